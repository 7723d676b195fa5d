"""
calc24 - solve and deal four-number "reach 24" puzzles.

Quick start:
    from calc24 import solve, normalize, generate

    solve([1, 2, 3, 4])                  # distinct solutions, e.g. '1 * 2 * 3 * 4'
    normalize("4 * 6") == normalize("6 * 4")   # True
    puzzle = generate()                  # Puzzle(numbers=(...), solutions=(...))
"""

__version__ = "0.1.0"

from .constants import TARGET, NUM_COUNT, MIN_CARD, MAX_CARD
from .normalizer import (
    tokenize,
    parse,
    canonicalize,
    serialize,
    normalize,
    render,
    TokenizeError,
    ParseError,
)
from .methods.search import search
from .methods.dedup import deduplicate, solve
from .tasks import Puzzle, generate, analyse_task, Game24Task, build_bank, verify

__all__ = [
    "__version__",
    "TARGET", "NUM_COUNT", "MIN_CARD", "MAX_CARD",
    "tokenize", "parse", "canonicalize", "serialize", "normalize", "render",
    "TokenizeError", "ParseError",
    "search", "deduplicate", "solve",
    "Puzzle", "generate", "analyse_task", "Game24Task", "build_bank", "verify",
]
