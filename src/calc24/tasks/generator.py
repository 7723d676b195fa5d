import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import MAX_CARD, MIN_CARD, NUM_COUNT
from ..methods.dedup import solve

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Puzzle:
    """Four cards and their structurally distinct solutions."""
    numbers: Tuple[int, ...]
    solutions: Tuple[str, ...]


def generate(rng: Optional[random.Random] = None,
             max_attempts: Optional[int] = None) -> Puzzle:
    """
    Draw four cards until the hand has at least one solution.

    With ``max_attempts`` set, give up with ``RuntimeError`` after that many
    unsolvable draws.
    """
    rng = rng or random.Random()
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        numbers = tuple(rng.randint(MIN_CARD, MAX_CARD) for _ in range(NUM_COUNT))
        solutions = solve(numbers)
        if solutions:
            log.info("generated %s after %d draw(s), %d solution(s)",
                     list(numbers), attempts, len(solutions))
            return Puzzle(numbers, tuple(solutions))
        log.debug("rejected unsolvable hand %s", list(numbers))
    raise RuntimeError(f"no solvable hand found in {max_attempts} attempts")
