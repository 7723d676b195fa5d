from .generator import Puzzle, generate
from .difficulty import analyse_task
from .game24 import Game24Task, build_bank, verify

__all__ = ["Puzzle", "generate", "analyse_task", "Game24Task", "build_bank", "verify"]
