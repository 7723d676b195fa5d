import logging
import random
import re
from typing import List, Optional, Sequence

import pandas as pd
import sympy

from ..constants import MAX_CARD, MIN_CARD, NUM_COUNT, TARGET
from ..methods.dedup import solve
from .difficulty import analyse_task

log = logging.getLogger(__name__)

# distinct hands of four cards drawn from 1..13 with repetition
TOTAL_HANDS = 1820


def verify(expression: str, numbers: Sequence[int], target: int = TARGET) -> bool:
    """True iff ``expression`` uses exactly ``numbers`` and equals ``target``."""
    used = sorted(int(n) for n in re.findall(r'\d+', expression))
    if used != sorted(numbers):
        return False
    try:
        return bool(sympy.sympify(expression) == target)
    except (sympy.SympifyError, SyntaxError, TypeError):
        return False


class Game24Task:
    """
    Input (x)   : a string of 4 numbers
    Output (y)  : an expression reaching 24, possibly as the last line of
                  a longer answer ("Answer: (1 + 2 + 3) * 4 = 24")
    Reward (r)  : 0 or 1, depending on whether the expression is correct
    """
    def __init__(self, path: str):
        self.path = path
        self.data = [str(p).strip() for p in pd.read_csv(path)['Puzzles']]

    def __len__(self) -> int:
        return len(self.data)

    def get_input(self, idx: int) -> str:
        return self.data[idx]

    def get_numbers(self, idx: int) -> List[int]:
        return list(map(int, self.data[idx].split()))

    def test_output(self, idx: int, output: str):
        expression = output.strip().split('\n')[-1].lower().replace('answer: ', '').split('=')[0]
        return {'r': int(verify(expression, self.get_numbers(idx)))}


def build_bank(size: int, seed: Optional[int] = None) -> pd.DataFrame:
    """
    Sample ``size`` distinct solvable hands, rated and sorted by difficulty.

    Columns: Rank (acceptance order), Puzzles, Solutions, Difficulty.
    """
    rng = random.Random(seed)
    seen = set()
    rows = []
    while len(rows) < size:
        if len(seen) >= TOTAL_HANDS:
            raise ValueError(f"only {len(rows)} solvable hands exist, asked for {size}")
        nums = sorted(rng.randint(MIN_CARD, MAX_CARD) for _ in range(NUM_COUNT))
        data = ' '.join(map(str, nums))
        if data in seen:
            continue
        seen.add(data)

        solutions = solve(nums)
        if not solutions:
            continue
        rows.append({
            'Rank': len(rows) + 1,
            'Puzzles': data,
            'Solutions': len(solutions),
            'Difficulty': analyse_task(nums, solutions),
        })
        log.debug("bank: accepted %s (%d solutions)", data, len(solutions))

    df = pd.DataFrame(rows, columns=['Rank', 'Puzzles', 'Solutions', 'Difficulty'])
    return df.sort_values(['Difficulty', 'Rank'], kind='stable').reset_index(drop=True)
