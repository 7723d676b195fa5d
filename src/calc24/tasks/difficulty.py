# ---------------------------------------------------------------------------
# Operation-weighted difficulty estimator  (1 = trivial … 5 = very hard)
# ---------------------------------------------------------------------------

import math
from collections import deque
from itertools import permutations
from typing import Optional, Sequence

import numpy as np
from sympy import Pow, sympify

from ..constants import TARGET
from ..methods.dedup import solve
from ..methods.search import OPS


def _cost_of_solution(expr_string: str) -> int:
    """
    Numeric cost for one expression; lower is easier.
    4nums.com's "very easy" sets tend to be <= 6.
    """
    tree = sympify(expr_string, evaluate=False)
    cost = depth = 0
    stack = [(tree, 0)]
    while stack:
        node, d = stack.pop()
        depth = max(depth, d)
        for child in node.args:
            stack.append((child, d + 1))

        if node.is_Add:
            cost += len(node.args) - 1          # n-ary add -> (n-1) plus ops
        elif node.is_Mul:
            # division shows up as Pow(den, -1)
            for arg in node.args[1:]:
                if isinstance(arg, Pow) and arg.exp.is_Number and arg.exp.is_negative:
                    cost += 3 if arg.base.is_Integer else 4
                else:
                    cost += 1
        elif node.is_Pow and node.exp.is_Number and node.exp.is_negative:
            cost += 3 if node.base.is_Integer else 4

    # mild penalty for deep nestings beyond 3
    if depth > 3:
        cost += depth - 3
    return cost


def _search_effort(nums: Sequence[int], target: int = TARGET, cap: int = 20000) -> float:
    """How many BFS states until first hit (log-scaled, capped)."""
    start = tuple(sorted(nums))
    queue = deque([start])
    seen = {start}
    steps = 0
    while queue and steps < cap:
        state = queue.popleft()
        steps += 1
        if len(state) == 1 and state[0] == target:
            return math.log10(steps + 1)
        for i, j in permutations(range(len(state)), 2):
            a, b = state[i], state[j]
            rest = [state[k] for k in range(len(state)) if k not in (i, j)]
            for _, fn, _ in OPS:
                r = fn(a, b)
                if r is None:
                    continue
                nxt = tuple(sorted(rest + [r]))
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
    return math.log10(cap)                      # hit the cap -> harder


def analyse_task(nums: Sequence[int], solutions: Optional[Sequence[str]] = None) -> int:
    """Difficulty band 1-5; unsolvable hands are 5."""
    if solutions is None:
        solutions = solve(nums)
    if not solutions:
        return 5

    costs = sorted(_cost_of_solution(s) for s in solutions)
    q25 = np.percentile(costs, 25)              # cost below which 25 % of solutions lie
    score = q25 + _search_effort(nums) * 0.6

    return (
        1 if score <= 6
        else 2 if score <= 8
        else 3 if score <= 10
        else 4 if score <= 12
        else 5
    )
