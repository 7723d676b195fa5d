"""
Brute-force 24-game search over integer arithmetic.

Every ordered pair of the working values is combined with each operator
and the search recurses on the shortened list; ``a - b`` and ``b - a``
(likewise ``/``) are separate branches. Division is only taken when it is
exact, so every intermediate value stays an ``int`` and hitting the target
is a plain equality test.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Sequence

from ..constants import TARGET


class Strength(IntEnum):
    """Binding strength of the operator that produced an item's text."""
    ADD_SUB = 1
    MUL_DIV = 2
    ATOM = 3


@dataclass(frozen=True)
class Item:
    value: int
    text: str
    strength: Strength


def _exact_div(a: int, b: int):
    return a // b if b != 0 and a % b == 0 else None


OPS = [
    ('+', lambda a, b: a + b, Strength.ADD_SUB),      # (symbol, fn, strength)
    ('-', lambda a, b: a - b, Strength.ADD_SUB),
    ('*', lambda a, b: a * b, Strength.MUL_DIV),
    ('/', _exact_div,         Strength.MUL_DIV),      # None -> branch pruned
]


def _wrap(item: Item, strength: Strength, right_of: str = '') -> str:
    """Parenthesise ``item`` when it binds looser than the enclosing operator."""
    if item.strength < strength:
        return f"({item.text})"
    # a - (b - c) and a / (b / c) must keep their parens
    if right_of in ('-', '/') and item.strength == strength:
        return f"({item.text})"
    return item.text


def search(numbers: Sequence[int], target: int = TARGET) -> List[str]:
    """
    All expression strings over ``numbers`` that evaluate to ``target``.

    Exact duplicates are dropped; algebraically equivalent strings are not
    (see ``calc24.methods.dedup``). The list keeps discovery order.
    """
    found: Dict[str, None] = {}

    def reduce(items: List[Item]):
        if len(items) == 1:
            if items[0].value == target:
                found.setdefault(items[0].text)
            return

        n = len(items)
        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                a, b = items[i], items[j]
                rest = [items[k] for k in range(n) if k not in (i, j)]

                for sym, fn, strength in OPS:
                    r = fn(a.value, b.value)
                    if r is None:
                        continue
                    text = f"{_wrap(a, strength)} {sym} {_wrap(b, strength, sym)}"
                    reduce(rest + [Item(r, text, strength)])

    if numbers:
        reduce([Item(n, str(n), Strength.ATOM) for n in numbers])
    return list(found)
