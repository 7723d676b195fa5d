"""
Expression trees shared by the solver and the normaliser.

Two separate families live here:

* the raw tree the parser builds straight from text
  (``Number`` / ``Binary``), and
* the canonical tree produced by flattening and sorting
  (``CNumber`` / ``CSum`` / ``CProduct``).

Canonical nodes carry their signature string as a memoised attribute, so
sorting siblings never has to re-serialise a subtree.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Tuple, Union

# ---------------------------------------------------------------------------
# Raw AST
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Binary:
    op: str                 # one of + - * /
    left: "Node"
    right: "Node"


Node = Union[Number, Binary]

ADDITIVE = ('+', '-')
MULTIPLICATIVE = ('*', '/')

# ---------------------------------------------------------------------------
# Canonical tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CNumber:
    value: int

    @cached_property
    def signature(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Term:
    sign: int               # +1 or -1
    node: "CanonicalNode"


@dataclass(frozen=True)
class Factor:
    inverse: bool           # True -> divides
    node: "CanonicalNode"


@dataclass(frozen=True)
class CSum:
    """Flat signed sum. Never holds another ``CSum`` as a direct child."""
    terms: Tuple[Term, ...]

    @cached_property
    def signature(self) -> str:
        parts = [('+' if t.sign > 0 else '-') + t.node.signature for t in self.terms]
        return f"Sum({','.join(parts)})"

    @property
    def is_difference(self) -> bool:
        """Exactly two terms with opposite signs, i.e. ``A - B``."""
        return (len(self.terms) == 2
                and {t.sign for t in self.terms} == {1, -1})


@dataclass(frozen=True)
class CProduct:
    """Flat product/quotient. Never holds another ``CProduct`` as a direct child."""
    factors: Tuple[Factor, ...]

    @cached_property
    def signature(self) -> str:
        parts = [('/' if f.inverse else '*') + f.node.signature for f in self.factors]
        return f"Prod({','.join(parts)})"


CanonicalNode = Union[CNumber, CSum, CProduct]
