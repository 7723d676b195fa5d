"""Collapse raw solver output to one representative per canonical signature."""

import logging
from typing import Dict, Iterable, List, Sequence

from ..constants import NUM_COUNT, TARGET
from ..normalizer import ParseError, TokenizeError, normalize
from .search import search

log = logging.getLogger(__name__)


def deduplicate(expressions: Iterable[str]) -> List[str]:
    """
    Keep the first expression seen for each signature, in input order.

    An expression that cannot be normalised is kept as its own entry.
    """
    representatives: Dict[str, str] = {}
    unique = []
    for expr in expressions:
        try:
            sig = normalize(expr)
        except (TokenizeError, ParseError) as e:
            log.warning("could not normalise solution %r: %s", expr, e)
            unique.append(expr)
            continue
        if sig not in representatives:
            representatives[sig] = expr
            unique.append(expr)
    return unique


def solve(numbers: Sequence[int], target: int = TARGET) -> List[str]:
    """Structurally distinct solutions for a four-number puzzle."""
    if len(numbers) != NUM_COUNT:
        return []
    raw = search(numbers, target)
    unique = deduplicate(raw)
    log.debug("%s: %d raw solution(s), %d distinct", list(numbers), len(raw), len(unique))
    return unique
