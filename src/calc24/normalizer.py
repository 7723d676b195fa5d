"""
Canonical signatures for arithmetic expressions.

Two solutions that differ only by reordering ``+``/``*`` operands,
re-associating a chain of ``+``/``-`` (or ``*``/``/``), or flipping a
two-term difference inside a product map to the same signature:

    >>> normalize("11 + 9 + 6 - 2") == normalize("11 - (2 - 6 - 9)")
    True
    >>> normalize("4 * (6 + 1)") == normalize("4 * 6 + 4 * 1")
    False

Multiplication is never distributed over addition, so ``(1+2)*3`` and
``1*3+2*3`` stay different solutions.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .expression import (
    ADDITIVE, MULTIPLICATIVE,
    Binary, CanonicalNode, CNumber, CProduct, CSum, Factor, Node, Number, Term,
)

TOKEN = re.compile(r'\d+|[()+\-*/]')


class TokenizeError(ValueError):
    """The input holds no arithmetic tokens at all."""


class ParseError(ValueError):
    """The token stream does not follow the expression grammar."""


# ------------------------------------------------------------------
# Tokenizer / recursive-descent parser for + - * / and parentheses
# ------------------------------------------------------------------

def tokenize(expr: str) -> List[str]:
    # anything that is not a number, operator or paren is dropped
    tokens = TOKEN.findall(expr)
    if not tokens:
        raise TokenizeError(f"no tokens in {expr!r}")
    return tokens


def parse(tokens: List[str]) -> Node:
    """
    Build a raw AST with the usual precedence, left-associative:

        Expression := Term (('+' | '-') Term)*
        Term       := Factor (('*' | '/') Factor)*
        Factor     := NUMBER | '(' Expression ')'
    """
    pos = 0

    def peek():
        return tokens[pos] if pos < len(tokens) else None

    def parse_expression() -> Node:
        nonlocal pos
        left = parse_term()
        while peek() in ADDITIVE:
            op = tokens[pos]
            pos += 1
            left = Binary(op, left, parse_term())
        return left

    def parse_term() -> Node:
        nonlocal pos
        left = parse_factor()
        while peek() in MULTIPLICATIVE:
            op = tokens[pos]
            pos += 1
            left = Binary(op, left, parse_factor())
        return left

    def parse_factor() -> Node:
        nonlocal pos
        tok = peek()
        if tok is None:
            raise ParseError("unexpected end of input")
        pos += 1
        if tok == '(':
            node = parse_expression()
            if peek() != ')':
                raise ParseError("unmatched '('")
            pos += 1
            return node
        if tok.isdigit():
            return Number(int(tok))
        raise ParseError(f"unexpected token {tok!r} at position {pos - 1}")

    node = parse_expression()
    if pos != len(tokens):
        raise ParseError(f"unparsed tail {' '.join(tokens[pos:])!r}")
    return node


# ------------------------------------------------------------------
# Flattening
# ------------------------------------------------------------------

def flatten_sum(node: Node, sign: int = 1) -> List[Tuple[int, Node]]:
    """Signed operands of a +/- chain; subtraction inverts every sign below it."""
    if isinstance(node, Binary) and node.op in ADDITIVE:
        right_sign = sign if node.op == '+' else -sign
        return flatten_sum(node.left, sign) + flatten_sum(node.right, right_sign)
    return [(sign, node)]


def flatten_product(node: Node, inverse: bool = False) -> List[Tuple[bool, Node]]:
    """Operands of a * / chain; division toggles the inverse flag below it."""
    if isinstance(node, Binary) and node.op in MULTIPLICATIVE:
        right_inverse = inverse if node.op == '*' else not inverse
        return (flatten_product(node.left, inverse)
                + flatten_product(node.right, right_inverse))
    return [(inverse, node)]


# ------------------------------------------------------------------
# Canonicalisation
# ------------------------------------------------------------------

def _orient(node: CanonicalNode) -> CanonicalNode:
    """
    Pick one orientation of a difference used as a factor.

    ``A - B`` and ``B - A`` are both serialised and the smaller one wins.
    No compensating sign is pushed into the enclosing product, so
    ``(2-1)*3`` and ``(1-2)*3`` share a signature.
    """
    if not isinstance(node, CSum) or not node.is_difference:
        return node
    pos, neg = node.terms
    forward = CSum((Term(1, pos.node), Term(-1, neg.node)))
    flipped = CSum((Term(1, neg.node), Term(-1, pos.node)))
    return min(forward, flipped, key=lambda s: s.signature)


def canonicalize(node: Node) -> CanonicalNode:
    if isinstance(node, Number):
        return CNumber(node.value)

    if node.op in ADDITIVE:
        terms = [Term(sign, canonicalize(child)) for sign, child in flatten_sum(node)]
        terms.sort(key=lambda t: (-t.sign, t.node.signature))   # positives first
        return CSum(tuple(terms))

    factors = [Factor(inverse, _orient(canonicalize(child)))
               for inverse, child in flatten_product(node)]
    factors.sort(key=lambda f: (f.node.signature, f.inverse))
    return CProduct(tuple(factors))


def serialize(node: CanonicalNode) -> str:
    return node.signature


def normalize(expression: str) -> str:
    """Signature string of ``expression``; equal strings mean equivalent solutions."""
    return serialize(canonicalize(parse(tokenize(expression))))


# ------------------------------------------------------------------
# Back to infix
# ------------------------------------------------------------------

def render(node: CanonicalNode) -> str:
    """
    Infix text for a canonical tree, parseable by ``parse``.

    Positive terms come before negative ones and multiplying factors before
    dividing ones, so re-normalising the text gives back the same signature.
    """
    if isinstance(node, CNumber):
        return str(node.value)

    if isinstance(node, CSum):
        ordered = sorted(node.terms, key=lambda t: -t.sign)
        text = render(ordered[0].node)
        for t in ordered[1:]:
            text += (' + ' if t.sign > 0 else ' - ') + render(t.node)
        return text

    def factor_text(f: Factor) -> str:
        inner = render(f.node)
        return f"({inner})" if isinstance(f.node, CSum) else inner

    ordered = sorted(node.factors, key=lambda f: f.inverse)
    text = factor_text(ordered[0])
    for f in ordered[1:]:
        text += (' / ' if f.inverse else ' * ') + factor_text(f)
    return text
