"""Tests for the brute-force search engine."""

from collections import Counter
import re

import pytest
import sympy

from calc24.methods.search import OPS, Item, Strength, _wrap, search
from calc24.normalizer import normalize


def numbers_in(expr):
    return Counter(int(n) for n in re.findall(r'\d+', expr))


class TestOps:

    def test_exact_division_only(self):
        div = dict((sym, fn) for sym, fn, _ in OPS)['/']
        assert div(8, 2) == 4
        assert div(-8, 2) == -4
        assert div(7, 2) is None
        assert div(8, 0) is None

    def test_strengths(self):
        assert {sym: s for sym, _, s in OPS} == {
            '+': Strength.ADD_SUB, '-': Strength.ADD_SUB,
            '*': Strength.MUL_DIV, '/': Strength.MUL_DIV,
        }


class TestWrap:

    def test_atom_never_wrapped(self):
        item = Item(3, "3", Strength.ATOM)
        assert _wrap(item, Strength.MUL_DIV, '/') == "3"

    def test_looser_child_wrapped(self):
        item = Item(3, "1 + 2", Strength.ADD_SUB)
        assert _wrap(item, Strength.MUL_DIV) == "(1 + 2)"

    def test_equal_strength_left_not_wrapped(self):
        item = Item(-1, "1 - 2", Strength.ADD_SUB)
        assert _wrap(item, Strength.ADD_SUB) == "1 - 2"

    @pytest.mark.parametrize("sym,strength,text", [
        ('-', Strength.ADD_SUB, "2 - 1"),
        ('/', Strength.MUL_DIV, "4 / 2"),
    ])
    def test_non_associative_right_wrapped(self, sym, strength, text):
        assert _wrap(Item(1, text, strength), strength, sym) == f"({text})"

    @pytest.mark.parametrize("sym,strength,text", [
        ('+', Strength.ADD_SUB, "2 - 1"),
        ('*', Strength.MUL_DIV, "4 / 2"),
    ])
    def test_associative_right_not_wrapped(self, sym, strength, text):
        assert _wrap(Item(1, text, strength), strength, sym) == text

    def test_tighter_right_not_wrapped(self):
        assert _wrap(Item(6, "2 * 3", Strength.MUL_DIV), Strength.ADD_SUB, '-') == "2 * 3"


class TestSearch:

    def test_product_of_all(self):
        assert "1 * 2 * 3 * 4" in search([1, 2, 3, 4])

    def test_division_needs_parentheses(self):
        assert "(10 * 10 - 4) / 4" in search([10, 10, 4, 4])

    def test_nested_subtraction(self):
        raw = search([11, 9, 6, 2])
        assert "11 + 9 + 6 - 2" in raw
        assert "11 - (2 - 6 - 9)" in raw

    def test_ordered_pairs(self):
        assert "4 - 6" in search([4, 6], target=-2)
        assert "4 - 6" in search([6, 4], target=-2)
        assert "12 / 2" in search([2, 12], target=6)

    def test_inexact_division_pruned(self):
        assert search([7, 2], target=3) == []

    @pytest.mark.parametrize("nums", [[1, 1, 1, 1], [3, 3, 8, 8]])
    def test_unsolvable(self, nums):
        assert search(nums) == []

    def test_custom_target(self):
        assert "1 + 2 + 3 + 4" in search([1, 2, 3, 4], target=10)

    def test_trivial_lists(self):
        assert search([]) == []
        assert search([24]) == ["24"]
        assert search([5]) == []

    def test_no_exact_duplicates(self):
        raw = search([1, 2, 3, 4])
        assert len(raw) == len(set(raw))

    @pytest.mark.parametrize("nums", [[1, 2, 3, 4], [10, 10, 4, 4], [4, 6, 1, 1], [2, 3, 4, 6]])
    def test_every_solution_is_sound(self, nums):
        raw = search(nums)
        assert raw
        for expr in raw:
            assert sympy.sympify(expr) == 24, expr
            assert numbers_in(expr) == Counter(nums), expr

    def test_every_solution_normalizes(self):
        for expr in search([2, 3, 4, 6]):
            assert normalize(expr)
