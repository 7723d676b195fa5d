"""Tests for batch solving a bank."""

import asyncio

from calc24.methods.dedup import solve
from calc24.run import run_async, summarize
from calc24.tasks.game24 import Game24Task


def make_task(tmp_path, *puzzles):
    path = tmp_path / "bank.csv"
    path.write_text("Puzzles\n" + "\n".join(puzzles) + "\n")
    return Game24Task(str(path))


class TestRunAsync:

    def test_results_match_sequential(self, tmp_path):
        task = make_task(tmp_path, "1 2 3 4", "4 4 10 10", "2 3 4 6")
        results = asyncio.run(run_async(task, concurrency=2))
        assert [r['idx'] for r in results] == [0, 1, 2]
        for r in results:
            assert r['ys'] == solve(task.get_numbers(r['idx']))
            assert r['input'] == task.get_input(r['idx'])
            assert all(info == {'r': 1} for info in r['infos'])

    def test_subset_of_indices(self, tmp_path):
        task = make_task(tmp_path, "1 2 3 4", "4 4 10 10")
        results = asyncio.run(run_async(task, indices=[1]))
        assert [r['idx'] for r in results] == [1]


class TestSummarize:

    def test_all_solved(self, tmp_path):
        task = make_task(tmp_path, "1 2 3 4", "4 4 10 10")
        stats = summarize(asyncio.run(run_async(task)))
        assert stats == {'total': 2, 'acc_any': 1.0, 'acc_avg': 1.0}

    def test_unsolvable_counts_as_miss(self, tmp_path):
        task = make_task(tmp_path, "1 2 3 4", "1 1 1 1")
        stats = summarize(asyncio.run(run_async(task)))
        assert stats == {'total': 2, 'acc_any': 0.5, 'acc_avg': 0.5}

    def test_empty(self):
        assert summarize([]) == {'total': 0, 'acc_any': 0.0, 'acc_avg': 0.0}
