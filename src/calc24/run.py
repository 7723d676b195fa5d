import asyncio
import logging
import time
from typing import Iterable, List, Optional

from .methods.dedup import solve
from .tasks.game24 import Game24Task

log = logging.getLogger(__name__)

CONCURRENCY = 4


async def run_async(task: Game24Task, concurrency: int = CONCURRENCY,
                    indices: Optional[Iterable[int]] = None) -> List[dict]:
    """
    Solve every puzzle of ``task`` in worker threads, at most ``concurrency``
    at a time. Results come back ordered by index.
    """
    if indices is None:
        indices = range(len(task))
    indices = list(indices)

    def run_one(idx: int) -> dict:
        ys = solve(task.get_numbers(idx))
        infos = [task.test_output(idx, y) for y in ys]
        return {'idx': idx, 'input': task.get_input(idx), 'ys': ys, 'infos': infos}

    semaphore = asyncio.Semaphore(concurrency)

    async def bounded(idx: int) -> dict:
        async with semaphore:
            return await asyncio.to_thread(run_one, idx)

    start_time = time.time()
    log.info("running %d puzzle(s) with up to %d workers", len(indices), concurrency)
    results = await asyncio.gather(*(bounded(i) for i in indices))

    results.sort(key=lambda r: r['idx'])
    log.info("finished %d puzzle(s) in %.2fs", len(results), time.time() - start_time)
    return results


def summarize(results: List[dict]) -> dict:
    """Share of puzzles with any correct answer, and mean per-answer accuracy."""
    if not results:
        return {'total': 0, 'acc_any': 0.0, 'acc_avg': 0.0}
    acc_any = sum(any(info['r'] for info in r['infos']) for r in results) / len(results)
    acc_avg = sum(sum(info['r'] for info in r['infos']) / len(r['infos'])
                  for r in results if r['infos']) / len(results)
    return {'total': len(results), 'acc_any': acc_any, 'acc_avg': acc_avg}
