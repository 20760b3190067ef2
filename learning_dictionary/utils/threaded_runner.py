# threaded_runner.py - fan zero-arg callables out to a thread pool (bench, stress tests)

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List


def run_parallel(tasks: Iterable[Callable], max_workers: int = 4, ordered: bool = False) -> List:
    """
    Run each task on a small pool and collect the results.
    ordered=False returns them in completion order, ordered=True in submit order.
    The first task exception is re-raised after the pool drains.
    """
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="runner") as ex:
        futs = [ex.submit(t) for t in tasks]
        if ordered:
            return [f.result() for f in futs]
        return [f.result() for f in as_completed(futs)]
