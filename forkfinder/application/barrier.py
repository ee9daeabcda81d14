"""Join-all combinator for independent blocking calls."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def join_all(tasks: Sequence[Callable[[], T]]) -> List[T]:
    """
    Run every task concurrently and wait for all of them.

    One worker per task, no bound on fan-out. Results come back in task
    order. The first failure observed is raised as soon as it is seen; the
    other tasks are not cancelled and keep running in the background.

    Args:
        tasks: Zero-argument callables

    Returns:
        Results in the same order as ``tasks``
    """
    if not tasks:
        return []

    executor = ThreadPoolExecutor(max_workers=len(tasks))
    try:
        futures = [executor.submit(task) for task in tasks]
        for future in as_completed(futures):
            future.result()
        return [future.result() for future in futures]
    finally:
        executor.shutdown(wait=False)
