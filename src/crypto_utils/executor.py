from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def submit(fn: Callable[..., T], *args, executor: Optional[Executor] = None) -> "Future[T]":
    """Run fn on the given executor, or on a private single-use thread.
    The returned future can be blocked on, polled, or awaited with
    asyncio.wrap_future()."""
    if executor is not None:
        return executor.submit(fn, *args)

    own_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="crypto-utils")
    try:
        return own_executor.submit(fn, *args)
    finally:
        # Does not wait; the submitted call still runs to completion.
        own_executor.shutdown(wait=False)
