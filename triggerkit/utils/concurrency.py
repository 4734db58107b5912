"""Bridging coroutines into the synchronous Lambda call path."""

import asyncio
import concurrent.futures
import inspect
from typing import Any


def run_sync(result: Any) -> Any:
    """
    Resolve a value, awaiting it to completion if it is awaitable.

    The Lambda runtime may or may not have an event loop running; when one
    is, the coroutine is run on a worker thread with its own loop.

    Args:
        result: A plain value, coroutine or other awaitable

    Returns:
        The value itself, or what the awaitable resolved to
    """
    if not inspect.isawaitable(result):
        return result

    async def _await() -> Any:
        return await result

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(_await())

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, _await()).result()
