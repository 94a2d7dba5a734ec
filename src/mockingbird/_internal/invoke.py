"""Invoke helpers: call sync or async handlers uniformly.

Handlers can be ``def`` or ``async def``. Any code that calls a
user-provided function must handle both cases. This module provides a
single helper so the sync/async check lives in exactly one place.

Usage::

    from mockingbird._internal.invoke import invoke

    result = await invoke(func, request)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync: returns immediately, no await needed
        def on_get(request):
            return Response("ok")

        # async: returns coroutine, awaited automatically
        async def on_get(request):
            await asyncio.sleep(0.1)
            return Response("ok")
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
