"""Handler abstraction: duplicable, asynchronously invocable request logic.

A handler is anything with two operations:

- ``handler(request)`` returns an awaitable that resolves to a
  ``Response`` (or raises);
- ``handler.clone()`` returns an independent instance that behaves
  identically.

The dispatcher never calls a handler stored in the table directly. It
clones the stored value and invokes the clone, so no two requests ever
share one handler instance. Clones are shallow: whatever the wrapped
function captured (a closure cell, a module global, a client) is shared,
never deep-copied.

Plain functions become handlers through ``as_handler()``::

    def on_get(request):
        return Response("ok")

    async def on_post(request):
        payload = await request.json()
        return Response(payload["name"])

    handlers = [as_handler(on_get), as_handler(on_post)]
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from mockingbird._internal.invoke import invoke
from mockingbird.errors import ConfigurationError
from mockingbird.http.response import Response

if TYPE_CHECKING:
    from mockingbird.http.request import Request


@runtime_checkable
class Handler(Protocol):
    """Structural interface every dispatch table entry satisfies."""

    def clone(self) -> Handler: ...

    def __call__(self, request: Request) -> Awaitable[Response]: ...


@dataclass(frozen=True, slots=True)
class FunctionHandler:
    """A ``Handler`` backed by a sync or async callable."""

    func: Callable[..., Any]
    name: str

    def clone(self) -> FunctionHandler:
        return replace(self)

    def __call__(self, request: Request) -> Awaitable[Response]:
        return self._respond(request)

    async def _respond(self, request: Request) -> Response:
        result = await invoke(self.func, request)
        return to_response(result, self.name)


def as_handler(obj: Any) -> Handler:
    """Wrap *obj* as a ``Handler``.

    Objects that already implement the protocol are returned unchanged.

    Raises:
        ConfigurationError: If *obj* is a class or is not callable.
    """
    if isinstance(obj, type):
        msg = f"Handler must be an instance or a function, got class {obj.__qualname__}"
        raise ConfigurationError(msg)
    if isinstance(obj, Handler):
        return obj
    if not callable(obj):
        msg = f"Handler must be callable, got {type(obj).__name__}: {obj!r}"
        raise ConfigurationError(msg)
    return FunctionHandler(func=obj, name=handler_name(obj))


def handler_name(obj: Any) -> str:
    """Human-readable name for listings and log lines."""
    name = getattr(obj, "name", None)
    if isinstance(name, str):
        return name
    return getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or repr(obj)


def to_response(result: Any, name: str) -> Response:
    """Coerce a handler's return value to a ``Response``.

    ``str`` and ``bytes`` become a 200 response with that body and no
    content headers.
    """
    if isinstance(result, Response):
        return result
    if isinstance(result, (str, bytes)):
        return Response(result)
    msg = (
        f"Handler {name!r} returned {type(result).__name__}; "
        "expected Response, str, or bytes."
    )
    raise TypeError(msg)
