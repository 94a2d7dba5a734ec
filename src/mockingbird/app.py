"""Mockingbird application class.

Mutable during setup (route registration, default handler, hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import inspect
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from http import HTTPMethod
from typing import Any

from mockingbird._internal.asgi import Receive, Scope, Send
from mockingbird.config import AppConfig
from mockingbird.http.request import Request
from mockingbird.http.response import Response
from mockingbird.routing.dispatcher import Dispatcher
from mockingbird.routing.handler import Handler
from mockingbird.routing.table import DispatchTable
from mockingbird.server.handler import handle_request

logger = logging.getLogger("mockingbird.server")


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be built into the dispatch table."""

    method: str | HTTPMethod
    path: str
    handler: Callable[..., Any] | Handler


def _empty_default(request: Request) -> Response:
    return Response()


class App:
    """A stand-in backend.

    Mutable during setup (routes, default handler, lifecycle hooks).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked;
    from then on the dispatch table is read-only and shared by every
    request.

    Usage::

        app = App()

        @app.route("GET", "/networks")
        def list_networks(request):
            return Response('{"networks": []}').with_content_type("application/json")

        @app.default
        def fallback(request):
            return Response("boo")

        app.run()

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread builds the table, even when several server threads call
        ``__call__()`` concurrently on first request.
    """

    __slots__ = (
        "_default_handler",
        "_dispatcher",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_shutdown_hooks",
        "_startup_hooks",
        "_table",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._default_handler: Callable[..., Any] | Handler = _empty_default
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Built state: set during _freeze()
        self._table: DispatchTable | None = None
        self._dispatcher: Dispatcher | None = None

    # -- Route registration --

    def route(
        self,
        method: str | HTTPMethod,
        path: str,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a route handler via decorator.

        Args:
            method: HTTP method, matched exactly (``"GET"`` does not
                match ``"get"``).
            path: Request path, matched exactly. No parameters, no
                wildcards, no trailing-slash folding.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add_route(method, path, func)
            return func

        return decorator

    def add_route(
        self,
        method: str | HTTPMethod,
        path: str,
        handler: Callable[..., Any] | Handler,
    ) -> None:
        """Register *handler* for ``(method, path)``.

        Registering the same pair again replaces the earlier handler
        when the table is built.
        """
        self._check_not_frozen()
        self._pending_routes.append(_PendingRoute(method, path, handler))

    def default(self, handler: Callable[..., Any] | Handler) -> Callable[..., Any] | Handler:
        """Set the handler for every request no route matches.

        Usable as a plain call or a decorator::

            @app.default
            def fallback(request):
                return Response("boo")
        """
        self._check_not_frozen()
        self._default_handler = handler
        return handler

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook (ASGI lifespan)."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook (ASGI lifespan)."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Built state --

    @property
    def table(self) -> DispatchTable:
        """The frozen dispatch table. Freezes the app on first access."""
        self._ensure_frozen()
        assert self._table is not None
        return self._table

    @property
    def dispatcher(self) -> Dispatcher:
        """The frozen dispatcher. Freezes the app on first access."""
        self._ensure_frozen()
        assert self._dispatcher is not None
        return self._dispatcher

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Build the dispatch table and serve it.

        A port of ``0`` (the default) is replaced by an unused TCP port
        before the server binds, and the resulting address is printed.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from mockingbird.server.dev import run_server
        from mockingbird.server.ports import get_unused_tcp_port

        self._ensure_frozen()

        _host = host or self.config.host
        _port = port if port is not None else self.config.port
        if _port == 0:
            _port = get_unused_tcp_port(_host)

        logger.info("Serving %d route(s) on %s:%d", len(self.table), _host, _port)
        if self.config.banner:
            print(f"Listening at http://{_host}:{_port}/", flush=True)

        run_server(self, _host, _port, reload=self.config.reload)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the dispatcher.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, dispatcher=self.dispatcher)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    for hook in self._startup_hooks:
                        result = hook()
                        if inspect.isawaitable(result):
                            await result
                    await send({"type": "lifespan.startup.complete"})
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    result = hook()
                    if inspect.isawaitable(result):
                        await result
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Build the dispatch table.

        MUST only be called while holding _freeze_lock.
        """
        table = DispatchTable.build(
            ((p.method, p.path, p.handler) for p in self._pending_routes),
            default=self._default_handler,
        )
        self._table = table
        self._dispatcher = Dispatcher(table)
        self._frozen = True
        logger.debug("Built %r", table)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and the default handler before calling app.run()."
            )
            raise RuntimeError(msg)
