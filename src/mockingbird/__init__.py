"""Mockingbird: stand-in HTTP backends for integration tests.

Routes requests by exact ``(method, path)`` to a handler and sends
everything else to a default handler.

Basic usage::

    from mockingbird import App, Response

    app = App()

    @app.route("GET", "/networks")
    def networks(request):
        return Response('{"networks": []}').with_content_type("application/json")

    @app.default
    def fallback(request):
        return Response("boo")

    app.run()  # picks an unused port and prints it
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "DispatchTable",
    "Dispatcher",
    "Handler",
    "MockingbirdError",
    "Request",
    "Response",
    "RouteKey",
    "TransportError",
    "as_handler",
    "get_unused_tcp_port",
    "routes",
]

# name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "App": "mockingbird.app",
    "AppConfig": "mockingbird.config",
    "ConfigurationError": "mockingbird.errors",
    "DispatchTable": "mockingbird.routing.table",
    "Dispatcher": "mockingbird.routing.dispatcher",
    "Handler": "mockingbird.routing.handler",
    "MockingbirdError": "mockingbird.errors",
    "Request": "mockingbird.http.request",
    "Response": "mockingbird.http.response",
    "RouteKey": "mockingbird.routing.route",
    "TransportError": "mockingbird.errors",
    "as_handler": "mockingbird.routing.handler",
    "get_unused_tcp_port": "mockingbird.server.ports",
    "routes": "mockingbird.routing.table",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import mockingbird`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
