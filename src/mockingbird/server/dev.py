"""Server runner.

Starts a pounce ASGI server with the live mockingbird App object.
Single worker: the route table is built once and shared by every
request on that worker's event loop.
"""


def run_server(app: object, host: str, port: int, *, reload: bool = False) -> None:
    """Start a pounce server with the given mockingbird App.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but we have a live ``App`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (mockingbird App instance).
        host: Bind host address.
        port: Bind port number (already resolved; never 0 here).
        reload: Enable auto-reload on file changes.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
    )
    server = Server(config, app)
    server.run()
