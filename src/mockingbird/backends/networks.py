"""Networks backend: a fake container-runtime network API.

Answers the two calls a network client makes on startup and ``boo`` to
everything else::

    GET  /networks  -> { "greeting": "Hola amigo!" }
    POST /networks  -> {"Id": "12345", "Warnings": ""}
    *               -> boo

Run:
    python -m mockingbird.backends.networks
"""

from mockingbird.app import App
from mockingbird.config import AppConfig
from mockingbird.http.request import Request
from mockingbird.http.response import Response

GREETING = '{ "greeting": "Hola amigo!" }'

CREATED = """{
    "Id": "12345",
    "Warnings": ""
}"""


def _json(body: str) -> Response:
    return Response(body).with_content_length().with_content_type("application/json")


def on_get_networks(request: Request) -> Response:
    return _json(GREETING)


def on_create_network(request: Request) -> Response:
    return _json(CREATED)


def fallback(request: Request) -> Response:
    # No content headers here, unlike the registered routes.
    return Response("boo")


def create_app(config: AppConfig | None = None) -> App:
    """Build the networks backend."""
    backend = App(config)
    backend.add_route("GET", "/networks", on_get_networks)
    backend.add_route("POST", "/networks", on_create_network)
    backend.default(fallback)
    return backend


app = create_app()


def main() -> None:
    """Serve the backend on an unused loopback port."""
    create_app().run()


if __name__ == "__main__":
    main()
