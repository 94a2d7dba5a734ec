"""Tests for mockingbird.server.handler: ASGI glue around the dispatcher."""

import logging
from typing import Any

import pytest

from mockingbird.errors import TransportError
from mockingbird.http.response import Response
from mockingbird.routing.dispatcher import Dispatcher
from mockingbird.routing.table import DispatchTable
from mockingbird.server.handler import handle_request


def _scope(method: str = "GET", path: str = "/", **overrides: Any) -> dict[str, Any]:
    base: dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": path,
        "raw_path": path.encode("latin-1"),
        "query_string": b"",
        "root_path": "",
        "headers": [],
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class _Wire:
    def __init__(self, *incoming: dict[str, Any]) -> None:
        self.incoming = list(incoming) or [{"type": "http.request", "body": b""}]
        self.sent: list[dict[str, Any]] = []

    async def receive(self) -> dict[str, Any]:
        return self.incoming.pop(0)

    async def send(self, message: dict[str, Any]) -> None:
        self.sent.append(message)


def _dispatcher(*entries) -> Dispatcher:
    return Dispatcher(DispatchTable.build(entries, default=lambda request: Response("boo")))


class TestHandleRequest:
    async def test_routes_and_sends(self) -> None:
        wire = _Wire()
        dispatcher = _dispatcher(("GET", "/networks", lambda request: Response("n")))
        await handle_request(_scope("GET", "/networks"), wire.receive, wire.send, dispatcher=dispatcher)
        assert wire.sent[0]["status"] == 200
        assert wire.sent[1]["body"] == b"n"

    async def test_default(self) -> None:
        wire = _Wire()
        await handle_request(_scope("PATCH", "/x"), wire.receive, wire.send, dispatcher=_dispatcher())
        assert wire.sent[1]["body"] == b"boo"

    async def test_request_body_reaches_handler(self) -> None:
        async def echo(request):
            return Response(await request.body())

        wire = _Wire(
            {"type": "http.request", "body": b"abc", "more_body": True},
            {"type": "http.request", "body": b"def", "more_body": False},
        )
        dispatcher = _dispatcher(("POST", "/echo", echo))
        await handle_request(_scope("POST", "/echo"), wire.receive, wire.send, dispatcher=dispatcher)
        assert wire.sent[1]["body"] == b"abcdef"

    async def test_disconnect_mid_body_propagates(self, caplog: pytest.LogCaptureFixture) -> None:
        async def echo(request):
            return Response(await request.body())

        wire = _Wire(
            {"type": "http.request", "body": b"abc", "more_body": True},
            {"type": "http.disconnect"},
        )
        dispatcher = _dispatcher(("POST", "/echo", echo))
        with caplog.at_level(logging.ERROR, logger="mockingbird.server"):
            with pytest.raises(TransportError):
                await handle_request(
                    _scope("POST", "/echo"), wire.receive, wire.send, dispatcher=dispatcher
                )
        assert wire.sent == []
        assert "Handler failed for POST /echo" in caplog.text

    async def test_non_http_scope_ignored(self) -> None:
        wire = _Wire()
        await handle_request({"type": "websocket"}, wire.receive, wire.send, dispatcher=_dispatcher())
        assert wire.sent == []

    async def test_percent_encoded_path_not_decoded_before_routing(self) -> None:
        # Servers hand over "path" decoded and "raw_path" as received.
        wire = _Wire()
        dispatcher = _dispatcher(("GET", "/networks", lambda request: Response("n")))
        scope = _scope("GET", "/networks", raw_path=b"/%6Eetworks")
        await handle_request(scope, wire.receive, wire.send, dispatcher=dispatcher)
        assert wire.sent[1]["body"] == b"boo"
