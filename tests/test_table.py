"""Tests for mockingbird.routing.table: DispatchTable and routes()."""

import logging
from http import HTTPMethod

import pytest

from mockingbird.errors import ConfigurationError
from mockingbird.http.response import Response
from mockingbird.routing.handler import FunctionHandler, as_handler
from mockingbird.routing.route import RouteKey
from mockingbird.routing.table import DispatchTable, routes


def first(request):
    return Response("first")


def second(request):
    return Response("second")


def fallback(request):
    return Response("boo")


class TestRoutes:
    def test_builds_keys_in_order(self) -> None:
        built = routes(("GET", "/networks", first), ("POST", "/networks", second))
        assert list(built) == [RouteKey("GET", "/networks"), RouteKey("POST", "/networks")]

    def test_wraps_handlers(self) -> None:
        built = routes(("GET", "/a", first))
        assert isinstance(built[RouteKey("GET", "/a")], FunctionHandler)

    def test_accepts_http_method(self) -> None:
        built = routes((HTTPMethod.DELETE, "/a", first))
        assert RouteKey("DELETE", "/a") in built

    def test_last_write_wins(self) -> None:
        built = routes(("GET", "/a", first), ("GET", "/a", second))
        assert len(built) == 1
        assert built[RouteKey("GET", "/a")].func is second  # type: ignore[attr-defined]

    def test_duplicate_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mockingbird.routing"):
            routes(("GET", "/a", first), ("GET", "/a", second))
        assert "GET /a registered twice" in caplog.text

    def test_empty(self) -> None:
        assert routes() == {}

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            routes(("GET", "/a", None))


class TestDispatchTable:
    def test_build(self) -> None:
        table = DispatchTable.build([("GET", "/a", first)], default=fallback)
        assert len(table) == 1
        assert RouteKey("GET", "/a") in table

    def test_lookup_match(self) -> None:
        table = DispatchTable.build([("GET", "/a", first)], default=fallback)
        assert table.lookup(RouteKey("GET", "/a")).func is first  # type: ignore[attr-defined]

    def test_lookup_miss_returns_default(self) -> None:
        table = DispatchTable.build([("GET", "/a", first)], default=fallback)
        assert table.lookup(RouteKey("DELETE", "/a")) is table.default
        assert table.lookup(RouteKey("GET", "/a/")) is table.default

    def test_default_not_keyed(self) -> None:
        table = DispatchTable.build([], default=fallback)
        assert len(table) == 0
        assert table.default.func is fallback  # type: ignore[attr-defined]

    def test_getitem_miss_raises(self) -> None:
        table = DispatchTable.build([], default=fallback)
        with pytest.raises(KeyError):
            table[RouteKey("GET", "/")]

    def test_build_last_write_wins(self) -> None:
        table = DispatchTable.build(
            [("GET", "/a", first), ("GET", "/a", second)],
            default=fallback,
        )
        assert table.lookup(RouteKey("GET", "/a")).func is second  # type: ignore[attr-defined]

    def test_read_only(self) -> None:
        table = DispatchTable.build([("GET", "/a", first)], default=fallback)
        with pytest.raises(TypeError):
            table[RouteKey("GET", "/b")] = as_handler(second)  # type: ignore[index]
        with pytest.raises(TypeError):
            table._entries[RouteKey("GET", "/b")] = as_handler(second)  # type: ignore[index]

    def test_source_mapping_copied(self) -> None:
        source = routes(("GET", "/a", first))
        table = DispatchTable(source, default=fallback)
        source[RouteKey("GET", "/b")] = as_handler(second)
        assert RouteKey("GET", "/b") not in table

    def test_non_callable_default_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            DispatchTable.build([], default=42)  # type: ignore[arg-type]

    def test_repr_sorted(self) -> None:
        table = DispatchTable.build(
            [("POST", "/networks", second), ("GET", "/networks", first)],
            default=fallback,
        )
        assert repr(table) == (
            "DispatchTable([GET /networks, POST /networks], default=fallback)"
        )
