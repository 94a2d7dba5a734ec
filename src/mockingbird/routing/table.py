"""Dispatch table: build-once mapping from RouteKey to Handler.

Built from a declarative list of ``(method, path, handler)`` triples
plus one default handler kept outside the mapping. Read-only after
construction, so any number of concurrent requests can look it up
without locks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from http import HTTPMethod
from types import MappingProxyType
from typing import Any, TypeAlias

from mockingbird.routing.handler import Handler, as_handler, handler_name
from mockingbird.routing.route import RouteKey

logger = logging.getLogger("mockingbird.routing")

RouteEntry: TypeAlias = tuple[str | HTTPMethod, str, Callable[..., Any] | Handler]


def routes(*entries: RouteEntry) -> dict[RouteKey, Handler]:
    """Build a route mapping from ``(method, path, handler)`` triples.

    Entries are inserted in the order given. When a ``(method, path)``
    pair repeats, the later entry replaces the earlier one::

        table = routes(
            ("GET", "/networks", on_get_networks),
            ("POST", "/networks", on_create_network),
        )
    """
    built: dict[RouteKey, Handler] = {}
    for method, path, handler in entries:
        key = RouteKey.of(method, path)
        if key in built:
            logger.debug(
                "Route %s registered twice; %s replaces %s",
                key,
                handler_name(handler),
                handler_name(built[key]),
            )
        built[key] = as_handler(handler)
    return built


class DispatchTable(Mapping[RouteKey, Handler]):
    """Immutable route table with a fallback handler.

    Usage::

        table = DispatchTable.build(
            [("GET", "/networks", on_get_networks)],
            default=lambda request: Response("boo"),
        )
        handler = table.lookup(RouteKey("GET", "/networks"))
    """

    __slots__ = ("_default", "_entries")

    def __init__(
        self,
        entries: Mapping[RouteKey, Handler],
        default: Callable[..., Any] | Handler,
    ) -> None:
        self._entries: Mapping[RouteKey, Handler] = MappingProxyType(
            {key: as_handler(handler) for key, handler in entries.items()}
        )
        self._default: Handler = as_handler(default)

    @classmethod
    def build(
        cls,
        entries: Iterable[RouteEntry],
        default: Callable[..., Any] | Handler,
    ) -> DispatchTable:
        """Build a table from triples, last write wins on repeated keys."""
        return cls(routes(*entries), default)

    @property
    def default(self) -> Handler:
        """The handler used when no route key matches."""
        return self._default

    def lookup(self, key: RouteKey) -> Handler:
        """Return the handler registered under *key*, or the default."""
        return self._entries.get(key, self._default)

    def __getitem__(self, key: RouteKey) -> Handler:
        return self._entries[key]

    def __iter__(self) -> Iterator[RouteKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        keys = ", ".join(str(key) for key in sorted(self._entries))
        return f"DispatchTable([{keys}], default={handler_name(self._default)})"
