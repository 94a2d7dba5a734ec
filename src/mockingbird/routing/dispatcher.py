"""Dispatcher: the per-request entry point into the route table."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING

from mockingbird.routing.route import RouteKey

if TYPE_CHECKING:
    from mockingbird.http.request import Request
    from mockingbird.http.response import Response
    from mockingbird.routing.table import DispatchTable

logger = logging.getLogger("mockingbird.dispatch")


class Dispatcher:
    """Select and invoke exactly one handler per request.

    Calling the dispatcher is synchronous and never suspends: it derives
    the request's ``RouteKey``, looks it up (falling back to the table's
    default), clones the handler, invokes the clone, and hands back the
    resulting awaitable untouched. Whatever the handler raises reaches
    the caller unchanged.
    """

    __slots__ = ("_table",)

    def __init__(self, table: DispatchTable) -> None:
        self._table = table

    @property
    def table(self) -> DispatchTable:
        return self._table

    def __call__(self, request: Request) -> Awaitable[Response]:
        key = RouteKey.from_request(request)
        handler = self._table.get(key)
        if handler is None:
            logger.debug("%s -> default", key)
            handler = self._table.default
        else:
            logger.debug("%s -> matched", key)
        return handler.clone()(request)
