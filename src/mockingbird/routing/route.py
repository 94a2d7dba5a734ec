"""RouteKey frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPMethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockingbird.http.request import Request


@dataclass(frozen=True, slots=True, order=True)
class RouteKey:
    """The ``(method, path)`` pair a handler is registered under.

    Both parts compare exactly: no case folding, no trailing-slash or
    percent-encoding normalisation. ``"/networks"`` and ``"/networks/"``
    are different keys, and so are ``"GET"`` and ``"get"``.

    Ordering exists so keys sort for listings; lookup only needs
    equality and hashing.
    """

    method: str
    path: str

    @classmethod
    def of(cls, method: str | HTTPMethod, path: str) -> RouteKey:
        """Build a key from a method literal or ``HTTPMethod`` member."""
        if isinstance(method, HTTPMethod):
            method = method.value
        return cls(method=method, path=path)

    @classmethod
    def from_request(cls, request: Request) -> RouteKey:
        """The key an incoming request is looked up under."""
        return cls(method=request.method, path=request.path)

    def __str__(self) -> str:
        return f"{self.method} {self.path}"
