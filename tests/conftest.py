"""Shared fixtures for mockingbird tests."""

from collections.abc import Callable
from typing import Any

import pytest

from mockingbird.http.headers import Headers
from mockingbird.http.request import Request


def build_request(
    method: str = "GET",
    path: str = "/",
    *,
    body: bytes = b"",
    headers: tuple[tuple[bytes, bytes], ...] = (),
) -> Request:
    """A Request whose receive() yields *body* in one message."""
    sent = False

    async def receive() -> dict[str, Any]:
        nonlocal sent
        if not sent:
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}
        return {"type": "http.disconnect"}

    return Request(
        method=method,
        path=path,
        headers=Headers(headers),
        query_string=b"",
        http_version="1.1",
        server=("testserver", 80),
        client=("127.0.0.1", 0),
        _receive=receive,
    )


@pytest.fixture
def make_request() -> Callable[..., Request]:
    return build_request
