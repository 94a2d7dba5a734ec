"""Mockingbird exception hierarchy.

Shared across the route table, dispatcher, and ASGI glue so every module
raises and catches the same types.
"""


class MockingbirdError(Exception):
    """Base for all mockingbird-specific errors."""


class ConfigurationError(MockingbirdError):
    """Raised when the route table cannot be built.

    Typically caught during ``App._freeze()`` at startup, never while
    serving requests.
    """


class TransportError(MockingbirdError):
    """The request or response could not be moved over the connection.

    Raised from request body access when the client goes away mid-read.
    The dispatcher never catches these; they travel back to the ASGI
    server unchanged.
    """
