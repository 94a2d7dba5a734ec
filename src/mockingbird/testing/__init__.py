"""Test utilities for mockingbird applications.

    from mockingbird.testing import TestClient
"""

from mockingbird.testing.client import TestClient

__all__ = ["TestClient"]
