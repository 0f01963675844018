"""Test utilities for warren routers::

    from warren.testing import TestClient
"""

from warren.testing.client import ClientResponse, TestClient

__all__ = ["ClientResponse", "TestClient"]
