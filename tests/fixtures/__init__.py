"""
Test fixtures shared by the payloadguard test suite.
"""

from .sources import (
    FOO,
    ITEM,
    ORDER,
    ArgumentJsonResponse,
    FakeRequest,
    Foo,
    Item,
    Order,
    RaisingJsonResponse,
    SlowRequest,
    SyncJsonResponse,
)

__all__ = [
    "FOO",
    "ITEM",
    "ORDER",
    "ArgumentJsonResponse",
    "FakeRequest",
    "Foo",
    "Item",
    "Order",
    "RaisingJsonResponse",
    "SlowRequest",
    "SyncJsonResponse",
]
