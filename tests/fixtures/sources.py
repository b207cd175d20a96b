"""
Request-like sources and shared schemas for extraction tests.
"""

import asyncio

from pydantic import BaseModel
from typing_extensions import TypedDict

from payloadguard import validatable


class Foo(TypedDict):
    bar: str


class Item(BaseModel):
    name: str
    qty: int


class Order(BaseModel):
    id: int
    items: list[Item]


FOO = validatable(Foo)
ITEM = validatable(Item)
ORDER = validatable(Order)


class FakeRequest:
    """Request-like source whose body is produced by ``async json()``."""

    def __init__(self, payload=None, *, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.calls = 0

    async def json(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


class SlowRequest(FakeRequest):
    """Resolves only after ``release`` is set."""

    def __init__(self, payload=None):
        super().__init__(payload)
        self.release = asyncio.Event()

    async def json(self):
        self.calls += 1
        await self.release.wait()
        return self.payload


class SyncJsonResponse:
    """Exposes a blocking ``json()``, like a synchronous HTTP client response."""

    def __init__(self, payload):
        self.payload = payload
        self.calls = 0

    def json(self):
        self.calls += 1
        return self.payload


class RaisingJsonResponse:
    """``json()`` fails before producing an awaitable."""

    def __init__(self):
        self.calls = 0

    def json(self):
        self.calls += 1
        raise RuntimeError("body already consumed")


class ArgumentJsonResponse:
    """``json()`` cannot be called without arguments."""

    async def json(self, encoding):
        return {}
