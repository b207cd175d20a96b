# tests/conftest.py
import pytest

from tests.fixtures import FakeRequest


@pytest.fixture
def make_request():
    def _make(payload=None, *, error=None):
        return FakeRequest(payload, error=error)

    return _make
