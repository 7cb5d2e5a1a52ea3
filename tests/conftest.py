"""Shared fixtures for the notification engine tests."""

from __future__ import annotations

import pytest

from support import FakeGateway, FrozenClock


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()
