"""Shared fixtures for funcstack tests."""

from collections.abc import Iterator

import pytest

from funcstack.params import clear_params


@pytest.fixture(autouse=True)
def _isolated_params() -> Iterator[None]:
    """Start and finish every test with an empty param registry."""
    clear_params()
    yield
    clear_params()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
