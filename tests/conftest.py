"""Shared fixtures for the Blogsum tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from fakes import BLOG_BASE_URL, FakeBackend
from services.llm_service import BackendError


@pytest.fixture
def fake_backend() -> Callable[..., FakeBackend]:
    return FakeBackend


@pytest.fixture
def failing_backend() -> FakeBackend:
    return FakeBackend(error=BackendError("backend unavailable"))


@pytest.fixture
def blog_client() -> Callable[..., httpx.AsyncClient]:
    """Build an ``AsyncClient`` whose requests are answered by *handler*."""

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=BLOG_BASE_URL, transport=httpx.MockTransport(handler))

    return _build
