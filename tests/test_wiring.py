"""Tests for the production wiring: lifespan-built collaborators and dependency providers."""

from __future__ import annotations

from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from config import settings
from engine.chat import ChatResponder
from engine.summarizer import BlogSummarizer
from main import app, get_blog_service, get_chat_responder, get_summarizer
from services.blog_service import BlogService
from services.llm_service import OpenAIChatBackend


@pytest.fixture
def local_settings(monkeypatch):
    monkeypatch.setattr(settings, "llm_provider", "local")
    monkeypatch.setattr(settings, "local_llm_model", "llama3")
    monkeypatch.setattr(settings, "blog_base_url", "https://blog.test/")
    monkeypatch.setattr(settings, "http_timeout_seconds", 12.5)
    app.dependency_overrides.clear()
    return settings


class TestLifespan:
    def test_startup_builds_shared_client_and_backend(self, local_settings):
        with TestClient(app) as client:
            http_client = app.state.http_client
            assert http_client.base_url == httpx.URL("https://blog.test/")
            assert http_client.timeout == httpx.Timeout(12.5)
            assert http_client.headers["User-Agent"] == local_settings.user_agent

            assert isinstance(app.state.backend, OpenAIChatBackend)
            assert app.state.backend.model == "llama3"

            assert client.get("/health").status_code == 200

        assert http_client.is_closed

    def test_providers_use_lifespan_collaborators(self, local_settings):
        with TestClient(app):
            request = SimpleNamespace(app=app)

            blog_service = get_blog_service(request)
            summarizer = get_summarizer(request)
            responder = get_chat_responder(request)

            assert isinstance(blog_service, BlogService)
            assert blog_service.client is app.state.http_client
            assert isinstance(summarizer, BlogSummarizer)
            assert summarizer.backend is app.state.backend
            assert isinstance(responder, ChatResponder)
            assert responder.backend is app.state.backend
