"""tests/conftest.py

Pytest configuration and shared fixtures for the chatbot test suite.
"""

from __future__ import annotations

# Standard Library
import json
import random
from collections.abc import Callable
from datetime import datetime
from typing import Any
from unittest.mock import Mock

# Third-Party Libraries
import httpx
import pytest

# Local Modules
from chatbot.local_resolver import LocalResolver
from chatbot.settings import ChatbotSettings
from chatbot.types import RemoteReply

FIXED_NOW = datetime(2026, 10, 19, 15, 5, 0)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns 2026-10-19 15:05."""
    return lambda: FIXED_NOW


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible reply selection."""
    return random.Random(1234)


@pytest.fixture
def resolver(rng: random.Random, fixed_clock: Callable[[], datetime]) -> LocalResolver:
    """LocalResolver wired to the seeded RNG and fixed clock."""
    return LocalResolver(rng=rng, now=fixed_clock)


@pytest.fixture
def settings() -> ChatbotSettings:
    """Settings with a dummy credential and two models, isolated from .env."""
    return ChatbotSettings(
        _env_file=None,
        gemini_api_key="test-key-123",
        gemini_models=["model-a", "model-b"],
        gemini_base_url="https://gemini.test",
    )


@pytest.fixture
def unconfigured_settings() -> ChatbotSettings:
    """Settings with no credential configured."""
    return ChatbotSettings(_env_file=None, gemini_api_key="")


@pytest.fixture
def candidates_body() -> Callable[[str], dict[str, Any]]:
    """Build a ``generateContent`` body in the candidates shape."""

    def _build(text: str) -> dict[str, Any]:
        return {
            "candidates": [
                {"content": {"role": "model", "parts": [{"text": text}]}}
            ]
        }

    return _build


@pytest.fixture
def make_http_client() -> Callable[..., tuple[httpx.Client, list[httpx.Request]]]:
    """Factory for an ``httpx.Client`` backed by ``httpx.MockTransport``.

    Returns:
        A callable taking a handler ``(httpx.Request) -> httpx.Response`` and
        returning ``(client, recorded_requests)``.
    """

    def _factory(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> tuple[httpx.Client, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        return httpx.Client(transport=httpx.MockTransport(_record)), seen

    return _factory


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Build a JSON ``httpx.Response``."""

    def _build(payload: Any, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return _build


@pytest.fixture
def mock_model_client() -> Mock:
    """Mock model caller whose ``call_model`` returns an empty reply."""
    client = Mock()
    client.call_model.return_value = RemoteReply.empty()
    return client
