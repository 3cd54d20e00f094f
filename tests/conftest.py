"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import os
from typing import Any, Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

os.environ["ANTHROPIC_API_KEY"] = os.environ.get("ANTHROPIC_API_KEY") or "test-anthropic-key"
os.environ["PREFLIGHT_CHECK"] = "false"

from trackcoach.logging_config import configure_logging

configure_logging()

from trackcoach.main import app
from trackcoach.services.completion import CompletionRequest, CompletionService
from trackcoach.services.errors import CompletionError


STUB_PLAN = "# 12-Week 400m Plan\n\n## Week 1\n- Monday: 6x200m @ 90%"
STUB_SUMMARY = "- Builds speed endurance\n- Two tempo days per week\n- Deload every fourth week"


class FakeCompletionService(CompletionService):
    """Records requests and answers each stage with a canned reply or error."""

    def __init__(self, replies: Dict[str, str | Exception] | None = None) -> None:
        self.replies: Dict[str, str | Exception] = {
            "plan": STUB_PLAN,
            "summary": STUB_SUMMARY,
            "connectivity": "Hi",
        }
        self.replies.update(replies or {})
        self.requests: list[CompletionRequest] = []

    @property
    def model(self) -> str:
        return "fake-model"

    def complete(self, request: CompletionRequest) -> str:
        self.requests.append(request)
        reply = self.replies[request.stage]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def stages(self) -> list[str]:
        return [r.stage for r in self.requests]


@pytest.fixture(scope="session")
def test_client() -> TestClient:
    """Provide a FastAPI test client."""

    return TestClient(app)


@pytest.fixture
def fake_service() -> FakeCompletionService:
    return FakeCompletionService()


@pytest.fixture
def make_service() -> type[FakeCompletionService]:
    """Factory for fakes with per-stage replies."""

    return FakeCompletionService


@pytest.fixture
def failing() -> Callable[..., CompletionError]:
    """Build a CompletionError for a stage, as the Anthropic client would raise it."""

    def _make(stage: str, message: str = "Error code: 529 - overloaded") -> CompletionError:
        return CompletionError(message, stage=stage)

    return _make


@pytest.fixture
def override_dependencies() -> Iterator[Dict[Any, Any]]:
    """Expose app.dependency_overrides and reset it after the test."""

    yield app.dependency_overrides
    app.dependency_overrides.clear()


@pytest.fixture
def sam_payload() -> Dict[str, Any]:
    """Minimal valid athlete submission."""

    return {
        "name": "Sam",
        "age": 20,
        "experienceLevel": "intermediate",
        "primaryEvent": "400m",
        "programLength": 12,
        "trainingDays": 5,
        "goals": "improve time",
    }
