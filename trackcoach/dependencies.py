"""FastAPI dependencies wiring settings to the plan generator."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from trackcoach.config import Settings, get_settings
from trackcoach.services.completion import AnthropicCompletionService, CompletionService
from trackcoach.services.plan_generator import PlanGenerator


def get_completion_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CompletionService:
    """Anthropic client for this request; raises ConfigurationError without a key."""

    return AnthropicCompletionService.from_settings(settings)


def get_plan_generator(
    service: Annotated[CompletionService, Depends(get_completion_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PlanGenerator:
    return PlanGenerator(service, preflight=settings.preflight_check)
