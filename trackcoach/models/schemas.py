"""Pydantic models describing API payloads."""
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ExperienceLevel(str, Enum):
    """How long the athlete has been training."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class TrainingRequest(BaseModel):
    """Athlete parameters submitted to the plan generator."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    name: str
    age: int
    experience_level: ExperienceLevel
    primary_event: str
    secondary_events: str | None = None
    personal_bests: str | None = None
    program_length: int
    training_days: int
    goals: str
    injuries: str | None = None
    additional_info: str | None = None


class TrainingResponse(TrainingRequest):
    """Submitted fields echoed back with the generated plan and summary."""

    plan: str
    summary: str


class ErrorResponse(BaseModel):
    """Body returned for every non-200 response."""

    error: str
