"""Error types raised while generating a training plan.

Each error that can reach the HTTP layer carries the status code it maps to;
the FastAPI app renders them as ``{"error": message}``.
"""
from __future__ import annotations


class TrainingPlanError(Exception):
    """Base exception for plan generation failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(TrainingPlanError):
    """Raised when the submitted athlete data is missing or malformed."""

    status_code = 400

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        self.fields = fields or []
        super().__init__(message)


class ConfigurationError(TrainingPlanError):
    """Raised when the completion service credential is absent or a placeholder."""

    status_code = 500


class GenerationError(TrainingPlanError):
    """Raised when the plan stage fails. Aborts the request."""

    status_code = 500


class CompletionError(Exception):
    """Raised by a completion service when a call fails for any reason.

    Attributes:
        stage: Label of the call that failed (e.g. "plan", "summary")
    """

    def __init__(self, message: str, stage: str | None = None) -> None:
        self.stage = stage
        super().__init__(message)
