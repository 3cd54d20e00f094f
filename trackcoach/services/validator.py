"""Validation of submitted athlete data."""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from trackcoach.models.schemas import TrainingRequest
from trackcoach.services.errors import ValidationError


logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "age",
    "experienceLevel",
    "primaryEvent",
    "programLength",
    "trainingDays",
    "goals",
)


def _is_blank(value: Any) -> bool:
    """Return True for values the form treats as "not filled in"."""

    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    return False


def missing_required_fields(payload: dict[str, Any]) -> list[str]:
    """List the required fields that are absent or empty, in form order."""

    return [field for field in REQUIRED_FIELDS if _is_blank(payload.get(field))]


def validate_training_request(payload: Any) -> TrainingRequest:
    """
    Check a decoded JSON body and convert it into a TrainingRequest.

    Required fields are checked for presence first so that a partially filled
    form always reports what is missing rather than a type error.

    Raises:
        ValidationError: body is not an object, a required field is missing,
            or a field has the wrong type
    """

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    missing = missing_required_fields(payload)
    if missing:
        logger.warning("Rejected plan request | missing=%s", ",".join(missing))
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            fields=missing,
        )

    try:
        return TrainingRequest.model_validate(payload)
    except PydanticValidationError as exc:
        invalid = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        logger.warning("Rejected plan request | invalid=%s", ",".join(invalid))
        raise ValidationError(f"Invalid field values: {details}", fields=invalid) from exc
