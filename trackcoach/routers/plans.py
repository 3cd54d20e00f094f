"""API endpoint generating AI-written training plans."""
from __future__ import annotations

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from trackcoach.dependencies import get_plan_generator
from trackcoach.models.schemas import ErrorResponse, TrainingResponse
from trackcoach.services.errors import TrainingPlanError, ValidationError
from trackcoach.services.plan_generator import PlanGenerator
from trackcoach.services.validator import validate_training_request


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["plans"])

GENERIC_FAILURE_MESSAGE = "Failed to generate training plan"


@router.post(
    "/generate-plan",
    response_model=TrainingResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_plan(
    request: Request,
    generator: Annotated[PlanGenerator, Depends(get_plan_generator)],
):
    """
    Generate a personalised track and field training plan.

    The credential check happens while resolving ``generator``, so a missing
    API key is reported before the body is even read.

    Returns:
        TrainingResponse: Submitted fields plus ``plan`` and ``summary``
    """

    try:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Rejected plan request with a body that is not valid JSON")
            raise ValidationError("Request body must be valid JSON")

        training_request = validate_training_request(payload)
        logger.info(
            "Handling plan request | athlete=%s event=%s weeks=%s days=%s",
            training_request.name,
            training_request.primary_event,
            training_request.program_length,
            training_request.training_days,
        )
        # The completion client blocks; keep it off the event loop.
        return await run_in_threadpool(generator.generate, training_request)
    except TrainingPlanError:
        raise
    except Exception:
        logger.exception("Unexpected failure while generating training plan")
        return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE_MESSAGE})
