"""Router exposing basic system endpoints."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from trackcoach.dependencies import get_completion_service
from trackcoach.services.completion import CompletionService, check_connectivity
from trackcoach.services.errors import CompletionError
from trackcoach.services.prompt_builder import load_prompt_config


logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/status")
async def get_status() -> dict[str, str]:
    """Return a minimal status payload."""
    return {"status": "online"}


@router.get("/completion")
async def get_completion_status(
    service: Annotated[CompletionService, Depends(get_completion_service)],
):
    """
    Send a tiny test prompt to the completion service.

    Diagnostic only; plan generation does not depend on it.

    Returns:
        dict: {"status": "ok", "model": str} or a 503 with {"error": str}
    """
    config = load_prompt_config()
    try:
        await run_in_threadpool(
            check_connectivity,
            service,
            config.connectivity_prompt,
            config.connectivity_max_tokens,
        )
    except CompletionError as exc:
        logger.warning("Completion service connectivity check failed: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"error": f"Completion service test failed: {exc}"},
        )
    return {"status": "ok", "model": service.model}
