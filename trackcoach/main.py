"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from trackcoach.logging_config import configure_logging
from trackcoach.routers import health, plans
from trackcoach.services.errors import TrainingPlanError


configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(title="TrackCoach API")


@app.exception_handler(TrainingPlanError)
async def training_plan_error_handler(request: Request, exc: TrainingPlanError) -> JSONResponse:
    """Render domain errors as ``{"error": message}`` with their status code."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch failures outside the route bodies, e.g. while resolving dependencies."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": plans.GENERIC_FAILURE_MESSAGE})


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Simple health probe for liveness checks."""
    return {"status": "ok"}


# Include routers
app.include_router(health.router)
app.include_router(plans.router)
