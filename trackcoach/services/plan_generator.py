"""Two-stage training plan generation: full plan, then a bullet-point summary."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from trackcoach.models.schemas import TrainingRequest, TrainingResponse
from trackcoach.services.completion import CompletionRequest, CompletionService, check_connectivity
from trackcoach.services.errors import CompletionError, GenerationError
from trackcoach.services.prompt_builder import (
    PromptConfig,
    build_plan_prompt,
    build_summary_prompt,
    load_prompt_config,
)


logger = logging.getLogger(__name__)

SUMMARY_FALLBACK = "Summary generation failed. Please refer to the full training plan."


@dataclass(frozen=True)
class SummaryResult:
    """Outcome of the summary stage.

    ``text`` always holds something displayable: the generated summary, or
    SUMMARY_FALLBACK when the call failed (``error`` then holds the reason).
    """

    text: str
    error: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.error is not None


def assemble_response(request: TrainingRequest, plan: str, summary: str) -> TrainingResponse:
    """Echo the request fields alongside the generated text, unmodified."""

    return TrainingResponse(**request.model_dump(), plan=plan, summary=summary)


class PlanGenerator:
    """Runs the plan and summary stages against a completion service."""

    def __init__(
        self,
        service: CompletionService,
        prompt_config: PromptConfig | None = None,
        preflight: bool = False,
    ) -> None:
        self.service = service
        self.prompt_config = prompt_config or load_prompt_config()
        self.preflight = preflight

    def run_preflight(self) -> None:
        """Connectivity self-test; failure aborts the request."""

        try:
            check_connectivity(
                self.service,
                prompt=self.prompt_config.connectivity_prompt,
                max_tokens=self.prompt_config.connectivity_max_tokens,
            )
        except CompletionError as exc:
            logger.error("Completion service test failed: %s", exc)
            raise GenerationError(f"Completion service test failed: {exc}") from exc

    def generate_plan(self, request: TrainingRequest) -> str:
        """
        Produce the full training plan text.

        Raises:
            GenerationError: the completion call failed; there is no fallback plan
        """

        stage = self.prompt_config.plan
        prompt = build_plan_prompt(request, self.prompt_config)
        logger.info("Generating training plan | athlete=%s event=%s", request.name, request.primary_event)
        try:
            plan = self.service.complete(
                CompletionRequest(
                    system=stage.system,
                    prompt=prompt,
                    temperature=stage.temperature,
                    max_tokens=stage.max_tokens,
                    stage=stage.name,
                )
            )
        except CompletionError as exc:
            logger.error("Training plan generation failed for %s: %s", request.name, exc)
            raise GenerationError(f"Failed to generate training plan: {exc}") from exc

        logger.info("Training plan generation successful | chars=%d", len(plan))
        logger.debug("Training plan for %s:\n%s", request.name, plan)
        return plan

    def generate_summary(self, plan_text: str) -> SummaryResult:
        """Condense the plan into bullet points, falling back to a fixed notice on failure."""

        stage = self.prompt_config.summary
        try:
            summary = self.service.complete(
                CompletionRequest(
                    system=stage.system,
                    prompt=build_summary_prompt(plan_text, self.prompt_config),
                    temperature=stage.temperature,
                    max_tokens=stage.max_tokens,
                    stage=stage.name,
                )
            )
        except Exception as exc:
            logger.warning("Summary generation failed, using fallback text: %s", exc, exc_info=True)
            return SummaryResult(text=SUMMARY_FALLBACK, error=str(exc))

        logger.info("Summary generation successful | chars=%d", len(summary))
        return SummaryResult(text=summary)

    def generate(self, request: TrainingRequest) -> TrainingResponse:
        """Run every stage for one validated request."""

        if self.preflight:
            self.run_preflight()

        plan = self.generate_plan(request)
        summary = self.generate_summary(plan)
        return assemble_response(request, plan, summary.text)
