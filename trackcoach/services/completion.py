"""Text completion clients used by the plan generator."""
from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from anthropic import Anthropic, APIError

from trackcoach.config import Settings
from trackcoach.services.errors import CompletionError, ConfigurationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionRequest:
    """One outbound call: instruction, prompt and sampling parameters."""

    system: str | None
    prompt: str
    temperature: float
    max_tokens: int
    stage: str = "completion"


class CompletionService(ABC):
    """Opaque text-completion backend.

    Implementations return the completion text or raise CompletionError;
    they never return an empty string for a failed call.
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Identifier of the model answering requests."""
        ...

    @abstractmethod
    def complete(self, request: CompletionRequest) -> str:
        """Send a completion request and return the generated text."""
        ...


class AnthropicCompletionService(CompletionService):
    """Completion backend using the Anthropic Messages API."""

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float | None = None,
    ) -> None:
        if timeout is None:
            self.client = Anthropic(api_key=api_key)
        else:
            self.client = Anthropic(api_key=api_key, timeout=timeout)
        self._model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnthropicCompletionService":
        """Build a client, refusing to start without a real API key."""

        if not settings.anthropic_configured:
            logger.error("Anthropic API key is not configured or is a placeholder value")
            raise ConfigurationError("Anthropic API key is not configured")
        return cls(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            timeout=settings.completion_timeout_seconds,
        )

    @property
    def model(self) -> str:
        return self._model

    def complete(self, request: CompletionRequest) -> str:
        request_payload = {
            "model": self._model,
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": [{"role": "user", "content": request.prompt}],
        }
        if request.system:
            request_payload["system"] = request.system

        start_time = time.perf_counter()
        try:
            response = self.client.messages.create(**request_payload)
        except APIError as exc:
            logger.error("Anthropic %s request failed: %s", request.stage, exc)
            raise CompletionError(str(exc), stage=request.stage) from exc

        latency_ms = int((time.perf_counter() - start_time) * 1000)
        text = self._extract_text(response)
        if not text:
            logger.error("Anthropic %s response contained no text", request.stage)
            raise CompletionError("Completion service returned an empty response", stage=request.stage)

        logger.info(
            "Anthropic %s completion finished | model=%s chars=%d latency_ms=%d",
            request.stage,
            self._model,
            len(text),
            latency_ms,
        )
        return text

    @staticmethod
    def _extract_text(response) -> str:
        """Join the text blocks of a Messages API response."""

        blocks = getattr(response, "content", None) or []
        parts = [getattr(block, "text", None) for block in blocks]
        return "".join(part for part in parts if part).strip()


def check_connectivity(service: CompletionService, prompt: str = "Hello, this is a test.", max_tokens: int = 5) -> str:
    """
    Send a tiny request to verify the completion service answers.

    Returns:
        str: The (short) completion text

    Raises:
        CompletionError: The service could not be reached or refused the call
    """

    logger.info("Testing completion service connection | model=%s", service.model)
    text = service.complete(
        CompletionRequest(
            system=None,
            prompt=prompt,
            temperature=0.0,
            max_tokens=max_tokens,
            stage="connectivity",
        )
    )
    logger.info("Completion service test successful: %r", text)
    return text
