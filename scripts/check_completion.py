"""Verify the Anthropic credential and model answer a test prompt."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from trackcoach.config import get_settings
from trackcoach.logging_config import configure_logging
from trackcoach.services.completion import AnthropicCompletionService, check_connectivity
from trackcoach.services.errors import CompletionError, ConfigurationError
from trackcoach.services.prompt_builder import load_prompt_config


logger = logging.getLogger("check_completion")


def main() -> int:
    configure_logging()
    settings = get_settings()

    try:
        service = AnthropicCompletionService.from_settings(settings)
    except ConfigurationError as e:
        logger.error("❌ %s. Set ANTHROPIC_API_KEY in your .env file.", e.message)
        return 1

    config = load_prompt_config()
    try:
        reply = check_connectivity(service, config.connectivity_prompt, config.connectivity_max_tokens)
    except CompletionError as e:
        logger.error("❌ Completion service test failed: %s", e)
        return 1

    logger.info("✅ %s answered: %r", service.model, reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())
