"""Generate a training plan from the command line."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from trackcoach.config import get_settings
from trackcoach.logging_config import configure_logging
from trackcoach.services.completion import AnthropicCompletionService, CompletionService
from trackcoach.services.errors import TrainingPlanError
from trackcoach.services.plan_export import export_filename, render_plan_markdown
from trackcoach.services.plan_generator import PlanGenerator
from trackcoach.services.validator import validate_training_request


logger = logging.getLogger("generate_plan")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a track and field training plan",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the plan as markdown
  python scripts/generate_plan.py athlete.json

  # Read the athlete from stdin and keep the full JSON response
  cat athlete.json | python scripts/generate_plan.py - --json

  # Save the markdown export next to the input
  python scripts/generate_plan.py athlete.json --output plans/
        """
    )
    parser.add_argument(
        "input",
        help="Path to a JSON file with the athlete's details, or '-' for stdin"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the full JSON response instead of markdown"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="File or directory to write the result to (default: stdout)"
    )
    return parser.parse_args(argv)


def load_payload(source: str) -> object:
    if source == "-":
        return json.load(sys.stdin)
    with Path(source).open("r", encoding="utf-8") as fh:
        return json.load(fh)


def render(payload: object, service: CompletionService, as_json: bool = False) -> tuple[str, str]:
    """
    Run the full pipeline and format the result.

    Returns:
        tuple: (suggested file name, rendered content)
    """
    training_request = validate_training_request(payload)
    response = PlanGenerator(service).generate(training_request)
    filename = export_filename(response)

    if as_json:
        content = json.dumps(response.model_dump(by_alias=True, exclude_none=True), indent=2)
        return str(Path(filename).with_suffix(".json")), content

    content = f"{render_plan_markdown(response)}\n\n## Summary\n\n{response.summary}\n"
    return filename, content


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        payload = load_payload(args.input)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Could not read athlete details from %s: %s", args.input, e)
        return 1

    try:
        service = AnthropicCompletionService.from_settings(get_settings())
        filename, content = render(payload, service, as_json=args.json)
    except TrainingPlanError as e:
        logger.error("%s", e.message)
        return 1

    if args.output is None:
        print(content)
        return 0

    target = args.output / filename if args.output.is_dir() else args.output
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info("Training plan written to %s", target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
