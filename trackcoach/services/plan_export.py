"""Markdown export of a generated training plan."""
import re

from trackcoach.models.schemas import TrainingResponse


def export_filename(response: TrainingResponse) -> str:
    """File name for a downloaded plan, e.g. ``Sam_Lee_training_plan.md``."""

    stem = re.sub(r"\s+", "_", response.name.strip()) or "athlete"
    return f"{stem}_training_plan.md"


def render_plan_markdown(response: TrainingResponse) -> str:
    """Prefix the plan with an athlete profile header."""

    lines = [
        f"# Training Plan for {response.name}",
        f"Age: {response.age}",
        f"Experience Level: {response.experience_level}",
        f"Primary Event: {response.primary_event}",
        f"Program Length: {response.program_length} weeks",
        f"Training Days: {response.training_days} days per week",
        f"Goals: {response.goals}",
        "",
        response.plan,
    ]
    return "\n".join(lines)
