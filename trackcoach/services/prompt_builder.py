"""Prompt rendering for the plan and summary stages."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from trackcoach.config import get_settings
from trackcoach.models.schemas import TrainingRequest


@dataclass(frozen=True)
class StageConfig:
    """Fixed instruction and sampling parameters for one completion stage."""

    name: str
    system: str
    template: str
    temperature: float
    max_tokens: int


@dataclass(frozen=True)
class PromptConfig:
    """Parsed prompt configuration file."""

    plan: StageConfig
    summary: StageConfig
    optional_fields: dict[str, dict[str, str]]
    connectivity_prompt: str
    connectivity_max_tokens: int


def _load_template(path: str | Path) -> str:
    with Path(path).open("r", encoding="utf-8") as fh:
        return fh.read()


def _load_stage(name: str, raw: dict[str, Any], base_dir: Path) -> StageConfig:
    return StageConfig(
        name=name,
        system=str(raw["system"]).strip(),
        template=_load_template(base_dir / raw["template_path"]),
        temperature=float(raw["temperature"]),
        max_tokens=int(raw["max_tokens"]),
    )


@lru_cache()
def load_prompt_config(path: Path | None = None) -> PromptConfig:
    """Read the YAML prompt configuration (cached per path)."""

    if path is None:
        path = get_settings().prompt_config_path
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)

    base_dir = path.parent
    stages = raw["stages"]
    connectivity = raw.get("connectivity_check", {})
    return PromptConfig(
        plan=_load_stage("plan", stages["plan"], base_dir),
        summary=_load_stage("summary", stages["summary"], base_dir),
        optional_fields=raw.get("optional_fields", {}),
        connectivity_prompt=connectivity.get("prompt", "Hello, this is a test."),
        connectivity_max_tokens=int(connectivity.get("max_tokens", 5)),
    )


def _format_optional_lines(request: TrainingRequest, labels: dict[str, str]) -> str:
    """Render one "Label: value" line per filled-in field, nothing otherwise."""

    lines = []
    for attribute, label in labels.items():
        value = getattr(request, attribute, None)
        if value is None or not str(value).strip():
            continue
        lines.append(f"{label}: {value}\n")
    return "".join(lines)


def build_plan_prompt(request: TrainingRequest, config: PromptConfig | None = None) -> str:
    """Render the plan-stage prompt for a validated request."""

    config = config or load_prompt_config()
    optional = config.optional_fields
    return config.plan.template.format(
        name=request.name,
        age=request.age,
        experience_level=request.experience_level,
        primary_event=request.primary_event,
        program_length=request.program_length,
        training_days=request.training_days,
        goals=request.goals,
        event_details=_format_optional_lines(request, optional.get("event_details", {})),
        athlete_notes=_format_optional_lines(request, optional.get("athlete_notes", {})),
    ).strip()


def build_summary_prompt(plan_text: str, config: PromptConfig | None = None) -> str:
    """Render the summary-stage prompt around the generated plan."""

    config = config or load_prompt_config()
    return config.summary.template.format(plan=plan_text).strip()
