"""Tests for the command-line plan generator and markdown export."""
from __future__ import annotations

import json

import pytest

from scripts import generate_plan
from trackcoach.models.schemas import TrainingResponse
from trackcoach.services.errors import ValidationError
from trackcoach.services.plan_export import export_filename, render_plan_markdown


@pytest.fixture
def response(sam_payload) -> TrainingResponse:
    return TrainingResponse.model_validate({**sam_payload, "name": "Sam  Lee", "plan": "## Week 1", "summary": "- Speed"})


def test_export_filename_replaces_whitespace(response):
    assert export_filename(response) == "Sam_Lee_training_plan.md"


def test_markdown_export_has_profile_header(response):
    markdown = render_plan_markdown(response)

    assert markdown.splitlines()[:7] == [
        "# Training Plan for Sam  Lee",
        "Age: 20",
        "Experience Level: intermediate",
        "Primary Event: 400m",
        "Program Length: 12 weeks",
        "Training Days: 5 days per week",
        "Goals: improve time",
    ]
    assert markdown.endswith("\n\n## Week 1")


def test_render_markdown(fake_service, sam_payload):
    filename, content = generate_plan.render(sam_payload, fake_service)

    assert filename == "Sam_training_plan.md"
    assert content.startswith("# Training Plan for Sam\n")
    assert "## Summary\n\n- Builds speed endurance" in content


def test_render_json(fake_service, sam_payload):
    filename, content = generate_plan.render(sam_payload, fake_service, as_json=True)

    assert filename == "Sam_training_plan.json"
    data = json.loads(content)
    assert data["primaryEvent"] == "400m"
    assert data["plan"].startswith("# 12-Week 400m Plan")


def test_render_rejects_incomplete_payload(fake_service):
    with pytest.raises(ValidationError):
        generate_plan.render({"name": "Sam"}, fake_service)
    assert fake_service.requests == []


def test_main_writes_output_directory(monkeypatch: pytest.MonkeyPatch, tmp_path, fake_service, sam_payload):
    source = tmp_path / "athlete.json"
    source.write_text(json.dumps(sam_payload), encoding="utf-8")
    out_dir = tmp_path / "plans"
    out_dir.mkdir()
    monkeypatch.setattr(
        generate_plan.AnthropicCompletionService,
        "from_settings",
        classmethod(lambda cls, settings: fake_service),
    )

    exit_code = generate_plan.main([str(source), "--output", str(out_dir)])

    assert exit_code == 0
    written = (out_dir / "Sam_training_plan.md").read_text(encoding="utf-8")
    assert written.startswith("# Training Plan for Sam")


def test_main_reports_unreadable_input(tmp_path):
    assert generate_plan.main([str(tmp_path / "missing.json")]) == 1
