"""Unit tests for athlete submission validation."""
from __future__ import annotations

import pytest

from trackcoach.services.errors import ValidationError
from trackcoach.services.validator import REQUIRED_FIELDS, missing_required_fields, validate_training_request


def test_valid_payload_is_converted(sam_payload):
    request = validate_training_request(sam_payload)

    assert request.name == "Sam"
    assert request.age == 20
    assert request.experience_level == "intermediate"
    assert request.primary_event == "400m"
    assert request.program_length == 12
    assert request.training_days == 5
    assert request.goals == "improve time"
    assert request.injuries is None


def test_optional_fields_are_kept(sam_payload):
    sam_payload.update(
        {
            "secondaryEvents": "200m",
            "personalBests": "400m: 49.8s",
            "injuries": "Tight left hamstring",
            "additionalInfo": "Trains on a grass track",
        }
    )

    request = validate_training_request(sam_payload)

    assert request.secondary_events == "200m"
    assert request.personal_bests == "400m: 49.8s"
    assert request.injuries == "Tight left hamstring"
    assert request.additional_info == "Trains on a grass track"


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_each_required_field_is_enforced(sam_payload, field):
    del sam_payload[field]

    with pytest.raises(ValidationError) as excinfo:
        validate_training_request(sam_payload)

    assert excinfo.value.fields == [field]
    assert field in excinfo.value.message
    assert excinfo.value.status_code == 400


@pytest.mark.parametrize("blank", [None, "", "   ", 0])
def test_blank_values_count_as_missing(sam_payload, blank):
    sam_payload["goals"] = blank
    sam_payload["age"] = blank

    assert missing_required_fields(sam_payload) == ["age", "goals"]


def test_all_missing_fields_are_reported_in_form_order():
    with pytest.raises(ValidationError) as excinfo:
        validate_training_request({"goals": "run faster"})

    assert excinfo.value.fields == [
        "name",
        "age",
        "experienceLevel",
        "primaryEvent",
        "programLength",
        "trainingDays",
    ]
    assert excinfo.value.message.startswith("Missing required fields: name, age")


@pytest.mark.parametrize("body", [[], "Sam", 42, None])
def test_non_object_body_is_rejected(body):
    with pytest.raises(ValidationError, match="JSON object"):
        validate_training_request(body)


def test_unknown_experience_level_is_rejected(sam_payload):
    sam_payload["experienceLevel"] = "legendary"

    with pytest.raises(ValidationError) as excinfo:
        validate_training_request(sam_payload)

    assert excinfo.value.fields == ["experienceLevel"]
    assert excinfo.value.message.startswith("Invalid field values")


def test_non_numeric_age_is_rejected(sam_payload):
    sam_payload["age"] = "twenty"

    with pytest.raises(ValidationError) as excinfo:
        validate_training_request(sam_payload)

    assert excinfo.value.fields == ["age"]


def test_numeric_strings_are_coerced(sam_payload):
    sam_payload["programLength"] = "16"

    request = validate_training_request(sam_payload)

    assert request.program_length == 16


def test_unknown_fields_are_ignored(sam_payload):
    sam_payload["favouriteColour"] = "green"

    request = validate_training_request(sam_payload)

    assert not hasattr(request, "favouriteColour")
