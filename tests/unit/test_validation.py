"""Validation tests."""

import pytest
from hypothesis import given, strategies as st
from returns.result import Failure, Success

from quickproto.core import (
    ConfigValidator,
    CreatePrototypeRequest,
    UpdatePrototypeRequest,
    ValidationError,
    safe_json_dumps,
    validate_config_document,
    validate_ui_config,
)
from quickproto.core.validate import MAX_ANSWER_LENGTH


def check(document):
    ConfigValidator.validate(document, safe_json_dumps(document))


# ============================================================================
# Request Models
# ============================================================================

def test_create_request_valid(sample_answers_data):
    req = CreatePrototypeRequest(**sample_answers_data)
    assert req.call_to_action == "Comenzar ahora"
    assert req.to_answers().atmosphere == sample_answers_data["atmosphere"]


def test_create_request_strips(sample_answers_data):
    req = CreatePrototypeRequest(**{**sample_answers_data, "call_to_action": "  Go now  "})
    assert req.call_to_action == "Go now"


@pytest.mark.parametrize("value", ["", "   "])
def test_create_request_empty(sample_answers_data, value):
    with pytest.raises(Exception):
        CreatePrototypeRequest(**{**sample_answers_data, "atmosphere": value})


def test_create_request_missing_field(sample_answers_data):
    data = dict(sample_answers_data)
    del data["visual_elements"]
    with pytest.raises(Exception):
        CreatePrototypeRequest(**data)


def test_create_request_extra_field(sample_answers_data):
    with pytest.raises(Exception):
        CreatePrototypeRequest(**sample_answers_data, title="Old schema")


def test_create_request_too_long(sample_answers_data):
    with pytest.raises(Exception):
        CreatePrototypeRequest(**{**sample_answers_data, "problem_or_goal": "x" * (MAX_ANSWER_LENGTH + 1)})


def test_create_request_strict_types(sample_answers_data):
    with pytest.raises(Exception):
        CreatePrototypeRequest(**{**sample_answers_data, "atmosphere": 42})


def test_update_request_provided_answers():
    req = UpdatePrototypeRequest(atmosphere=" Verde ")
    assert req.provided_answers() == {"atmosphere": "Verde"}


def test_update_request_empty():
    assert UpdatePrototypeRequest().provided_answers() == {}


def test_update_request_null_is_not_provided():
    assert UpdatePrototypeRequest(atmosphere=None).provided_answers() == {}


def test_update_request_rejects_blank():
    with pytest.raises(Exception):
        UpdatePrototypeRequest(call_to_action="  ")


@given(st.text(min_size=1, max_size=500))
def test_answer_validation_property(answer):
    """Property test: any non-blank answer is accepted and stripped."""
    if answer.strip():
        req = UpdatePrototypeRequest(problem_or_goal=answer)
        assert req.provided_answers() == {"problem_or_goal": answer.strip()}


# ============================================================================
# ConfigValidator
# ============================================================================

def test_generated_config_is_valid(generator, sample_answers):
    check(generator.generate(sample_answers).to_document())


def test_validator_missing_key(generator, sample_answers):
    document = generator.generate(sample_answers).to_document()
    del document["theme"]
    with pytest.raises(ValidationError, match="theme"):
        check(document)


def test_validator_unknown_layout(generator, sample_answers):
    document = generator.generate(sample_answers).to_document()
    document["layout"] = "grid"
    with pytest.raises(ValidationError, match="layout"):
        check(document)


def test_validator_bad_color(generator, sample_answers):
    document = generator.generate(sample_answers).to_document()
    document["primary_color"] = "blue"
    with pytest.raises(ValidationError, match="color"):
        check(document)


def test_validator_duplicate_ids(generator, sample_answers):
    document = generator.generate(sample_answers).to_document()
    document["components"].append(dict(document["components"][0]))
    with pytest.raises(ValidationError, match="Duplicate"):
        check(document)


def test_validator_unknown_type(generator, sample_answers):
    document = generator.generate(sample_answers).to_document()
    document["components"][0]["type"] = "container"
    with pytest.raises(ValidationError, match="unknown type"):
        check(document)


@pytest.mark.parametrize("component_id,key", [
    ("main-heading", "content"),
    ("data-input", "placeholder"),
    ("content-list", "items"),
    ("main-image", "content"),
    ("cta-button", "label"),
    ("cta-button", "action"),
])
def test_validator_missing_payload(generator, sample_answers, component_id, key):
    document = generator.generate(sample_answers).to_document()
    component = next(c for c in document["components"] if c["id"] == component_id)
    del component[key]
    with pytest.raises(ValidationError, match=key):
        check(document)


def test_validator_non_string_style(generator, sample_answers):
    document = generator.generate(sample_answers).to_document()
    document["components"][0]["styles"]["fontSize"] = 24
    with pytest.raises(ValidationError, match="styles"):
        check(document)


def test_validator_too_deep():
    document = {"layout": "single-column", "theme": "minimal", "primary_color": "#2563eb",
                "components": [{"id": "a", "type": "text", "content": "x", "styles": {}}]}
    nested = document["components"][0]
    for _ in range(10):
        nested["styles"] = {"inner": {}}
        nested = nested["styles"]["inner"]
    with pytest.raises(ValidationError):
        check(document)


def test_validate_ui_config_result(generator, sample_answers):
    assert validate_ui_config(generator.generate(sample_answers)) == Success(None)


def test_validate_config_document_success(generator, sample_answers):
    config = generator.generate(sample_answers)
    result = validate_config_document(config.to_document())
    assert isinstance(result, Success)
    assert result.unwrap() == config


def test_validate_config_document_failure():
    result = validate_config_document({"layout": "single-column"})
    assert isinstance(result, Failure)
    assert "theme" in result.failure().message
