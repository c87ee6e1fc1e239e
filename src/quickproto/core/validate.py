"""Input validation and generated-config checks."""

import re
from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from pydantic import BaseModel, Field, field_validator, ConfigDict

from ..agents.models import AnswerSet, ComponentType, Layout, Theme, UIConfiguration
from .json import JSONParseError, safe_json_dumps, validate_json_depth, validate_json_size


# Validation limits
MAX_ANSWER_LENGTH = 2_000
MAX_UI_CONFIG_SIZE = 64 * 1024  # 64KB
MAX_JSON_DEPTH = 8

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

# Payload keys each component type must carry
REQUIRED_PAYLOAD: dict[str, tuple[str, ...]] = {
    ComponentType.HEADING.value: ("content",),
    ComponentType.TEXT.value: ("content",),
    ComponentType.IMAGE.value: ("content",),
    ComponentType.INPUT.value: ("placeholder",),
    ComponentType.BUTTON.value: ("label", "action"),
    ComponentType.LIST.value: ("items",),
}


class ValidationError(Exception):
    """Validation failed."""

    pass


class ConfigurationError(Exception):
    """A generated or stored UI configuration does not match its schema."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid", frozen=True  # Immutable by default
    )


def _strip_answer(v: str | None) -> str | None:
    if v is None:
        return None
    stripped = v.strip()
    if not stripped:
        raise ValueError("Answer cannot be empty")
    return stripped


class CreatePrototypeRequest(RequestValidator):
    """Validated answers for a new prototype."""

    problem_or_goal: str = Field(min_length=1, max_length=MAX_ANSWER_LENGTH)
    content_elements: str = Field(min_length=1, max_length=MAX_ANSWER_LENGTH)
    call_to_action: str = Field(min_length=1, max_length=MAX_ANSWER_LENGTH)
    visual_elements: str = Field(min_length=1, max_length=MAX_ANSWER_LENGTH)
    atmosphere: str = Field(min_length=1, max_length=MAX_ANSWER_LENGTH)

    @field_validator("*")
    @classmethod
    def validate_answer(cls, v: str) -> str:
        """Ensure answer is non-empty after stripping."""
        return _strip_answer(v)

    def to_answers(self) -> AnswerSet:
        return AnswerSet(**self.model_dump())


class UpdatePrototypeRequest(RequestValidator):
    """Validated partial answer update."""

    problem_or_goal: str | None = Field(default=None, min_length=1, max_length=MAX_ANSWER_LENGTH)
    content_elements: str | None = Field(default=None, min_length=1, max_length=MAX_ANSWER_LENGTH)
    call_to_action: str | None = Field(default=None, min_length=1, max_length=MAX_ANSWER_LENGTH)
    visual_elements: str | None = Field(default=None, min_length=1, max_length=MAX_ANSWER_LENGTH)
    atmosphere: str | None = Field(default=None, min_length=1, max_length=MAX_ANSWER_LENGTH)

    @field_validator("*")
    @classmethod
    def validate_answer(cls, v: str | None) -> str | None:
        """Ensure provided answers are non-empty after stripping."""
        return _strip_answer(v)

    def provided_answers(self) -> dict[str, str]:
        """Answers explicitly sent with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ConfigValidator:
    """Validates UI configuration documents."""

    @staticmethod
    def validate(config_dict: dict[str, Any], config_json: str) -> None:
        """
        Validate a UI configuration document.

        Args:
            config_dict: Parsed configuration dictionary
            config_json: JSON string representation

        Raises:
            ValidationError: If validation fails
        """
        try:
            validate_json_size(config_json, MAX_UI_CONFIG_SIZE, "UI config")
            validate_json_depth(config_dict, MAX_JSON_DEPTH)
        except JSONParseError as e:
            raise ValidationError(str(e)) from e

        for key in ("layout", "theme", "primary_color", "components"):
            if key not in config_dict:
                raise ValidationError(f"UI config missing required '{key}' field")

        if config_dict["layout"] not in {layout.value for layout in Layout}:
            raise ValidationError(f"Unknown layout: {config_dict['layout']!r}")
        if config_dict["theme"] not in {theme.value for theme in Theme}:
            raise ValidationError(f"Unknown theme: {config_dict['theme']!r}")
        if not isinstance(config_dict["primary_color"], str) or not _HEX_COLOR.match(
            config_dict["primary_color"]
        ):
            raise ValidationError(f"Invalid primary color: {config_dict['primary_color']!r}")

        components = config_dict["components"]
        if not isinstance(components, list):
            raise ValidationError("UI config 'components' must be a list")

        seen: set[str] = set()
        for index, component in enumerate(components):
            ConfigValidator._validate_component(index, component, seen)

    @staticmethod
    def _validate_component(index: int, component: Any, seen: set[str]) -> None:
        if not isinstance(component, dict):
            raise ValidationError(f"Component {index} must be an object")

        component_id = component.get("id")
        if not isinstance(component_id, str) or not component_id:
            raise ValidationError(f"Component {index} missing 'id'")
        if component_id in seen:
            raise ValidationError(f"Duplicate component id: {component_id!r}")
        seen.add(component_id)

        component_type = component.get("type")
        if component_type not in REQUIRED_PAYLOAD:
            raise ValidationError(f"Component {component_id!r} has unknown type {component_type!r}")

        for key in REQUIRED_PAYLOAD[component_type]:
            if component.get(key) in (None, "", []):
                raise ValidationError(f"Component {component_id!r} missing '{key}'")

        items = component.get("items")
        if items is not None and not all(isinstance(item, str) for item in items):
            raise ValidationError(f"Component {component_id!r} items must be strings")

        styles = component.get("styles", {})
        if not isinstance(styles, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in styles.items()
        ):
            raise ValidationError(f"Component {component_id!r} styles must map strings to strings")


def validate_config_document(config_dict: dict[str, Any]) -> Result[UIConfiguration, ValidationResult]:
    """
    Validate a stored configuration document and load it (Result pattern version).

    Args:
        config_dict: Parsed UI configuration dictionary

    Returns:
        Result holding the loaded configuration or the validation error
    """
    try:
        ConfigValidator.validate(config_dict, safe_json_dumps(config_dict))
        return Success(UIConfiguration.model_validate(config_dict))
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
    except ValueError as e:
        # pydantic.ValidationError
        return Failure(ValidationResult(str(e)))


def validate_ui_config(config: UIConfiguration) -> Result[None, ValidationResult]:
    """
    Validate a UI configuration (Result pattern version).

    Args:
        config: Generated configuration

    Returns:
        Result indicating success or validation error
    """
    document = config.to_document()
    try:
        ConfigValidator.validate(document, safe_json_dumps(document))
        return Success(None)
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
