"""Answer and UI configuration data models."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


ANSWER_FIELDS: tuple[str, ...] = (
    "problem_or_goal",
    "content_elements",
    "call_to_action",
    "visual_elements",
    "atmosphere",
)


class AnswerSet(BaseModel):
    """The five answers describing a product idea."""

    model_config = ConfigDict(frozen=True)

    problem_or_goal: str = Field(..., min_length=1, description="Core problem or goal")
    content_elements: str = Field(..., min_length=1, description="Content that must appear")
    call_to_action: str = Field(..., min_length=1, description="Primary user action")
    visual_elements: str = Field(..., min_length=1, description="Imagery cues")
    atmosphere: str = Field(..., min_length=1, description="Tone and mood cues")

    def merge(self, updates: Mapping[str, str]) -> "AnswerSet":
        """Overlay the given answers on this set and return a new one."""
        unknown = set(updates) - set(ANSWER_FIELDS)
        if unknown:
            raise ValueError(f"Unknown answer fields: {sorted(unknown)}")
        return AnswerSet.model_validate({**self.model_dump(), **updates})


class ComponentType(str, Enum):
    """Component kinds the preview renderer understands."""

    HEADING = "heading"
    TEXT = "text"
    INPUT = "input"
    BUTTON = "button"
    IMAGE = "image"
    LIST = "list"


class Layout(str, Enum):
    """Page layouts."""

    SINGLE_COLUMN = "single-column"
    TWO_COLUMN = "two-column"
    CENTERED = "centered"


class Theme(str, Enum):
    """Visual themes."""

    MINIMAL = "minimal"
    MODERN = "modern"
    CLASSIC = "classic"


class UIComponent(BaseModel):
    """One node of the generated UI."""

    id: str = Field(..., min_length=1, description="Unique identifier")
    type: ComponentType = Field(..., description="Component type")
    content: str | None = Field(default=None)
    label: str | None = Field(default=None)
    placeholder: str | None = Field(default=None)
    action: str | None = Field(default=None)
    items: list[str] | None = Field(default=None)
    styles: dict[str, str] = Field(default_factory=dict)


class UIConfiguration(BaseModel):
    """Complete generated UI description."""

    layout: Layout = Field(default=Layout.SINGLE_COLUMN)
    theme: Theme = Field(default=Theme.MINIMAL)
    primary_color: str = Field(..., pattern=r"^#[0-9a-fA-F]{6}$")
    components: list[UIComponent] = Field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        """Plain JSON-ready dict with empty payload fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)
