"""Answer-to-UI configuration generation."""

from .models import AnswerSet, UIComponent, UIConfiguration, ComponentType, Layout, Theme
from .ui_generator import ConfigGenerator, Templates

__all__ = [
    "AnswerSet",
    "UIComponent",
    "UIConfiguration",
    "ComponentType",
    "Layout",
    "Theme",
    "ConfigGenerator",
    "Templates",
]
