"""UI Config Generator - rule-based answers-to-UI classifier."""

import re
import unicodedata
from collections.abc import Callable, Iterable
from typing import NamedTuple

from ..core.logging_config import get_logger
from .models import AnswerSet, ComponentType, Layout, Theme, UIComponent, UIConfiguration
from .palette import (
    BUTTON_STYLES,
    COLOR_RULES,
    CTA_ACTION,
    CTA_FILLER_PREFIXES,
    CTA_MAX_LENGTH,
    DEFAULT_CTA_LABEL,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_TITLE,
    DESCRIPTION_TEXT,
    HEADING_STYLES,
    IMAGE_CAPTION,
    IMAGE_KEYWORDS,
    IMAGE_STYLES,
    INPUT_KEYWORDS,
    INPUT_PLACEHOLDER,
    INPUT_STYLES,
    LIST_ITEMS,
    LIST_KEYWORDS,
    LIST_STYLES,
    TEXT_STYLES,
    TITLE_FILLER_PREFIXES,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    WHOLE_WORD_KEYWORDS,
    ColorRule,
    ComponentId,
)


logger = get_logger(__name__)

_SENTENCE_END = re.compile(r"[.!?]")


def normalize(text: str) -> str:
    """Casefold and strip accents so keywords match regardless of spelling."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def keyword_pattern(keywords: Iterable[str]) -> re.Pattern[str]:
    """Compile keywords into a pattern matching any of them at a word start."""
    alternatives = "|".join(
        re.escape(k) + (r"\b" if k in WHOLE_WORD_KEYWORDS else "") for k in keywords
    )
    return re.compile(rf"(?<!\w)(?:{alternatives})")


def filler_pattern(prefixes: Iterable[str]) -> re.Pattern[str]:
    """Compile leading filler phrases, longest first, case-insensitively."""
    ordered = sorted(prefixes, key=len, reverse=True)
    alternatives = "|".join(re.escape(p) for p in ordered)
    return re.compile(rf"^(?:{alternatives})\b[\s:,]*", re.IGNORECASE)


_TITLE_FILLER = filler_pattern(TITLE_FILLER_PREFIXES)
_CTA_FILLER = filler_pattern(CTA_FILLER_PREFIXES)


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def extract_title(problem_or_goal: str) -> str:
    """First sentence of the answer without filler, or the default title."""
    first = ""
    for segment in _SENTENCE_END.split(problem_or_goal):
        segment = segment.strip().lstrip("¿¡").strip()
        if segment:
            first = segment
            break

    title = capitalize_first(_TITLE_FILLER.sub("", first, count=1).strip())
    if TITLE_MIN_LENGTH < len(title) < TITLE_MAX_LENGTH:
        return title
    return DEFAULT_TITLE


def clean_cta_label(call_to_action: str) -> str:
    """Button label from the call-to-action answer, or the default label."""
    label = capitalize_first(_CTA_FILLER.sub("", call_to_action.strip(), count=1).strip())
    if not label or len(label) > CTA_MAX_LENGTH:
        return DEFAULT_CTA_LABEL
    return label


class Templates:
    """Component templates."""

    @staticmethod
    def heading(content: str) -> UIComponent:
        return UIComponent(
            id=ComponentId.HEADING,
            type=ComponentType.HEADING,
            content=content,
            styles=dict(HEADING_STYLES),
        )

    @staticmethod
    def description() -> UIComponent:
        return UIComponent(
            id=ComponentId.DESCRIPTION,
            type=ComponentType.TEXT,
            content=DESCRIPTION_TEXT,
            styles=dict(TEXT_STYLES),
        )

    @staticmethod
    def input_field() -> UIComponent:
        return UIComponent(
            id=ComponentId.INPUT,
            type=ComponentType.INPUT,
            placeholder=INPUT_PLACEHOLDER,
            styles=dict(INPUT_STYLES),
        )

    @staticmethod
    def feature_list() -> UIComponent:
        return UIComponent(
            id=ComponentId.LIST,
            type=ComponentType.LIST,
            items=list(LIST_ITEMS),
            styles=dict(LIST_STYLES),
        )

    @staticmethod
    def image() -> UIComponent:
        return UIComponent(
            id=ComponentId.IMAGE,
            type=ComponentType.IMAGE,
            content=IMAGE_CAPTION,
            styles=dict(IMAGE_STYLES),
        )

    @staticmethod
    def button(label: str, background_color: str) -> UIComponent:
        return UIComponent(
            id=ComponentId.BUTTON,
            type=ComponentType.BUTTON,
            label=label,
            action=CTA_ACTION,
            styles={"backgroundColor": background_color, **BUTTON_STYLES},
        )


class ComponentRule(NamedTuple):
    """Adds one component when an answer mentions any keyword."""

    name: str
    field: str
    keywords: tuple[str, ...]
    build: Callable[[], UIComponent]


# Evaluated in order; output order follows this table.
COMPONENT_RULES: tuple[ComponentRule, ...] = (
    ComponentRule("input", "content_elements", INPUT_KEYWORDS, Templates.input_field),
    ComponentRule("list", "content_elements", LIST_KEYWORDS, Templates.feature_list),
    ComponentRule("image", "visual_elements", IMAGE_KEYWORDS, Templates.image),
)


class ConfigGenerator:
    """Generates UI configurations from the five answers.

    Pure and deterministic: the same answers always yield the same
    configuration. Instances hold only compiled, read-only rule tables and
    may be shared between threads.
    """

    def __init__(
        self,
        component_rules: tuple[ComponentRule, ...] = COMPONENT_RULES,
        color_rules: tuple[ColorRule, ...] = COLOR_RULES,
        default_color: str = DEFAULT_PRIMARY_COLOR,
    ) -> None:
        self.component_rules = component_rules
        self.color_rules = color_rules
        self.default_color = default_color
        self._component_patterns = tuple(
            (rule, keyword_pattern(rule.keywords)) for rule in component_rules
        )
        self._color_patterns = tuple(
            (rule, keyword_pattern(rule.keywords)) for rule in color_rules
        )

        logger.debug(
            "initialized",
            component_rules=len(component_rules),
            color_rules=len(color_rules),
        )

    def generate(self, answers: AnswerSet) -> UIConfiguration:
        """Build a fresh configuration from the answers."""
        primary_color = self.infer_primary_color(answers.atmosphere)

        components = [
            Templates.heading(extract_title(answers.problem_or_goal)),
            Templates.description(),
        ]
        for rule in self.matched_rules(answers):
            components.append(rule.build())
        components.append(Templates.button(clean_cta_label(answers.call_to_action), primary_color))

        logger.debug(
            "generated",
            components=[c.type.value for c in components],
            primary_color=primary_color,
        )

        return UIConfiguration(
            layout=Layout.SINGLE_COLUMN,
            theme=Theme.MINIMAL,
            primary_color=primary_color,
            components=components,
        )

    def matched_rules(self, answers: AnswerSet) -> list[ComponentRule]:
        """Conditional component rules triggered by the answers, in table order."""
        matched = []
        for rule, pattern in self._component_patterns:
            if pattern.search(normalize(getattr(answers, rule.field))):
                matched.append(rule)
        return matched

    def infer_primary_color(self, atmosphere: str) -> str:
        """Color of the first rule whose keywords appear in the atmosphere answer."""
        text = normalize(atmosphere)
        for rule, pattern in self._color_patterns:
            if pattern.search(text):
                return rule.color
        return self.default_color
