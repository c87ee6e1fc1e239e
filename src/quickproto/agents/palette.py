"""Fixed vocabulary of the config generator.

Keyword lists are lowercase and accent-free; answers are normalised the
same way before matching. A keyword matches at the start of any word,
so stems such as ``azul`` also catch ``azules``. Keywords in
``WHOLE_WORD_KEYWORDS`` must also end at a word boundary.
"""

from types import MappingProxyType
from typing import NamedTuple


# Fixed top-level values
DEFAULT_PRIMARY_COLOR = "#2563eb"

# Heading
DEFAULT_TITLE = "Solución simple y efectiva"
TITLE_MIN_LENGTH = 10  # exclusive
TITLE_MAX_LENGTH = 60  # exclusive
TITLE_FILLER_PREFIXES: tuple[str, ...] = (
    "el problema principal es",
    "el problema es",
    "nuestro objetivo es",
    "el objetivo es",
    "necesitamos",
    "necesito",
    "queremos",
    "quiero",
    "the main problem is",
    "the problem is",
    "our goal is",
    "the goal is",
    "we need",
    "i need",
    "we want",
    "i want",
)

# Call to action
DEFAULT_CTA_LABEL = "Comenzar"
CTA_MAX_LENGTH = 50  # inclusive
CTA_ACTION = "primary-action"
CTA_FILLER_PREFIXES: tuple[str, ...] = (
    "la acción principal es",
    "la accion principal es",
    "la acción es",
    "la accion es",
    "quiero que el usuario",
    "quiero que los usuarios",
    "el usuario debe",
    "the main action is",
    "the action is",
    "i want the user to",
    "i want users to",
    "the user must",
    "the user should",
)

# Literal component payloads
DESCRIPTION_TEXT = "Aquí encontrarás toda la información relevante de forma clara y sencilla."
INPUT_PLACEHOLDER = "Ingresa tu información aquí..."
LIST_ITEMS: tuple[str, ...] = (
    "Característica principal",
    "Beneficio clave",
    "Ventaja competitiva",
)
IMAGE_CAPTION = "Imagen principal del producto"


class ComponentId:
    """Stable component ids, one per component kind."""

    HEADING = "main-heading"
    DESCRIPTION = "main-description"
    INPUT = "data-input"
    LIST = "content-list"
    IMAGE = "main-image"
    BUTTON = "cta-button"


# Style blocks
HEADING_STYLES = MappingProxyType({"fontSize": "2rem", "fontWeight": "bold"})
TEXT_STYLES = MappingProxyType({"margin": "1rem 0", "lineHeight": "1.6"})
INPUT_STYLES = MappingProxyType({
    "padding": "0.75rem",
    "border": "1px solid #d1d5db",
    "borderRadius": "0.375rem",
})
LIST_STYLES = MappingProxyType({"marginBottom": "1.5rem"})
IMAGE_STYLES = MappingProxyType({"width": "100%", "height": "12rem", "borderRadius": "0.5rem"})
# backgroundColor is filled in with the inferred primary color
BUTTON_STYLES = MappingProxyType({
    "color": "#ffffff",
    "padding": "0.75rem 1.5rem",
    "borderRadius": "0.5rem",
    "fontSize": "1rem",
    "fontWeight": "600",
})


# Keywords for conditional components
INPUT_KEYWORDS: tuple[str, ...] = (
    "formulario",
    "datos",
    "email",
    "correo",
    "input",
    "registro",
    "informacion",
    "form",
    "data",
    "registration",
    "information",
    "forms",
)
LIST_KEYWORDS: tuple[str, ...] = (
    "lista",
    "caracteristicas",
    "beneficios",
    "elementos",
    "puntos",
    "list",
    "lists",
    "features",
    "benefits",
    "elements",
    "points",
)
IMAGE_KEYWORDS: tuple[str, ...] = (
    "imagen",
    "foto",
    "grafico",
    "icono",
    "visual",
    "image",
    "photo",
    "graphic",
    "icon",
)


# Short English words that are prefixes of unrelated Spanish words
# (forma, listo, redes).
WHOLE_WORD_KEYWORDS = frozenset({"form", "list", "red"})


class ColorRule(NamedTuple):
    """Keywords that select a primary color."""

    name: str
    keywords: tuple[str, ...]
    color: str


# Color names first, then moods. First match wins.
COLOR_RULES: tuple[ColorRule, ...] = (
    ColorRule("blue", ("azul", "blue"), "#2563eb"),
    ColorRule("green", ("verde", "green"), "#16a34a"),
    ColorRule("red", ("rojo", "roja", "red"), "#dc2626"),
    ColorRule("orange", ("naranja", "orange"), "#ea580c"),
    ColorRule("purple", ("morado", "purpura", "violeta", "purple"), "#9333ea"),
    ColorRule("professional", ("profesional", "corporativ", "professional", "corporate"), "#1e40af"),
    ColorRule("warm", ("calido", "calida", "acogedor", "warm", "cozy"), "#d97706"),
    ColorRule("elegant", ("elegante", "sofisticad", "elegant", "sophisticated"), "#7c3aed"),
    ColorRule("trustworthy", ("confiable", "confianza", "trustworthy", "trust"), "#0369a1"),
    ColorRule("energetic", ("energetico", "energia", "vibrante", "energetic", "vibrant"), "#e11d48"),
)
