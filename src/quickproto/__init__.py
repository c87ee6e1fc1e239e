"""quickproto - turn five short answers into a clickable UI prototype."""

__version__ = "0.1.0"
