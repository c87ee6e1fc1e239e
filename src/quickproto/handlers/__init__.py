"""Handlers for HTTP requests."""

from .prototypes import PrototypeHandler, router

__all__ = ["PrototypeHandler", "router"]
