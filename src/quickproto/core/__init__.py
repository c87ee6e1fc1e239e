"""Core utilities and infrastructure."""

from .logging_config import configure_logging, get_logger, LogContext
from .config import Settings, get_settings
from .json import (
    load_json_object,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)
from .id import RequestID, new_request_id, request_id_from_header
from .validate import (
    ValidationError,
    ConfigurationError,
    CreatePrototypeRequest,
    UpdatePrototypeRequest,
    ConfigValidator,
    validate_config_document,
    validate_ui_config,
)


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings or get_settings())


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ConfigurationError",
    "CreatePrototypeRequest",
    "UpdatePrototypeRequest",
    "ConfigValidator",
    "validate_config_document",
    "validate_ui_config",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "load_json_object",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # IDs
    "RequestID",
    "new_request_id",
    "request_id_from_header",
    # DI
    "create_container",
]
