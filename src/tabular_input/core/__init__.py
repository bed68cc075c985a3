"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import WidgetError, InvalidConfiguration, UnsupportedOperation, PayloadError
from .validate import ValidationResult, PayloadValidator, validate_payload
from .logging_config import configure_logging, get_logger
from .json import safe_json_dumps, loads_json, validate_json_size, validate_json_depth
from .hash import Algorithm, hash_string
from .id import WidgetID, is_element_id, new_script_key, new_widget_id


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "WidgetError",
    "InvalidConfiguration",
    "UnsupportedOperation",
    "PayloadError",
    # Validation
    "ValidationResult",
    "PayloadValidator",
    "validate_payload",
    # Logging
    "configure_logging",
    "get_logger",
    # JSON
    "safe_json_dumps",
    "loads_json",
    "validate_json_size",
    "validate_json_depth",
    # Hashing
    "Algorithm",
    "hash_string",
    # IDs
    "WidgetID",
    "new_widget_id",
    "new_script_key",
    "is_element_id",
    # DI
    "create_container",
]
