"""Fast, type-safe JSON encoding for client payloads."""

from typing import Any
import json

import msgspec
import orjson

from .errors import PayloadError


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError, orjson.JSONEncodeError):
            # Integers outside 64-bit range and similar edge cases
            pass

    if indent == 0:
        try:
            encoder = msgspec.json.Encoder()
            return encoder.encode(obj).decode("utf-8")
        except (TypeError, ValueError, OverflowError):
            pass

    # Pretty-printed output or last resort (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None)


def loads_json(text: str | bytes) -> dict[str, Any]:
    """
    Decode a JSON object.

    Args:
        text: JSON document

    Returns:
        Parsed dictionary

    Raises:
        PayloadError: If the document is invalid or not an object
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    try:
        result = msgspec.json.decode(data)
    except msgspec.DecodeError as e:
        raise PayloadError(f"Invalid JSON: {e}", e) from e

    if not isinstance(result, dict):
        raise PayloadError(f"Expected dict, got {type(result).__name__}")
    return result


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate encoded JSON size.

    Args:
        data: JSON string to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        PayloadError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise PayloadError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 20, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        PayloadError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise PayloadError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
