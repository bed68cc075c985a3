"""Client payload validation (Result pattern)."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from .errors import PayloadError
from .json import validate_json_depth, validate_json_size


# Fields every client payload must carry
REQUIRED_PAYLOAD_FIELDS = (
    "id",
    "inputId",
    "template",
    "preludeScripts",
    "deferredScripts",
    "max",
    "min",
    "attributes",
    "indexPlaceholder",
)


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None


class PayloadValidator:
    """Validates serialized widget payloads before they reach the page."""

    @staticmethod
    def validate(payload: dict[str, Any], payload_json: str, max_size: int, max_depth: int) -> None:
        """
        Validate payload comprehensively.

        Args:
            payload: Payload dictionary (wire field names)
            payload_json: JSON string representation
            max_size: Maximum encoded size in bytes
            max_depth: Maximum nesting depth

        Raises:
            PayloadError: If validation fails
        """
        validate_json_size(payload_json, max_size, "Widget payload")
        validate_json_depth(payload, max_depth)

        for name in REQUIRED_PAYLOAD_FIELDS:
            if name not in payload:
                raise PayloadError(f"Widget payload missing required '{name}' field")

        if payload["max"] < payload["min"]:
            raise PayloadError("Widget payload 'max' is lower than 'min'")


def validate_payload(
    payload: dict[str, Any], payload_json: str, max_size: int, max_depth: int
) -> Result[None, ValidationResult]:
    """
    Validate widget payload (Result pattern version).

    Args:
        payload: Payload dictionary (wire field names)
        payload_json: JSON string representation
        max_size: Maximum encoded size in bytes
        max_depth: Maximum nesting depth

    Returns:
        Result indicating success or validation error
    """
    try:
        PayloadValidator.validate(payload, payload_json, max_size, max_depth)
        return Success(None)
    except PayloadError as e:
        return Failure(ValidationResult(str(e)))
