"""
Option Resolver
Turns raw, under-specified widget options into a consistent configuration.
"""

import sys
from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .core.config import Settings, get_settings
from .core.errors import InvalidConfiguration
from .core.logging_config import get_logger

logger = get_logger(__name__)

# Unbounded maximum row count
UNBOUNDED = sys.maxsize


class ButtonPosition(str, Enum):
    """Where the add button is rendered."""
    HEADER = "header"
    FOOTER = "footer"
    ROW = "row"
    ROW_BEGIN = "row-begin"

    @classmethod
    def _missing_(cls, value):
        # Also accept the slash spelling
        if value == "row/begin":
            return cls.ROW_BEGIN
        return None


class ResolvedModel(BaseModel):
    """Base for resolved values: strict and immutable."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class RowCountPolicy(ResolvedModel):
    """Row count limits. allow_empty_list is True exactly when min == 0."""

    min: int = Field(ge=0)
    max: int = Field(ge=1)
    allow_empty_list: bool


class ButtonOptions(ResolvedModel):
    """HTML options of the add or remove button."""

    css_class: str
    label: str
    attributes: dict[str, Any] = Field(default_factory=dict)


class ResolvedOptions(ResolvedModel):
    """Everything resolved once at widget construction."""

    policy: RowCountPolicy
    add_button_positions: frozenset[ButtonPosition]
    add_button: ButtonOptions
    remove_button: ButtonOptions


def resolve_row_count(
    min: int | None = None, max: int | None = None, allow_empty_list: bool = False
) -> RowCountPolicy:
    """
    Resolve min/max/allow_empty_list into a consistent policy.

    Args:
        min: Minimum number of rows (None derives it from allow_empty_list)
        max: Maximum number of rows (None = unbounded)
        allow_empty_list: Legacy switch, kept consistent with min

    Returns:
        RowCountPolicy

    Raises:
        InvalidConfiguration: If min is negative
    """
    if min is None:
        min = 0 if allow_empty_list else 1
    elif min < 0:
        raise InvalidConfiguration('Option "min" cannot be less than 0')

    if max is None:
        max = UNBOUNDED
    if max < 1:
        max = 1
    if max < min:
        max = min

    # An explicit min wins over allow_empty_list in both directions
    return RowCountPolicy(min=min, max=max, allow_empty_list=min == 0)


def resolve_button_positions(
    raw: str | ButtonPosition | Iterable[str | ButtonPosition] | None, min: int
) -> frozenset[ButtonPosition]:
    """
    Normalize the add button placement into a non-empty set.

    Args:
        raw: None, a single position or a collection of positions
        min: Resolved minimum row count (drives the default)

    Returns:
        Set of button positions

    Raises:
        InvalidConfiguration: If a value is not a known position
    """
    if isinstance(raw, (str, ButtonPosition)):
        raw = [raw]

    values = list(raw) if raw is not None else []
    if not values:
        return frozenset({ButtonPosition.HEADER if min == 0 else ButtonPosition.ROW})

    try:
        return frozenset(ButtonPosition(v) for v in values)
    except ValueError as e:
        raise InvalidConfiguration(f"Unknown add button position: {e}") from e


def resolve_button_options(
    raw: dict[str, Any] | None, default_class: str, default_label: str
) -> ButtonOptions:
    """
    Fill in defaults for missing button keys; caller keys are never overwritten.

    Args:
        raw: Caller options; `class` and `label` are recognized, the rest
            are passed through as HTML attributes
        default_class: CSS class used when `class` is absent
        default_label: Label markup used when `label` is absent

    Returns:
        ButtonOptions

    Raises:
        InvalidConfiguration: If `class` or `label` has an unsupported type
    """
    options = dict(raw or {})
    css_class = options.pop("class", default_class)
    label = options.pop("label", default_label)
    if isinstance(css_class, (list, tuple)):
        css_class = " ".join(str(c) for c in css_class)

    try:
        return ButtonOptions(css_class=css_class, label=label, attributes=options)
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        raise InvalidConfiguration(f"Invalid button options: {e}") from e


def resolve_options(
    min: int | None = None,
    max: int | None = None,
    allow_empty_list: bool = False,
    add_button_position: Any = None,
    add_button_options: dict[str, Any] | None = None,
    remove_button_options: dict[str, Any] | None = None,
    settings: Settings | None = None,
) -> ResolvedOptions:
    """
    Resolve all construction-time options.

    Raises:
        InvalidConfiguration: On the first inconsistency found
    """
    settings = settings or get_settings()

    policy = resolve_row_count(min, max, allow_empty_list)
    resolved = ResolvedOptions(
        policy=policy,
        add_button_positions=resolve_button_positions(add_button_position, policy.min),
        add_button=resolve_button_options(
            add_button_options, settings.add_button_class, settings.add_button_label
        ),
        remove_button=resolve_button_options(
            remove_button_options, settings.remove_button_class, settings.remove_button_label
        ),
    )

    logger.debug(
        "options_resolved",
        min=policy.min,
        max=policy.max,
        allow_empty_list=policy.allow_empty_list,
        positions=sorted(p.value for p in resolved.add_button_positions),
    )
    return resolved
