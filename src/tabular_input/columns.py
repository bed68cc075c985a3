"""
Columns
One column per attribute of a row, created from plain definitions.
"""

import html
import re
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from .core.errors import InvalidConfiguration, UnsupportedOperation
from .core.logging_config import get_logger

if TYPE_CHECKING:
    from .registry import ScriptRegistry

logger = get_logger(__name__)

# Characters in an input name and what they become in the element id
_ID_REPLACEMENTS = (("[]", ""), ("][", "-"), ("[", "-"), ("]", ""), (" ", "-"), (".", "-"))

# A "-0" segment, i.e. the row index of the first row
_FIRST_INDEX_SEGMENT = re.compile(r"-0(?=-|$)")


def input_id_from_name(name: str) -> str:
    """`items[0][name]` -> `items-0-name`."""
    for old, new in _ID_REPLACEMENTS:
        name = name.replace(old, new)
    return name.lower()


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Render HTML attributes; None and False values are skipped."""
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


class BaseColumn(BaseModel):
    """
    Column definition bound to one attribute of a row.

    Concrete kinds override render_input(); everything else (naming,
    client identifiers, value lookup) is shared.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    name: str = Field(..., min_length=1)
    type: str = Field(default="text")
    title: str | None = None
    model: Any = None
    attribute_options: dict[str, Any] = Field(default_factory=dict)
    enable_error: bool = False
    default_value: Any = None
    options: dict[str, Any] = Field(default_factory=dict, description="Input HTML attributes")
    input_name: str = Field(default="", description="Name prefix supplied by the widget")

    def element_name(self, index: int | str) -> str:
        prefix = self.input_name
        if not prefix:
            return f"[{index}][{self.name}]"
        return f"{prefix}[{index}][{self.name}]"

    def element_id(self, index: int | str) -> str:
        """
        `items-0-name`. The index is inserted as given, so a `{placeholder}`
        token keeps its case and matches the payload's indexPlaceholder.
        """
        prefix = input_id_from_name(self.input_name)
        return f"{prefix}-{index}-{input_id_from_name(self.name)}"

    def client_id(self) -> str:
        """Index-agnostic identifier used as key of client attribute options."""
        return _FIRST_INDEX_SEGMENT.sub("", self.element_id(0))

    def value_for(self, row: Any) -> Any:
        """Value of this column's attribute in a row (mapping or object)."""
        if row is None:
            return self.default_value
        if isinstance(row, Mapping):
            return row.get(self.name, self.default_value)
        return getattr(row, self.name, self.default_value)

    def header(self) -> str:
        return self.title if self.title is not None else self.name.replace("_", " ").capitalize()

    def register_scripts(self, registry: "ScriptRegistry", index: int | str) -> None:
        """Register client scripts the input needs (none by default)."""

    def render_input(self, index: int | str, value: Any) -> str:
        raise UnsupportedOperation(f'Column type "{self.type}" cannot render an input')


class TextColumn(BaseColumn):
    type: str = "text"

    def render_input(self, index: int | str, value: Any) -> str:
        attributes = {
            "type": "text",
            "id": self.element_id(index),
            "name": self.element_name(index),
            "value": "" if value is None else value,
            "class": "form-control",
            **self.options,
        }
        return f"<input{render_attributes(attributes)}>"


class HiddenColumn(BaseColumn):
    type: str = "hidden"

    def render_input(self, index: int | str, value: Any) -> str:
        attributes = {
            "type": "hidden",
            "id": self.element_id(index),
            "name": self.element_name(index),
            "value": "" if value is None else value,
            **self.options,
        }
        return f"<input{render_attributes(attributes)}>"


ColumnFactory = Callable[..., BaseColumn]


class ColumnRegistry:
    """
    Registry of column kinds keyed by type tag.

    Examples:
        >>> registry = ColumnRegistry()
        >>> @registry.register("date")
        ... class DateColumn(BaseColumn):
        ...     ...
        >>> registry.create({"name": "due", "type": "date"})
    """

    def __init__(self):
        self.factories: dict[str, ColumnFactory] = {}

    def register(self, tag: str) -> Callable[[ColumnFactory], ColumnFactory]:
        """Register a column kind under a type tag (decorator)."""

        def decorator(factory: ColumnFactory) -> ColumnFactory:
            if tag in self.factories:
                raise InvalidConfiguration(f'Column type "{tag}" is already registered')
            self.factories[tag] = factory
            return factory

        return decorator

    def has(self, tag: str) -> bool:
        return tag in self.factories

    def create(
        self,
        definition: Mapping[str, Any],
        input_name: str = "",
        attribute_options: Mapping[str, Any] | None = None,
        enable_error: bool = False,
    ) -> BaseColumn:
        """
        Build a column from its definition.

        Widget-level attribute_options and enable_error apply only when the
        definition does not set them.

        Args:
            definition: Column definition (`type` selects the kind, default "text")
            input_name: Name prefix of the widget inputs
            attribute_options: Widget-level client attribute options
            enable_error: Widget-level inline error switch

        Returns:
            Column instance

        Raises:
            InvalidConfiguration: Unknown type tag or invalid definition
        """
        params = dict(definition)
        tag = params.get("type") or "text"
        factory = self.factories.get(tag)
        if factory is None:
            raise InvalidConfiguration(f'Column type "{tag}" does not exist')

        params["type"] = tag
        params.setdefault("attribute_options", dict(attribute_options or {}))
        params.setdefault("enable_error", enable_error)
        params["input_name"] = input_name

        try:
            column = factory(**params)
        except ValueError as e:
            # pydantic.ValidationError is a ValueError
            raise InvalidConfiguration(f"Invalid column definition: {e}") from e

        logger.debug("column_created", name=column.name, type=tag)
        return column


def default_column_registry() -> ColumnRegistry:
    """Registry with the built-in text and hidden kinds."""
    registry = ColumnRegistry()
    registry.register("text")(TextColumn)
    registry.register("hidden")(HiddenColumn)
    return registry
