"""
Tabular Input Widget
Resolves raw options once and renders rows on demand.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .binding import FormBinding
from .columns import ColumnRegistry, default_column_registry, input_id_from_name
from .core.config import Settings, get_settings
from .core.errors import InvalidConfiguration
from .core.id import is_element_id, new_widget_id
from .core.logging_config import get_logger
from .options import resolve_options
from .registry import ScriptRegistry
from .renderers import BaseRenderer, RenderResult, RowOptions, TableRenderer

logger = get_logger(__name__)


class WidgetOptions(BaseModel):
    """Raw widget options as supplied by the caller."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    id: str | None = Field(default=None, description="Root element id (generated if absent)")
    input_name: str | None = Field(default=None, description="Input name prefix, e.g. 'items'")
    columns: list[dict[str, Any]] = Field(default_factory=list)
    min: int | None = None
    max: int | None = None
    allow_empty_list: bool = False
    add_button_position: Any = None
    add_button_options: dict[str, Any] = Field(default_factory=dict)
    remove_button_options: dict[str, Any] = Field(default_factory=dict)
    attribute_options: dict[str, Any] = Field(default_factory=dict)
    enable_error: bool = False
    sortable: bool = False
    row_options: Any = None


class TabularInput:
    """
    Repeatable group of row inputs with client-side add/remove/reorder.

    All options are resolved here; a bad option raises InvalidConfiguration
    before any script registry is touched.

    Examples:
        >>> widget = TabularInput(WidgetOptions(id="w0", input_name="items",
        ...                                     columns=[{"name": "title"}]))
        >>> html = widget.run(registry, rows=[{"title": "First"}])
    """

    renderer_class: type[BaseRenderer] = TableRenderer

    def __init__(
        self,
        options: WidgetOptions,
        binding: FormBinding | None = None,
        column_registry: ColumnRegistry | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.column_registry = column_registry or default_column_registry()

        if not options.columns:
            raise InvalidConfiguration("At least one column is required")

        self.id = options.id or new_widget_id()
        if not is_element_id(self.id):
            raise InvalidConfiguration(f"Widget id {self.id!r} is not a valid element id")
        self.input_name = options.input_name or self.id
        if options.row_options is not None and not (
            callable(options.row_options) or isinstance(options.row_options, dict)
        ):
            raise InvalidConfiguration("row_options must be a mapping or a callable")

        resolved = resolve_options(
            min=options.min,
            max=options.max,
            allow_empty_list=options.allow_empty_list,
            add_button_position=options.add_button_position,
            add_button_options=options.add_button_options,
            remove_button_options=options.remove_button_options,
            settings=self.settings,
        )
        columns = [
            self.column_registry.create(
                definition,
                input_name=self.input_name,
                attribute_options=options.attribute_options,
                enable_error=options.enable_error,
            )
            for definition in options.columns
        ]

        row_options: RowOptions | None = options.row_options
        self.renderer = self.renderer_class(
            id=self.id,
            input_id=input_id_from_name(self.input_name),
            columns=columns,
            options=resolved,
            binding=binding,
            sortable=options.sortable,
            row_options=row_options,
            settings=self.settings,
        )
        logger.info("widget_created", widget_id=self.id, columns=len(columns))

    @property
    def options(self):
        return self.renderer.options

    def run(self, registry: ScriptRegistry, rows: Sequence[Any] = ()) -> str:
        """Render rows; the bootstrap is registered on the registry."""
        return self.renderer.render(registry, rows)

    def render_pass(self, registry: ScriptRegistry, rows: Sequence[Any] = ()) -> RenderResult:
        return self.renderer.render_pass(registry, rows)
