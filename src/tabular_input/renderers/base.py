"""
Base Renderer
Shared render pass: capture scripts, build the client payload, register bootstrap.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

import structlog

from ..attributes import collect_attributes
from ..binding import FormBinding
from ..columns import BaseColumn
from ..core.config import Settings, get_settings
from ..core.errors import UnsupportedOperation
from ..core.logging_config import get_logger
from ..merger import ScriptRegistryMerger
from ..options import ButtonPosition, ResolvedOptions
from ..registry import ScriptRegistry
from ..serializer import WidgetConfig, build_widget_config, index_placeholder, render_bootstrap

logger = get_logger(__name__)

RowOptions = Union[Mapping[str, Any], Callable[[Any, int, "BaseRenderer"], Mapping[str, Any]]]


@dataclass(frozen=True)
class RenderResult:
    """Outcome of one render pass."""
    content: str
    config: WidgetConfig
    bootstrap_keys: list[str]


class BaseRenderer:
    """
    Renders rows of a tabular input and wires its client controller.

    Subclasses implement internal_render() and prepare_template(). Any
    scripts they register on the registry while doing so are split into
    prelude and deferred scripts of the payload.
    """

    def __init__(
        self,
        id: str,
        input_id: str,
        columns: Sequence[BaseColumn],
        options: ResolvedOptions,
        binding: FormBinding | None = None,
        sortable: bool = False,
        row_options: RowOptions | None = None,
        settings: Settings | None = None,
    ):
        self.id = id
        self.input_id = input_id
        self.columns = list(columns)
        self.options = options
        self.binding = binding
        self.sortable = sortable
        self.row_options = row_options or {}
        self.settings = settings or get_settings()
        self.index_placeholder = index_placeholder(id, self.settings)
        self.registry: ScriptRegistry | None = None

    @property
    def min(self) -> int:
        return self.options.policy.min

    @property
    def max(self) -> int:
        return self.options.policy.max

    def render(self, registry: ScriptRegistry, rows: Sequence[Any] = ()) -> str:
        """Render content; registers the bootstrap on the registry."""
        return self.render_pass(registry, rows).content

    def render_pass(self, registry: ScriptRegistry, rows: Sequence[Any] = ()) -> RenderResult:
        """
        Run one render pass.

        Args:
            registry: Page script registry (mutated)
            rows: Row data (mappings or objects)

        Returns:
            RenderResult with content, payload and bootstrap keys
        """
        with structlog.contextvars.bound_contextvars(widget_id=self.id):
            merger = ScriptRegistryMerger(registry)
            self.registry = registry
            try:
                with merger.capture() as captured:
                    content = self.internal_render(rows)
                    template = self.prepare_template()
            finally:
                self.registry = None

            config = build_widget_config(
                widget_id=self.id,
                input_id=self.input_id,
                template=template,
                policy=self.options.policy,
                attributes=collect_attributes(self.columns, self.binding),
                prelude_scripts=captured.prelude_scripts,
                deferred_scripts=captured.deferred_scripts,
                placeholder=self.index_placeholder,
            )
            bootstrap = render_bootstrap(config, self.sortable, self.settings)
            keys = merger.commit(captured, bootstrap)

            logger.info(
                "widget_rendered",
                rows=len(rows),
                prelude=len(config.prelude_scripts),
                deferred=len(config.deferred_scripts),
            )
            return RenderResult(content=content, config=config, bootstrap_keys=keys)

    def internal_render(self, rows: Sequence[Any]) -> str:
        raise UnsupportedOperation(f"{type(self).__name__} does not implement internal_render()")

    def prepare_template(self) -> str:
        raise UnsupportedOperation(f"{type(self).__name__} does not implement prepare_template()")

    def register_column_scripts(self, column: BaseColumn, index: int | str) -> None:
        """Let a column register its scripts on the registry of the running pass."""
        if self.registry is not None:
            column.register_scripts(self.registry, index)

    def row_attributes(self, row: Any, index: int) -> dict[str, Any]:
        if callable(self.row_options):
            return dict(self.row_options(row, index, self))
        return dict(self.row_options)

    def is_add_button_position_header(self) -> bool:
        return ButtonPosition.HEADER in self.options.add_button_positions

    def is_add_button_position_footer(self) -> bool:
        return ButtonPosition.FOOTER in self.options.add_button_positions

    def is_add_button_position_row(self) -> bool:
        return ButtonPosition.ROW in self.options.add_button_positions

    def is_add_button_position_row_begin(self) -> bool:
        return ButtonPosition.ROW_BEGIN in self.options.add_button_positions
