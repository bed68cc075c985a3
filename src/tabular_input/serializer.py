"""
Config Serializer
Client payload of a widget and the bootstrap statements that hand it over.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from returns.pipeline import is_successful

from .core.config import Settings, get_settings
from .core.errors import PayloadError
from .core.id import is_element_id
from .core.json import loads_json, safe_json_dumps
from .core.validate import validate_payload
from .options import RowCountPolicy

# Options of the drag-reorder plugin; rows are the <tr> of the table body
SORTABLE_OPTIONS = {
    "containerSelector": "table",
    "itemPath": "> tbody",
    "itemSelector": "tr",
    "placeholder": '<tr class="placeholder"/>',
    "handle": ".drag-handle",
}


class WidgetConfig(BaseModel):
    """Payload consumed by the client-side controller (wire names are aliases)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    id: str
    input_id: str = Field(alias="inputId")
    template: str
    prelude_scripts: list[str] = Field(default_factory=list, alias="preludeScripts")
    deferred_scripts: list[str] = Field(default_factory=list, alias="deferredScripts")
    max: int
    min: int
    attributes: dict[str, dict[str, Any]] = Field(default_factory=dict)
    index_placeholder: str = Field(alias="indexPlaceholder")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return safe_json_dumps(self.to_payload())


def index_placeholder(widget_id: str, settings: Settings | None = None) -> str:
    """Row index token of a widget, e.g. `multiple_index_w0`."""
    settings = settings or get_settings()
    return f"{settings.index_placeholder_prefix}{widget_id}"


def build_widget_config(
    widget_id: str,
    input_id: str,
    template: str,
    policy: RowCountPolicy,
    attributes: dict[str, dict[str, Any]],
    prelude_scripts: list[str],
    deferred_scripts: list[str],
    placeholder: str,
) -> WidgetConfig:
    """Assemble the payload. Pure; no I/O."""
    return WidgetConfig(
        id=widget_id,
        input_id=input_id,
        template=template,
        prelude_scripts=list(prelude_scripts),
        deferred_scripts=list(deferred_scripts),
        max=policy.max,
        min=policy.min,
        attributes=attributes,
        index_placeholder=placeholder,
    )


def parse_widget_config(text: str | bytes) -> WidgetConfig:
    """
    Parse a serialized payload back into a WidgetConfig.

    Raises:
        PayloadError: If the document is not a valid payload
    """
    data = loads_json(text)
    try:
        return WidgetConfig.model_validate(data)
    except ValueError as e:
        raise PayloadError(f"Invalid widget payload: {e}", e) from e


def _script_json(obj: Any) -> str:
    # "</" would close the surrounding <script> element
    return safe_json_dumps(obj).replace("</", "<\\/")


def render_bootstrap(
    config: WidgetConfig, sortable: bool = False, settings: Settings | None = None
) -> list[str]:
    """
    Bootstrap statements for a widget, in execution order.

    Args:
        config: Widget payload
        sortable: Also initialize drag-reorder on the widget table
        settings: Limits and client plugin name

    Returns:
        One statement, or two when sortable

    Raises:
        PayloadError: If the payload exceeds the configured limits, or the
            widget id cannot be used as a selector
    """
    settings = settings or get_settings()
    if not is_element_id(config.id):
        raise PayloadError(f"Widget id {config.id!r} is not a valid element id")

    payload = config.to_payload()
    payload_json = _script_json(payload)
    result = validate_payload(
        payload, payload_json, settings.max_payload_size, settings.max_payload_depth
    )
    if not is_successful(result):
        raise PayloadError(result.failure().message)

    lines = [f"jQuery('#{config.id}').{settings.client_plugin}({payload_json});"]
    if sortable:
        lines.append(f"jQuery('#{config.id} table').sorting({_script_json(SORTABLE_OPTIONS)});")
    return lines
