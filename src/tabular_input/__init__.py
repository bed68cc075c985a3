"""
Tabular input widget.
Server-side option resolution and script wiring for client-side repeatable rows.
"""

from .attributes import collect_attributes, merge_options
from .binding import FormBinding, ModelFormBinding, StackFormBinding
from .columns import BaseColumn, ColumnRegistry, HiddenColumn, TextColumn, default_column_registry
from .core import InvalidConfiguration, PayloadError, Settings, UnsupportedOperation, WidgetError
from .merger import CapturedScripts, ScriptRegistryMerger
from .options import (
    UNBOUNDED,
    ButtonOptions,
    ButtonPosition,
    ResolvedOptions,
    RowCountPolicy,
    resolve_options,
)
from .registry import RegistrySnapshot, ScriptEntry, ScriptPosition, ScriptRegistry
from .renderers import BaseRenderer, RenderResult, TableRenderer
from .serializer import WidgetConfig, build_widget_config, parse_widget_config, render_bootstrap
from .widget import TabularInput, WidgetOptions

__version__ = "0.1.0"

__all__ = [
    # Options
    "UNBOUNDED",
    "ButtonOptions",
    "ButtonPosition",
    "ResolvedOptions",
    "RowCountPolicy",
    "resolve_options",
    # Attributes
    "collect_attributes",
    "merge_options",
    "FormBinding",
    "ModelFormBinding",
    "StackFormBinding",
    # Columns
    "BaseColumn",
    "ColumnRegistry",
    "HiddenColumn",
    "TextColumn",
    "default_column_registry",
    # Scripts
    "RegistrySnapshot",
    "ScriptEntry",
    "ScriptPosition",
    "ScriptRegistry",
    "CapturedScripts",
    "ScriptRegistryMerger",
    # Rendering
    "BaseRenderer",
    "RenderResult",
    "TableRenderer",
    "WidgetConfig",
    "build_widget_config",
    "parse_widget_config",
    "render_bootstrap",
    "TabularInput",
    "WidgetOptions",
    # Errors
    "WidgetError",
    "InvalidConfiguration",
    "UnsupportedOperation",
    "PayloadError",
    "Settings",
]
