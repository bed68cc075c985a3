"""Renderers of tabular input layouts."""

from .base import BaseRenderer, RenderResult, RowOptions
from .table import TableRenderer

__all__ = [
    "BaseRenderer",
    "RenderResult",
    "RowOptions",
    "TableRenderer",
]
