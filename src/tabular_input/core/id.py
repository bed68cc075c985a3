"""Widget IDs and Script Keys.

ULID-based ids for widgets constructed without an explicit id, and for
statements that must be registered once per render call.

Design:
- Prefixed: `w_<ULID>` keeps ids valid as HTML ids and jQuery selectors
- K-sortable: widgets rendered later on a page sort after earlier ones
"""

import re
from typing import NewType

from ulid import ULID

WidgetID = NewType("WidgetID", str)
"""Widget root element identifier"""

ScriptKey = NewType("ScriptKey", str)
"""Script registry key"""

# HTML id that can be used unescaped in a jQuery "#id" selector
_ELEMENT_ID = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


class Prefix:
    """ID prefix constants."""

    WIDGET = "w"
    BOOTSTRAP = "boot"


def new_widget_id() -> WidgetID:
    """Generate new widget ID, e.g. `w_01hx...`."""
    return WidgetID(f"{Prefix.WIDGET}_{ULID()}".lower())


def new_script_key() -> ScriptKey:
    """Generate a registry key no earlier registration can share."""
    return ScriptKey(f"{Prefix.BOOTSTRAP}_{ULID()}")


def is_element_id(value: str) -> bool:
    """Check that a widget id is safe as element id and selector."""
    return _ELEMENT_ID.fullmatch(value) is not None


__all__ = [
    "WidgetID",
    "ScriptKey",
    "Prefix",
    "new_widget_id",
    "new_script_key",
    "is_element_id",
]
