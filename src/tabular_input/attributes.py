"""Client attribute options per column."""

from collections.abc import Iterable
from typing import Any

from .binding import FormBinding
from .columns import BaseColumn


def merge_options(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursive merge; override wins, nested mappings are merged key by key."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_options(merged[key], value)
        else:
            merged[key] = value
    return merged


def collect_attributes(
    columns: Iterable[BaseColumn], binding: FormBinding | None = None
) -> dict[str, dict[str, Any]]:
    """
    Map every column's client identifier to its merged option bag.

    Framework-level options (from the binding) are merged with the column's
    own attribute_options; the column wins on key conflicts. Columns without
    a model, or without a binding, contribute their own options verbatim.

    Args:
        columns: Columns in declaration order
        binding: Optional form binding

    Returns:
        Ordered mapping client id -> options
    """
    attributes: dict[str, dict[str, Any]] = {}
    for column in columns:
        client_id = column.client_id()

        if binding is not None and column.model is not None:
            framework = binding.lookup(column.model, column.name)
            # No framework options: the attribute does not take part in validation
            if framework is None:
                continue
            attributes[client_id] = merge_options(framework, column.attribute_options)
        else:
            attributes[client_id] = dict(column.attribute_options)

    return attributes
