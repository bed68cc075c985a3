"""
Form Binding
Framework-level client validation options for (model, attribute) pairs.
"""

from typing import Any, Protocol

import annotated_types
from pydantic import BaseModel

from .core.logging_config import get_logger

logger = get_logger(__name__)


class FormBinding(Protocol):
    """Answers which client validation options an attribute carries."""

    def lookup(self, model: Any, attribute: str) -> dict[str, Any] | None:
        """Return options for the attribute, or None if it does not take part."""
        ...


class ModelFormBinding:
    """
    Derives client validation options from pydantic field metadata.

    Examples:
        >>> class Item(BaseModel):
        ...     title: str = Field(max_length=10)
        >>> ModelFormBinding().lookup(Item(title="x"), "title")
        {'name': 'title', 'required': True, 'maxlength': 10}
    """

    def lookup(self, model: Any, attribute: str) -> dict[str, Any] | None:
        model_class = model if isinstance(model, type) else type(model)
        if not (isinstance(model_class, type) and issubclass(model_class, BaseModel)):
            return None

        field = model_class.model_fields.get(attribute)
        if field is None:
            return None

        options: dict[str, Any] = {"name": attribute, "required": field.is_required()}
        for constraint in field.metadata:
            if isinstance(constraint, annotated_types.MaxLen):
                options["maxlength"] = constraint.max_length
            elif isinstance(constraint, annotated_types.MinLen):
                options["minlength"] = constraint.min_length
            elif getattr(constraint, "pattern", None) is not None:
                options["pattern"] = constraint.pattern
        return options


class StackForm(Protocol):
    """Form that pushes client options of every rendered field onto a stack."""

    attributes: list[dict[str, Any]]

    def field(self, model: Any, attribute: str) -> Any:
        """Render a field, pushing its client options onto `attributes`."""
        ...


class StackFormBinding:
    """
    Adapter for forms that publish client options through a pending stack.

    The entry pushed by `field()` is popped and accepted only when its
    `name` equals the attribute; otherwise it is pushed back so unrelated
    bindings on the form stay intact.
    """

    def __init__(self, form: StackForm):
        self.form = form

    def lookup(self, model: Any, attribute: str) -> dict[str, Any] | None:
        self.form.field(model, attribute)
        if not self.form.attributes:
            return None

        options = self.form.attributes.pop()
        if options.get("name") == attribute:
            return dict(options)

        self.form.attributes.append(options)
        logger.debug(
            "attribute_binding_mismatch", attribute=attribute, popped=options.get("name")
        )
        return None
