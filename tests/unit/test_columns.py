"""Column tests."""

import pytest

from tabular_input.columns import (
    BaseColumn,
    ColumnRegistry,
    TextColumn,
    input_id_from_name,
    render_attributes,
)
from tabular_input.core import InvalidConfiguration, UnsupportedOperation


def test_input_id_from_name():
    assert input_id_from_name("items[0][name]") == "items-0-name"
    assert input_id_from_name("Order[items][3][unit.price]") == "order-items-3-unit-price"
    assert input_id_from_name("tags[]") == "tags"
    # Only the fixed replacement table applies
    assert input_id_from_name("Meta[a:b]") == "meta-a:b"


def test_element_naming():
    column = TextColumn(name="name", input_name="items")

    assert column.element_name(0) == "items[0][name]"
    assert column.element_id(0) == "items-0-name"
    assert column.element_id(12) == "items-12-name"


def test_element_id_keeps_index_token_case():
    column = TextColumn(name="Title", input_name="Order[Items]")

    assert column.element_id("{multiple_index_W0}") == "order-items-{multiple_index_W0}-title"
    assert column.element_name("{multiple_index_W0}") == "Order[Items][{multiple_index_W0}][Title]"


def test_client_id_strips_row_index():
    assert TextColumn(name="name", input_name="items").client_id() == "items-name"
    assert TextColumn(name="qty", input_name="Order[lines]").client_id() == "order-lines-qty"


def test_client_id_keeps_other_zero_segments():
    """Only the row index segment goes, not digits that merely start with 0."""
    column = TextColumn(name="05", input_name="items")
    assert column.element_id(0) == "items-0-05"
    assert column.client_id() == "items-05"


def test_value_for_mapping_and_object():
    column = TextColumn(name="title", default_value="n/a")

    class Row:
        title = "From object"

    assert column.value_for({"title": "From dict"}) == "From dict"
    assert column.value_for({}) == "n/a"
    assert column.value_for(Row()) == "From object"
    assert column.value_for(None) == "n/a"


def test_header_defaults_to_name():
    assert TextColumn(name="unit_price").header() == "Unit price"
    assert TextColumn(name="unit_price", title="Price").header() == "Price"


def test_text_input_rendering():
    column = TextColumn(name="title", input_name="items", options={"placeholder": "Title"})
    html = column.render_input(1, 'Say "hi"')

    assert 'name="items[1][title]"' in html
    assert 'id="items-1-title"' in html
    assert 'value="Say &quot;hi&quot;"' in html
    assert 'placeholder="Title"' in html


def test_base_column_cannot_render():
    with pytest.raises(UnsupportedOperation):
        BaseColumn(name="x").render_input(0, None)


def test_render_attributes_skips_empty():
    assert render_attributes({"a": None, "b": False, "c": True, "d": 0}) == ' c d="0"'


def test_registry_creates_by_tag(column_registry):
    column = column_registry.create({"name": "id", "type": "hidden"}, input_name="items")

    assert column.type == "hidden"
    assert 'type="hidden"' in column.render_input(0, 5)


def test_registry_default_tag_is_text(column_registry):
    column = column_registry.create({"name": "title"})
    assert isinstance(column, TextColumn)


def test_registry_unknown_tag(column_registry):
    with pytest.raises(InvalidConfiguration):
        column_registry.create({"name": "due", "type": "date"})


def test_registry_invalid_definition(column_registry):
    with pytest.raises(InvalidConfiguration):
        column_registry.create({"name": "title", "colour": "red"})


def test_registry_duplicate_tag():
    registry = ColumnRegistry()
    registry.register("text")(TextColumn)

    with pytest.raises(InvalidConfiguration):
        registry.register("text")(TextColumn)


def test_registry_widget_level_defaults(column_registry):
    inherited = column_registry.create(
        {"name": "title"}, attribute_options={"validateOnBlur": False}, enable_error=True
    )
    overridden = column_registry.create(
        {"name": "title", "attribute_options": {}, "enable_error": False},
        attribute_options={"validateOnBlur": False},
        enable_error=True,
    )

    assert inherited.attribute_options == {"validateOnBlur": False}
    assert inherited.enable_error is True
    assert overridden.attribute_options == {}
    assert overridden.enable_error is False


def test_registry_custom_kind():
    registry = ColumnRegistry()

    @registry.register("static")
    class StaticColumn(BaseColumn):
        def render_input(self, index, value):
            return f"<span>{value}</span>"

    column = registry.create({"name": "total", "type": "static"})
    assert registry.has("static")
    assert column.render_input(0, 3) == "<span>3</span>"
