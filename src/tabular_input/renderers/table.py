"""Table layout: one <tr> per row, one <td> per visible column."""

import html
from collections.abc import Sequence
from typing import Any

from ..columns import BaseColumn, HiddenColumn, render_attributes
from ..options import ButtonOptions
from .base import BaseRenderer


class TableRenderer(BaseRenderer):
    """Renders rows as a table with add/remove buttons per placement."""

    def internal_render(self, rows: Sequence[Any]) -> str:
        rows = list(rows)
        # Pad with empty rows up to the minimum
        rows.extend([None] * max(self.min - len(rows), 0))

        body = "".join(self.render_row(row, index) for index, row in enumerate(rows))
        table = (
            '<table class="multiple-input-list table table-condensed table-renderer">'
            f"{self.render_header()}<tbody>{body}</tbody>{self.render_footer()}</table>"
        )
        return f'<div id="{self.id}" class="multiple-input">{table}</div>'

    def prepare_template(self) -> str:
        return self.render_row(None, "{" + self.index_placeholder + "}")

    @property
    def visible_columns(self) -> list[BaseColumn]:
        return [c for c in self.columns if not isinstance(c, HiddenColumn)]

    @property
    def hidden_columns(self) -> list[BaseColumn]:
        return [c for c in self.columns if isinstance(c, HiddenColumn)]

    def has_action_column(self) -> bool:
        return self.max > self.min or self.is_add_button_position_row()

    def render_header(self) -> str:
        cells = []
        if self.sortable:
            cells.append('<th class="list-cell__drag"></th>')
        if self.is_add_button_position_row_begin():
            cells.append('<th class="list-cell__button"></th>')
        for column in self.visible_columns:
            cells.append(f'<th class="list-cell__{column.name}">{html.escape(column.header())}</th>')
        if self.has_action_column() or self.is_add_button_position_header():
            button = self.render_add_button() if self.is_add_button_position_header() else ""
            cells.append(f'<th class="list-cell__button">{button}</th>')
        return f"<thead><tr>{''.join(cells)}</tr></thead>"

    def render_footer(self) -> str:
        if not self.is_add_button_position_footer():
            return ""
        span = len(self.visible_columns) + 1 + int(self.sortable)
        span += int(self.is_add_button_position_row_begin())
        return (
            f'<tfoot><tr><td colspan="{span}" class="list-cell__button">'
            f"{self.render_add_button()}</td></tr></tfoot>"
        )

    def render_row(self, row: Any, index: int | str) -> str:
        cells = []
        if self.sortable:
            cells.append(
                '<td class="list-cell__drag"><div class="drag-handle">'
                '<i class="glyphicon glyphicon-menu-hamburger"></i></div></td>'
            )
        if self.is_add_button_position_row_begin():
            cells.append(f'<td class="list-cell__button">{self.render_add_button()}</td>')

        hidden = "".join(self.render_input(c, row, index) for c in self.hidden_columns)
        for position, column in enumerate(self.visible_columns):
            cell = self.render_cell(column, row, index)
            if position == 0:
                cell = hidden + cell
            cells.append(f'<td class="list-cell__{column.name}">{cell}</td>')
        if not self.visible_columns and hidden:
            cells.append(f'<td class="list-cell__hidden">{hidden}</td>')

        if self.has_action_column():
            cells.append(f'<td class="list-cell__button">{self.render_actions(index)}</td>')

        attributes = {"class": "multiple-input-list__item"}
        if isinstance(index, int):
            attributes.update(self.row_attributes(row, index))
        return f"<tr{render_attributes(attributes)}>{''.join(cells)}</tr>"

    def render_input(self, column: BaseColumn, row: Any, index: int | str) -> str:
        content = column.render_input(index, column.value_for(row))
        self.register_column_scripts(column, index)
        return content

    def render_cell(self, column: BaseColumn, row: Any, index: int | str) -> str:
        content = self.render_input(column, row, index)
        if column.enable_error:
            content += '<div class="help-block help-block-error"></div>'
        return f'<div class="form-group field-{column.element_id(index)}">{content}</div>'

    def render_actions(self, index: int | str) -> str:
        buttons = ""
        # Rows below the minimum cannot be removed; the template row always can
        if not isinstance(index, int) or index >= self.min:
            buttons += self.render_button(self.options.remove_button, "js-input-remove")
        if self.is_add_button_position_row():
            buttons += self.render_add_button()
        return buttons

    def render_add_button(self) -> str:
        return self.render_button(self.options.add_button, "js-input-plus")

    @staticmethod
    def render_button(button: ButtonOptions, action: str) -> str:
        attributes = {
            **button.attributes,
            "class": f"multiple-input-list__btn {action} {button.css_class}".strip(),
        }
        return f"<div{render_attributes(attributes)}>{button.label}</div>"
