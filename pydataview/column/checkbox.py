"""Checkbox column for selecting rows."""

from __future__ import annotations

import json

from collections.abc import Callable
from typing import Any

from pydantic import Field

from ..config import get_settings
from ..html import checkbox
from .base import Cell, Column, ColumnRenderer, DataContext, GlobalContext
from .header import HeaderContext


class CheckboxColumn(Column):
    """Column with a checkbox in every row.

    Attributes
    ----------
    header : str, optional
        Header content. When None and ``multiple`` is set, a "select all"
        checkbox is rendered; otherwise the header cell is omitted.
    footer : str, optional
        Footer content.
    content : Callable, optional
        ``callable(input_html, context) -> str`` wrapping the input.
    input_attributes : dict
        Attributes of the input. ``name`` and ``value`` here replace the
        defaults.
    multiple : bool
        Whether more than one row can be selected.
    """

    header: str | None = None
    footer: str | None = None
    content: Callable[[str, DataContext], str] | None = None
    input_attributes: dict[str, Any] = Field(default_factory=dict)
    column_attributes: dict[str, Any] = Field(default_factory=dict)
    header_attributes: dict[str, Any] = Field(default_factory=dict)
    body_attributes: dict[str, Any] = Field(default_factory=dict)
    multiple: bool = True

    def get_renderer(self) -> type[ColumnRenderer]:
        return CheckboxColumnRenderer


def key_to_value(key: Any) -> str:
    """Convert a row key to an input value; non-scalar keys become JSON."""
    if isinstance(key, (dict, list, tuple)):
        return json.dumps(key, ensure_ascii=False, separators=(",", ":"))
    return str(key)


class CheckboxColumnRenderer(ColumnRenderer):
    """Renderer for :class:`CheckboxColumn`.

    Input names default to ``GridSettings.checkbox_name`` and
    ``GridSettings.checkbox_all_name``.
    """

    column_class = CheckboxColumn

    def __init__(self, name: str | None = None, all_name: str | None = None) -> None:
        grid_settings = get_settings().grid
        self.name = name or grid_settings.checkbox_name
        self.all_name = all_name or grid_settings.checkbox_all_name

    def render_column(self, column: CheckboxColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        return cell.add_attributes(column.column_attributes)

    def render_header(self, column: CheckboxColumn, cell: Cell, context: HeaderContext) -> Cell | None:
        self.check_column(column)
        header = column.header
        if header is None:
            if not column.multiple:
                return None
            header = checkbox(self.all_name, 1)
            return cell.add_attributes(column.header_attributes).with_content(header).with_encode(False)
        return cell.add_attributes(column.header_attributes).with_content(header)

    def render_body(self, column: CheckboxColumn, cell: Cell, context: DataContext) -> Cell:
        self.check_column(column)
        attributes = column.input_attributes
        name = None if "name" in attributes else self.name
        value = None if "value" in attributes else key_to_value(context.key)

        content = checkbox(name, value, attributes)
        if column.content is not None:
            content = column.content(content, context)

        return cell.add_attributes(column.body_attributes).with_content(content).with_encode(False)

    def render_footer(self, column: CheckboxColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        if column.footer is not None:
            cell = cell.with_content(column.footer)
        return cell
