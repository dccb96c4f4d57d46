"""Radio column for selecting a single row."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import Field

from ..config import get_settings
from ..html import radio
from .base import Cell, Column, ColumnRenderer, DataContext, GlobalContext
from .checkbox import key_to_value
from .header import HeaderContext


class RadioColumn(Column):
    """Column with a radio button in every row.

    The header cell is omitted unless ``header`` is set.
    """

    header: str | None = None
    footer: str | None = None
    content: Callable[[str, DataContext], str] | None = None
    input_attributes: dict[str, Any] = Field(default_factory=dict)
    column_attributes: dict[str, Any] = Field(default_factory=dict)
    header_attributes: dict[str, Any] = Field(default_factory=dict)
    body_attributes: dict[str, Any] = Field(default_factory=dict)

    def get_renderer(self) -> type[ColumnRenderer]:
        return RadioColumnRenderer


class RadioColumnRenderer(ColumnRenderer):
    """Renderer for :class:`RadioColumn`."""

    column_class = RadioColumn

    def __init__(self, name: str | None = None) -> None:
        self.name = name or get_settings().grid.radio_name

    def render_column(self, column: RadioColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        return cell.add_attributes(column.column_attributes)

    def render_header(self, column: RadioColumn, cell: Cell, context: HeaderContext) -> Cell | None:
        self.check_column(column)
        if column.header is None:
            return None
        return cell.add_attributes(column.header_attributes).with_content(column.header)

    def render_body(self, column: RadioColumn, cell: Cell, context: DataContext) -> Cell:
        self.check_column(column)
        attributes = column.input_attributes
        name = None if "name" in attributes else self.name
        value = None if "value" in attributes else key_to_value(context.key)

        content = radio(name, value, attributes)
        if column.content is not None:
            content = column.content(content, context)

        return cell.add_attributes(column.body_attributes).with_content(content).with_encode(False)

    def render_footer(self, column: RadioColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        if column.footer is not None:
            cell = cell.with_content(column.footer)
        return cell
