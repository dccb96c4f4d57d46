"""Serial column: the row number within the page."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import Cell, Column, ColumnRenderer, DataContext, GlobalContext
from .header import HeaderContext


class SerialColumn(Column):
    """Column numbering rows from 1 on each page."""

    header: str | None = None
    footer: str | None = None
    column_attributes: dict[str, Any] = Field(default_factory=dict)
    body_attributes: dict[str, Any] = Field(default_factory=dict)

    def get_renderer(self) -> type[ColumnRenderer]:
        return SerialColumnRenderer


class SerialColumnRenderer(ColumnRenderer):
    """Renderer for :class:`SerialColumn`."""

    column_class = SerialColumn

    def render_column(self, column: SerialColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        return cell.add_attributes(column.column_attributes)

    def render_header(self, column: SerialColumn, cell: Cell, context: HeaderContext) -> Cell | None:
        self.check_column(column)
        return cell.with_content(column.header if column.header is not None else "#")

    def render_body(self, column: SerialColumn, cell: Cell, context: DataContext) -> Cell:
        self.check_column(column)
        return cell.add_attributes(column.body_attributes).with_content(str(context.index + 1))

    def render_footer(self, column: SerialColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        return cell.with_content(column.footer if column.footer is not None else "")
