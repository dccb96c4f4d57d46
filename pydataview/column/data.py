"""Data column: shows one property of each row."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import Any

from pydantic import Field

from ..config import get_settings
from ..html import encode
from ..values import get_value, resolve_value
from .base import Cell, Column, ColumnRenderer, DataContext, GlobalContext
from .header import HeaderContext


class DataColumn(Column):
    """Column showing the value of a row property.

    Attributes
    ----------
    property : str, optional
        Dotted path of the value in the row, also the sort property.
    field : str, optional
        Field the reader sorts by when it differs from ``property``.
    header : str, optional
        Header label. Defaults to the capitalized property.
    encode_header : bool
        Whether ``header`` is HTML-escaped.
    footer : str, optional
        Footer content.
    column_attributes, header_attributes, footer_attributes : dict
        Attributes of the ``<col>``, ``<th>`` and footer ``<td>``.
    body_attributes : dict or Callable
        Attributes of each body ``<td>``, or ``callable(data, context)``
        returning them.
    with_sorting : bool
        Whether the header links to sorting by this column.
    content : Any, optional
        Body content replacing the property value; a literal or
        ``callable(data, context)``. Not escaped.
    date_time_format : str, optional
        ``strftime`` format for date and datetime values.

    None and False values render empty, True renders as ``1``.
    """

    property: str | None = None
    field: str | None = None
    header: str | None = None
    encode_header: bool = True
    footer: str | None = None
    column_attributes: dict[str, Any] = Field(default_factory=dict)
    header_attributes: dict[str, Any] = Field(default_factory=dict)
    body_attributes: dict[str, Any] | Callable[..., dict[str, Any]] = Field(default_factory=dict)
    footer_attributes: dict[str, Any] = Field(default_factory=dict)
    with_sorting: bool = True
    content: Any = None
    date_time_format: str | None = None

    def get_renderer(self) -> type[ColumnRenderer]:
        return DataColumnRenderer

    def get_override_order_fields(self) -> dict[str, str]:
        """Return ``{property: field}`` when the column sorts by another field."""
        if self.property is None or self.field is None or self.property == self.field:
            return {}
        return {self.property: self.field}


class DataColumnRenderer(ColumnRenderer):
    """Renderer for :class:`DataColumn`.

    Parameters
    ----------
    date_time_format : str, optional
        Default ``strftime`` format for date values. Taken from
        ``GridSettings.date_time_format`` when not given.
    """

    column_class = DataColumn

    def __init__(self, date_time_format: str | None = None) -> None:
        self.date_time_format = date_time_format or get_settings().grid.date_time_format

    def render_column(self, column: DataColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        return cell.add_attributes(column.column_attributes)

    def render_header(self, column: DataColumn, cell: Cell, context: HeaderContext) -> Cell | None:
        self.check_column(column)
        cell = cell.add_attributes(column.header_attributes).with_encode(False)

        if column.header is None:
            label = "" if column.property is None else encode(column.property[:1].upper() + column.property[1:])
        else:
            label = encode(column.header) if column.encode_header else column.header
        cell = cell.with_content(label)

        if not column.with_sorting or column.property is None:
            return cell

        cell, link, prepend, append = context.prepare_sortable(cell, column.property)
        if link is not None:
            label = link.with_content(label).with_encode(False).render()
        return cell.with_content(prepend + label + append)

    def render_body(self, column: DataColumn, cell: Cell, context: DataContext) -> Cell:
        self.check_column(column)
        if column.content is not None:
            content = str(resolve_value(column.content, context.data, context))
        elif column.property is not None:
            content = encode(self._to_string(get_value(context.data, column.property), column))
        else:
            content = ""

        attributes = resolve_value(column.body_attributes, context.data, context)
        return cell.add_attributes(attributes).with_content(content).with_encode(False)

    def render_footer(self, column: DataColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        if column.footer is not None:
            cell = cell.with_content(column.footer)
        return cell.add_attributes(column.footer_attributes)

    def _to_string(self, value: Any, column: DataColumn) -> str:
        if value is None or value is False:
            return ""
        if value is True:
            return "1"
        if isinstance(value, (datetime, date)):
            return value.strftime(column.date_time_format or self.date_time_format)
        return str(value)
