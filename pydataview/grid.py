"""Grid view: renders columns over a data reader as an HTML table.

Usage:
    from pydataview import ArrayDataReader, GridView, QueryUrlCreator, Sort
    from pydataview.column import DataColumn, SerialColumn

    reader = ArrayDataReader(users, sort=Sort.only(["name", "age"]))
    grid = GridView(
        data_reader=reader,
        columns=[SerialColumn(), DataColumn(property="name"), DataColumn(property="age")],
        url_creator=QueryUrlCreator("/users"),
        sort_value="-age",
    )
    html = grid.render()
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .column.base import Cell, Column, ColumnRenderer, DataContext, GlobalContext, SortableOptions
from .column.checkbox import key_to_value
from .column.container import RendererContainer
from .column.header import HeaderContext
from .config import get_settings
from .exceptions import DataReaderNotSetError
from .html import add_css_class, encode, tag
from .log import debug, warn
from .reader import PageToken
from .sort import order_string_to_dict
from .translator import IdentityTranslator, Translator
from .url import UrlConfig
from .values import resolve_value


class GridView(BaseModel):
    """Immutable grid widget.

    Options left as None are taken from settings when rendering
    (``GridSettings``, ``UrlSettings`` and ``SortableSettings``).

    Attributes
    ----------
    columns : tuple[Column, ...]
        Column definitions. Invisible columns are skipped entirely.
    data_reader : Any
        Supplies ``(key, record)`` rows and the sort.
    renderer_container : RendererContainer
        Builds and caches column renderers.
    sort_value : str, optional
        Requested order string, e.g. ``"-age"``, applied to readers that
        provide ``with_sort()``. Column properties are mapped to their
        override fields.
    page_token : PageToken, optional
        Current page.
    page_size : int, optional
        Current page size.
    url_creator : Callable, optional
        ``(arguments, query_parameters) -> url`` for sort links.
    url_config : UrlConfig, optional
        URL parameter names and placement.
    sortable : SortableOptions, optional
        Sortable header decoration.
    multi_sort : bool, optional
        Whether sorting by a column keeps the other columns' order.
    translator : Translator
        Translator for built-in messages.
    translation_category : str, optional
        Translation category. Taken from ``GridSettings.translation_category``
        when not given.
    table_attributes : dict
        Attributes of ``<table>``; its class defaults to
        ``GridSettings.table_class``.
    header_row_attributes, footer_row_attributes : dict
        Attributes of the header and footer ``<tr>``.
    body_row_attributes : dict or Callable
        Attributes of body rows, or ``callable(data, key, index)``.
    empty_text : str, optional
        Shown in a single row spanning all columns when there are no rows.
    empty_cell : str, optional
        Markup placed in body cells with no content.
    column_grouping : bool
        Whether to render ``<colgroup>``.
    enable_header, enable_footer : bool
        Whether to render ``<thead>`` and ``<tfoot>``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    columns: tuple[Column, ...] = ()
    data_reader: Any = None
    renderer_container: RendererContainer = Field(default_factory=RendererContainer)
    sort_value: str | None = None
    page_token: PageToken | None = None
    page_size: int | None = None
    url_creator: Callable[..., str] | None = None
    url_config: UrlConfig | None = None
    sortable: SortableOptions | None = None
    multi_sort: bool | None = None
    translator: Translator = Field(default_factory=IdentityTranslator)
    translation_category: str | None = None
    table_attributes: dict[str, Any] = Field(default_factory=dict)
    header_row_attributes: dict[str, Any] = Field(default_factory=dict)
    body_row_attributes: dict[str, Any] | Callable[..., dict[str, Any]] = Field(default_factory=dict)
    footer_row_attributes: dict[str, Any] = Field(default_factory=dict)
    empty_text: str | None = None
    empty_cell: str | None = None
    column_grouping: bool = False
    enable_header: bool = True
    enable_footer: bool = False

    def with_columns(self, *columns: Column) -> GridView:
        """Return a copy with other columns."""
        return self.model_copy(update={"columns": columns})

    def with_data_reader(self, data_reader: Any) -> GridView:
        """Return a copy reading from another data reader."""
        return self.model_copy(update={"data_reader": data_reader})

    def with_renderer_configs(self, configs: Mapping[type[ColumnRenderer], Mapping[str, Any]]) -> GridView:
        """Return a copy whose renderers are built with extra constructor arguments."""
        return self.model_copy(update={"renderer_container": self.renderer_container.add_configs(configs)})

    def render(self) -> str:
        """Render the table.

        Raises
        ------
        DataReaderNotSetError
            If no data reader is set.
        """
        if self.data_reader is None:
            raise DataReaderNotSetError()

        settings = get_settings()
        columns = [column for column in self.columns if column.visible]
        renderers = [self.renderer_container.get(column.get_renderer()) for column in columns]

        override_order_fields: dict[str, str] = {}
        for column in columns:
            get_fields = getattr(column, "get_override_order_fields", None)
            if get_fields is not None:
                override_order_fields.update(get_fields())

        data_reader, original_sort, sort = self._prepare_data_reader(override_order_fields)
        context_options: dict[str, Any] = {
            "data_reader": data_reader,
            "sort": sort,
            "original_sort": original_sort,
            "url_config": self.url_config or UrlConfig.from_settings(settings.url),
            "sortable": self.sortable or SortableOptions.from_settings(settings.sortable),
            "page_token": self.page_token,
            "page_size": self.page_size,
            "multi_sort": settings.sortable.multi_sort if self.multi_sort is None else self.multi_sort,
            "url_creator": self.url_creator,
            "translator": self.translator,
            "translation_category": (
                settings.grid.translation_category if self.translation_category is None else self.translation_category
            ),
        }
        global_context = GlobalContext(**context_options)
        header_context = HeaderContext(**context_options, override_order_fields=override_order_fields)

        rows = list(data_reader.read())
        debug(f"Rendering grid with {len(columns)} columns and {len(rows)} rows")

        parts: list[str] = []
        if self.column_grouping:
            cols = [
                _render_cell("col", renderer.render_column(column, Cell(), global_context))
                for column, renderer in zip(columns, renderers)
            ]
            parts.append(tag("colgroup", _join_lines(cols), encode=False))

        if self.enable_header:
            header_cells: list[str] = []
            for column, renderer in zip(columns, renderers):
                cell = renderer.render_header(column, Cell(), header_context)
                if cell is not None:
                    header_cells.append(_render_cell("th", cell))
            header_row = tag("tr", _join_lines(header_cells), self.header_row_attributes, encode=False)
            parts.append(tag("thead", _join_lines([header_row]), encode=False))

        body_rows = self._render_body_rows(rows, columns, renderers, global_context, settings)
        parts.append(tag("tbody", _join_lines(body_rows), encode=False))

        if self.enable_footer:
            footer_cells = [
                _render_cell("td", renderer.render_footer(column, Cell(), global_context))
                for column, renderer in zip(columns, renderers)
            ]
            footer_row = tag("tr", _join_lines(footer_cells), self.footer_row_attributes, encode=False)
            parts.append(tag("tfoot", _join_lines([footer_row]), encode=False))

        table_attributes = self.table_attributes
        if "class" not in table_attributes:
            table_attributes = add_css_class(table_attributes, settings.grid.table_class)
        return tag("table", _join_lines(parts), table_attributes, encode=False)

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def _prepare_data_reader(self, override_order_fields: Mapping[str, str]) -> tuple[Any, Any, Any]:
        original_sort = self.data_reader.get_sort()
        if self.sort_value is None:
            return self.data_reader, original_sort, original_sort
        if original_sort is None or not hasattr(self.data_reader, "with_sort"):
            warn(f"Ignoring sort value {self.sort_value!r}: {type(self.data_reader).__name__} does not support sorting")
            return self.data_reader, original_sort, original_sort

        order = {
            override_order_fields.get(name, name): direction
            for name, direction in order_string_to_dict(self.sort_value).items()
        }
        sort = original_sort.with_order(order)
        return self.data_reader.with_sort(sort), original_sort, sort

    def _render_body_rows(
        self,
        rows: list[tuple[Any, Any]],
        columns: list[Column],
        renderers: list[ColumnRenderer],
        context: GlobalContext,
        settings: Any,
    ) -> list[str]:
        if not rows:
            empty_text = self.empty_text if self.empty_text is not None else settings.grid.empty_text
            message = context.translate(empty_text)
            cell = tag("td", encode(message), {"colspan": len(columns)}, encode=False)
            return [tag("tr", cell, encode=False)]

        empty_cell = self.empty_cell if self.empty_cell is not None else settings.grid.empty_cell
        result: list[str] = []
        for index, (key, data) in enumerate(rows):
            cells: list[str] = []
            for column, renderer in zip(columns, renderers):
                data_context = DataContext(
                    column=column,
                    data=data,
                    key=key,
                    index=index,
                    prepared_data_reader=context.data_reader,
                )
                cell = renderer.render_body(column, Cell(), data_context)
                if cell.is_empty_content():
                    cell = cell.with_content(empty_cell).with_encode(False)
                cells.append(_render_cell("td", cell))
            attributes = {**resolve_value(self.body_row_attributes, data, key, index), "data-key": key_to_value(key)}
            result.append(tag("tr", _join_lines(cells), attributes, encode=False))
        return result


def _render_cell(name: str, cell: Cell) -> str:
    return tag(name, list(cell.content), cell.attributes, cell.encode, cell.double_encode)


def _join_lines(items: list[str]) -> str:
    return "\n" + "\n".join(items) + "\n" if items else ""
