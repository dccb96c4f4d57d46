"""Base building blocks shared by every column kind.

- :class:`Cell` describes one ``<col>``/``<th>``/``<td>`` before it becomes HTML
- :class:`DataContext` carries one row for one column
- :class:`GlobalContext` carries the state of a whole render
- :class:`Column` and :class:`ColumnRenderer` split a column's declarative
  options from the strategy that renders them
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..config import SortableSettings, get_settings
from ..exceptions import UnexpectedColumnTypeError
from ..html import add_css_class
from ..reader import PageToken
from ..sort import Sort
from ..translator import DEFAULT_CATEGORY, IdentityTranslator, Translator
from ..url import UrlConfig


if TYPE_CHECKING:
    from .header import HeaderContext


# =============================================================================
# Cell
# =============================================================================


class Cell(BaseModel):
    """Attributes, content and encoding of a single cell.

    ``encode`` is tri-state: ``None`` escapes everything except trusted
    markup (objects with ``__html__``), ``True`` escapes everything and
    ``False`` escapes nothing.

    Example:
        cell = Cell().with_content("Name").add_class("sortable")
        cell.attributes  # {"class": "sortable"}
    """

    model_config = ConfigDict(frozen=True)

    attributes: dict[str, Any] = Field(default_factory=dict)
    content: tuple[Any, ...] = ()
    encode: bool | None = None
    double_encode: bool = True

    def with_content(self, *content: Any) -> Cell:
        """Return a copy with the given content items."""
        return self.model_copy(update={"content": content})

    def with_attribute(self, name: str, value: Any) -> Cell:
        """Return a copy with a single attribute set."""
        return self.model_copy(update={"attributes": {**self.attributes, name: value}})

    def with_attributes(self, attributes: Mapping[str, Any]) -> Cell:
        """Return a copy whose attributes are replaced."""
        return self.model_copy(update={"attributes": dict(attributes)})

    def add_attributes(self, attributes: Mapping[str, Any]) -> Cell:
        """Return a copy with attributes merged in; later keys win."""
        return self.model_copy(update={"attributes": {**self.attributes, **attributes}})

    def add_class(self, *classes: str | None) -> Cell:
        """Return a copy with CSS classes appended."""
        return self.model_copy(update={"attributes": add_css_class(self.attributes, *classes)})

    def with_encode(self, encode: bool | None) -> Cell:
        """Return a copy with another encode mode."""
        return self.model_copy(update={"encode": encode})

    def with_double_encode(self, double_encode: bool) -> Cell:
        """Return a copy with double encoding switched on or off."""
        return self.model_copy(update={"double_encode": double_encode})

    def is_empty_content(self) -> bool:
        """Return True if every content item renders to an empty string."""
        return all(str(item) == "" for item in self.content)


# =============================================================================
# Contexts
# =============================================================================


class DataContext(BaseModel):
    """One row as seen by one column.

    Attributes
    ----------
    column : Column
        The column being rendered.
    data : Any
        The row record.
    key : Any
        The row key as returned by the data reader.
    index : int
        Zero-based row index within the rendered page.
    prepared_data_reader : Any
        The reader the rows were read from.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    column: Any
    data: Any
    key: Any
    index: int
    prepared_data_reader: Any = None


class SortableOptions(BaseModel):
    """CSS classes and markup used to decorate sortable headers."""

    model_config = ConfigDict(frozen=True)

    header_class: str | None = None
    header_prepend: str = ""
    header_append: str = ""
    header_asc_class: str | None = None
    header_asc_prepend: str = ""
    header_asc_append: str = ""
    header_desc_class: str | None = None
    header_desc_prepend: str = ""
    header_desc_append: str = ""
    link_attributes: dict[str, Any] = Field(default_factory=dict)
    link_asc_class: str | None = "asc"
    link_desc_class: str | None = "desc"

    @classmethod
    def from_settings(cls, settings: SortableSettings | None = None) -> SortableOptions:
        """Create options from ``SortableSettings`` (global settings by default)."""
        if settings is None:
            settings = get_settings().sortable
        return cls(**settings.model_dump(exclude={"multi_sort"}))


class GlobalContext(BaseModel):
    """State shared by every cell of one render.

    Attributes
    ----------
    data_reader : Any
        The reader supplying the rows.
    sort : Sort or None
        The sort currently applied to the reader.
    original_sort : Sort or None
        The sort the reader was configured with before request parameters
        were applied. Sort links are only produced when both sorts are set.
    url_config : UrlConfig
        Names and placement of pagination and sort URL parameters.
    sortable : SortableOptions
        Decoration of sortable headers.
    page_token : PageToken or None
        Current page.
    page_size : int, str or None
        Current page size, kept in sort links.
    multi_sort : bool
        Whether sorting by one column keeps the order of the others.
    url_creator : Callable or None
        ``(arguments, query_parameters) -> url`` for sort and page links.
    translator : Translator
        Translates user-facing strings.
    translation_category : str
        Category passed to the translator.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data_reader: Any = None
    sort: Sort | None = None
    original_sort: Sort | None = None
    url_config: UrlConfig = Field(default_factory=UrlConfig)
    sortable: SortableOptions = Field(default_factory=SortableOptions)
    page_token: PageToken | None = None
    page_size: int | str | None = None
    multi_sort: bool = False
    url_creator: Callable[..., str] | None = None
    translator: Translator = Field(default_factory=IdentityTranslator)
    translation_category: str = DEFAULT_CATEGORY

    def translate(self, message_id: str) -> str:
        """Translate a message in this render's category."""
        return self.translator.translate(message_id, self.translation_category)


# =============================================================================
# Columns and renderers
# =============================================================================


class Column(BaseModel, ABC):
    """Declarative, immutable description of one column.

    Subclasses name the renderer class that knows how to draw them.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    visible: bool = True

    @abstractmethod
    def get_renderer(self) -> type[ColumnRenderer]:
        """Return the renderer class for this column."""


class ColumnRenderer(ABC):
    """Strategy turning a column definition into cells.

    Each method receives the cell prepared by the grid and returns a new one.
    :meth:`render_header` may return None to omit the header cell.
    """

    column_class: ClassVar[type[Column]]

    def check_column(self, column: Column) -> None:
        """Raise if the column is not of the kind this renderer draws.

        Raises
        ------
        UnexpectedColumnTypeError
            If ``column`` is not an instance of :attr:`column_class`.
        """
        if not isinstance(column, self.column_class):
            raise UnexpectedColumnTypeError(self.column_class, type(column), renderer=type(self).__name__)

    @abstractmethod
    def render_column(self, column: Column, cell: Cell, context: GlobalContext) -> Cell:
        """Render the ``<col>`` cell."""

    @abstractmethod
    def render_header(self, column: Column, cell: Cell, context: HeaderContext) -> Cell | None:
        """Render the header cell, or return None to omit it."""

    @abstractmethod
    def render_body(self, column: Column, cell: Cell, context: DataContext) -> Cell:
        """Render the body cell of one row."""

    @abstractmethod
    def render_footer(self, column: Column, cell: Cell, context: GlobalContext) -> Cell:
        """Render the footer cell."""

