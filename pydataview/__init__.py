"""pydataview - server-side HTML grids with sortable headers and column renderers."""

from .column import (
    ActionButton,
    ActionColumn,
    ActionColumnRenderer,
    Cell,
    CheckboxColumn,
    CheckboxColumnRenderer,
    Column,
    ColumnRenderer,
    DataColumn,
    DataColumnRenderer,
    DataContext,
    GlobalContext,
    HeaderContext,
    RadioColumn,
    RadioColumnRenderer,
    RendererContainer,
    SerialColumn,
    SerialColumnRenderer,
    SortableOptions,
)
from .config import DataViewSettings, clear_settings, get_settings, reload_settings
from .exceptions import (
    ConfigurationError,
    DataReaderNotSetError,
    DataViewException,
    EmptyTagNameError,
    MissingCollaboratorError,
    MissingUrlCreatorError,
    UnexpectedColumnTypeError,
)
from .grid import GridView
from .reader import ArrayDataReader, DataReader, PageToken
from .sort import Sort
from .translator import IdentityTranslator, MessageTranslator, Translator
from .url import (
    ActionColumnUrlConfig,
    ActionColumnUrlCreator,
    QueryUrlCreator,
    UrlConfig,
    UrlParameterType,
    create_url_parameters,
)


__version__ = "0.1.0"

__all__ = [
    "ActionButton",
    "ActionColumn",
    "ActionColumnRenderer",
    "ActionColumnUrlConfig",
    "ActionColumnUrlCreator",
    "ArrayDataReader",
    "Cell",
    "CheckboxColumn",
    "CheckboxColumnRenderer",
    "Column",
    "ColumnRenderer",
    "ConfigurationError",
    "DataColumn",
    "DataColumnRenderer",
    "DataContext",
    "DataReader",
    "DataReaderNotSetError",
    "DataViewException",
    "DataViewSettings",
    "EmptyTagNameError",
    "GlobalContext",
    "GridView",
    "HeaderContext",
    "IdentityTranslator",
    "MessageTranslator",
    "MissingCollaboratorError",
    "MissingUrlCreatorError",
    "PageToken",
    "QueryUrlCreator",
    "RadioColumn",
    "RadioColumnRenderer",
    "RendererContainer",
    "SerialColumn",
    "SerialColumnRenderer",
    "Sort",
    "SortableOptions",
    "Translator",
    "UnexpectedColumnTypeError",
    "UrlConfig",
    "UrlParameterType",
    "__version__",
    "clear_settings",
    "create_url_parameters",
    "get_settings",
    "reload_settings",
]
