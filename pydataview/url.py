"""URL parameter configuration and URL creators.

Pagination and sort links are built in two steps:

1. :func:`create_url_parameters` turns the page token, page size and sort
   string into ``(arguments, query_parameters)`` according to a
   :class:`UrlConfig`.
2. A URL creator callable receives those two mappings and returns the URL.

Usage:
    from pydataview.url import QueryUrlCreator, UrlConfig, create_url_parameters

    config = UrlConfig(query_parameters={"tab": "users"})
    arguments, query = create_url_parameters(None, 20, "-name", config)
    QueryUrlCreator("/users")(arguments, query)  # "/users?tab=users&pagesize=20&sort=-name"
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field

from .config import get_settings
from .exceptions import ConfigurationError
from .reader import PageToken
from .values import get_value


if TYPE_CHECKING:
    from .column.base import DataContext
    from .config import UrlSettings


UrlParameters = tuple[dict[str, Any], dict[str, Any]]

#: Pagination/sort URL creator: ``(arguments, query_parameters) -> url``.
UrlCreator = Callable[[dict[str, Any], dict[str, Any]], str]


class UrlParameterType(str, Enum):
    """Where a URL parameter is placed."""

    PATH = "path"
    QUERY = "query"


class UrlConfig(BaseModel):
    """Names and placement of the pagination and sort URL parameters.

    ``arguments`` and ``query_parameters`` are static entries added to every
    generated URL; computed parameters with the same name replace them.
    """

    model_config = ConfigDict(frozen=True)

    page_parameter_name: str = "page"
    previous_page_parameter_name: str = "prev-page"
    page_size_parameter_name: str = "pagesize"
    sort_parameter_name: str = "sort"
    page_parameter_type: UrlParameterType = UrlParameterType.QUERY
    previous_page_parameter_type: UrlParameterType = UrlParameterType.QUERY
    page_size_parameter_type: UrlParameterType = UrlParameterType.QUERY
    sort_parameter_type: UrlParameterType = UrlParameterType.QUERY
    arguments: dict[str, Any] = Field(default_factory=dict)
    query_parameters: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: UrlSettings | None = None) -> UrlConfig:
        """Create a config from ``UrlSettings`` (global settings by default)."""
        if settings is None:
            settings = get_settings().url
        return cls(**settings.model_dump())

    def with_arguments(self, arguments: Mapping[str, Any]) -> UrlConfig:
        """Return a copy with other static path arguments."""
        return self.model_copy(update={"arguments": dict(arguments)})

    def with_query_parameters(self, parameters: Mapping[str, Any]) -> UrlConfig:
        """Return a copy with other static query parameters."""
        return self.model_copy(update={"query_parameters": dict(parameters)})


def create_url_parameters(
    page_token: PageToken | None,
    page_size: int | str | None,
    sort: str | None,
    config: UrlConfig,
) -> UrlParameters:
    """Build path arguments and query parameters for a pagination or sort URL.

    Static entries from ``config`` come first. Each of the four parameters is
    then written, under its configured name, into the mapping selected by its
    placement. Values that do not apply are written as ``None`` so query
    builders can drop them.

    Parameters
    ----------
    page_token : PageToken or None
        The page to link to. Fills the page parameter when reading forward and
        the previous-page parameter when reading backward.
    page_size : int, str or None
        Copied verbatim.
    sort : str or None
        Order string, copied verbatim.
    config : UrlConfig
        Parameter names and placement.

    Returns
    -------
    tuple[dict, dict]
        ``(arguments, query_parameters)``.
    """
    arguments: dict[str, Any] = dict(config.arguments)
    query_parameters: dict[str, Any] = dict(config.query_parameters)
    targets = {
        UrlParameterType.PATH: arguments,
        UrlParameterType.QUERY: query_parameters,
    }

    next_page = page_token.value if page_token is not None and not page_token.is_previous else None
    previous_page = page_token.value if page_token is not None and page_token.is_previous else None

    targets[config.page_parameter_type][config.page_parameter_name] = next_page
    targets[config.previous_page_parameter_type][config.previous_page_parameter_name] = previous_page
    targets[config.page_size_parameter_type][config.page_size_parameter_name] = page_size
    targets[config.sort_parameter_type][config.sort_parameter_name] = sort

    return arguments, query_parameters


class QueryUrlCreator:
    """Default pagination/sort URL creator.

    Path arguments are appended as ``/name-value`` segments and query
    parameters are URL-encoded. ``None`` values are dropped from both.

    Example:
        QueryUrlCreator("/users")({"page": "2"}, {"sort": "name", "pagesize": None})
        # "/users/page-2?sort=name"
    """

    def __init__(self, base_url: str = "") -> None:
        self.base_url = base_url

    def __call__(self, arguments: Mapping[str, Any], query_parameters: Mapping[str, Any]) -> str:
        url = self.base_url.rstrip("/") if arguments else self.base_url
        for name, value in arguments.items():
            if value is None:
                continue
            url += "/" + quote(str(name), safe="") + "-" + quote(str(value), safe="")
        query = urlencode([(k, str(v)) for k, v in query_parameters.items() if v is not None])
        if query:
            url += "?" + query
        return url


# --- Action column URLs ---


class UrlGenerator(Protocol):
    """Generates a URL for a named route."""

    def __call__(self, route: str, arguments: dict[str, Any], query_parameters: dict[str, Any]) -> str:
        """Return the URL of ``route``."""


class ActionColumnUrlConfig(BaseModel):
    """Per-column options for :class:`ActionColumnUrlCreator`.

    Attributes
    ----------
    primary_key : str, optional
        Row field holding the key; the creator's default when None.
    base_route_name : str, optional
        Route prefix; the current route when None.
    arguments, query_parameters : dict
        Static entries merged into every action URL.
    primary_key_parameter_type : UrlParameterType, optional
        Where the key goes; the creator's default when None.
    """

    model_config = ConfigDict(frozen=True)

    primary_key: str | None = None
    base_route_name: str | None = None
    arguments: dict[str, Any] = Field(default_factory=dict)
    query_parameters: dict[str, Any] = Field(default_factory=dict)
    primary_key_parameter_type: UrlParameterType | None = None


class ActionColumnUrlCreator:
    """Route-based URL creator for action column buttons.

    The route is ``<base route>/<action>`` and the row's primary key is placed
    either in the path arguments or in the query parameters.

    Parameters
    ----------
    url_generator : UrlGenerator
        Callable ``(route, arguments, query_parameters) -> url``.
    current_route : str
        Route used when the column does not name a base route.
    default_primary_key : str
        Row field holding the key.
    default_primary_key_parameter_type : UrlParameterType
        Default placement of the key.
    """

    def __init__(
        self,
        url_generator: UrlGenerator,
        current_route: str = "",
        default_primary_key: str = "id",
        default_primary_key_parameter_type: UrlParameterType = UrlParameterType.QUERY,
    ) -> None:
        self.url_generator = url_generator
        self.current_route = current_route
        self.default_primary_key = default_primary_key
        self.default_primary_key_parameter_type = default_primary_key_parameter_type

    def __call__(self, action: str, context: DataContext) -> str:
        config = getattr(context.column, "url_config", None)
        if config is None:
            config = ActionColumnUrlConfig()
        if not isinstance(config, ActionColumnUrlConfig):
            raise ConfigurationError(
                f"{type(self).__name__} supports {ActionColumnUrlConfig.__name__} only.",
                given=type(config).__name__,
            )

        primary_key = config.primary_key or self.default_primary_key
        placement = config.primary_key_parameter_type or self.default_primary_key_parameter_type
        key_value = get_value(context.data, primary_key, context.key)

        route = f"{config.base_route_name or self.current_route}/{action}"
        arguments = dict(config.arguments)
        query_parameters = dict(config.query_parameters)
        if placement is UrlParameterType.PATH:
            arguments[primary_key] = str(key_value)
        else:
            query_parameters[primary_key] = str(key_value)

        return self.url_generator(route, arguments, query_parameters)
