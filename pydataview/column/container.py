"""Lazily built, configurable registry of column renderers."""

from __future__ import annotations

import copy
import inspect
import typing

from collections.abc import Mapping
from typing import Any, TypeVar

from ..log import debug
from .base import ColumnRenderer


RendererT = TypeVar("RendererT", bound=ColumnRenderer)


class RendererContainer:
    """Creates renderer instances on first use and caches them.

    Constructor arguments come from two places:

    - per-class configs added with :meth:`add_configs`
    - the ``dependencies`` map, used for constructor parameters whose
      annotated type is registered there and that are not configured

    The cache is not thread-safe. Build one container per thread, or guard
    it externally.

    Parameters
    ----------
    dependencies : Mapping[type, Any], optional
        Objects injected into renderer constructors by annotated type.

    Example:
        container = RendererContainer({ActionColumnUrlCreator: url_creator})
        container = container.add_configs({DataColumnRenderer: {"date_time_format": "%d.%m.%Y"}})
        container.get(DataColumnRenderer) is container.get(DataColumnRenderer)  # True
    """

    def __init__(self, dependencies: Mapping[type, Any] | None = None) -> None:
        self._dependencies: dict[type, Any] = dict(dependencies or {})
        self._configs: dict[type, dict[str, Any]] = {}
        self._cache: dict[type, ColumnRenderer] = {}

    def get(self, renderer_class: type[RendererT]) -> RendererT:
        """Return the renderer instance for a class, building it if needed.

        Errors raised by the renderer constructor propagate unchanged.
        """
        if renderer_class not in self._cache:
            self._cache[renderer_class] = self._make(renderer_class)
            debug(f"Created renderer {renderer_class.__name__}")
        return self._cache[renderer_class]  # type: ignore[return-value]

    def add_configs(self, configs: Mapping[type, Mapping[str, Any]]) -> RendererContainer:
        """Return a copy with constructor arguments merged in.

        For each class named in ``configs`` the new arguments are merged over
        the existing ones and its cached instance is dropped. Other classes
        keep their cached instances. The receiver is not modified.
        """
        new = copy.copy(self)
        new._configs = dict(self._configs)
        new._cache = dict(self._cache)
        for renderer_class, config in configs.items():
            new._configs[renderer_class] = {**new._configs.get(renderer_class, {}), **config}
            if new._cache.pop(renderer_class, None) is not None:
                debug(f"Evicted cached renderer {renderer_class.__name__}")
        return new

    def get_config(self, renderer_class: type) -> dict[str, Any]:
        """Return a copy of the constructor arguments configured for a class."""
        return dict(self._configs.get(renderer_class, {}))

    def _make(self, renderer_class: type[RendererT]) -> RendererT:
        kwargs = dict(self._configs.get(renderer_class, {}))
        if self._dependencies:
            hints = typing.get_type_hints(renderer_class.__init__)
            for name in inspect.signature(renderer_class).parameters:
                if name in kwargs or name not in hints:
                    continue
                dependency = self._find_dependency(hints[name])
                if dependency is not None:
                    kwargs[name] = dependency
        return renderer_class(**kwargs)

    def _find_dependency(self, hint: Any) -> Any:
        if isinstance(hint, type) and hint in self._dependencies:
            return self._dependencies[hint]
        # Optional[X], X | Y
        for arg in typing.get_args(hint):
            if isinstance(arg, type) and arg in self._dependencies:
                return self._dependencies[arg]
        return None
