"""Data reader interface and an in-memory implementation."""

from __future__ import annotations

import copy

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from .sort import Sort


class PageToken(BaseModel):
    """Opaque pagination cursor.

    ``value`` is a page number for offset pagination or a key for keyset
    pagination; ``is_previous`` tells in which direction the page is read.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    is_previous: bool = False

    @classmethod
    def next(cls, value: str) -> PageToken:
        """Create a token reading forward from value."""
        return cls(value=value, is_previous=False)

    @classmethod
    def previous(cls, value: str) -> PageToken:
        """Create a token reading backward from value."""
        return cls(value=value, is_previous=True)


@runtime_checkable
class DataReader(Protocol):
    """Read-only access to the rows of a grid."""

    def read(self) -> Iterable[tuple[Any, Any]]:
        """Return ``(key, record)`` pairs in display order."""

    def get_sort(self) -> Sort | None:
        """Return the sort applied to the rows, if sorting is supported."""


class ArrayDataReader:
    """Data reader over records held in memory.

    Parameters
    ----------
    records : Mapping or Iterable
        A mapping of key to record, or an iterable of records keyed by
        their position.
    sort : Sort, optional
        Sort applied on :meth:`read`.
    page_token : PageToken, optional
        Current page token, exposed for URL generation.
    page_size : int, optional
        Current page size, exposed for URL generation.
    """

    def __init__(
        self,
        records: Mapping[Any, Any] | Iterable[Any],
        sort: Sort | None = None,
        page_token: PageToken | None = None,
        page_size: int | None = None,
    ) -> None:
        if isinstance(records, Mapping):
            self._items = list(records.items())
        else:
            self._items = list(enumerate(records))
        self._sort = sort
        self.page_token = page_token
        self.page_size = page_size

    def read(self) -> list[tuple[Any, Any]]:
        if self._sort is None or not self._sort.order:
            return list(self._items)
        return self._sort.sort_records(self._items)

    def get_sort(self) -> Sort | None:
        return self._sort

    def with_sort(self, sort: Sort | None) -> ArrayDataReader:
        """Return a reader over the same records with another sort."""
        new = copy.copy(self)
        new._sort = sort
        return new

    def __len__(self) -> int:
        return len(self._items)
