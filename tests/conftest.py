"""Pytest configuration and fixtures."""

from __future__ import annotations

import os

from typing import TYPE_CHECKING

import pytest

from pydataview import log
from pydataview.column import Cell, DataContext, HeaderContext, SortableOptions
from pydataview.config import clear_settings
from pydataview.sort import Sort
from pydataview.url import QueryUrlCreator


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """Run every test without PYDATAVIEW_* variables or config files."""
    for key in list(os.environ):
        if key.startswith("PYDATAVIEW_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    clear_settings()
    log.reset_logger()
    yield
    clear_settings()
    log.reset_logger()


@pytest.fixture
def users() -> list[dict[str, object]]:
    """Three user records keyed by position."""
    return [
        {"id": 1, "name": "Bob", "age": 30},
        {"id": 2, "name": "Ann", "age": 25},
        {"id": 7, "name": "Eve", "age": 41},
    ]


@pytest.fixture
def sortable_options() -> SortableOptions:
    """Header decoration with a distinct value per state."""
    return SortableOptions(
        header_class="sortable",
        header_prepend="[",
        header_append="]",
        header_asc_class="sorted-asc",
        header_asc_prepend="^",
        header_asc_append="",
        header_desc_class="sorted-desc",
        header_desc_prepend="v",
        header_desc_append="",
    )


@pytest.fixture
def make_header_context(sortable_options: SortableOptions):
    """Build a header context over a sort of ``name``, ``age`` and ``created``."""

    def factory(order: str = "", multi_sort: bool = False, **options) -> HeaderContext:
        sort = Sort.only(["name", "age", "created"]).with_order_string(order)
        defaults = {
            "sort": sort,
            "original_sort": Sort.only(["name", "age", "created"]),
            "sortable": sortable_options,
            "page_size": 20,
            "multi_sort": multi_sort,
            "url_creator": QueryUrlCreator("/list"),
        }
        defaults.update(options)
        return HeaderContext(**defaults)

    return factory


@pytest.fixture
def make_data_context():
    """Build a data context for a column and a row."""

    def factory(column, data, key=0, index=0) -> DataContext:
        return DataContext(column=column, data=data, key=key, index=index)

    return factory


@pytest.fixture
def cell() -> Cell:
    """An empty cell."""
    return Cell()
