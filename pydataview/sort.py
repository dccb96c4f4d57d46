"""Sort specification shared by data readers and sortable headers.

A :class:`Sort` holds two things:

- the *config* (``properties``): which properties may be sorted at all
- the *order*: the properties currently sorted and their direction, in
  precedence order

Its canonical string form joins properties with commas and prefixes
descending ones with ``-``, e.g. ``"name,-created_at"``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .values import get_value


Direction = Literal["asc", "desc"]

DESC_PREFIX = "-"


def order_string_to_dict(value: str) -> dict[str, Direction]:
    """Parse an order string such as ``"name,-age"``.

    Blank entries are skipped; a property repeated later overrides the earlier
    entry but keeps its first position.
    """
    order: dict[str, Direction] = {}
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if part.startswith(DESC_PREFIX):
            name = part[len(DESC_PREFIX) :].strip()
            if name:
                order[name] = "desc"
        else:
            order[part] = "asc"
    return order


def order_dict_to_string(order: Mapping[str, str]) -> str:
    """Serialize an order mapping to its canonical string form."""
    return ",".join(
        f"{DESC_PREFIX}{name}" if direction == "desc" else name for name, direction in order.items()
    )


class Sort(BaseModel):
    """Immutable sort specification.

    Use :meth:`only` to reject properties that are not in the config, or
    :meth:`any` to keep them in the order while still tracking which
    properties are sortable by headers.

    Example:
        sort = Sort.only(["name", "age"]).with_order_string("-age")
        sort.get_order()          # {"age": "desc"}
        sort.order_as_string()    # "-age"
    """

    model_config = ConfigDict(frozen=True)

    properties: tuple[str, ...] = ()
    order: dict[str, Direction] = Field(default_factory=dict)
    ignore_extra_fields: bool = True

    @classmethod
    def only(cls, config: Iterable[str]) -> Sort:
        """Create a sort that accepts only the configured properties."""
        return cls(properties=tuple(config), ignore_extra_fields=True)

    @classmethod
    def any(cls, config: Iterable[str] = ()) -> Sort:
        """Create a sort that accepts any property in its order."""
        return cls(properties=tuple(config), ignore_extra_fields=False)

    def has_field_in_config(self, name: str) -> bool:
        """Return True if the property is sortable."""
        return name in self.properties

    def get_order(self) -> dict[str, Direction]:
        """Return a copy of the current order."""
        return dict(self.order)

    def with_order(self, order: Mapping[str, str]) -> Sort:
        """Return a copy with another order.

        Directions other than ``"desc"`` are read as ``"asc"``. With
        ``only()`` sorts, properties outside the config are dropped.
        """
        normalized: dict[str, Direction] = {}
        for name, direction in order.items():
            if self.ignore_extra_fields and name not in self.properties:
                continue
            normalized[name] = "desc" if str(direction).lower() == "desc" else "asc"
        return self.model_copy(update={"order": normalized})

    def with_order_string(self, value: str) -> Sort:
        """Return a copy with the order parsed from its string form."""
        return self.with_order(order_string_to_dict(value))

    def order_as_string(self) -> str:
        """Return the order in its canonical string form."""
        return order_dict_to_string(self.order)

    def sort_records(self, records: list[tuple[object, object]]) -> list[tuple[object, object]]:
        """Sort ``(key, record)`` pairs by the current order.

        Applies a stable sort per property from the lowest precedence to the
        highest. ``None`` values sort first in ascending order.
        """
        result = list(records)
        for name, direction in reversed(list(self.order.items())):
            result.sort(
                key=lambda item, prop=name: _sort_key(get_value(item[1], prop)),
                reverse=direction == "desc",
            )
        return result


def _sort_key(value: object) -> tuple[bool, object]:
    return (value is not None, value if value is not None else 0)
