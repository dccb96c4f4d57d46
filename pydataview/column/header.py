"""Header rendering context and sortable header links."""

from __future__ import annotations

from pydantic import Field

from ..html import Anchor
from ..log import debug
from ..sort import Direction, order_dict_to_string
from ..url import create_url_parameters
from .base import Cell, GlobalContext


class HeaderContext(GlobalContext):
    """Global context extended with what header cells need for sorting.

    Attributes
    ----------
    override_order_fields : dict[str, str]
        Maps a column property to the field the reader sorts by, for columns
        whose displayed property differs from the sortable field.
    """

    override_order_fields: dict[str, str] = Field(default_factory=dict)

    def prepare_sortable(self, cell: Cell, property: str) -> tuple[Cell, Anchor | None, str, str]:  # pylint: disable=redefined-builtin
        """Decorate a header cell of a sortable property and build its link.

        Parameters
        ----------
        cell : Cell
            The header cell.
        property : str
            The column property.

        Returns
        -------
        tuple
            ``(cell, link, prepend, append)``. When the property cannot be
            sorted the cell is returned as is, with no link and empty
            decoration.
        """
        field = self.override_order_fields.get(property, property)
        if self.sort is None or self.original_sort is None or not self.sort.has_field_in_config(field):
            return cell, None, "", ""

        options = self.sortable
        link = Anchor(attributes=options.link_attributes)
        current = self.sort.get_order().get(field)
        if current is None:
            cell = cell.add_class(options.header_class)
            prepend, append = options.header_prepend, options.header_append
        elif current == "asc":
            cell = cell.add_class(options.header_asc_class)
            prepend, append = options.header_asc_prepend, options.header_asc_append
            link = link.add_class(options.link_asc_class)
        else:
            cell = cell.add_class(options.header_desc_class)
            prepend, append = options.header_desc_prepend, options.header_desc_append
            link = link.add_class(options.link_desc_class)

        next_sort = self.next_sort_value(property)
        if self.url_creator is None:
            url = "#"
        else:
            url = self.url_creator(*create_url_parameters(None, self.page_size, next_sort, self.url_config))
        debug(f"Sort link for {property!r}: order={current!r} next={next_sort!r} url={url!r}")

        return cell, link.with_url(url), prepend, append

    def next_sort_value(self, property: str) -> str | None:  # pylint: disable=redefined-builtin
        """Return the sort string a click on the property's header should apply.

        - unsorted: sort ascending, appended to the current order in
          multi-sort mode, replacing it otherwise
        - ascending: sort descending, in place in multi-sort mode, replacing
          the order otherwise
        - descending: remove the property from the order

        Returns None when the resulting order is empty. The property name is
        used in the result even when the reader sorts by an override field.
        """
        if self.sort is None:
            return None
        field = self.override_order_fields.get(property, property)
        order: dict[str, Direction] = self.sort.get_order()
        current = order.get(field)

        if current is None:
            if self.multi_sort:
                order[field] = "asc"
            else:
                order = {field: "asc"}
        elif current == "asc":
            if self.multi_sort:
                order[field] = "desc"
            else:
                order = {field: "desc"}
        else:
            del order[field]

        result = self.sort.with_order(order).get_order()
        if not result:
            return None
        if field != property:
            result = {property if name == field else name: direction for name, direction in result.items()}
        return order_dict_to_string(result)
