"""Tests for DataColumn and DataColumnRenderer."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from pydataview.column import DataColumn, DataColumnRenderer, GlobalContext, SerialColumn
from pydataview.exceptions import UnexpectedColumnTypeError


@pytest.fixture
def renderer() -> DataColumnRenderer:
    """Renderer with a fixed date format."""
    return DataColumnRenderer(date_time_format="%Y-%m-%d %H:%M")


class TestHeader:
    """Tests for header cells."""

    def test_sortable_header_end_to_end(self, renderer, make_header_context, cell):
        """An unsorted sortable header links to sorting ascending."""
        column = DataColumn(property="name", header="Name")
        result = renderer.render_header(column, cell, make_header_context())
        assert result.attributes == {"class": "sortable"}
        assert result.encode is False
        assert result.content == ('[<a href="/list?pagesize=20&amp;sort=name">Name</a>]',)

    def test_default_label(self, renderer, make_header_context, cell):
        """The property is capitalized when no header is set."""
        column = DataColumn(property="created_at", with_sorting=False)
        assert renderer.render_header(column, cell, make_header_context()).content == ("Created_at",)

    def test_header_is_escaped(self, renderer, make_header_context, cell):
        """Headers are escaped unless encode_header is off."""
        context = make_header_context()
        escaped = renderer.render_header(DataColumn(header="<b>A</b>"), cell, context)
        raw = renderer.render_header(DataColumn(header="<b>A</b>", encode_header=False), cell, context)
        assert escaped.content == ("&lt;b&gt;A&lt;/b&gt;",)
        assert raw.content == ("<b>A</b>",)

    def test_not_sortable_property(self, renderer, make_header_context, cell):
        """Properties outside the sort config are plain labels."""
        column = DataColumn(property="email")
        result = renderer.render_header(column, cell, make_header_context())
        assert result.content == ("Email",)
        assert "class" not in result.attributes

    def test_header_attributes(self, renderer, make_header_context, cell):
        """Header attributes are added to the cell."""
        column = DataColumn(property="email", header_attributes={"scope": "col"})
        assert renderer.render_header(column, cell, make_header_context()).attributes == {"scope": "col"}

    def test_sorted_header(self, renderer, make_header_context, cell):
        """A descending header links back to the unsorted state."""
        column = DataColumn(property="age")
        result = renderer.render_header(column, cell, make_header_context("-age"))
        assert result.content == ('v<a class="desc" href="/list?pagesize=20">Age</a>',)
        assert result.attributes == {"class": "sorted-desc"}

    def test_override_field(self, renderer, make_header_context, cell):
        """Columns sorting by another field link with their property name."""
        column = DataColumn(property="title", field="name")
        context = make_header_context(override_order_fields=column.get_override_order_fields())
        result = renderer.render_header(column, cell, context)
        assert "sort=title" in result.content[0]


class TestBody:
    """Tests for body cells."""

    def test_value_is_escaped(self, renderer, make_data_context, cell):
        """Row values are escaped."""
        column = DataColumn(property="name")
        result = renderer.render_body(column, cell, make_data_context(column, {"name": "<Ann>"}))
        assert result.content == ("&lt;Ann&gt;",)
        assert result.encode is False

    def test_dotted_path_and_objects(self, renderer, make_data_context, cell):
        """Dotted paths read nested mappings and attributes."""

        class Profile:
            city = "Oslo"

        column = DataColumn(property="user.profile.city")
        data = {"user": {"profile": Profile()}}
        assert renderer.render_body(column, cell, make_data_context(column, data)).content == ("Oslo",)

    def test_none_is_empty(self, renderer, make_data_context, cell):
        """None values render as empty strings."""
        column = DataColumn(property="name")
        assert renderer.render_body(column, cell, make_data_context(column, {"name": None})).content == ("",)

    @pytest.mark.parametrize(("value", "expected"), [(False, ""), (True, "1"), (0, "0")])
    def test_booleans(self, renderer, make_data_context, cell, value, expected):
        """False renders empty and True renders as 1; other falsy values are kept."""
        column = DataColumn(property="active")
        assert renderer.render_body(column, cell, make_data_context(column, {"active": value})).content == (expected,)

    def test_dates(self, renderer, make_data_context, cell):
        """Dates use the column format, then the renderer format."""
        moment = datetime(2024, 5, 17, 9, 30)
        column = DataColumn(property="at")
        custom = DataColumn(property="at", date_time_format="%d.%m.%Y")
        assert renderer.render_body(column, cell, make_data_context(column, {"at": moment})).content == ("2024-05-17 09:30",)
        assert renderer.render_body(custom, cell, make_data_context(custom, {"at": date(2024, 5, 17)})).content == (
            "17.05.2024",
        )

    def test_content_override(self, renderer, make_data_context, cell):
        """Content callables receive the row and context and are not escaped."""
        column = DataColumn(property="name", content=lambda data, context: f"<b>{data['name']}</b>#{context.index}")
        result = renderer.render_body(column, cell, make_data_context(column, {"name": "Ann"}, index=2))
        assert result.content == ("<b>Ann</b>#2",)

    def test_literal_content(self, renderer, make_data_context, cell):
        """Literal content replaces the value."""
        column = DataColumn(property="name", content="n/a")
        assert renderer.render_body(column, cell, make_data_context(column, {"name": "Ann"})).content == ("n/a",)

    def test_computed_body_attributes(self, renderer, make_data_context, cell):
        """Body attributes can be computed from the row."""
        column = DataColumn(property="age", body_attributes=lambda data, context: {"class": "old" if data["age"] > 40 else "young"})
        result = renderer.render_body(column, cell, make_data_context(column, {"age": 41}))
        assert result.attributes == {"class": "old"}

    def test_no_property(self, renderer, make_data_context, cell):
        """A column without property or content is empty."""
        column = DataColumn()
        assert renderer.render_body(column, cell, make_data_context(column, {})).is_empty_content()


class TestColumnAndFooter:
    """Tests for column and footer cells."""

    def test_column_attributes(self, renderer, cell):
        """Column attributes go to the <col> cell."""
        column = DataColumn(column_attributes={"style": "width: 10%"})
        assert renderer.render_column(column, cell, GlobalContext()).attributes == {"style": "width: 10%"}

    def test_footer(self, renderer, cell):
        """Footer content and attributes are applied."""
        column = DataColumn(footer="Total", footer_attributes={"class": "sum"})
        result = renderer.render_footer(column, cell, GlobalContext())
        assert result.content == ("Total",)
        assert result.attributes == {"class": "sum"}

    def test_no_footer(self, renderer, cell):
        """Without a footer the cell is unchanged."""
        assert renderer.render_footer(DataColumn(), cell, GlobalContext()).content == ()


class TestColumnType:
    """Tests for the column type check."""

    def test_wrong_column(self, renderer, cell):
        """Other column kinds are rejected."""
        with pytest.raises(UnexpectedColumnTypeError, match='Expected "DataColumn", but "SerialColumn" given.'):
            renderer.render_column(SerialColumn(), cell, GlobalContext())

    def test_default_date_format_from_settings(self, monkeypatch):
        """The renderer default comes from GridSettings."""
        monkeypatch.setenv("PYDATAVIEW_GRID__DATE_TIME_FORMAT", "%Y")
        assert DataColumnRenderer().date_time_format == "%Y"

    def test_get_renderer(self):
        """Data columns are drawn by DataColumnRenderer."""
        assert DataColumn().get_renderer() is DataColumnRenderer

    def test_override_order_fields(self):
        """Only differing fields are overrides."""
        assert DataColumn(property="a", field="b").get_override_order_fields() == {"a": "b"}
        assert DataColumn(property="a", field="a").get_override_order_fields() == {}
        assert DataColumn(property="a").get_override_order_fields() == {}
