"""Tests for data readers and page tokens."""

from pydataview.reader import ArrayDataReader, DataReader, PageToken
from pydataview.sort import Sort


class TestPageToken:
    """Tests for PageToken constructors."""

    def test_next(self):
        """next() reads forward."""
        token = PageToken.next("2")
        assert token.value == "2"
        assert token.is_previous is False

    def test_previous(self):
        """previous() reads backward."""
        assert PageToken.previous("abc").is_previous is True


class TestArrayDataReader:
    """Tests for the in-memory reader."""

    def test_list_records_are_keyed_by_position(self, users):
        """A list is keyed by index."""
        reader = ArrayDataReader(users)
        assert [key for key, _ in reader.read()] == [0, 1, 2]
        assert len(reader) == 3

    def test_mapping_records_keep_their_keys(self):
        """A mapping keeps its keys."""
        reader = ArrayDataReader({"x": {"v": 1}, "y": {"v": 2}})
        assert [key for key, _ in reader.read()] == ["x", "y"]

    def test_read_applies_sort(self, users):
        """Rows are returned in sort order."""
        reader = ArrayDataReader(users, sort=Sort.only(["name"]).with_order_string("name"))
        assert [row["name"] for _, row in reader.read()] == ["Ann", "Bob", "Eve"]

    def test_with_sort(self, users):
        """with_sort() returns a new reader."""
        reader = ArrayDataReader(users, sort=Sort.only(["age"]))
        sorted_reader = reader.with_sort(reader.get_sort().with_order_string("-age"))
        assert [row["age"] for _, row in sorted_reader.read()] == [41, 30, 25]
        assert reader.get_sort().get_order() == {}

    def test_satisfies_protocol(self, users):
        """ArrayDataReader is a DataReader."""
        assert isinstance(ArrayDataReader(users), DataReader)
