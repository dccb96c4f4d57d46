"""Tests for the pydataview exception hierarchy."""

import pytest

from pydataview.exceptions import (
    ConfigurationError,
    DataReaderNotSetError,
    DataViewException,
    EmptyTagNameError,
    MissingCollaboratorError,
    MissingUrlCreatorError,
    UnexpectedColumnTypeError,
)


class _Expected:
    pass


class _Given:
    pass


class TestDataViewException:
    """Tests for the base exception."""

    def test_message_only(self):
        """Without context the message is the string form."""
        error = DataViewException("Something broke")
        assert str(error) == "Something broke"
        assert error.message == "Something broke"
        assert error.context == {}

    def test_context_is_appended(self):
        """Context entries are listed after the message."""
        error = DataViewException("Bad column", column="name", index=3)
        assert str(error) == "Bad column (column='name', index=3)"
        assert error.context == {"column": "name", "index": 3}


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            UnexpectedColumnTypeError(_Expected, _Given),
            EmptyTagNameError(),
            DataReaderNotSetError(),
        ],
    )
    def test_configuration_errors(self, error):
        """Programmer mistakes are configuration errors."""
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, DataViewException)

    def test_missing_url_creator_is_missing_collaborator(self):
        """A missing URL creator is a missing collaborator, not a config error."""
        error = MissingUrlCreatorError("view")
        assert isinstance(error, MissingCollaboratorError)
        assert not isinstance(error, ConfigurationError)


class TestSpecificErrors:
    """Tests for messages and attributes of specific errors."""

    def test_unexpected_column_type_message(self):
        """The message names the expected and given classes."""
        error = UnexpectedColumnTypeError(_Expected, _Given)
        assert error.message == 'Expected "_Expected", but "_Given" given.'
        assert error.expected is _Expected
        assert error.given is _Given

    def test_empty_tag_name_default_message(self):
        """Empty tag name error has a default message."""
        assert str(EmptyTagNameError()) == "Tag name cannot be empty."

    def test_data_reader_not_set_default_message(self):
        """Data reader error has a default message."""
        assert "data reader is not set" in str(DataReaderNotSetError())

    def test_missing_url_creator_keeps_action(self):
        """The action is available as an attribute and in the context."""
        error = MissingUrlCreatorError("delete", column="ActionColumn")
        assert error.action == "delete"
        assert "action='delete'" in str(error)
        assert "column='ActionColumn'" in str(error)
