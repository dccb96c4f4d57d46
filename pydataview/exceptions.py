"""pydataview exception hierarchy.

All pydataview-specific exceptions inherit from DataViewException, enabling
catch-all handling while supporting specific error types.
"""

from __future__ import annotations

from typing import Any


class DataViewException(Exception):
    """Base exception for all pydataview errors."""

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize pydataview exception.

        Parameters
        ----------
        message : str
            Human-readable error message.
        **context : Any
            Additional context (column, action, renderer, etc.).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Format exception with context."""
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class ConfigurationError(DataViewException):
    """Invalid grid or column configuration.

    Raised for programmer mistakes that are detected while rendering.
    These are never retried.
    """


class UnexpectedColumnTypeError(ConfigurationError):
    """A renderer received a column of the wrong kind.

    Raised when a column definition is paired with a renderer that was
    written for a different column class.
    """

    def __init__(self, expected: type, given: type, **context: Any) -> None:
        """Initialize column type error.

        Parameters
        ----------
        expected : type
            The column class the renderer supports.
        given : type
            The column class actually passed in.
        **context : Any
            Additional context.
        """
        super().__init__(
            f'Expected "{expected.__qualname__}", but "{given.__qualname__}" given.',
            expected=expected.__qualname__,
            given=given.__qualname__,
            **context,
        )
        self.expected = expected
        self.given = given


class EmptyTagNameError(ConfigurationError):
    """A tag name is required but an empty one was configured."""

    def __init__(self, message: str = "Tag name cannot be empty.", **context: Any) -> None:
        """Initialize empty tag name error.

        Parameters
        ----------
        message : str
            Human-readable error message.
        **context : Any
            Additional context.
        """
        super().__init__(message, **context)


class DataReaderNotSetError(ConfigurationError):
    """A grid was rendered without a data reader."""

    def __init__(self, message: str = "Failed to create widget because data reader is not set.", **context: Any) -> None:
        """Initialize data reader error.

        Parameters
        ----------
        message : str
            Human-readable error message.
        **context : Any
            Additional context.
        """
        super().__init__(message, **context)


class MissingCollaboratorError(DataViewException):
    """A collaborator needed for rendering was not configured."""


class MissingUrlCreatorError(MissingCollaboratorError):
    """An action URL was requested but no URL creator is configured.

    Raised lazily, only when a visible button actually needs a URL.
    Neither the column nor its renderer provided a URL creator.
    """

    def __init__(self, action: str, **context: Any) -> None:
        """Initialize missing URL creator error.

        Parameters
        ----------
        action : str
            The action whose URL could not be created.
        **context : Any
            Additional context.
        """
        super().__init__(
            "Action column URL creator is not set. Configure it on the column or on the renderer.",
            action=action,
            **context,
        )
        self.action = action
