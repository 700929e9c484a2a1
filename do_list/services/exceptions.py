"""Custom exceptions for the task-state layer."""


class DoListError(Exception):
    """Base exception for all task list errors."""

    pass


class ValidationError(DoListError):
    """Exception raised when a title is empty or an argument is invalid."""

    pass


class NotFoundError(DoListError):
    """Exception raised when an operation references an unknown task id."""

    pass


class PersistenceError(DoListError):
    """Exception raised when the task collection cannot be read or written."""

    pass
