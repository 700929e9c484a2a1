"""Service layer for Do List."""

from .exceptions import (
    DoListError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

__all__ = [
    'DoListError',
    'NotFoundError',
    'PersistenceError',
    'ValidationError',
]
