"""Exceptions for sequence backend operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .sequence_like import Operation


class SequenceLikeError(Exception):
    """Base class for sequence backend errors."""


class UnsupportedOperationError(SequenceLikeError):
    """A backend was asked for an operation it declares as unsupported.

    Attributes:
        backend (str): Name of the backend class (e.g. "ChunkBackend").
        operation (Operation): The operation that is not available.
    """

    def __init__(self, backend: str, operation: Operation):
        super().__init__(
            f"Operation '{operation.value}' is not supported by backend '{backend}'."
        )
        self.backend = backend
        self.operation = operation
