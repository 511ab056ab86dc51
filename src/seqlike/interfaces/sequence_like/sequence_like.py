"""Capability interface for immutable sequence backends.

Defines the `SequenceLike` abstraction: a fixed set of pure operations that a
concrete sequence representation (contiguous array, linked list, chunk tree)
binds to its own type. Generic algorithms and the conformance harness are
written once against this contract and run unchanged against every backend.

All operations return new values and never mutate their inputs. Numeric
arguments are clamped rather than rejected: ``take(-10)`` is empty,
``drop(10)`` on a four element sequence is empty, and so on.
"""

from __future__ import annotations

import abc
import enum
import math
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from .errors import UnsupportedOperationError

S = TypeVar("S")


class Operation(str, enum.Enum):
    """Names of the operations in the capability contract."""

    FROM_ITERABLE = "from_iterable"
    TO_ITERABLE = "to_iterable"
    TAKE = "take"
    DROP = "drop"
    REVERSE = "reverse"
    PREPEND = "prepend"
    PREPEND_ALL = "prepend_all"
    CONCAT = "concat"


def clamp(n: float, length: int) -> int:
    """Floor a requested count and clamp it into ``[0, length]``.

    Fractional counts round down, NaN counts as zero and infinities clamp to
    the nearest bound.
    """
    if not n > 0:
        return 0
    if n >= length:
        return length
    return math.floor(n)


class SequenceLike(abc.ABC, Generic[S]):
    """Contract for an immutable sequence backend.

    One instance binds a concrete sequence type ``S`` to the operations below.
    Instances hold no state, so a single module-level instance per backend is
    shared by the whole process.

    Subclasses may list operations they do not provide in
    ``unsupported_operations``; those raise `UnsupportedOperationError`
    through `unsupported()` instead of returning a value.
    """

    unsupported_operations: ClassVar[frozenset[Operation]] = frozenset()

    @property
    def name(self) -> str:
        """Human-readable backend name, used in error messages."""
        return type(self).__name__

    def supports(self, operation: Operation) -> bool:
        """Return True if the backend implements ``operation``."""
        return operation not in self.unsupported_operations

    def unsupported(self, operation: Operation) -> UnsupportedOperationError:
        """Build the error raised when an unsupported operation is called."""
        return UnsupportedOperationError(self.name, operation)

    # --- Construction / Observation ---

    @abc.abstractmethod
    def from_iterable(self, source: Iterable[Any]) -> S:
        """Build a sequence from a finite ordered source.

        Args:
            source: Any finite iterable; it is consumed exactly once.

        Returns:
            S: A sequence whose projection reproduces ``source`` in order.
        """

    @abc.abstractmethod
    def to_iterable(self, seq: S) -> Iterable[Any]:
        """Project a sequence to its canonical ordered form.

        Used for observation and comparison only. The returned iterable can be
        enumerated any number of times.
        """

    # --- Transformations ---

    @abc.abstractmethod
    def take(self, seq: S, n: float) -> S:
        """Keep the first ``max(0, min(n, len(seq)))`` elements."""

    @abc.abstractmethod
    def drop(self, seq: S, n: float) -> S:
        """Remove the first ``max(0, min(n, len(seq)))`` elements."""

    @abc.abstractmethod
    def reverse(self, seq: S) -> S:
        """Return the elements in reverse order."""

    @abc.abstractmethod
    def prepend(self, seq: S, element: Any) -> S:
        """Insert ``element`` at index 0."""

    @abc.abstractmethod
    def prepend_all(self, seq: S, prefix: S) -> S:
        """Return ``prefix`` followed by ``seq``."""

    @abc.abstractmethod
    def concat(self, seq: S, suffix: S) -> S:
        """Return ``seq`` followed by ``suffix``."""
