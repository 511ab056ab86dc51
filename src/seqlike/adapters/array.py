"""Contiguous, tuple-backed sequence backend.

Tuples are already immutable and ordered, so the backend is a thin binding:
``to_iterable`` is the identity and slicing already clamps out-of-range bounds
the way the contract requires (negative counts are clamped explicitly, since a
negative slice bound would count from the end).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from seqlike.interfaces.sequence_like import SequenceLike, clamp

__all__ = ["ArrayBackend"]


class ArrayBackend(SequenceLike[tuple[Any, ...]]):
    """`SequenceLike` over plain tuples.

    Cheap indexed access and slicing; ``prepend`` and ``concat`` copy.
    """

    def from_iterable(self, source: Iterable[Any]) -> tuple[Any, ...]:
        return tuple(source)

    def to_iterable(self, seq: tuple[Any, ...]) -> tuple[Any, ...]:
        return seq

    def take(self, seq: tuple[Any, ...], n: float) -> tuple[Any, ...]:
        return seq[: clamp(n, len(seq))]

    def drop(self, seq: tuple[Any, ...], n: float) -> tuple[Any, ...]:
        return seq[clamp(n, len(seq)) :]

    def reverse(self, seq: tuple[Any, ...]) -> tuple[Any, ...]:
        return seq[::-1]

    def prepend(self, seq: tuple[Any, ...], element: Any) -> tuple[Any, ...]:
        return (element, *seq)

    def prepend_all(
        self, seq: tuple[Any, ...], prefix: tuple[Any, ...]
    ) -> tuple[Any, ...]:
        return prefix + seq

    def concat(self, seq: tuple[Any, ...], suffix: tuple[Any, ...]) -> tuple[Any, ...]:
        return seq + suffix
