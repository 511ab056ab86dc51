"""Data-last forms of the capability operations.

Each helper takes the backend first and returns a one-argument function over a
sequence, so pipelines can be written with `pipe`:

    pipe(F.from_iterable([1, 2, 3, 4]), take(F, 2), to_list(F))  # [1, 2]

The helpers are backend-agnostic: the same pipeline runs against any
`SequenceLike` instance.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from seqlike.interfaces.sequence_like import SequenceLike

S = TypeVar("S")


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread ``value`` through ``fns`` from left to right."""
    for fn in fns:
        value = fn(value)
    return value


def take(F: SequenceLike[S], n: float) -> Callable[[S], S]:  # pylint: disable=invalid-name
    """Curried `SequenceLike.take`."""
    return lambda seq: F.take(seq, n)


def drop(F: SequenceLike[S], n: float) -> Callable[[S], S]:  # pylint: disable=invalid-name
    """Curried `SequenceLike.drop`."""
    return lambda seq: F.drop(seq, n)


def reverse(F: SequenceLike[S]) -> Callable[[S], S]:  # pylint: disable=invalid-name
    """Curried `SequenceLike.reverse`."""
    return F.reverse


def prepend(F: SequenceLike[S], element: Any) -> Callable[[S], S]:  # pylint: disable=invalid-name
    """Curried `SequenceLike.prepend`."""
    return lambda seq: F.prepend(seq, element)


def prepend_all(F: SequenceLike[S], prefix: S) -> Callable[[S], S]:  # pylint: disable=invalid-name
    """Curried `SequenceLike.prepend_all`."""
    return lambda seq: F.prepend_all(seq, prefix)


def concat(F: SequenceLike[S], suffix: S) -> Callable[[S], S]:  # pylint: disable=invalid-name
    """Curried `SequenceLike.concat`."""
    return lambda seq: F.concat(seq, suffix)


def to_list(F: SequenceLike[S]) -> Callable[[S], list[Any]]:  # pylint: disable=invalid-name
    """Project a sequence to a plain list through ``F.to_iterable``."""
    return lambda seq: list(F.to_iterable(seq))
