"""Ordered sequence comparison used by the conformance harness."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .errors import ConformanceError


def same_element(a: Any, b: Any) -> bool:
    """Return True if ``a`` and ``b`` are equal and of the same type.

    ``1``, ``1.0`` and ``True`` compare equal in Python but are different
    elements in a mixed-type sequence. An element always matches itself, so
    ``nan`` survives a round-trip the way it does in list equality.
    """
    return a is b or (type(a) is type(b) and a == b)


def first_difference(actual: tuple[Any, ...], expected: tuple[Any, ...]) -> int | None:
    """Return the first index where the sequences differ.

    Returns ``None`` when they agree on their common prefix, in which case
    they are equal exactly when their lengths match.
    """
    for i, (a, b) in enumerate(zip(actual, expected)):
        if not same_element(a, b):
            return i
    return None


def assert_same_sequence(
    actual: Iterable[Any], expected: Iterable[Any], *, label: str, check: str
) -> None:
    """Assert element-wise, order- and length-sensitive equality.

    Args:
        actual: The projected result (typically ``F.to_iterable(seq)``).
        expected: The expected elements, in order.
        label: Backend label, reported on failure.
        check: Check name, reported on failure.

    Raises:
        ConformanceError: If the sequences differ in length or in any element.
    """
    actual_t, expected_t = tuple(actual), tuple(expected)
    index = first_difference(actual_t, expected_t)
    if index is None and len(actual_t) == len(expected_t):
        return
    raise ConformanceError(
        label=label, check=check, index=index, actual=actual_t, expected=expected_t
    )
