"""Exceptions raised by the conformance harness."""

from __future__ import annotations

from typing import Any

# pylint: disable=too-many-arguments


class ConformanceError(AssertionError):
    """A backend produced a result different from the expected sequence.

    Attributes:
        label (str): Backend label (e.g. "chunk").
        check (str): Name of the failing check (e.g. "take_out_of_bounds").
        index (int | None): First differing position, or None when only the
            lengths differ.
        actual (tuple): The projected result.
        expected (tuple): The expected sequence.
        detail (str): The failure description without the label prefix.
    """

    def __init__(
        self,
        *,
        label: str,
        check: str,
        index: int | None,
        actual: tuple[Any, ...],
        expected: tuple[Any, ...],
    ):
        if index is None:
            detail = f"length {len(actual)} != expected length {len(expected)}"
        else:
            detail = (
                f"element {index}: {actual[index]!r} != expected {expected[index]!r}"
            )
        self.detail = (
            f"{detail} (got {list(actual)!r}, expected {list(expected)!r})"
        )
        super().__init__(f"[{label}] {check}: {self.detail}")
        self.label = label
        self.check = check
        self.index = index
        self.actual = actual
        self.expected = expected
