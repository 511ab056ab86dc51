"""Module for providing sequence related assertion helpers"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from hypothesis import strategies as st

from seqlike.interfaces.sequence_like import SequenceLike

# small mixed-type elements; 1 vs "1" vs None must stay distinguishable
elements = st.one_of(st.integers(-50, 50), st.text(max_size=2), st.none())
element_lists = st.lists(elements, max_size=25)


def project(F: SequenceLike, seq: Any) -> list[Any]:  # pylint: disable=invalid-name
    """Canonical projection of ``seq`` to a list."""
    return list(F.to_iterable(seq))


def assert_projects_to(
    F: SequenceLike, seq: Any, expected: Iterable[Any]  # pylint: disable=invalid-name
) -> None:
    """Fails if ``seq`` does not project to exactly ``expected``.

    Compares types as well as values so ``1`` and ``True`` are not confused.
    """
    actual = project(F, seq)
    expected = list(expected)
    assert actual == expected, f"{actual!r} != {expected!r}"
    assert [type(a) for a in actual] == [type(e) for e in expected], (
        f"element types differ: {actual!r} vs {expected!r}"
    )
