"""Persistent singly-linked list backend.

A list is either `Nil` (the shared empty list) or a `Cons` cell holding a head
element and a tail list. Cells are immutable, so transformations share
structure freely: ``drop`` returns an existing tail, ``prepend`` allocates a
single cell, ``prepend_all`` copies only the prefix.

Every walk over the cells is a loop rather than recursion, so lists longer
than the interpreter's recursion limit are fine.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, Union

from seqlike.interfaces.sequence_like import SequenceLike, clamp

__all__ = ["Cons", "LinkedList", "ListBackend", "Nil", "NIL"]


class _ListBase:
    """Shared behaviour of `Nil` and `Cons`."""

    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        node = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ListBase):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a is b or a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"List({', '.join(repr(a) for a in self)})"

    def __len__(self) -> int:
        raise NotImplementedError  # pragma: no cover


class Nil(_ListBase):
    """The empty list. Use the `NIL` singleton."""

    __slots__ = ()

    def __len__(self) -> int:
        return 0


NIL = Nil()


class Cons(_ListBase):
    """A non-empty list cell.

    Attributes:
        head: First element.
        tail: The rest of the list.
    """

    __slots__ = ("head", "tail", "_length")

    def __init__(self, head: Any, tail: LinkedList) -> None:
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "tail", tail)
        object.__setattr__(self, "_length", len(tail) + 1)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return self._length


LinkedList = Union[Cons, Nil]


def _prepend_reversed(items: Iterable[Any], tail: LinkedList) -> LinkedList:
    """Cons each item of ``items`` onto ``tail``; the last item ends up first."""
    out = tail
    for item in items:
        out = Cons(item, out)
    return out


class ListBackend(SequenceLike[LinkedList]):
    """`SequenceLike` over persistent linked lists.

    O(1) ``prepend`` and ``drop`` sharing; ``take``, ``reverse`` and
    ``concat`` copy the cells they rebuild.
    """

    def from_iterable(self, source: Iterable[Any]) -> LinkedList:
        return _prepend_reversed(reversed(tuple(source)), NIL)

    def to_iterable(self, seq: LinkedList) -> tuple[Any, ...]:
        return tuple(seq)

    def take(self, seq: LinkedList, n: float) -> LinkedList:
        count = clamp(n, len(seq))
        if count == len(seq):
            return seq
        return _prepend_reversed(reversed(tuple(islice(seq, count))), NIL)

    def drop(self, seq: LinkedList, n: float) -> LinkedList:
        node = seq
        for _ in range(clamp(n, len(seq))):
            assert isinstance(node, Cons)
            node = node.tail
        return node

    def reverse(self, seq: LinkedList) -> LinkedList:
        return _prepend_reversed(seq, NIL)

    def prepend(self, seq: LinkedList, element: Any) -> LinkedList:
        return Cons(element, seq)

    def prepend_all(self, seq: LinkedList, prefix: LinkedList) -> LinkedList:
        if not len(seq):
            return prefix
        return _prepend_reversed(reversed(tuple(prefix)), seq)

    def concat(self, seq: LinkedList, suffix: LinkedList) -> LinkedList:
        return self.prepend_all(suffix, seq)
