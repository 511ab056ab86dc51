"""Chunked, tree-shaped sequence backend.

A `Chunk` is an immutable tree whose nodes are one of:

- ``_Empty``: no elements.
- ``_Singleton``: exactly one element.
- ``_Array``: a leaf holding a tuple of elements.
- ``_Concat``: a left chunk followed by a right chunk.
- ``_Slice``: a window ``[offset, offset + length)`` over another chunk.

``take`` and ``drop`` create slice views without copying elements, ``concat``
and ``prepend`` create concatenation nodes. A concatenation that would make
the tree deeper than ``MAX_DEPTH`` is flattened back to a single array leaf,
which keeps walks bounded. Walks use an explicit stack, never recursion.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Union

from seqlike.interfaces.sequence_like import SequenceLike, clamp

__all__ = ["Chunk", "ChunkBackend", "MAX_DEPTH"]

MAX_DEPTH = 64


@dataclass(frozen=True)
class _Empty:
    pass


@dataclass(frozen=True)
class _Singleton:
    value: Any


@dataclass(frozen=True)
class _Array:
    items: tuple[Any, ...]


@dataclass(frozen=True, eq=False)
class _Concat:
    left: Chunk
    right: Chunk


@dataclass(frozen=True, eq=False)
class _Slice:
    chunk: Chunk
    offset: int
    length: int


_Backing = Union[_Empty, _Singleton, _Array, _Concat, _Slice]


class Chunk:
    """Immutable chunked sequence.

    Build chunks with `Chunk.from_iterable`, `Chunk.of` or `Chunk.empty`; the
    constructor is internal.

    Attributes:
        length: Number of elements.
        depth: Height of the backing tree (leaves are depth 0).
    """

    __slots__ = ("_backing", "length", "depth")

    def __init__(self, backing: _Backing) -> None:
        match backing:
            case _Empty():
                length, depth = 0, 0
            case _Singleton():
                length, depth = 1, 0
            case _Array(items):
                length, depth = len(items), 0
            case _Concat(left, right):
                length = left.length + right.length
                depth = max(left.depth, right.depth) + 1
            case _Slice(chunk, _, size):
                length, depth = size, chunk.depth + 1
            case _:
                raise TypeError(f"unknown chunk backing: {backing!r}")
        object.__setattr__(self, "_backing", backing)
        object.__setattr__(self, "length", length)
        object.__setattr__(self, "depth", depth)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Chunk is immutable")

    # ---- constructors ----

    @staticmethod
    def empty() -> Chunk:
        """Return the empty chunk."""
        return _EMPTY

    @staticmethod
    def of(value: Any) -> Chunk:
        """Return a chunk holding exactly ``value``."""
        return Chunk(_Singleton(value))

    @staticmethod
    def from_iterable(source: Iterable[Any]) -> Chunk:
        """Return a chunk holding the elements of ``source`` in order."""
        if isinstance(source, Chunk):
            return source
        items = tuple(source)
        if not items:
            return _EMPTY
        return Chunk(_Array(items))

    # ---- observation ----

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        # Each frame is (chunk, start, stop) relative to that chunk.
        stack: list[tuple[Chunk, int, int]] = [(self, 0, self.length)]
        while stack:
            chunk, start, stop = stack.pop()
            if start >= stop:
                continue
            match chunk._backing:
                case _Singleton(value):
                    yield value
                case _Array(items):
                    yield from items[start:stop]
                case _Concat(left, right):
                    split = left.length
                    # right first so left is popped first
                    stack.append((right, max(start - split, 0), stop - split))
                    stack.append((left, start, min(stop, split)))
                case _Slice(inner, offset, _):
                    stack.append((inner, offset + start, offset + stop))

    def to_tuple(self) -> tuple[Any, ...]:
        """Materialize the elements into a tuple."""
        match self._backing:
            case _Array(items):
                return items
        return tuple(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self.length == other.length and all(
            a is b or a == b for a, b in zip(self, other)
        )

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"Chunk({', '.join(repr(a) for a in self)})"

    # ---- transformations ----

    def _slice(self, offset: int, length: int) -> Chunk:
        if length <= 0:
            return _EMPTY
        if offset == 0 and length == self.length:
            return self
        match self._backing:
            case _Slice(inner, inner_offset, _):
                return Chunk(_Slice(inner, inner_offset + offset, length))
            case _Array(items) if length == 1:
                return Chunk.of(items[offset])
        return Chunk(_Slice(self, offset, length))

    def take(self, n: float) -> Chunk:
        """Return the first ``n`` elements, clamped to ``[0, len]``."""
        return self._slice(0, clamp(n, self.length))

    def drop(self, n: float) -> Chunk:
        """Return all but the first ``n`` elements, clamped to ``[0, len]``."""
        count = clamp(n, self.length)
        return self._slice(count, self.length - count)

    def reverse(self) -> Chunk:
        """Return the elements in reverse order."""
        if self.length <= 1:
            return self
        return Chunk(_Array(self.to_tuple()[::-1]))

    def concat(self, that: Chunk) -> Chunk:
        """Return this chunk followed by ``that``."""
        if not that.length:
            return self
        if not self.length:
            return that
        if max(self.depth, that.depth) + 1 > MAX_DEPTH:
            return Chunk(_Array(self.to_tuple() + that.to_tuple()))
        return Chunk(_Concat(self, that))

    def prepend(self, value: Any) -> Chunk:
        """Return a chunk with ``value`` inserted at index 0."""
        return Chunk.of(value).concat(self)

    def prepend_all(self, prefix: Chunk) -> Chunk:
        """Return ``prefix`` followed by this chunk."""
        return prefix.concat(self)


_EMPTY = Chunk(_Empty())


class ChunkBackend(SequenceLike[Chunk]):
    """`SequenceLike` over `Chunk` trees.

    Slicing and concatenation are O(1) node allocations; ``reverse`` and
    projection walk the tree.
    """

    def from_iterable(self, source: Iterable[Any]) -> Chunk:
        return Chunk.from_iterable(source)

    def to_iterable(self, seq: Chunk) -> tuple[Any, ...]:
        return seq.to_tuple()

    def take(self, seq: Chunk, n: float) -> Chunk:
        return seq.take(n)

    def drop(self, seq: Chunk, n: float) -> Chunk:
        return seq.drop(n)

    def reverse(self, seq: Chunk) -> Chunk:
        return seq.reverse()

    def prepend(self, seq: Chunk, element: Any) -> Chunk:
        return seq.prepend(element)

    def prepend_all(self, seq: Chunk, prefix: Chunk) -> Chunk:
        return seq.prepend_all(prefix)

    def concat(self, seq: Chunk, suffix: Chunk) -> Chunk:
        return seq.concat(suffix)
