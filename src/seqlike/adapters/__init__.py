"""Concrete sequence backends implementing `SequenceLike`."""

from .array import ArrayBackend
from .chunk import Chunk, ChunkBackend
from .linked_list import Cons, ListBackend, Nil

ARRAY = ArrayBackend()
LIST = ListBackend()
CHUNK = ChunkBackend()

__all__ = [
    "ARRAY",
    "CHUNK",
    "LIST",
    "ArrayBackend",
    "Chunk",
    "ChunkBackend",
    "Cons",
    "ListBackend",
    "Nil",
]
