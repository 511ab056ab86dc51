"""SEQLIKE Capability Interface Package"""

from .errors import SequenceLikeError, UnsupportedOperationError
from .sequence_like import Operation, SequenceLike, clamp

__all__ = [
    "Operation",
    "SequenceLike",
    "SequenceLikeError",
    "UnsupportedOperationError",
    "clamp",
]
