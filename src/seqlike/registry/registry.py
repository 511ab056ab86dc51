"""Registry of sequence backends taking part in the conformance run.

New backends are added with `BackendRegistry.register` and picked up by the
harness and the CLI without changes to either. A registration may mark
operations as *pending*: the harness reports checks for those operations as
skipped for that one registration only, while every other backend still runs
them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from seqlike.adapters import ARRAY, CHUNK, LIST
from seqlike.interfaces.sequence_like import Operation, SequenceLike

from .errors import BackendAlreadyRegisteredError, UnknownBackendError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendEntry:
    """A registered backend.

    Attributes:
        label: Human-readable name shown in reports (e.g. "chunk").
        backend: The capability instance.
        pending: Operations whose checks are skipped for this backend. Always
            includes the backend's own ``unsupported_operations``.
    """

    label: str
    backend: SequenceLike
    pending: frozenset[Operation] = frozenset()

    def is_pending(self, operation: Operation) -> bool:
        """Return True if checks for ``operation`` are skipped for this entry."""
        return operation in self.pending


class BackendRegistry:
    """Ordered mapping of labels to registered backends."""

    def __init__(self) -> None:
        self._entries: dict[str, BackendEntry] = {}

    def register(
        self,
        label: str,
        backend: SequenceLike,
        *,
        pending: Iterable[Operation] = (),
    ) -> BackendEntry:
        """Register ``backend`` under ``label``.

        Args:
            label: Unique label for reports and CLI selection.
            backend: The capability instance to register.
            pending: Operations to mark as pending for this registration only.

        Returns:
            BackendEntry: The stored entry.

        Raises:
            BackendAlreadyRegisteredError: If ``label`` is already taken.
        """
        if label in self._entries:
            raise BackendAlreadyRegisteredError(label)
        entry = BackendEntry(
            label=label,
            backend=backend,
            pending=frozenset(pending) | backend.unsupported_operations,
        )
        self._entries[label] = entry
        logger.debug(
            "Registered backend %s (%s), pending=%s",
            label,
            backend.name,
            sorted(op.value for op in entry.pending) or "<none>",
        )
        return entry

    def get(self, label: str) -> BackendEntry:
        """Return the entry for ``label``.

        Raises:
            UnknownBackendError: If nothing is registered under ``label``.
        """
        try:
            return self._entries[label]
        except KeyError as e:
            raise UnknownBackendError(label, self.labels()) from e

    def select(self, labels: Iterable[str]) -> list[BackendEntry]:
        """Return the entries for ``labels``, in the order given."""
        return [self.get(label) for label in labels]

    def labels(self) -> tuple[str, ...]:
        """Registered labels in registration order."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[BackendEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, label: object) -> bool:
        return label in self._entries


def default_registry() -> BackendRegistry:
    """Return a fresh registry holding the built-in backends."""
    registry = BackendRegistry()
    registry.register("array", ARRAY)
    registry.register("list", LIST)
    registry.register("chunk", CHUNK)
    return registry
