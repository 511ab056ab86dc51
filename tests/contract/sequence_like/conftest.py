"""Fixtures for SequenceLike contract tests."""

from __future__ import annotations

import pytest

from seqlike.interfaces.sequence_like import Operation, SequenceLike
from seqlike.registry import BackendEntry, default_registry

# pylint: disable=redefined-outer-name

REGISTRY = default_registry()


@pytest.fixture(scope="module", params=REGISTRY.labels())
def backend_entry(request: pytest.FixtureRequest) -> BackendEntry:
    """Return the registry entry for each built-in backend.

    Supported params are the labels of `default_registry()`:
      - `"array"` → ArrayBackend
      - `"list"` → ListBackend
      - `"chunk"` → ChunkBackend

    Backends register themselves in `seqlike.registry.default_registry`;
    adding one there adds it to every contract test.
    """
    return REGISTRY.get(request.param)


@pytest.fixture(scope="module")
def F(backend_entry: BackendEntry) -> SequenceLike:  # pylint: disable=invalid-name
    """The capability instance under test."""
    return backend_entry.backend


@pytest.fixture
def require(backend_entry: BackendEntry):
    """Skip the test if any of the given operations is pending for the backend."""

    def _require(*operations: Operation) -> None:
        if pending := [op.value for op in operations if backend_entry.is_pending(op)]:
            pytest.skip(f"{backend_entry.label}: pending {', '.join(pending)}")

    return _require

