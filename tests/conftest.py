"""Global pytest configuration for SEQLIKE.

Adds a default marker to every test from the folder it lives in
(`tests/unit/` → `unit`, and so on) and registers Hypothesis profiles.
Select a profile with ``SEQLIKE_HYPOTHESIS_PROFILE`` (default: ``dev``).
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import settings

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "contract", "functional")

settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("ci", max_examples=300, deadline=None)
settings.load_profile(os.environ.get("SEQLIKE_HYPOTHESIS_PROFILE", "dev"))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to each item that lacks it."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for name in FOLDER_MARKERS:
            if TESTS_ROOT / name in path.parents:
                if not any(marker.name == name for marker in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, name))
