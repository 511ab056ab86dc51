"""Configuration utilities for SEQLIKE.

Small environment-driven helpers used by the CLI.
"""

import os
import re

BACKENDS_ENV = "SEQLIKE_BACKENDS"  # pragma: no mutate
LOGGER_LEVELS_ENV = "SEQLIKE_LOGGER_LEVELS"  # pragma: no mutate


def split_labels(value: str) -> tuple[str, ...]:
    """Split a comma/space separated list, dropping empty fragments."""
    return tuple(s for s in re.split(r"[,\s]+", value) if s)


def get_selected_backends() -> tuple[str, ...] | None:
    """Get the backend labels selected through the environment.

    Returns:
        The labels listed in `SEQLIKE_BACKENDS`, in order, or ``None`` when the
        variable is unset or blank (meaning: every registered backend).
    """
    if not (value := os.environ.get(BACKENDS_ENV, "").strip()):
        return None
    return split_labels(value)
