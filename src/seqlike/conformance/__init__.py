"""SEQLIKE conformance harness.

Runs one fixed battery of checks against every sequence backend so that a
regression in any backend is caught independently of the others.
"""

from .checks import CHECKS, Check, CheckContext, check, get_check
from .compare import assert_same_sequence, same_element
from .errors import ConformanceError
from .runner import (
    CheckResult,
    ConformanceReport,
    Outcome,
    run_check,
    run_conformance,
    run_registry,
)

__all__ = [
    "CHECKS",
    "Check",
    "CheckContext",
    "CheckResult",
    "ConformanceError",
    "ConformanceReport",
    "Outcome",
    "assert_same_sequence",
    "check",
    "get_check",
    "run_check",
    "run_conformance",
    "run_registry",
    "same_element",
]
