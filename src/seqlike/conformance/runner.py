"""Run the conformance battery against backends and collect results.

Every check runs in isolation: a failure (or an unexpected exception) in one
check is recorded and the run moves on. Checks over a pending operation are
reported as skipped with a visible reason rather than silently dropped.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from seqlike.interfaces.sequence_like import Operation, SequenceLike
from seqlike.registry import BackendRegistry

from .checks import CHECKS, Check
from .errors import ConformanceError

logger = logging.getLogger(__name__)


class Outcome(str, enum.Enum):
    """Result of running a single check against a single backend."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one (check, backend) combination."""

    label: str
    check: str
    operations: frozenset[Operation]
    outcome: Outcome
    message: str = ""


@dataclass
class ConformanceReport:
    """Results of a conformance run, in execution order."""

    results: list[CheckResult] = field(default_factory=list)

    def _with(self, outcome: Outcome) -> list[CheckResult]:
        return [r for r in self.results if r.outcome is outcome]

    @property
    def passed(self) -> list[CheckResult]:
        """Results that passed."""
        return self._with(Outcome.PASSED)

    @property
    def failed(self) -> list[CheckResult]:
        """Results that failed."""
        return self._with(Outcome.FAILED)

    @property
    def skipped(self) -> list[CheckResult]:
        """Results skipped because of a pending operation."""
        return self._with(Outcome.SKIPPED)

    @property
    def ok(self) -> bool:
        """True if no check failed."""
        return not self.failed

    def labels(self) -> list[str]:
        """Backend labels in the order they first appear."""
        return list(dict.fromkeys(r.label for r in self.results))

    def for_label(self, label: str) -> ConformanceReport:
        """Return the sub-report for one backend."""
        return ConformanceReport([r for r in self.results if r.label == label])

    def extend(self, other: ConformanceReport) -> None:
        """Append the results of ``other``."""
        self.results.extend(other.results)


def run_check(
    check: Check,
    backend: SequenceLike,
    label: str,
    pending: frozenset[Operation] = frozenset(),
) -> CheckResult:
    """Run one check against one backend and classify the outcome."""

    def result(outcome: Outcome, message: str = "") -> CheckResult:
        return CheckResult(label, check.name, check.operations, outcome, message)

    if blocked := sorted(op.value for op in check.operations & pending):
        reason = f"pending for {label}: {', '.join(blocked)}"
        logger.debug("[%s] %s skipped (%s)", label, check.name, reason)
        return result(Outcome.SKIPPED, reason)

    try:
        check(backend, label)
    except ConformanceError as e:
        logger.warning("%s", e)
        return result(Outcome.FAILED, e.detail)
    except Exception as e:  # pylint: disable=broad-exception-caught
        # A crashing backend fails this check only.
        message = f"{type(e).__name__}: {e}"
        logger.warning("[%s] %s raised %s", label, check.name, message, exc_info=True)
        return result(Outcome.FAILED, message)

    logger.debug("[%s] %s passed", label, check.name)
    return result(Outcome.PASSED)


def run_conformance(
    backend: SequenceLike,
    label: str,
    *,
    pending: Iterable[Operation] = (),
    checks: Sequence[Check] | None = None,
) -> ConformanceReport:
    """Run the battery against one backend.

    Args:
        backend: The capability instance under test.
        label: Human-readable backend label used in every result.
        pending: Operations whose checks are skipped for this backend. The
            backend's own ``unsupported_operations`` are always added.
        checks: Checks to run; defaults to the full battery.

    Returns:
        ConformanceReport: One result per check, in battery order.
    """
    effective = frozenset(pending) | backend.unsupported_operations
    report = ConformanceReport(
        [
            run_check(c, backend, label, effective)
            for c in (CHECKS if checks is None else checks)
        ]
    )
    logger.info(
        "%s: %d passed, %d failed, %d skipped",
        label,
        len(report.passed),
        len(report.failed),
        len(report.skipped),
    )
    return report


def run_registry(
    registry: BackendRegistry,
    labels: Iterable[str] | None = None,
    *,
    checks: Sequence[Check] | None = None,
) -> ConformanceReport:
    """Run the battery once per registered backend.

    Args:
        registry: Backends to test.
        labels: Restrict the run to these labels (in this order); all
            registered backends when None.
        checks: Checks to run; defaults to the full battery.

    Raises:
        UnknownBackendError: If a label in ``labels`` is not registered.
    """
    entries = list(registry) if labels is None else registry.select(labels)
    report = ConformanceReport()
    for entry in entries:
        report.extend(
            run_conformance(
                entry.backend, entry.label, pending=entry.pending, checks=checks
            )
        )
    return report
