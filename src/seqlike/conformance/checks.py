"""The conformance battery.

Each check builds its sequences with ``from_iterable``, applies one operation
or a short pipeline, projects the result with ``to_iterable`` and compares it
to a literal expected sequence. Checks are independent of one another: they
share no fixtures and can run in any order.

Add a check by decorating a function with `check`; it is appended to `CHECKS`
and picked up by every conformance run.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from seqlike.interfaces.sequence_like import Operation, SequenceLike
from seqlike.pipeable import concat, drop, pipe, prepend, prepend_all, reverse, take

from .compare import assert_same_sequence

AS = (1, 2, 3, 4)


@dataclass(frozen=True)
class CheckContext:
    """What a check function receives: the backend under test and its label."""

    F: SequenceLike  # pylint: disable=invalid-name
    label: str
    check: str

    def expect(self, seq: Any, expected: Iterable[Any]) -> None:
        """Project ``seq`` and compare it with ``expected``."""
        assert_same_sequence(
            self.F.to_iterable(seq), expected, label=self.label, check=self.check
        )


@dataclass(frozen=True)
class Check:
    """One entry of the battery.

    Attributes:
        name: Unique check name, used in reports.
        operations: Operations the check exercises besides construction and
            projection. The check is skipped if any of them is pending.
        run: The check body.
    """

    name: str
    operations: frozenset[Operation]
    run: Callable[[CheckContext], None]

    def __call__(self, F: SequenceLike, label: str) -> None:  # pylint: disable=invalid-name
        self.run(CheckContext(F=F, label=label, check=self.name))


CHECKS: list[Check] = []


def check(*operations: Operation) -> Callable[[Callable[[CheckContext], None]], Check]:
    """Register the decorated function as a check over ``operations``."""

    def decorator(fn: Callable[[CheckContext], None]) -> Check:
        entry = Check(
            name=fn.__name__.removeprefix("check_"),
            operations=frozenset(operations),
            run=fn,
        )
        CHECKS.append(entry)
        return entry

    return decorator


# --- fromIterable / toIterable ---


@check(Operation.FROM_ITERABLE, Operation.TO_ITERABLE)
def check_roundtrip(ctx: CheckContext) -> None:
    """Projection of a built sequence reproduces the source."""
    ctx.expect(ctx.F.from_iterable(AS), AS)
    ctx.expect(ctx.F.from_iterable([]), [])
    ctx.expect(ctx.F.from_iterable(iter(["a", 1, None])), ["a", 1, None])


# --- take ---


@check(Operation.TAKE)
def check_take(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), take(F, 2)), [1, 2])
    ctx.expect(pipe(F.from_iterable(AS), take(F, 0)), [])


@check(Operation.TAKE)
def check_take_out_of_bounds(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), take(F, -10)), [])
    ctx.expect(pipe(F.from_iterable(AS), take(F, 4)), AS)
    ctx.expect(pipe(F.from_iterable(AS), take(F, 10)), AS)
    ctx.expect(pipe(F.from_iterable([]), take(F, 2)), [])


@check(Operation.TAKE)
def check_take_fractional(ctx: CheckContext) -> None:
    """Fractional counts round down; NaN and infinities clamp."""
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), take(F, 2.5)), [1, 2])
    ctx.expect(pipe(F.from_iterable(AS), take(F, 0.9)), [])
    ctx.expect(pipe(F.from_iterable(AS), take(F, float("inf"))), AS)
    ctx.expect(pipe(F.from_iterable(AS), take(F, float("-inf"))), [])
    ctx.expect(pipe(F.from_iterable(AS), take(F, float("nan"))), [])


# --- drop ---


@check(Operation.DROP)
def check_drop(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), drop(F, 2)), [3, 4])
    ctx.expect(pipe(F.from_iterable(AS), drop(F, 0)), AS)


@check(Operation.DROP)
def check_drop_out_of_bounds(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), drop(F, -10)), AS)
    ctx.expect(pipe(F.from_iterable(AS), drop(F, 4)), [])
    ctx.expect(pipe(F.from_iterable(AS), drop(F, 10)), [])
    ctx.expect(pipe(F.from_iterable([]), drop(F, 2)), [])


@check(Operation.DROP)
def check_drop_fractional(ctx: CheckContext) -> None:
    """Fractional counts round down; NaN and infinities clamp."""
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), drop(F, 1.5)), [2, 3, 4])
    ctx.expect(pipe(F.from_iterable(AS), drop(F, -0.5)), AS)
    ctx.expect(pipe(F.from_iterable(AS), drop(F, float("inf"))), [])
    ctx.expect(pipe(F.from_iterable(AS), drop(F, float("nan"))), AS)


@check(Operation.TAKE, Operation.DROP, Operation.CONCAT)
def check_take_drop_complement(ctx: CheckContext) -> None:
    """take(n) followed by drop(n) rebuilds the sequence for every n."""
    F = ctx.F  # pylint: disable=invalid-name
    seq = F.from_iterable(AS)
    for n in range(len(AS) + 2):
        ctx.expect(F.concat(F.take(seq, n), F.drop(seq, n)), AS)


@check(Operation.TAKE, Operation.DROP)
def check_slice_pipeline(ctx: CheckContext) -> None:
    """drop then take selects an inner window."""
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), drop(F, 1), take(F, 2)), [2, 3])
    ctx.expect(pipe(F.from_iterable(AS), take(F, 3), drop(F, 1)), [2, 3])


# --- reverse ---


@check(Operation.REVERSE)
def check_reverse(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), reverse(F)), [4, 3, 2, 1])
    ctx.expect(pipe(F.from_iterable([]), reverse(F)), [])


@check(Operation.REVERSE)
def check_reverse_involution(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), reverse(F), reverse(F)), AS)


# --- prepend ---


@check(Operation.PREPEND)
def check_prepend(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(pipe(F.from_iterable(AS), prepend(F, "a")), ["a", 1, 2, 3, 4])
    ctx.expect(pipe(F.from_iterable([]), prepend(F, "a")), ["a"])


# --- prependAll ---


@check(Operation.PREPEND_ALL)
def check_prepend_all(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(
        pipe(F.from_iterable([1, 2]), prepend_all(F, F.from_iterable(["a", "b"]))),
        ["a", "b", 1, 2],
    )
    ctx.expect(pipe(F.from_iterable([1, 2]), prepend_all(F, F.from_iterable([]))), [1, 2])
    ctx.expect(
        pipe(F.from_iterable([]), prepend_all(F, F.from_iterable(["a", "b"]))),
        ["a", "b"],
    )


# --- concat ---


@check(Operation.CONCAT)
def check_concat(ctx: CheckContext) -> None:
    F = ctx.F  # pylint: disable=invalid-name
    ctx.expect(
        pipe(F.from_iterable([1, 2]), concat(F, F.from_iterable(["a", "b"]))),
        [1, 2, "a", "b"],
    )
    ctx.expect(pipe(F.from_iterable([1, 2]), concat(F, F.from_iterable([]))), [1, 2])
    ctx.expect(
        pipe(F.from_iterable([]), concat(F, F.from_iterable(["a", "b"]))),
        ["a", "b"],
    )


@check(Operation.CONCAT, Operation.REVERSE)
def check_concat_reverse(ctx: CheckContext) -> None:
    """reverse(a ++ b) == reverse(b) ++ reverse(a)."""
    F = ctx.F  # pylint: disable=invalid-name
    a, b = F.from_iterable([1, 2]), F.from_iterable(["a", "b", "c"])
    ctx.expect(F.reverse(F.concat(a, b)), ["c", "b", "a", 2, 1])
    ctx.expect(F.concat(F.reverse(b), F.reverse(a)), ["c", "b", "a", 2, 1])


def get_check(name: str) -> Check:
    """Return the registered check called ``name``.

    Raises:
        KeyError: If no check has that name.
    """
    for entry in CHECKS:
        if entry.name == name:
            return entry
    raise KeyError(name)
