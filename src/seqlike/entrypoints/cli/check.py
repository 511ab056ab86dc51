"""SEQLIKE conformance commands.

``seqlike backends`` lists the registered backends and their pending
operations. ``seqlike check`` runs the conformance battery and prints one line
per (backend, check) to **stdout**; the summary goes to **stderr**. The exit
code is 1 when any check failed.

Backends come from the registry stored on the Click context object
(`default_registry()` unless the caller provides one), so new backends show up
here without changes to these commands.
"""

from __future__ import annotations

import logging

import click

from seqlike import config
from seqlike.conformance import CHECKS, Outcome, get_check, run_registry
from seqlike.registry import BackendRegistry, UnknownBackendError, default_registry

from .helpers import error, error_glyph, skip_glyph, success, success_glyph, warn

logger = logging.getLogger(__name__)

_GLYPHS = {
    Outcome.PASSED: lambda: success_glyph(err=False),
    Outcome.FAILED: lambda: error_glyph(err=False),
    Outcome.SKIPPED: lambda: skip_glyph(err=False),
}

_COLORS = {Outcome.PASSED: "green", Outcome.FAILED: "red", Outcome.SKIPPED: "yellow"}


def _registry(ctx: click.Context) -> BackendRegistry:
    if ctx.obj is None:
        ctx.obj = default_registry()
    return ctx.obj


@click.command()
@click.pass_context
def backends(ctx: click.Context) -> None:
    """List registered backends and their pending operations."""
    for entry in _registry(ctx):
        pending = ", ".join(sorted(op.value for op in entry.pending)) or "-"
        click.echo(f"{entry.label}\t{entry.backend.name}\tpending: {pending}")


@click.command()
@click.option(
    "--backend",
    "-b",
    "labels",
    multiple=True,
    help=(
        "Run only this backend (repeatable). Defaults to SEQLIKE_BACKENDS "
        "when set, otherwise every registered backend."
    ),
)
@click.option(
    "--check",
    "-c",
    "check_names",
    multiple=True,
    help="Run only this check (repeatable). See 'seqlike check --list'.",
)
@click.option(
    "--list",
    "list_checks",
    is_flag=True,
    help="List the available checks and exit.",
)
@click.option(
    "--show-passed/--hide-passed",
    default=True,
    show_default=True,
    help="Print a line for each passing check.",
)
@click.pass_context
def check(
    ctx: click.Context,
    labels: tuple[str, ...],
    check_names: tuple[str, ...],
    list_checks: bool,
    show_passed: bool,
) -> None:
    """Run the conformance battery against the registered backends."""

    if list_checks:
        for c in CHECKS:
            ops = ", ".join(sorted(op.value for op in c.operations))
            click.echo(f"{c.name}\t{ops}")
        return

    registry = _registry(ctx)
    selected = labels or config.get_selected_backends()

    try:
        checks = [get_check(name) for name in check_names] or None
    except KeyError as e:
        raise click.BadParameter(
            f"Unknown check {e.args[0]!r}", param_hint="'--check'"
        ) from e

    try:
        report = run_registry(registry, selected, checks=checks)
    except UnknownBackendError as e:
        raise click.BadParameter(str(e), param_hint="'--backend'") from e

    for result in report.results:
        if result.outcome is Outcome.PASSED and not show_passed:
            continue
        line = f"{_GLYPHS[result.outcome]()}  [{result.label}] {result.check}"
        if result.message:
            line += f": {result.message}"
        click.secho(line, fg=_COLORS[result.outcome])

    for label in report.labels():
        if skipped := report.for_label(label).skipped:
            warn(f"{label}: {len(skipped)} check(s) skipped")

    if not report.ok:
        error(f"{len(report.failed)} of {len(report.results)} check(s) failed.")
        ctx.exit(1)
    success(
        f"{len(report.passed)} check(s) passed across "
        f"{len(report.labels())} backend(s)."
    )
