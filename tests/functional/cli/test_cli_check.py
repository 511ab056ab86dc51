"""Functional tests for the ``seqlike`` CLI.

This suite verifies, through Click's CliRunner:
- ``seqlike check`` runs every backend and exits 0 when all checks pass.
- Backend selection via ``--backend`` and ``SEQLIKE_BACKENDS``.
- A broken backend injected into the registry makes the run exit 1 and names
  the offending (backend, check) pair, while other backends still run.
- Pending operations are reported as skipped.
- ``seqlike backends`` lists registrations and their pending operations.
"""

from __future__ import annotations

import re

import pytest
from click.testing import CliRunner

import seqlike
from seqlike.adapters import ArrayBackend
from seqlike.conformance import CHECKS
from seqlike.entrypoints.cli import main
from seqlike.interfaces.sequence_like import Operation
from seqlike.registry import default_registry

# pylint: disable=magic-value-comparison, redefined-outer-name

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


class OffByOneTake(ArrayBackend):
    """Array backend whose take() keeps one element too many."""

    def take(self, seq: tuple, n: int) -> tuple:
        return seq[: max(0, n) + 1]


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """CliRunner with backend selection cleared from the environment."""
    monkeypatch.delenv("SEQLIKE_BACKENDS", raising=False)
    return CliRunner()


def _text(output: str) -> str:
    return ANSI_RE.sub("", output)


def test_version(runner: CliRunner):
    """--version prints the package version."""
    result = runner.invoke(main.seqlike, ["--version"])
    assert result.exit_code == 0
    assert seqlike.__version__ in _text(result.output)


def test_help_shows_commands(runner: CliRunner):
    """--help renders the prose and lists the subcommands."""
    result = runner.invoke(main.seqlike, ["--help"])
    assert result.exit_code == 0
    text = _text(result.output)
    assert "Usage:" in text
    assert "check" in text
    assert "backends" in text


def test_check_all_backends_pass(runner: CliRunner):
    """The built-in backends all pass the battery."""
    result = runner.invoke(main.seqlike, ["check"])
    assert result.exit_code == 0, result.output
    text = _text(result.output)
    for label in ("array", "list", "chunk"):
        assert f"[{label}] take" in text
    assert f"{3 * len(CHECKS)} check(s) passed across 3 backend(s)." in text


def test_check_single_backend(runner: CliRunner):
    """--backend restricts the run."""
    result = runner.invoke(main.seqlike, ["check", "-b", "chunk", "--hide-passed"])
    assert result.exit_code == 0, result.output
    text = _text(result.output)
    assert "[array]" not in text
    assert f"{len(CHECKS)} check(s) passed across 1 backend(s)." in text


def test_check_backends_from_environment(runner: CliRunner):
    """SEQLIKE_BACKENDS selects backends when --backend is absent."""
    result = runner.invoke(main.seqlike, ["check"], env={"SEQLIKE_BACKENDS": "list"})
    assert result.exit_code == 0, result.output
    text = _text(result.output)
    assert "[list] reverse" in text
    assert "[chunk]" not in text


def test_check_unknown_backend(runner: CliRunner):
    """An unknown label is a usage error."""
    result = runner.invoke(main.seqlike, ["check", "-b", "vector"])
    assert result.exit_code == 2
    assert "Unknown backend 'vector'" in _text(result.output)


def test_check_unknown_check_name(runner: CliRunner):
    """An unknown check name is a usage error."""
    result = runner.invoke(main.seqlike, ["check", "-c", "sort"])
    assert result.exit_code == 2
    assert "Unknown check 'sort'" in _text(result.output)


def test_check_list(runner: CliRunner):
    """--list prints every check with its operations."""
    result = runner.invoke(main.seqlike, ["check", "--list"])
    assert result.exit_code == 0
    lines = _text(result.output).splitlines()
    assert "prepend_all\tprepend_all" in lines
    assert len([line for line in lines if "\t" in line]) == len(CHECKS)


def test_check_reports_broken_backend(runner: CliRunner):
    """A failing backend exits 1, names the failing checks, others still pass."""
    registry = default_registry()
    registry.register("broken", OffByOneTake())
    result = runner.invoke(main.seqlike, ["check", "--hide-passed"], obj=registry)
    assert result.exit_code == 1
    text = _text(result.output)
    assert "[broken] take: length 3 != expected length 2" in text
    assert "[array] take" not in text
    assert "check(s) failed." in text


def test_check_failure_does_not_stop_selected_checks(runner: CliRunner):
    """-c picks checks by name; a failing one leaves the rest running."""
    registry = default_registry()
    registry.register("broken", OffByOneTake())
    result = runner.invoke(
        main.seqlike,
        [
            "check",
            "-b",
            "broken",
            "-c",
            "take",
            "-c",
            "take_fractional",
            "-c",
            "reverse",
        ],
        obj=registry,
    )
    assert result.exit_code == 1
    text = _text(result.output)
    assert "[broken] take:" in text
    assert "[broken] take_fractional" in text
    assert "[broken] reverse" in text
    assert "[broken] drop" not in text
    assert "2 of 3 check(s) failed." in text


def test_check_reports_pending_as_skipped(runner: CliRunner):
    """Pending operations show up as skipped, and the run still passes."""
    registry = default_registry()
    registry.register("gap", ArrayBackend(), pending=[Operation.PREPEND_ALL])
    result = runner.invoke(main.seqlike, ["check", "-b", "gap"], obj=registry)
    assert result.exit_code == 0, result.output
    text = _text(result.output)
    assert "[gap] prepend_all: pending for gap: prepend_all" in text
    assert "gap: 1 check(s) skipped" in text


def test_backends_lists_registrations(runner: CliRunner):
    """``seqlike backends`` lists label, class and pending operations."""
    registry = default_registry()
    registry.register("gap", ArrayBackend(), pending=[Operation.CONCAT])
    result = runner.invoke(main.seqlike, ["backends"], obj=registry)
    assert result.exit_code == 0
    lines = _text(result.output).splitlines()
    assert "array\tArrayBackend\tpending: -" in lines
    assert "chunk\tChunkBackend\tpending: -" in lines
    assert "gap\tArrayBackend\tpending: concat" in lines
