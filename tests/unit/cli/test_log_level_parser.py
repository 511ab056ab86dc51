"""Unit tests for the CLI log level parser.

These tests exercise seqlike.entrypoints.cli.helpers.log_level_parser.parse_log_level,
covering default behavior, override semantics, input normalization (commas/spaces),
case-insensitivity, and error handling for malformed input.
"""

import logging
import types

import click
import pytest

from seqlike.entrypoints.cli.helpers.log_level_parser import parse_log_level


def make_ctx():
    """Create a minimal Click context stub; the callback does not use it."""
    return types.SimpleNamespace()


def test_empty_uses_defaults():
    """When no levels are provided, return the default library logger levels."""
    assert parse_log_level(make_ctx(), None, ()) == {"hypothesis": logging.WARNING}
    assert parse_log_level(make_ctx(), None, None) == {"hypothesis": logging.WARNING}


def test_repeated_flags_override_order():
    """Later repeated CLI flags override earlier ones for the same logger."""
    value = ("seqlike=INFO", "hypothesis=ERROR", "seqlike=WARNING")
    out = parse_log_level(make_ctx(), None, value)
    assert out["seqlike"] == logging.WARNING
    assert out["hypothesis"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces():
    """Accept a plain string (e.g. from an env var) with commas and spaces."""
    value = "seqlike=INFO,  seqlike.conformance=DEBUG hypothesis=ERROR"
    out = parse_log_level(make_ctx(), None, value)
    assert out["seqlike"] == logging.INFO
    assert out["seqlike.conformance"] == logging.DEBUG
    assert out["hypothesis"] == logging.ERROR


def test_case_insensitive_levels():
    """Level names should be parsed case-insensitively."""
    out = parse_log_level(make_ctx(), None, ("seqlike=info", "hypothesis=WaRnInG"))
    assert out["seqlike"] == logging.INFO
    assert out["hypothesis"] == logging.WARNING


@pytest.mark.parametrize("bad", ["seqlike", "seqlike:INFO"])
def test_missing_equals_raises(bad):
    """Items without NAME=LEVEL raise BadParameter."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(make_ctx(), None, (bad,))


def test_invalid_level_raises():
    """Unknown level names raise BadParameter."""
    with pytest.raises(click.BadParameter, match="Invalid log level: LOUD"):
        parse_log_level(make_ctx(), None, ("seqlike=LOUD",))
