"""Unit tests for seqlike.config."""

import pytest

from seqlike import config


@pytest.mark.parametrize(
    "value, expected",
    [
        ("array", ("array",)),
        ("array,chunk", ("array", "chunk")),
        (" list ,  chunk array ", ("list", "chunk", "array")),
        (",,", ()),
    ],
)
def test_split_labels(value, expected):
    """Labels are split on commas and whitespace, dropping empties."""
    assert config.split_labels(value) == expected


def test_selected_backends_unset(monkeypatch: pytest.MonkeyPatch):
    """Without SEQLIKE_BACKENDS every backend is selected (None)."""
    monkeypatch.delenv(config.BACKENDS_ENV, raising=False)
    assert config.get_selected_backends() is None


def test_selected_backends_blank(monkeypatch: pytest.MonkeyPatch):
    """A blank SEQLIKE_BACKENDS counts as unset."""
    monkeypatch.setenv(config.BACKENDS_ENV, "   ")
    assert config.get_selected_backends() is None


def test_selected_backends(monkeypatch: pytest.MonkeyPatch):
    """SEQLIKE_BACKENDS selects labels in order."""
    monkeypatch.setenv(config.BACKENDS_ENV, "chunk, list")
    assert config.get_selected_backends() == ("chunk", "list")
