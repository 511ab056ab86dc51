"""Functional tests.

Purpose
- Validate the ``seqlike`` CLI as a user sees it: output lines and exit codes.

Guidelines
- Drive commands with click's CliRunner; inject registries through ``obj``.
- Strip ANSI styling before asserting on text.
"""
