"""Entrypoints (inbound adapters) for SEQLIKE.

Expose the conformance harness to the outside world through the CLI. Parse and
validate inputs, call the harness, and present results.
"""
