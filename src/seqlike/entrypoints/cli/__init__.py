"""SEQLIKE command-line interface."""
