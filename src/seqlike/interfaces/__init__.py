"""Abstract ports implemented by SEQLIKE adapters."""
