"""SEQLIKE

Interchangeable immutable sequence backends behind one capability interface,
plus a conformance harness that proves every backend behaves the same.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
