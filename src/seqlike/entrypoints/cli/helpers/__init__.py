"""CLI helpers for SEQLIKE.

Utilities used by the command-line interface: parsing of NAME=LEVEL logger
options and message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, error_glyph, skip_glyph, success, success_glyph, warn

__all__ = [
    "error",
    "error_glyph",
    "parse_log_level",
    "skip_glyph",
    "success",
    "success_glyph",
    "warn",
]
