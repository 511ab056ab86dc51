"""Terminal message helpers for the SEQLIKE CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII
fallbacks. Summary messages write to stderr so stdout can carry the report.
"""

import click


def _supports_character(character: str, err: bool = True) -> bool:
    """Return True if *character* can be encoded on the target stream.

    Decides whether to emit emojis or fall back to ASCII so terminals without
    UTF-8 don't raise `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr" if err else "stdout")
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def _glyph(emoji: str, fallback: str, err: bool) -> str:
    return emoji if _supports_character(emoji, err) else fallback


def caution_glyph(err: bool = True) -> str:
    """Return "⚠️" when the stream supports it, otherwise "[!]"."""
    return _glyph("⚠️", "[!]", err)


def success_glyph(err: bool = True) -> str:
    """Return "✅" when the stream supports it, otherwise "[OK]"."""
    return _glyph("✅", "[OK]", err)


def error_glyph(err: bool = True) -> str:
    """Return "❌" when the stream supports it, otherwise "[X]"."""
    return _glyph("❌", "[X]", err)


def skip_glyph(err: bool = True) -> str:
    """Return "⏭️" when the stream supports it, otherwise "[-]"."""
    return _glyph("⏭️", "[-]", err)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  chunk: 1 check skipped (pending: prepend_all)``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Example:
        ``✅  All 39 checks passed.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Example:
        ``❌  2 checks failed.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
