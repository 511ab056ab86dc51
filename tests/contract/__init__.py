"""Contract tests.

Purpose
- State the SequenceLike behavior once and run it against every registered
  backend to keep them interchangeable.

Guidelines
- Get backends from the `backend_entry` / `F` fixtures, never import them.
- Assert only projected results (`to_iterable`), not representation details.
- Skip through the `require` fixture when an operation is pending.
"""
