"""Unit tests.

Purpose
- Verify one backend, the registry, the harness or a CLI helper in isolation.

Guidelines
- Reach into backend internals only to check structural sharing or tree shape.
- Keep tests small and deterministic.
"""
