"""SEQLIKE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior defined once and run against every sequence backend.
- functional/   : The CLI tested end-to-end at its boundary.
- helpers/      : Shared utilities and Hypothesis strategies (no tests here).

General guidance
- Everything under test is pure; no fixture needs setup or teardown.
- Contract tests parametrize backends through `default_registry()`.
- Property-based tests use @pytest.mark.property.
- Markers: unit, contract, functional, property
"""
