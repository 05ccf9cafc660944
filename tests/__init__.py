"""VAXREG test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every CenterRegistry / CenterIdGenerator must honor.
- integration/  : bootstrap wiring and command flows through the message bus.
- fixtures/     : Shared pytest fixtures (no tests here).

Markers are applied per folder by tests/conftest.py. Property-based
tests live with the layer they exercise and use @pytest.mark.property.
"""
