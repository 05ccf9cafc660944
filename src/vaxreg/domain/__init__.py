"""Domain layer for VAXREG.

Contains business rules: value objects, centers and their inventories, and the
failure taxonomy. This package is deliberately technology-agnostic.

Dependency rule: do not import from `vaxreg.adapters` or `vaxreg.bootstrap`.
"""
