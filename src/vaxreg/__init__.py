"""VAXREG

An in-memory registry of vaccination centers. It tracks how many slots each
center has per vaccine type and dose, books slots atomically, and searches
centers by availability, safely under concurrent access.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
