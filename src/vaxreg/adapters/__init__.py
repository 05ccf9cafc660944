"""Concrete implementations of the VAXREG ports."""
