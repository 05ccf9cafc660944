"""Bootstrap (composition root) for VAXREG.

Assembles the application at runtime: builds an explicit registry instance,
wires it and the other dependencies into service-layer handlers, and reads
configuration. There is no process-wide registry; whoever calls `bootstrap()`
owns the returned container and its lifetime.

Import rules:
- Embedding applications import *this* package.
- This package may import: `vaxreg.adapters`, `vaxreg.service_layer`,
  `vaxreg.interfaces`, `vaxreg.domain`, and `vaxreg.config`.
- Inner layers must not import `vaxreg.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
