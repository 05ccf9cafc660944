"""Fixtures for center registry contract tests."""

from collections.abc import Iterable

import pytest

from vaxreg.adapters.registry import InMemoryCenterRegistry
from vaxreg.interfaces.center_registry import CenterRegistry


@pytest.fixture(params=["memory"])
def registry(request: pytest.FixtureRequest) -> Iterable[CenterRegistry]:
    """Return a fresh CenterRegistry for the requested backend.

    Supported params:
      - `"memory"` → InMemoryCenterRegistry

    Extend by adding new identifiers to `params` and branching below.
    """

    match request.param:
        case "memory":
            yield InMemoryCenterRegistry()
        case _:
            raise ValueError(f"unknown registry type: {request.param}")
