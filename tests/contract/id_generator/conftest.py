"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from vaxreg.adapters.id_generators import (
    SequentialIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from vaxreg.interfaces.id_generator import CenterIdGenerator


@pytest.fixture(params=["ulid", "uuid4", "sequential"])
def id_generator(
    request: pytest.FixtureRequest,
) -> Iterable[CenterIdGenerator]:
    """Return a fresh CenterIdGenerator for the requested backend.

    Supported params:
      - `"ulid"` → ULIDGenerator
      - `"uuid4"` → UUIDv4Generator
      - `"sequential"` → SequentialIdGenerator
    """

    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case "sequential":
            yield SequentialIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")
