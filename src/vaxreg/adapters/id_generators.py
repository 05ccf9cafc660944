"""Center id generators for VAXREG."""

import itertools
import threading
import uuid

from ulid import monotonic

from vaxreg.interfaces.id_generator import CenterIdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(CenterIdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers made of a
    timestamp and a random component, so ids sort in creation order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(CenterIdGenerator):
    """Random UUIDv4 generator. Ids carry no ordering."""

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SequentialIdGenerator(CenterIdGenerator):
    """Short human-readable ids: ``C1``, ``C2``, ...

    Args:
        prefix: Text placed before the counter.
        start: First counter value.
    """

    def __init__(self, prefix: str = "C", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate the next id in sequence."""
        with self._lock:
            return f"{self._prefix}{next(self._counter)}"
