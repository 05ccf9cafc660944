"""Vaccination centers and their slot inventories.

A `Center` owns exactly one `Inventory`: a mapping from `VaccineKey` to the
number of bookable slots. Every inventory operation is atomic with respect to
the other operations on the *same* inventory; each inventory has its own lock,
so work on different centers never contends.

Operations fail softly: they return an `Outcome` carrying a `FailureReason`
instead of raising. Only malformed value objects raise `InvalidInputError`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .errors import FailureReason, InvalidInputError
from .value_objects import DoseType, Location, Outcome, Tag, VaccineKey, VaccineType

if TYPE_CHECKING:
    from vaxreg.interfaces.id_generator import CenterIdGenerator

logger = logging.getLogger(__name__)


class NegativeUpdatePolicy(Enum):
    """What `Inventory.update` does when a delta would leave a negative count."""

    REJECT = "reject"  # fail with EXHAUSTED, count unchanged
    CLAMP = "clamp"  # floor the count at zero
    ALLOW = "allow"  # store the negative count as-is


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Inventory:
    """Thread-safe slot counts for one center.

    Args:
        owner: Label used in log messages and failure details (the center id).
        negative_updates: Policy applied when `update` would go below zero.
    """

    def __init__(
        self,
        owner: str = "",
        negative_updates: NegativeUpdatePolicy = NegativeUpdatePolicy.REJECT,
    ) -> None:
        self._owner = owner
        self._negative_updates = negative_updates
        self._counts: dict[VaccineKey, int] = {}
        self._lock = threading.Lock()

    @property
    def negative_updates(self) -> NegativeUpdatePolicy:
        """The policy applied by `update` to negative results."""
        return self._negative_updates

    # --- mutations ---

    def add(self, key: VaccineKey, initial_count: int) -> Outcome:
        """Insert a new key with a non-negative count.

        Not an upsert: adding an existing key fails with DUPLICATE_ID and
        leaves its count untouched.
        """
        if not isinstance(key, VaccineKey):
            return self._bad_key(key)
        if not _is_int(initial_count) or initial_count < 0:
            return self._invalid(
                f"initial count must be a non-negative int, got {initial_count!r}"
            )

        with self._lock:
            if key in self._counts:
                return self._fail(FailureReason.DUPLICATE_ID, f"{key} already stocked")
            self._counts[key] = initial_count

        logger.debug(
            "Center %s: added %s with %d slots", self._owner, key, initial_count
        )
        return Outcome.success()

    def update(self, key: VaccineKey, delta: int) -> Outcome:
        """Add `delta` (positive or negative) to an existing key's count."""
        if not isinstance(key, VaccineKey):
            return self._bad_key(key)
        if not _is_int(delta):
            return self._invalid(f"delta must be an int, got {delta!r}")

        with self._lock:
            current = self._counts.get(key)
            if current is None:
                return self._fail(FailureReason.NOT_FOUND, f"{key} not stocked")

            new_count = current + delta
            if new_count < 0:
                match self._negative_updates:
                    case NegativeUpdatePolicy.REJECT:
                        return self._fail(
                            FailureReason.EXHAUSTED,
                            f"{key} has {current} slots; cannot apply {delta}",
                        )
                    case NegativeUpdatePolicy.CLAMP:
                        new_count = 0
                    case NegativeUpdatePolicy.ALLOW:
                        pass
            self._counts[key] = new_count

        logger.debug("Center %s: %s %d -> %d", self._owner, key, current, new_count)
        return Outcome.success()

    def remove(self, key: VaccineKey) -> Outcome:
        """Delete a key entirely, whatever its count."""
        if not isinstance(key, VaccineKey):
            return self._bad_key(key)
        with self._lock:
            if self._counts.pop(key, None) is None:
                return self._fail(FailureReason.NOT_FOUND, f"{key} not stocked")

        logger.debug("Center %s: removed %s", self._owner, key)
        return Outcome.success()

    def book(self, vaccine_type: VaccineType, dose_type: DoseType) -> Outcome:
        """Consume one slot if any is left.

        Types that are not `VaccineType`/`DoseType` instances fail with
        INVALID_INPUT.
        """
        if (key := VaccineKey.from_types(vaccine_type, dose_type)) is None:
            return self._invalid(
                f"unrecognized vaccine/dose type {vaccine_type!r}/{dose_type!r}"
            )
        with self._lock:
            current = self._counts.get(key)
            if current is None:
                return self._fail(FailureReason.NOT_FOUND, f"{key} not stocked")
            if current <= 0:
                return self._fail(FailureReason.EXHAUSTED, f"{key} fully booked")
            self._counts[key] = current - 1

        logger.debug("Center %s: booked %s (%d left)", self._owner, key, current - 1)
        return Outcome.success()

    # --- queries ---

    def has_availability(self, vaccine_type: VaccineType, dose_type: DoseType) -> bool:
        """True iff the key is stocked with at least one slot.

        Malformed types are never available.
        """
        if (key := VaccineKey.from_types(vaccine_type, dose_type)) is None:
            return False
        with self._lock:
            count = self._counts.get(key)
        return count is not None and count > 0

    def count(self, key: VaccineKey) -> int | None:
        """Current count for `key`, or None if it was never added."""
        if not isinstance(key, VaccineKey):
            return None
        with self._lock:
            return self._counts.get(key)

    def snapshot(self) -> dict[VaccineKey, int]:
        """A consistent copy of all counts."""
        with self._lock:
            return dict(self._counts)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)

    # --- helpers ---

    def _fail(self, reason: FailureReason, detail: str) -> Outcome:
        logger.info("Center %s: %s (%s)", self._owner, detail, reason.value)
        return Outcome.failure(reason, detail)

    def _invalid(self, detail: str) -> Outcome:
        return self._fail(FailureReason.INVALID_INPUT, detail)

    def _bad_key(self, key: object) -> Outcome:
        return self._invalid(f"key must be a VaccineKey, got {key!r}")


@dataclass(frozen=True, eq=False)
class Center:
    """A vaccination center.

    Conventions:
      - `center_id` is a non-empty string and the center's identity;
        equality and hashing use it alone.
      - `description` and `tags` are None when not supplied.
      - `inventory` is owned by the center; mutate it only through its methods.
      - The negative-update policy lives on the inventory. A center built
        without one gets `NegativeUpdatePolicy.REJECT`, whatever
        `VAXREG_NEGATIVE_UPDATES` says; use `Center.create(...,
        negative_updates=...)` or pass an `Inventory` to apply another.
    """

    center_id: str
    name: str
    location: Location
    description: str | None = None
    tags: frozenset[Tag] | None = None
    inventory: Inventory = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.center_id, str) or not self.center_id.strip():
            raise InvalidInputError(
                "center", self.center_id, "center_id must be a non-empty string"
            )
        if self.tags is not None:
            tags = frozenset(self.tags)
            if not all(isinstance(tag, Tag) for tag in tags):
                raise InvalidInputError(
                    "center", self.center_id, "tags must be Tag members"
                )
            object.__setattr__(self, "tags", tags)
        if self.inventory is None:
            object.__setattr__(self, "inventory", Inventory(owner=self.center_id))

    @classmethod
    def create(  # pylint: disable=too-many-arguments
        cls,
        id_generator: CenterIdGenerator,
        name: str,
        location: Location,
        *,
        description: str | None = None,
        tags: Iterable[Tag] | None = None,
        negative_updates: NegativeUpdatePolicy = NegativeUpdatePolicy.REJECT,
    ) -> Center:
        """Create a center with a freshly generated id and an empty inventory."""
        center_id = id_generator.new_id()
        return cls(
            center_id=center_id,
            name=name,
            location=location,
            description=description,
            tags=frozenset(tags) if tags is not None else None,
            inventory=Inventory(owner=center_id, negative_updates=negative_updates),
        )

    def has_tag(self, tag: Tag) -> bool:
        """True if the center carries `tag`."""
        return self.tags is not None and tag in self.tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Center):
            return NotImplemented
        return self.center_id == other.center_id

    def __hash__(self) -> int:
        return hash(self.center_id)
