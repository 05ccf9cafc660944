"""In-memory CenterRegistry implementation.

Centers live in a dict keyed by center id, in insertion order, for the
lifetime of the registry instance.

Thread-safety
-------------
- `add_center()` inserts under the registry lock, so concurrent adds for the
  same id have exactly one winner.
- Inventory operations resolve the center with a single dict lookup and then
  run under *that center's* lock; the registry lock is never held while an
  inventory is touched, so centers progress independently.
- Searches iterate over a copy of the center list taken under the registry
  lock and read each inventory under its own lock. A search may miss a slot
  added mid-scan but never sees a torn count.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from vaxreg.domain.center import Center
from vaxreg.domain.errors import FailureReason
from vaxreg.domain.value_objects import (
    DoseType,
    Outcome,
    SearchRequest,
    SearchResponse,
    VaccineKey,
    VaccineType,
)
from vaxreg.interfaces.center_registry import CenterRegistry

__all__ = ["InMemoryCenterRegistry"]

logger = logging.getLogger(__name__)


class InMemoryCenterRegistry(CenterRegistry):
    """Thread-safe in-memory registry of vaccination centers."""

    def __init__(self) -> None:
        self._centers: dict[str, Center] = {}
        self._lock = threading.Lock()

    # --- centers ---

    def add_center(self, center: Center) -> Outcome:
        with self._lock:
            if center.center_id in self._centers:
                logger.info("Center %s already registered", center.center_id)
                return Outcome.failure(
                    FailureReason.DUPLICATE_ID,
                    f"center {center.center_id} already registered",
                )
            self._centers[center.center_id] = center
        logger.debug("Registered center %s (%s)", center.center_id, center.name)
        return Outcome.success(center.center_id)

    def get(self, center_id: str) -> Center | None:
        return self._centers.get(center_id)

    def __iter__(self) -> Iterator[Center]:
        return iter(self._all_centers())

    def __len__(self) -> int:
        return len(self._centers)

    # --- availability ---

    def add_availability(self, center_id: str, key: VaccineKey, count: int) -> Outcome:
        if (center := self.get(center_id)) is None:
            return self._unknown_center(center_id)
        return center.inventory.add(key, count)

    def update_availability(
        self, center_id: str, key: VaccineKey, delta: int
    ) -> Outcome:
        if (center := self.get(center_id)) is None:
            return self._unknown_center(center_id)
        return center.inventory.update(key, delta)

    def remove_availability(self, center_id: str, key: VaccineKey) -> Outcome:
        if (center := self.get(center_id)) is None:
            return self._unknown_center(center_id)
        return center.inventory.remove(key)

    def book_slot(
        self, center_id: str, vaccine_type: VaccineType, dose_type: DoseType
    ) -> Outcome:
        if (center := self.get(center_id)) is None:
            return self._unknown_center(center_id)
        return center.inventory.book(vaccine_type, dose_type)

    def availability(self, center_id: str, key: VaccineKey) -> int | None:
        if (center := self.get(center_id)) is None:
            return None
        return center.inventory.count(key)

    # --- search ---

    def search(self, vaccine_type: VaccineType, dose_type: DoseType) -> SearchResponse:
        return SearchResponse.of(
            center
            for center in self._all_centers()
            if center.inventory.has_availability(vaccine_type, dose_type)
        )

    def search_any(self, requests: Iterable[SearchRequest]) -> SearchResponse:
        keys = (VaccineKey.from_types(r.vaccine_type, r.dose_type) for r in requests)
        # malformed predicates match nothing
        predicates = list(dict.fromkeys(key for key in keys if key is not None))
        return SearchResponse.of(
            center
            for center in self._all_centers()
            if any(
                center.inventory.has_availability(key.vaccine_type, key.dose_type)
                for key in predicates
            )
        )

    # --- helpers ---

    def _all_centers(self) -> list[Center]:
        with self._lock:
            return list(self._centers.values())

    @staticmethod
    def _unknown_center(center_id: str) -> Outcome:
        logger.info("Center %s not registered", center_id)
        return Outcome.failure(
            FailureReason.NOT_FOUND, f"center {center_id} not registered"
        )
