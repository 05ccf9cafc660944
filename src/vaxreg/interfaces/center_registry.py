"""Interface for the Center Registry.

Defines the `CenterRegistry` abstraction that owns the set of vaccination
centers, routes per-center inventory operations by center id, and searches
across all centers for availability.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vaxreg.domain.center import Center
    from vaxreg.domain.value_objects import (
        DoseType,
        Outcome,
        SearchRequest,
        SearchResponse,
        VaccineKey,
        VaccineType,
    )


class CenterRegistry(abc.ABC):
    """Center id → Center mapping with delegated inventory operations and search.

    Every operation resolving a center by id fails softly: an unknown id yields
    an `Outcome` with `FailureReason.NOT_FOUND`, never an exception.
    """

    # --- centers ---

    @abc.abstractmethod
    def add_center(self, center: Center) -> Outcome:
        """Add a center if its id is not registered yet.

        Insertion is atomic per id: of two concurrent adds for the same id,
        exactly one succeeds. An existing center is never overwritten. The
        center keeps the negative-update policy its inventory was built with.

        Returns:
            A successful Outcome, or one with DUPLICATE_ID.
        """

    @abc.abstractmethod
    def get(self, center_id: str) -> Center | None:
        """Return the center registered under `center_id`, or None."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[Center]:
        """Iterate over registered centers in insertion order."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Number of registered centers."""

    def __contains__(self, center_id: object) -> bool:
        return isinstance(center_id, str) and self.get(center_id) is not None

    # --- availability ---

    @abc.abstractmethod
    def add_availability(self, center_id: str, key: VaccineKey, count: int) -> Outcome:
        """Stock a new (vaccine, dose) key at a center.

        Returns:
            A successful Outcome, or one with NOT_FOUND (unknown center),
            DUPLICATE_ID (key already stocked) or INVALID_INPUT.
        """

    @abc.abstractmethod
    def update_availability(
        self, center_id: str, key: VaccineKey, delta: int
    ) -> Outcome:
        """Add `delta` to an already stocked key at a center.

        The update is additive, not a set-to-value. What happens when the
        result would be negative depends on the center inventory's
        `NegativeUpdatePolicy`.

        Returns:
            A successful Outcome, or one with NOT_FOUND (unknown center or
            key), EXHAUSTED (rejected negative result) or INVALID_INPUT.
        """

    @abc.abstractmethod
    def remove_availability(self, center_id: str, key: VaccineKey) -> Outcome:
        """Delete a stocked key at a center, regardless of its count.

        Returns:
            A successful Outcome, or one with NOT_FOUND (unknown center or key).
        """

    @abc.abstractmethod
    def book_slot(
        self, center_id: str, vaccine_type: VaccineType, dose_type: DoseType
    ) -> Outcome:
        """Consume one slot at a center.

        Returns:
            A successful Outcome, or one with NOT_FOUND (unknown center or
            key), EXHAUSTED (no slots left) or INVALID_INPUT (types that
            are not VaccineType/DoseType instances).
        """

    @abc.abstractmethod
    def availability(self, center_id: str, key: VaccineKey) -> int | None:
        """Current count for `key` at a center, or None if either is unknown."""

    # --- search ---

    @abc.abstractmethod
    def search(self, vaccine_type: VaccineType, dose_type: DoseType) -> SearchResponse:
        """Find centers with at least one slot for (vaccine_type, dose_type).

        Centers appear in registry insertion order. Malformed types match
        no center.
        """

    @abc.abstractmethod
    def search_any(self, requests: Iterable[SearchRequest]) -> SearchResponse:
        """Find centers matching *any* of the requests (logical OR).

        A center matching several requests appears once. Centers appear in
        registry insertion order.
        """
