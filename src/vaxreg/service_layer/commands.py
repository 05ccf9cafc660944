"""Module defining Commands."""

from dataclasses import dataclass

from vaxreg.domain.value_objects import (
    DoseType,
    Location,
    SearchRequest,
    Tag,
    VaccineKey,
    VaccineType,
)


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class AddCenter(Command):
    """Command to register a new center.

    `center_id` is generated when left as None.
    """

    name: str
    location: Location
    description: str | None = None
    tags: frozenset[Tag] | None = None
    center_id: str | None = None


@dataclass(frozen=True)
class AddAvailability(Command):
    """Command to stock a new (vaccine, dose) key at a center."""

    center_id: str
    key: VaccineKey
    count: int


@dataclass(frozen=True)
class UpdateAvailability(Command):
    """Command to add a (possibly negative) delta to a stocked key."""

    center_id: str
    key: VaccineKey
    delta: int


@dataclass(frozen=True)
class RemoveAvailability(Command):
    """Command to delete a stocked key from a center."""

    center_id: str
    key: VaccineKey


@dataclass(frozen=True)
class BookSlot(Command):
    """Command to consume one slot at a center."""

    center_id: str
    vaccine_type: VaccineType
    dose_type: DoseType


@dataclass(frozen=True)
class SearchCenters(Command):
    """Command to find centers matching any of `requests`."""

    requests: tuple[SearchRequest, ...]
