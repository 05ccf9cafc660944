"""Module including value objects used across the domain layer."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from .errors import FailureReason, InvalidInputError

if TYPE_CHECKING:
    from .center import Center

# pylint: disable=too-few-public-methods

_CODE_RE = re.compile(r"^[A-Z][A-Z0-9_]*$")


def _canonical_code(kind: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(kind, value, "code must be a string")
    code = value.strip().upper()
    if not _CODE_RE.match(code):
        raise InvalidInputError(
            kind, value, "code must start with a letter and use only A-Z, 0-9 and _"
        )
    return code


# --- Categories ---


@dataclass(frozen=True, slots=True)
class VaccineType:
    """Open-ended vaccine category (e.g. COVISHIELD).

    Conventions:
      - `code` is canonical uppercase; lookups are case-insensitive.
      - Well-known values are available as class attributes, but any valid
        code may be constructed.
    """

    code: str

    COVISHIELD: ClassVar[VaccineType]
    COVAXIN: ClassVar[VaccineType]
    SPUTNIK: ClassVar[VaccineType]

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", _canonical_code("vaccine type", self.code))

    @classmethod
    def of(cls, value: VaccineType | str) -> VaccineType:
        """Coerce a code (or an existing instance) into a VaccineType."""
        return value if isinstance(value, cls) else cls(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.code


VaccineType.COVISHIELD = VaccineType("COVISHIELD")
VaccineType.COVAXIN = VaccineType("COVAXIN")
VaccineType.SPUTNIK = VaccineType("SPUTNIK")


@dataclass(frozen=True, slots=True)
class DoseType:
    """Open-ended dose category (e.g. DOSE1)."""

    code: str

    DOSE1: ClassVar[DoseType]
    DOSE2: ClassVar[DoseType]
    PRECAUTION: ClassVar[DoseType]

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", _canonical_code("dose type", self.code))

    @classmethod
    def of(cls, value: DoseType | str) -> DoseType:
        """Coerce a code (or an existing instance) into a DoseType."""
        return value if isinstance(value, cls) else cls(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.code


DoseType.DOSE1 = DoseType("DOSE1")
DoseType.DOSE2 = DoseType("DOSE2")
DoseType.PRECAUTION = DoseType("PRECAUTION")


@dataclass(frozen=True, slots=True)
class VaccineKey:
    """Inventory key pairing a vaccine type with a dose type."""

    vaccine_type: VaccineType
    dose_type: DoseType

    def __post_init__(self) -> None:
        if not isinstance(self.vaccine_type, VaccineType):
            raise InvalidInputError(
                "vaccine key", self.vaccine_type, "vaccine_type must be a VaccineType"
            )
        if not isinstance(self.dose_type, DoseType):
            raise InvalidInputError(
                "vaccine key", self.dose_type, "dose_type must be a DoseType"
            )

    @classmethod
    def of(
        cls, vaccine_type: VaccineType | str, dose_type: DoseType | str
    ) -> VaccineKey:
        """Build a key from instances or raw codes."""
        return cls(VaccineType.of(vaccine_type), DoseType.of(dose_type))

    @classmethod
    def from_types(cls, vaccine_type: object, dose_type: object) -> VaccineKey | None:
        """Build a key from instances only; None if either is not one.

        Unlike `of`, raw codes are not coerced and nothing is raised, so
        callers can turn malformed input into a soft failure.
        """
        if isinstance(vaccine_type, VaccineType) and isinstance(dose_type, DoseType):
            return cls(vaccine_type, dose_type)
        return None

    def __str__(self) -> str:
        return f"{self.vaccine_type}-{self.dose_type}"


class Tag(Enum):
    """Enumeration of center categories."""

    PHC = "phc"
    PVT_HOSPITAL = "pvt_hospital"
    SCHOOL = "school"


@dataclass(frozen=True, slots=True)
class Location:
    """Postal location of a center. Opaque to inventory logic."""

    pincode: int
    address_line1: str
    address_line2: str
    city: str


# --- Search ---


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """A single (vaccine type, dose type) search predicate."""

    vaccine_type: VaccineType
    dose_type: DoseType

    @property
    def key(self) -> VaccineKey:
        """The inventory key this predicate tests."""
        return VaccineKey(self.vaccine_type, self.dose_type)


@dataclass(frozen=True, slots=True)
class SearchResponse:
    """Centers matching a search, with their count."""

    count: int
    centers: tuple[Center, ...]

    @classmethod
    def of(cls, centers: Iterable[Center]) -> SearchResponse:
        """Build a response; `count` is derived from `centers`."""
        matched = tuple(centers)
        return cls(count=len(matched), centers=matched)


# --- Results ---


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of an operation that fails softly.

    An Outcome is truthy iff the operation succeeded, so callers that only
    need the boolean can write ``if registry.book_slot(...):``.

    `detail` explains a failure; on success it may name the affected entity
    (registering a center reports the center id).
    """

    ok: bool
    reason: FailureReason | None = None
    detail: str | None = None

    @classmethod
    def success(cls, detail: str | None = None) -> Outcome:
        """A successful outcome, optionally naming what was affected."""
        return cls(ok=True, detail=detail)

    @classmethod
    def failure(cls, reason: FailureReason, detail: str | None = None) -> Outcome:
        """A failed outcome with its reason."""
        return cls(ok=False, reason=reason, detail=detail)

    def __bool__(self) -> bool:
        return self.ok
