"""Domain-layer error definitions."""

from enum import Enum

# ============================================================================
#                           Soft failure reasons
# ============================================================================


class FailureReason(Enum):
    """Why an operation failed without mutating state."""

    DUPLICATE_ID = "duplicate_id"
    NOT_FOUND = "not_found"
    EXHAUSTED = "exhausted"
    INVALID_INPUT = "invalid_input"


# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidInputError(DomainError):
    """Raised when a value object is built from malformed data.

    Attributes:
        kind: What was being built (e.g. "vaccine type", "center").
        value: The offending value.
    """

    def __init__(self, kind: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {kind} ({value!r}): {reason}")
        self.kind = kind
        self.value = value
        self.reason = reason
