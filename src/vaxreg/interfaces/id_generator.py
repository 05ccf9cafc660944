"""Interface for center id generators."""

import abc

# pylint: disable=too-few-public-methods


class CenterIdGenerator(abc.ABC):
    """Contract for a generator of unique center ids."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique, non-empty center id."""
