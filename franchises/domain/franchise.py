"""
Franchise domain entity.

This is the root aggregate of the hierarchy.
It contains business logic and is independent of infrastructure.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from core.domain.validators import EntityValidator
from offices.domain.office import Office


@dataclass(frozen=True)
class Franchise:
    """
    Franchise domain entity.

    Represents a franchise owning zero or more offices.
    This is an immutable value object with business logic.

    ``offices`` is a view-time attribute: it is only populated when the
    franchise is retrieved in detail, and is None otherwise.
    """

    id: Optional[int]
    name: str
    offices: Optional[Tuple[Office, ...]] = None

    def __post_init__(self):
        """Validate and normalize franchise entity."""
        object.__setattr__(self, "name", EntityValidator.normalize_name(self.name, "Franchise"))
        if self.offices is not None:
            object.__setattr__(self, "offices", tuple(self.offices))

    @classmethod
    def create(cls, name: str, franchise_id: Optional[int] = None) -> "Franchise":
        """
        Create a new Franchise entity.

        Args:
            name: Franchise display name
            franchise_id: Optional id (assigned by storage when omitted)

        Returns:
            Franchise entity instance
        """
        return cls(id=franchise_id, name=name)

    def with_offices(self, offices: Iterable[Office]) -> "Franchise":
        """
        Create a view of this franchise with its offices attached.

        Args:
            offices: Offices belonging to the franchise

        Returns:
            New Franchise instance carrying the offices
        """
        return replace(self, offices=tuple(offices))

    def without_offices(self) -> "Franchise":
        """Return the persisted form of this franchise, with no office view."""
        return replace(self, offices=None)
