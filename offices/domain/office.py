"""
Office domain entity.

This is the core domain entity representing an office of a franchise.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass
from typing import Optional

from core.domain.validators import EntityValidator


@dataclass(frozen=True)
class Office:
    """
    Office domain entity.

    Represents an office belonging to exactly one franchise.
    This is an immutable value object with business logic.
    """

    id: Optional[int]
    name: str
    franchise_id: int

    def __post_init__(self):
        """Validate and normalize office entity."""
        object.__setattr__(self, "name", EntityValidator.normalize_name(self.name, "Office"))
        EntityValidator.require_reference(self.franchise_id, "Franchise id")

    @classmethod
    def create(
        cls,
        name: str,
        franchise_id: int,
        office_id: Optional[int] = None,
    ) -> "Office":
        """
        Create a new Office entity.

        Args:
            name: Office display name
            franchise_id: Id of the franchise this office belongs to
            office_id: Optional id (assigned by storage when omitted)

        Returns:
            Office entity instance
        """
        return cls(id=office_id, name=name, franchise_id=franchise_id)
