"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from enum import Enum


class ParentKind(Enum):
    """Kind of aggregate that can own children in the hierarchy."""

    FRANCHISE = "franchise"
    OFFICE = "office"

    def __str__(self) -> str:
        """Return kind as string."""
        return self.value

    @property
    def label(self) -> str:
        """Human-readable label used in error messages."""
        return self.value.capitalize()
