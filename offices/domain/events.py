"""
Office domain events.

Domain events represent something that happened in the office domain.
"""
from dataclasses import dataclass

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OfficeCreated(DomainEvent):
    """Event raised when an office is created."""

    office_id: int
    franchise_id: int
    name: str

    @property
    def aggregate_id(self) -> str:
        return str(self.office_id)


@dataclass(frozen=True, kw_only=True)
class OfficeUpdated(DomainEvent):
    """Event raised when an office is updated."""

    office_id: int
    franchise_id: int
    name: str

    @property
    def aggregate_id(self) -> str:
        return str(self.office_id)
