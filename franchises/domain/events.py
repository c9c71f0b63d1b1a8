"""
Franchise domain events.

Domain events represent something that happened in the franchise domain.
"""
from dataclasses import dataclass

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class FranchiseCreated(DomainEvent):
    """Event raised when a franchise is created."""

    franchise_id: int
    name: str

    @property
    def aggregate_id(self) -> str:
        return str(self.franchise_id)


@dataclass(frozen=True, kw_only=True)
class FranchiseUpdated(DomainEvent):
    """Event raised when a franchise is updated."""

    franchise_id: int
    name: str

    @property
    def aggregate_id(self) -> str:
        return str(self.franchise_id)
