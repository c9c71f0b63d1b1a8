"""
Product domain events.

Domain events represent something that happened in the product domain.
"""
from dataclasses import dataclass

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ProductCreated(DomainEvent):
    """Event raised when a product is created."""

    product_id: int
    office_id: int
    name: str
    stock: int

    @property
    def aggregate_id(self) -> str:
        return str(self.product_id)


@dataclass(frozen=True, kw_only=True)
class ProductUpdated(DomainEvent):
    """Event raised when a product is updated."""

    product_id: int
    office_id: int
    name: str
    stock: int

    @property
    def aggregate_id(self) -> str:
        return str(self.product_id)


@dataclass(frozen=True, kw_only=True)
class ProductDeleted(DomainEvent):
    """Event raised when a product is deleted."""

    product_id: int
    office_id: int

    @property
    def aggregate_id(self) -> str:
        return str(self.product_id)
