"""
Product domain entity.

This is the core domain entity representing a product stocked by an office.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass
from typing import Optional

from core.domain.validators import EntityValidator


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Represents a product held in stock by exactly one office.
    This is an immutable value object with business logic.
    """

    id: Optional[int]
    name: str
    stock: int
    office_id: int

    def __post_init__(self):
        """Validate and normalize product entity."""
        object.__setattr__(self, "name", EntityValidator.normalize_name(self.name, "Product"))
        EntityValidator.require_stock(self.stock)
        EntityValidator.require_reference(self.office_id, "Office id")

    @classmethod
    def create(
        cls,
        name: str,
        stock: int,
        office_id: int,
        product_id: Optional[int] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            name: Product display name
            stock: Units in stock, never negative
            office_id: Id of the office holding the product
            product_id: Optional id (assigned by storage when omitted)

        Returns:
            Product entity instance
        """
        return cls(id=product_id, name=name, stock=stock, office_id=office_id)
