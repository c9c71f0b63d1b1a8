"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import abstractmethod
from typing import List

from core.ports.named_entity_repository import NamedEntityRepository
from products.domain.product import Product


class ProductRepository(NamedEntityRepository[Product]):
    """
    Abstract repository for Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def delete(self, product: Product) -> None:
        """
        Delete a product entity.

        Args:
            product: Persisted product to delete
        """
        pass

    @abstractmethod
    async def top_stock_by_office(self, franchise_id: int) -> List[Product]:
        """
        Find the product with the most stock in each office of a franchise.

        Implementations must follow TopStockSelector semantics: one product
        per office, ties broken by lowest id, ordered by office id.

        Args:
            franchise_id: Franchise id

        Returns:
            List of Product entities
        """
        pass
