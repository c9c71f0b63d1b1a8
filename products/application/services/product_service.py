"""
Product use cases.

Get, create, update and delete products, and report the product with
the most stock in each office of a franchise.
"""

import logging
from dataclasses import replace
from typing import List

from core.domain.exceptions import (
    IdentifierMismatchError,
    ParentReassignmentError,
    ProductNotFoundError,
)
from core.domain.services import HierarchyExistenceChecker, NameUniquenessGuard
from core.domain.value_objects import ParentKind
from core.infrastructure.events import event_bus
from core.ports.named_entity_repository import NamedEntityRepository
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated
from products.domain.product import Product
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Application service for the Product aggregate."""

    def __init__(
        self,
        product_repository: ProductRepository,
        office_repository: NamedEntityRepository,
    ):
        """
        Initialize service with repositories.

        Args:
            product_repository: Product persistence
            office_repository: Lookup used to resolve the parent office
        """
        self.product_repository = product_repository
        self.name_guard = NameUniquenessGuard(product_repository, "product")
        self.hierarchy_checker = HierarchyExistenceChecker({ParentKind.OFFICE: office_repository})

    async def get_product(self, product_id: int) -> Product:
        """
        Get a product.

        Args:
            product_id: Product id

        Returns:
            Product entity

        Raises:
            ProductNotFoundError: If product not found
        """
        logger.info("Product will be consulted by id %s", product_id)

        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Not found product {product_id}")
        return product

    async def create_product(self, product: Product) -> Product:
        """
        Create a product in an existing office.

        Args:
            product: Validated product; any id it carries is ignored

        Returns:
            Persisted product entity

        Raises:
            OfficeNotFoundError: If the office does not exist
            NameConflictError: If another product already holds the name
        """
        logger.info("Creating product with the following features %s", product)

        await self.hierarchy_checker.assert_parent_exists(product.office_id, ParentKind.OFFICE)
        await self.name_guard.assert_name_available(product.name)

        saved = await self.product_repository.save(replace(product, id=None))

        await event_bus.publish(
            ProductCreated(
                product_id=saved.id,
                office_id=saved.office_id,
                name=saved.name,
                stock=saved.stock,
            )
        )

        return saved

    async def update_product(self, product_id: int, product: Product) -> Product:
        """
        Replace a product.

        Args:
            product_id: Id taken from the request path
            product: Validated product carrying the same id

        Returns:
            Persisted product entity

        Raises:
            IdentifierMismatchError: If product_id differs from product.id
            ProductNotFoundError: If product not found
            ParentReassignmentError: If the office reference changes
            NameConflictError: If another product already holds the name
        """
        if product_id != product.id:
            logger.error("IDs do not match: path %s, payload %s", product_id, product.id)
            raise IdentifierMismatchError()

        logger.info("Updating product with the following features %s", product)

        current = await self.get_product(product_id)
        if product.office_id != current.office_id:
            logger.warning(
                "Rejected move of product %s from office %s to %s",
                product_id,
                current.office_id,
                product.office_id,
            )
            raise ParentReassignmentError("A product cannot be moved to another office")

        await self.name_guard.assert_name_available(product.name, excluded_id=product_id)

        saved = await self.product_repository.save(product)

        await event_bus.publish(
            ProductUpdated(
                product_id=saved.id,
                office_id=saved.office_id,
                name=saved.name,
                stock=saved.stock,
            )
        )

        return saved

    async def delete_product(self, product_id: int) -> None:
        """
        Delete a product.

        Args:
            product_id: Product id

        Raises:
            ProductNotFoundError: If product not found
        """
        logger.info("Deleting product by id %s", product_id)

        product = await self.get_product(product_id)
        await self.product_repository.delete(product)

        await event_bus.publish(ProductDeleted(product_id=product.id, office_id=product.office_id))

    async def top_stock_by_franchise(self, franchise_id: int) -> List[Product]:
        """
        Get the product with the most stock in each office of a franchise.

        Args:
            franchise_id: Franchise id

        Returns:
            One product per office that has products, ordered by office id
        """
        logger.info("Checking products with more stock for the franchise %s", franchise_id)

        return await self.product_repository.top_stock_by_office(franchise_id)
