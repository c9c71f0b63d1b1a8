"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, connection, transaction

from core.domain.exceptions import (
    DomainException,
    NameConflictError,
    OfficeNotFoundError,
    ProductNotFoundError,
)
from offices.infrastructure.models import Office as OfficeModel
from products.domain.product import Product
from products.domain.services import TopStockSelector
from products.infrastructure.models import Product as ProductModel
from products.ports.product_repository import ProductRepository


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            name=model.name,
            stock=model.stock,
            office_id=model.office_id,
        )

    def _to_model(self, product: Product) -> ProductModel:
        """
        Convert domain entity to Django model.

        Args:
            product: Product domain entity

        Returns:
            Django Product model
        """
        if product.id is None:
            return ProductModel(
                name=product.name,
                stock=product.stock,
                office_id=product.office_id,
            )

        model = ProductModel.objects.get(id=product.id)
        model.name = product.name
        model.stock = product.stock
        model.office_id = product.office_id
        return model

    @sync_to_async
    def save(self, product: Product) -> Product:
        """
        Save a product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        try:
            with transaction.atomic():
                model = self._to_model(product)
                model.save()
        except ProductModel.DoesNotExist as exc:
            raise ProductNotFoundError(f"Not found product {product.id}") from exc
        except IntegrityError as exc:
            raise self._integrity_error(product) from exc
        return self._to_domain(model)

    def _integrity_error(self, product: Product) -> DomainException:
        """
        Map a rejected save onto the constraint that caused it.

        The office may have been deleted after the existence check;
        otherwise the only remaining constraint is the unique name.
        """
        if not OfficeModel.objects.filter(id=product.office_id).exists():
            return OfficeNotFoundError(f"Not found office {product.office_id}")
        return NameConflictError(f"The product with the name [{product.name}] already exists")

    @sync_to_async
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product id

        Returns:
            Product entity or None if not found
        """
        try:
            model = ProductModel.objects.get(id=product_id)
            return self._to_domain(model)
        except ProductModel.DoesNotExist:
            return None

    @sync_to_async
    def exists_by_name(self, name: str) -> bool:
        """
        Check whether a product holds a name.

        Args:
            name: Normalized product name

        Returns:
            True if a product holds the name, False otherwise
        """
        return ProductModel.objects.filter(name=name).exists()

    @sync_to_async
    def find_by_name(self, name: str) -> Optional[Product]:
        """
        Find a product by name.

        Args:
            name: Normalized product name

        Returns:
            Product entity or None if not found
        """
        model = ProductModel.objects.filter(name=name).first()
        return self._to_domain(model) if model else None

    @sync_to_async
    def delete(self, product: Product) -> None:
        """
        Delete a product entity.

        Args:
            product: Persisted product to delete
        """
        ProductModel.objects.filter(id=product.id).delete()

    @sync_to_async
    def top_stock_by_office(self, franchise_id: int) -> List[Product]:
        """
        Find the product with the most stock in each office of a franchise.

        Args:
            franchise_id: Franchise id

        Returns:
            List of Product entities, one per office
        """
        qs = ProductModel.objects.filter(office__franchise_id=franchise_id).order_by(
            "office_id", "-stock", "id"
        )
        # PostgreSQL can keep only the first row of each office server-side
        if connection.vendor == "postgresql":
            qs = qs.distinct("office_id")
        return TopStockSelector.select(self._to_domain(model) for model in qs)
