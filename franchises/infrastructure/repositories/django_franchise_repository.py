"""
Django implementation of FranchiseRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from typing import Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from core.domain.exceptions import FranchiseNotFoundError, NameConflictError
from franchises.domain.franchise import Franchise
from franchises.infrastructure.models import Franchise as FranchiseModel
from franchises.ports.franchise_repository import FranchiseRepository


class DjangoFranchiseRepository(FranchiseRepository):
    """
    Django ORM implementation of FranchiseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: FranchiseModel) -> Franchise:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Franchise model

        Returns:
            Franchise domain entity
        """
        return Franchise(id=model.id, name=model.name)

    def _to_model(self, franchise: Franchise) -> FranchiseModel:
        """
        Convert domain entity to Django model.

        Unsaved entities map to a new model; the others to the stored row.

        Args:
            franchise: Franchise domain entity

        Returns:
            Django Franchise model
        """
        if franchise.id is None:
            return FranchiseModel(name=franchise.name)

        # pylint: disable=no-member
        model = FranchiseModel.objects.get(id=franchise.id)
        model.name = franchise.name
        return model

    @sync_to_async
    def save(self, franchise: Franchise) -> Franchise:
        """
        Save a franchise entity.

        Args:
            franchise: Franchise entity to save

        Returns:
            Saved franchise entity
        """
        try:
            with transaction.atomic():
                model = self._to_model(franchise)
                model.save()
        except FranchiseModel.DoesNotExist as exc:  # pylint: disable=no-member
            raise FranchiseNotFoundError(f"Not found franchise {franchise.id}") from exc
        except IntegrityError as exc:
            raise NameConflictError(
                f"The franchise with the name [{franchise.name}] already exists"
            ) from exc
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, franchise_id: int) -> Optional[Franchise]:
        """
        Find a franchise by ID.

        Args:
            franchise_id: Franchise id

        Returns:
            Franchise entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = FranchiseModel.objects.get(id=franchise_id)
            return self._to_domain(model)
        except FranchiseModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def exists_by_name(self, name: str) -> bool:
        """
        Check whether a franchise holds a name.

        Args:
            name: Normalized franchise name

        Returns:
            True if a franchise holds the name, False otherwise
        """
        # pylint: disable=no-member
        return FranchiseModel.objects.filter(name=name).exists()

    @sync_to_async
    def find_by_name(self, name: str) -> Optional[Franchise]:
        """
        Find a franchise by name.

        Args:
            name: Normalized franchise name

        Returns:
            Franchise entity or None if not found
        """
        # pylint: disable=no-member
        model = FranchiseModel.objects.filter(name=name).first()
        return self._to_domain(model) if model else None
