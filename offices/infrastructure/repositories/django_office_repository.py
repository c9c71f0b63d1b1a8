"""
Django implementation of OfficeRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from core.domain.exceptions import (
    DomainException,
    FranchiseNotFoundError,
    NameConflictError,
    OfficeNotFoundError,
)
from franchises.infrastructure.models import Franchise as FranchiseModel
from offices.domain.office import Office
from offices.infrastructure.models import Office as OfficeModel
from offices.ports.office_repository import OfficeRepository


class DjangoOfficeRepository(OfficeRepository):
    """
    Django ORM implementation of OfficeRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: OfficeModel) -> Office:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Office model

        Returns:
            Office domain entity
        """
        return Office(id=model.id, name=model.name, franchise_id=model.franchise_id)

    def _to_model(self, office: Office) -> OfficeModel:
        """
        Convert domain entity to Django model.

        Args:
            office: Office domain entity

        Returns:
            Django Office model
        """
        if office.id is None:
            return OfficeModel(name=office.name, franchise_id=office.franchise_id)

        model = OfficeModel.objects.get(id=office.id)
        model.name = office.name
        model.franchise_id = office.franchise_id
        return model

    @sync_to_async
    def save(self, office: Office) -> Office:
        """
        Save an office entity.

        Args:
            office: Office entity to save

        Returns:
            Saved office entity
        """
        try:
            with transaction.atomic():
                model = self._to_model(office)
                model.save()
        except OfficeModel.DoesNotExist as exc:
            raise OfficeNotFoundError(f"Not found office {office.id}") from exc
        except IntegrityError as exc:
            raise self._integrity_error(office) from exc
        return self._to_domain(model)

    def _integrity_error(self, office: Office) -> DomainException:
        """
        Map a rejected save onto the constraint that caused it.

        The franchise may have been deleted after the existence check;
        otherwise the only remaining constraint is the unique name.
        """
        if not FranchiseModel.objects.filter(id=office.franchise_id).exists():
            return FranchiseNotFoundError(f"Not found franchise {office.franchise_id}")
        return NameConflictError(f"The office with the name [{office.name}] already exists")

    @sync_to_async
    def find_by_id(self, office_id: int) -> Optional[Office]:
        """
        Find an office by ID.

        Args:
            office_id: Office id

        Returns:
            Office entity or None if not found
        """
        try:
            model = OfficeModel.objects.get(id=office_id)
            return self._to_domain(model)
        except OfficeModel.DoesNotExist:
            return None

    @sync_to_async
    def exists_by_name(self, name: str) -> bool:
        """
        Check whether an office holds a name.

        Args:
            name: Normalized office name

        Returns:
            True if an office holds the name, False otherwise
        """
        return OfficeModel.objects.filter(name=name).exists()

    @sync_to_async
    def find_by_name(self, name: str) -> Optional[Office]:
        """
        Find an office by name.

        Args:
            name: Normalized office name

        Returns:
            Office entity or None if not found
        """
        model = OfficeModel.objects.filter(name=name).first()
        return self._to_domain(model) if model else None

    @sync_to_async
    def list_by_franchise_id(self, franchise_id: int) -> List[Office]:
        """
        List all offices of a franchise.

        Args:
            franchise_id: Franchise id

        Returns:
            List of Office entities
        """
        models = OfficeModel.objects.filter(franchise_id=franchise_id).order_by("id")
        return [self._to_domain(model) for model in models]
