"""
Office use cases.

Get, create and update offices. An office can only be created under
an existing franchise and never moves to another one.
"""

import logging
from dataclasses import replace

from core.domain.exceptions import (
    IdentifierMismatchError,
    OfficeNotFoundError,
    ParentReassignmentError,
)
from core.domain.services import HierarchyExistenceChecker, NameUniquenessGuard
from core.domain.value_objects import ParentKind
from core.infrastructure.events import event_bus
from core.ports.named_entity_repository import NamedEntityRepository
from offices.domain.events import OfficeCreated, OfficeUpdated
from offices.domain.office import Office
from offices.ports.office_repository import OfficeRepository

logger = logging.getLogger(__name__)


class OfficeService:
    """Application service for the Office aggregate."""

    def __init__(
        self,
        office_repository: OfficeRepository,
        franchise_repository: NamedEntityRepository,
    ):
        """
        Initialize service with repositories.

        Args:
            office_repository: Office persistence
            franchise_repository: Lookup used to resolve the parent franchise
        """
        self.office_repository = office_repository
        self.name_guard = NameUniquenessGuard(office_repository, "office")
        self.hierarchy_checker = HierarchyExistenceChecker(
            {ParentKind.FRANCHISE: franchise_repository}
        )

    async def get_office(self, office_id: int) -> Office:
        """
        Get an office.

        Args:
            office_id: Office id

        Returns:
            Office entity

        Raises:
            OfficeNotFoundError: If office not found
        """
        logger.info("Office will be consulted by id %s", office_id)

        office = await self.office_repository.find_by_id(office_id)
        if office is None:
            raise OfficeNotFoundError(f"Not found office {office_id}")
        return office

    async def create_office(self, office: Office) -> Office:
        """
        Create an office under an existing franchise.

        Args:
            office: Validated office; any id it carries is ignored

        Returns:
            Persisted office entity

        Raises:
            FranchiseNotFoundError: If the franchise does not exist
            NameConflictError: If another office already holds the name
        """
        logger.info("Creating office with the following features %s", office)

        await self.hierarchy_checker.assert_parent_exists(
            office.franchise_id, ParentKind.FRANCHISE
        )
        await self.name_guard.assert_name_available(office.name)

        saved = await self.office_repository.save(replace(office, id=None))

        await event_bus.publish(
            OfficeCreated(office_id=saved.id, franchise_id=saved.franchise_id, name=saved.name)
        )

        return saved

    async def update_office(self, office_id: int, office: Office) -> Office:
        """
        Replace an office.

        Args:
            office_id: Id taken from the request path
            office: Validated office carrying the same id

        Returns:
            Persisted office entity

        Raises:
            IdentifierMismatchError: If office_id differs from office.id
            OfficeNotFoundError: If office not found
            ParentReassignmentError: If the franchise reference changes
            NameConflictError: If another office already holds the name
        """
        if office_id != office.id:
            logger.error("IDs do not match: path %s, payload %s", office_id, office.id)
            raise IdentifierMismatchError()

        logger.info("Updating office with the following features %s", office)

        current = await self.get_office(office_id)
        if office.franchise_id != current.franchise_id:
            logger.warning(
                "Rejected move of office %s from franchise %s to %s",
                office_id,
                current.franchise_id,
                office.franchise_id,
            )
            raise ParentReassignmentError("An office cannot be moved to another franchise")

        await self.name_guard.assert_name_available(office.name, excluded_id=office_id)

        saved = await self.office_repository.save(office)

        await event_bus.publish(
            OfficeUpdated(office_id=saved.id, franchise_id=saved.franchise_id, name=saved.name)
        )

        return saved
