"""
Franchise use cases.

Get, create and update franchises, and list the offices of a franchise.
"""

import logging
from dataclasses import replace
from typing import List

from core.domain.exceptions import FranchiseNotFoundError, IdentifierMismatchError
from core.domain.services import NameUniquenessGuard
from core.infrastructure.events import event_bus
from franchises.domain.events import FranchiseCreated, FranchiseUpdated
from franchises.domain.franchise import Franchise
from franchises.ports.franchise_repository import FranchiseRepository
from offices.domain.office import Office
from offices.ports.office_repository import OfficeRepository

logger = logging.getLogger(__name__)


class FranchiseService:
    """Application service for the Franchise aggregate."""

    def __init__(
        self,
        franchise_repository: FranchiseRepository,
        office_repository: OfficeRepository,
    ):
        """Initialize service with repositories."""
        self.franchise_repository = franchise_repository
        self.office_repository = office_repository
        self.name_guard = NameUniquenessGuard(franchise_repository, "franchise")

    async def get_franchise(self, franchise_id: int) -> Franchise:
        """
        Get a franchise together with its offices.

        Args:
            franchise_id: Franchise id

        Returns:
            Franchise entity with its offices attached

        Raises:
            FranchiseNotFoundError: If franchise not found
        """
        logger.info("Franchise will be consulted by id %s", franchise_id)

        franchise = await self._find_franchise(franchise_id)
        offices = await self.list_offices(franchise_id)
        return franchise.with_offices(offices)

    async def create_franchise(self, franchise: Franchise) -> Franchise:
        """
        Create a franchise.

        Args:
            franchise: Validated franchise; any id it carries is ignored

        Returns:
            Persisted franchise entity

        Raises:
            NameConflictError: If another franchise already holds the name
        """
        logger.info("Creating franchise with the following features %s", franchise)

        await self.name_guard.assert_name_available(franchise.name)

        saved = await self.franchise_repository.save(replace(franchise, id=None, offices=None))

        await event_bus.publish(FranchiseCreated(franchise_id=saved.id, name=saved.name))

        return saved

    async def update_franchise(self, franchise_id: int, franchise: Franchise) -> Franchise:
        """
        Replace a franchise.

        Args:
            franchise_id: Id taken from the request path
            franchise: Validated franchise carrying the same id

        Returns:
            Persisted franchise entity

        Raises:
            IdentifierMismatchError: If franchise_id differs from franchise.id
            FranchiseNotFoundError: If franchise not found
            NameConflictError: If another franchise already holds the name
        """
        if franchise_id != franchise.id:
            logger.error("IDs do not match: path %s, payload %s", franchise_id, franchise.id)
            raise IdentifierMismatchError()

        logger.info("Updating franchise with the following features %s", franchise)

        await self._find_franchise(franchise_id)
        await self.name_guard.assert_name_available(franchise.name, excluded_id=franchise_id)

        saved = await self.franchise_repository.save(franchise.without_offices())

        await event_bus.publish(FranchiseUpdated(franchise_id=saved.id, name=saved.name))

        return saved

    async def list_offices(self, franchise_id: int) -> List[Office]:
        """
        List the offices of a franchise.

        Args:
            franchise_id: Franchise id

        Returns:
            List of Office entities, empty when the franchise has none
        """
        logger.info("Checking offices for the franchise %s", franchise_id)

        return await self.office_repository.list_by_franchise_id(franchise_id)

    async def _find_franchise(self, franchise_id: int) -> Franchise:
        franchise = await self.franchise_repository.find_by_id(franchise_id)
        if franchise is None:
            raise FranchiseNotFoundError(f"Not found franchise {franchise_id}")
        return franchise
