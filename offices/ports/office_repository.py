"""
Office repository port (interface).

This defines the contract for office persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import abstractmethod
from typing import List

from core.ports.named_entity_repository import NamedEntityRepository
from offices.domain.office import Office


class OfficeRepository(NamedEntityRepository[Office]):
    """
    Abstract repository for Office entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def list_by_franchise_id(self, franchise_id: int) -> List[Office]:
        """
        List all offices of a franchise.

        Args:
            franchise_id: Franchise id

        Returns:
            List of Office entities, ordered by id
        """
        pass
