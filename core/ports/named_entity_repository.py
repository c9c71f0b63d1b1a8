"""
Named entity repository port (interface).

Every aggregate of the hierarchy is identified by a storage-assigned id
and carries a unique, normalized name. This port holds the persistence
operations the three aggregates share; each aggregate's own port
extends it with its specific queries.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

EntityT = TypeVar("EntityT")


class NamedEntityRepository(ABC, Generic[EntityT]):
    """
    Abstract repository for entities with a unique name.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def find_by_id(self, entity_id: int) -> Optional[EntityT]:
        """
        Find an entity by ID.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity or None if not found
        """
        pass

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """
        Check whether an entity already holds a name.

        Args:
            name: Normalized name

        Returns:
            True if some entity holds the name, False otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[EntityT]:
        """
        Find the entity holding a name.

        Args:
            name: Normalized name

        Returns:
            Entity or None if no entity holds the name
        """
        pass

    @abstractmethod
    async def save(self, entity: EntityT) -> EntityT:
        """
        Save an entity.

        Entities without an id are created; the others are replaced.

        Args:
            entity: Entity to save

        Returns:
            Saved entity, with its storage-assigned id

        Raises:
            NameConflictError: If the storage unique constraint on the name fails
        """
        pass
