"""
Franchise repository port (interface).

This defines the contract for franchise persistence operations.
Implementations are in the infrastructure layer.
"""

from core.ports.named_entity_repository import NamedEntityRepository
from franchises.domain.franchise import Franchise


class FranchiseRepository(NamedEntityRepository[Franchise]):
    """
    Abstract repository for Franchise entities.

    Franchises need no query beyond the shared ones: lookup by id,
    lookup by name and save.
    """
