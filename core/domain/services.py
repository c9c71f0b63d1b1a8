"""
Cross-aggregate domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity: keeping names unique per entity type
and making sure a child is only created under an existing parent.
"""
import logging
from typing import Any, Dict, Optional

from core.domain.exceptions import (
    FranchiseNotFoundError,
    NameConflictError,
    NotFoundError,
    OfficeNotFoundError,
)
from core.domain.validators import EntityValidator
from core.domain.value_objects import ParentKind
from core.ports.named_entity_repository import NamedEntityRepository

logger = logging.getLogger(__name__)

_NOT_FOUND_ERRORS = {
    ParentKind.FRANCHISE: FranchiseNotFoundError,
    ParentKind.OFFICE: OfficeNotFoundError,
}


class NameUniquenessGuard:
    """
    Domain service checking name collisions for one entity type.

    This is a pre-check only: the storage unique constraint remains
    the authoritative guard against concurrent writers.
    """

    def __init__(self, repository: NamedEntityRepository, entity_label: str):
        """
        Initialize guard.

        Args:
            repository: Repository of the entity type to check
            entity_label: Entity label used in error messages (e.g. "franchise")
        """
        self.repository = repository
        self.entity_label = entity_label

    async def assert_name_available(self, name: str, excluded_id: Optional[int] = None) -> None:
        """
        Ensure a name can be used by a new or updated entity.

        On create (no excluded_id) any holder of the name is a conflict.
        On update the holder may be the entity being updated itself.

        Args:
            name: Name to check, normalized before the lookup
            excluded_id: Id of the entity being updated, None on create

        Raises:
            NameConflictError: If another entity already holds the name
        """
        normalized = EntityValidator.normalize_name(name, self.entity_label.capitalize())

        if excluded_id is None:
            if await self.repository.exists_by_name(normalized):
                logger.warning("%s name %s already exists", self.entity_label, normalized)
                raise NameConflictError(
                    f"The {self.entity_label} with the name [{normalized}] already exists"
                )
            return

        holder = await self.repository.find_by_name(normalized)
        if holder is not None and holder.id != excluded_id:
            logger.warning(
                "Rejected rename of %s %s onto %s held by %s",
                self.entity_label,
                excluded_id,
                normalized,
                holder.id,
            )
            raise NameConflictError(
                f"You are trying to update the {self.entity_label} name to an existing one"
            )


class HierarchyExistenceChecker:
    """
    Domain service resolving the immediate parent of a new child.

    One checker serves every parent kind; a lookup repository is
    registered per kind.
    """

    def __init__(self, lookups: Dict[ParentKind, NamedEntityRepository]):
        """
        Initialize checker.

        Args:
            lookups: Repository used to resolve each parent kind
        """
        self.lookups = dict(lookups)

    async def assert_parent_exists(self, parent_id: Any, parent_kind: ParentKind) -> None:
        """
        Ensure the referenced parent exists.

        Args:
            parent_id: Identifier of the parent
            parent_kind: Kind of the parent

        Raises:
            FranchiseNotFoundError: If a franchise parent does not exist
            OfficeNotFoundError: If an office parent does not exist
        """
        repository = self.lookups.get(parent_kind)
        if repository is None:
            raise ValueError(f"No lookup registered for parent kind {parent_kind}")

        parent = await repository.find_by_id(parent_id)
        if parent is None:
            logger.warning("%s %s not found", parent_kind.label, parent_id)
            error_class = _NOT_FOUND_ERRORS.get(parent_kind, NotFoundError)
            raise error_class(f"Not found {parent_kind.value} {parent_id}")
