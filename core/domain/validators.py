"""
Entity validation rules shared by every aggregate.

Every rule is a pure function of its input and raises ValidationError
on malformed values, so entities can run them at construction time.
"""
from typing import Any

from core.domain.exceptions import ValidationError

MAX_NAME_LENGTH = 255
# Largest value every supported backend stores in a PositiveIntegerField
MAX_STOCK = 2_147_483_647


class EntityValidator:
    """Domain service holding the construction-time invariants."""

    @staticmethod
    def normalize_name(name: Any, entity_label: str) -> str:
        """
        Validate and normalize an entity name.

        Args:
            name: Raw name as received from the caller
            entity_label: Entity label used in error messages (e.g. "Franchise")

        Returns:
            The trimmed, upper-cased name

        Raises:
            ValidationError: If the name is missing, not text, blank or too long
        """
        if name is None or not isinstance(name, str) or not name.strip():
            raise ValidationError(f"{entity_label} name cannot be null or blank")

        normalized = name.strip().upper()
        if len(normalized) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"{entity_label} name cannot exceed {MAX_NAME_LENGTH} characters"
            )
        return normalized

    @staticmethod
    def require_reference(reference: Any, field_label: str) -> Any:
        """
        Ensure a mandatory parent reference is present.

        Args:
            reference: Parent identifier
            field_label: Label used in the error message (e.g. "Franchise id")

        Returns:
            The reference unchanged

        Raises:
            ValidationError: If the reference is missing
        """
        if reference is None:
            raise ValidationError(f"{field_label} cannot be null")
        return reference

    @staticmethod
    def require_stock(stock: Any) -> int:
        """
        Ensure a stock count is an integer between 0 and MAX_STOCK.

        Raises:
            ValidationError: If stock is missing, not an integer or out of range
        """
        # bool is an int subclass
        if stock is None or isinstance(stock, bool) or not isinstance(stock, int):
            raise ValidationError("Product stock must be an integer")
        if stock < 0:
            raise ValidationError("Product stock cannot be negative")
        if stock > MAX_STOCK:
            raise ValidationError(f"Product stock cannot exceed {MAX_STOCK}")
        return stock
