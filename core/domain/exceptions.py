"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainException, ValueError):
    """Raised when an entity is built from malformed input."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(DomainException):
    """Base exception for entities that could not be resolved."""

    def __init__(self, message: str = "Not found", code: str = "NOT_FOUND"):
        super().__init__(message, code=code)


class FranchiseNotFoundError(NotFoundError):
    """Raised when a franchise is not found."""

    def __init__(self, message: str = "Franchise not found"):
        super().__init__(message, code="FRANCHISE_NOT_FOUND")


class OfficeNotFoundError(NotFoundError):
    """Raised when an office is not found."""

    def __init__(self, message: str = "Office not found"):
        super().__init__(message, code="OFFICE_NOT_FOUND")


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class NameConflictError(DomainException):
    """Raised when a name already belongs to a different record."""

    def __init__(self, message: str = "Name already in use"):
        super().__init__(message, code="NAME_CONFLICT")


class IdentifierMismatchError(DomainException):
    """Raised when the path identifier disagrees with the payload identifier."""

    def __init__(self, message: str = "IDs do not match"):
        super().__init__(message, code="IDENTIFIER_MISMATCH")


class ParentReassignmentError(DomainException):
    """Raised when an update tries to move an entity under another parent."""

    def __init__(self, message: str = "Changing the parent reference is not supported"):
        super().__init__(message, code="PARENT_REASSIGNMENT_NOT_SUPPORTED")
