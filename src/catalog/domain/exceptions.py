"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object or entity invariant was violated."""


class CatalogDomainException(DomainException):
    """A catalog business rule was violated (not a missing entity)."""


class ConcurrentModificationError(CatalogDomainException):
    """The stored aggregate changed since it was loaded."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    default_message = "Entity not found."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class CategoryNotFoundException(EntityNotFoundError):

    default_message = "Category not found."


class ProductNotFoundException(EntityNotFoundError):

    default_message = "Product not found."
