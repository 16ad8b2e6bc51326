"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Each subclass has a ``kind`` and the ``status`` a transport layer would
report for it, so callers can branch on the error without string matching.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "domain"
    status = 400

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        entity_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = "validation"
    status = 422


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = "not_found"
    status = 404


class PreconditionFailedError(DomainException):
    """An operation's precondition (e.g. association membership) is not met."""

    kind = "precondition_failed"
    status = 412


# Stable messages, relied on by callers and tests.
PRODUCT_NOT_FOUND = "The product with the given id was not found"
STORE_NOT_FOUND = "The store with the given id was not found"
STORE_NOT_ASSOCIATED = "The store with the given id is not associated to the product"
INVALID_PRODUCT = "Invalid product data"
