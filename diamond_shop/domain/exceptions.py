"""Domain exception hierarchy.

Repositories never translate persistence failures; these types cover the
conditions the data-access layer and its callers raise themselves.
"""

from __future__ import annotations


class DiamondShopError(Exception):
    """Base class for errors raised by the diamond shop backend."""


class BadRequestError(DiamondShopError):
    """Request payload failed validation.

    errors holds one human-readable message per failing field.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class NotFoundError(DiamondShopError):
    """A lookup the caller requires to succeed returned nothing."""

    def __init__(self, entity: str, id: object) -> None:
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} {id} not found")


class UnknownFieldError(DiamondShopError, ValueError):
    """A field or relation name does not exist on the entity type.

    This is a programming error in the caller, not a data condition.
    """

    def __init__(self, entity: str, field: str, kind: str = "field") -> None:
        self.entity = entity
        self.field = field
        self.kind = kind
        super().__init__(f"{entity} has no {kind} named {field!r}")


class NotSoftDeletableError(DiamondShopError, TypeError):
    """Soft delete requested for an entity type without an is_deleted flag."""

    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"{entity} does not support soft delete")
