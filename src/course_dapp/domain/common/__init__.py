"""Shared domain building blocks: typed identifiers, entities and domain errors."""

from .entity import Entity, EntityId
from .exceptions import (
    AuthorizationError,
    DomainError,
    ValidationError,
)

__all__ = [
    "AuthorizationError",
    "DomainError",
    "Entity",
    "EntityId",
    "ValidationError",
]
