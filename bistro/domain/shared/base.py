"""Base classes for domain entities and value objects."""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from datetime import datetime, timezone
from typing import Any, Self
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True)


class Entity(BaseModel, ABC):
    """
    Base class for directory entities.

    Entities carry two notions of equality:

    * identity equality (``is_same``) decides whether two values denote the
      same real-world record and drives duplicate detection and lookups;
    * full equality (``==`` and ``hash``) compares every attribute and is
      what collections and snapshots are compared by.

    Entities are immutable; an edit produces a new value via ``with_changes``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    @abstractmethod
    def identity_key(self) -> Hashable:
        """Attributes that identify the real-world record."""

    def is_same(self, other: Any) -> bool:
        """Check if ``other`` denotes the same real-world record."""
        if other is self:
            return True
        if other is None or type(other) is not type(self):
            return False
        return self.identity_key == other.identity_key

    def with_changes(self, **changes: Any) -> Self:
        """Return a revalidated copy with the given attributes replaced."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self).model_validate(data)


class DomainEvent(BaseModel):
    """Base class for domain events."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
