"""
Command definitions for the directory.

Commands carry already-parsed, typed requests from the user-facing command
layer. They are executed by the handlers in ``handlers.py``.
"""

from abc import ABC
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from ..entities import AnyEntity
from ..value_objects.enums import EntityKind


class Command(BaseModel, ABC):
    """Base class for all commands."""

    model_config = ConfigDict(frozen=True)

    command_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CommandResult(BaseModel):
    """Result of command execution."""

    command_id: UUID
    success: bool
    message: str = ""
    errors: list[str] = Field(default_factory=list)
    processing_time_ms: float = Field(default=0.0, ge=0.0)


class AddEntityCommand(Command):
    """Add a new entry to the namespace matching the entity's kind."""

    entity: AnyEntity


class EditEntityCommand(Command):
    """Edit the entry at a 1-based position of the displayed list."""

    entity_kind: EntityKind
    index: int = Field(ge=1)
    changes: dict[str, Any] = Field(default_factory=dict)


class DeleteEntityCommand(Command):
    """Delete the entry at a 1-based position of the displayed list."""

    entity_kind: EntityKind
    index: int = Field(ge=1)


class ClearDirectoryCommand(Command):
    """Empty every namespace."""
