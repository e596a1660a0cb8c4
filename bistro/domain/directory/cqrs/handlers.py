"""
Command handlers for the directory.

Handlers turn recoverable domain failures (duplicates, missing entries,
invalid indexes) into failed ``CommandResult`` objects carrying a message
for the user. Programming errors, such as passing ``None`` where an entity
is required, are not caught.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import ValidationError

from ...shared.base import Entity
from ...shared.exceptions import (
    CommandError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from ..directory import Directory
from ..snapshot import DirectorySnapshot
from ..value_objects.enums import EntityKind
from .commands import (
    AddEntityCommand,
    ClearDirectoryCommand,
    Command,
    CommandResult,
    DeleteEntityCommand,
    EditEntityCommand,
)

logger = logging.getLogger(__name__)

MESSAGE_INVALID_INDEX = "The index provided is invalid."
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_CLEARED = "Directory has been cleared!"

RECOVERABLE_ERRORS = (CommandError, DuplicateEntityError, EntityNotFoundError)


class CommandHandler(ABC):
    """Base class for command handlers."""

    command_type: ClassVar[type[Command]]

    def __init__(self, directory: Directory) -> None:
        self.directory = directory

    def can_handle(self, command: Command) -> bool:
        """Check if this handler can handle the command."""
        return isinstance(command, self.command_type)

    def handle(self, command: Command) -> CommandResult:
        """Handle a command and return result."""
        try:
            message = self.execute(command)
        except RECOVERABLE_ERRORS as e:
            logger.info(f"{type(command).__name__} rejected: {e.message}")
            return CommandResult(
                command_id=command.command_id,
                success=False,
                message=e.message,
                errors=[e.message],
            )
        return CommandResult(
            command_id=command.command_id, success=True, message=message
        )

    @abstractmethod
    def execute(self, command: Command) -> str:
        """Apply the command to the directory and return a feedback message."""

    def _entity_at(self, kind: EntityKind, index: int) -> Entity:
        entries = self.directory.get_list(kind)
        if index > len(entries):
            raise CommandError(MESSAGE_INVALID_INDEX, {"index": index})
        return entries[index - 1]


class AddEntityHandler(CommandHandler):
    command_type = AddEntityCommand

    def execute(self, command: AddEntityCommand) -> str:
        entity = command.entity
        if self.directory.has_entity(entity):
            raise DuplicateEntityError(
                entity.kind, f"This {entity.kind} already exists in the directory"
            )
        self.directory.add_entity(entity)
        return f"New {entity.kind} added: {entity}"


class EditEntityHandler(CommandHandler):
    command_type = EditEntityCommand

    def execute(self, command: EditEntityCommand) -> str:
        if not command.changes:
            raise CommandError(MESSAGE_NOT_EDITED)

        target = self._entity_at(command.entity_kind, command.index)
        try:
            edited = target.with_changes(**command.changes)
        except ValidationError as e:
            raise CommandError(
                f"Invalid {command.entity_kind.value} details: "
                f"{e.error_count()} field(s) failed validation",
                {"errors": str([error["msg"] for error in e.errors()])},
            ) from e

        self.directory.set_entity(target, edited)
        return f"Edited {command.entity_kind.value}: {edited}"


class DeleteEntityHandler(CommandHandler):
    command_type = DeleteEntityCommand

    def execute(self, command: DeleteEntityCommand) -> str:
        target = self._entity_at(command.entity_kind, command.index)
        self.directory.remove_entity(target)
        return f"Deleted {command.entity_kind.value}: {target}"


class ClearDirectoryHandler(CommandHandler):
    command_type = ClearDirectoryCommand

    def execute(self, command: ClearDirectoryCommand) -> str:
        self.directory.reset_data(DirectorySnapshot())
        return MESSAGE_CLEARED


class CommandBus:
    """Command bus for routing commands to appropriate handlers."""

    def __init__(self) -> None:
        self.handlers: list[CommandHandler] = []

    def register_handler(self, handler: CommandHandler) -> None:
        """Register a command handler."""
        self.handlers.append(handler)

    def execute(self, command: Command) -> CommandResult:
        """Execute a command through the appropriate handler."""
        start_time = time.perf_counter()

        handler = self._find_handler(command)
        if handler is None:
            return CommandResult(
                command_id=command.command_id,
                success=False,
                message=f"No handler found for command {type(command).__name__}",
                errors=[f"Unhandled command type: {type(command).__name__}"],
            )

        result = handler.handle(command)
        result.processing_time_ms = (time.perf_counter() - start_time) * 1000
        return result

    def _find_handler(self, command: Command) -> CommandHandler | None:
        for handler in self.handlers:
            if handler.can_handle(command):
                return handler
        return None


def create_command_bus(directory: Directory) -> CommandBus:
    """Build a bus with every directory command handler registered."""
    bus = CommandBus()
    for handler_type in (
        AddEntityHandler,
        EditEntityHandler,
        DeleteEntityHandler,
        ClearDirectoryHandler,
    ):
        bus.register_handler(handler_type(directory))
    return bus
