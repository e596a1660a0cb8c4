"""Directory commands and their handlers."""

from .commands import (
    AddEntityCommand,
    ClearDirectoryCommand,
    Command,
    CommandResult,
    DeleteEntityCommand,
    EditEntityCommand,
)
from .handlers import CommandBus, create_command_bus

__all__ = [
    "Command",
    "CommandResult",
    "AddEntityCommand",
    "EditEntityCommand",
    "DeleteEntityCommand",
    "ClearDirectoryCommand",
    "CommandBus",
    "create_command_bus",
]
