"""Directory value objects."""

from .common import Shift, Tag
from .enums import DayOfWeek, EntityKind, ShiftSlot

__all__ = [
    "Tag",
    "Shift",
    "DayOfWeek",
    "ShiftSlot",
    "EntityKind",
]
