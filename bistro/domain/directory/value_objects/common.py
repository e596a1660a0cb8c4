"""Common value objects for the directory domain."""

from pydantic import Field, field_validator

from ...shared.base import ValueObject
from .enums import DayOfWeek, ShiftSlot


class Tag(ValueObject):
    """Free-form label attached to people and reservations."""

    name: str = Field(min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v.isalnum():
            raise ValueError("Tag names should be alphanumeric")
        return v

    def __str__(self) -> str:
        return f"[{self.name}]"


class Shift(ValueObject):
    """A rostered half-day shift."""

    day: DayOfWeek
    slot: ShiftSlot

    def __str__(self) -> str:
        return f"{self.day.value.capitalize()} {self.slot.value}"
