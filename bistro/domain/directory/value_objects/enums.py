"""Domain enums for the directory."""

from enum import Enum


class EntityKind(str, Enum):
    """
    Entity namespaces held by the directory.

    Declaration order is the canonical order used for reset, equality,
    hashing and count reports.
    """

    PERSON = "person"
    CUSTOMER = "customer"
    EMPLOYEE = "employee"
    SUPPLIER = "supplier"
    RESERVATION = "reservation"

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @property
    def is_person_family(self) -> bool:
        """Check if the namespace holds contactable people."""
        return self is not EntityKind.RESERVATION


class DayOfWeek(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class ShiftSlot(str, Enum):
    """Half-day slot an employee can be rostered for."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
