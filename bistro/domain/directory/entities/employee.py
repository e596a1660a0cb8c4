"""Employee entity."""

from typing import Literal

from pydantic import Field

from ...shared.base import Entity
from ..value_objects.common import Shift
from ..value_objects.enums import DayOfWeek
from .contact import ContactDetails


class Employee(ContactDetails, Entity):
    """A member of staff with pay, leave balance and rostered shifts."""

    kind: Literal["employee"] = "employee"

    job_title: str = Field(min_length=1, max_length=50)
    salary: int = Field(ge=0)
    leaves: int = Field(default=0, ge=0)
    shifts: frozenset[Shift] = Field(default_factory=frozenset)

    @property
    def identity_key(self) -> str:
        return self.name

    def works_on(self, day: DayOfWeek) -> bool:
        """Check if the employee is rostered for any slot on ``day``."""
        return any(shift.day == day for shift in self.shifts)

    def __str__(self) -> str:
        return f"{self.name}; Job title: {self.job_title}; Phone: {self.phone}"
