"""Reservation entity."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from ...shared.base import Entity
from ..value_objects.common import Tag


class Reservation(Entity):
    """
    A table booking.

    A reservation is identified by the booking phone number together with
    the reserved date and time; party size, remark and tags may all change
    without it becoming a different booking.
    """

    kind: Literal["reservation"] = "reservation"

    phone: str = Field(min_length=1, max_length=30)
    number_of_people: int = Field(ge=1)
    date_time: datetime
    remark: str = Field(default="", max_length=200)
    tags: frozenset[Tag] = Field(default_factory=frozenset)

    @property
    def identity_key(self) -> tuple[str, datetime]:
        return (self.phone, self.date_time)

    def __str__(self) -> str:
        return (
            f"{self.date_time:%Y-%m-%d %H:%M}; Phone: {self.phone}; "
            f"Pax: {self.number_of_people}"
        )
