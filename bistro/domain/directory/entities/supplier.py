"""Supplier entity."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from ...shared.base import Entity
from .contact import ContactDetails


class Supplier(ContactDetails, Entity):
    """A vendor delivering goods to the restaurant."""

    kind: Literal["supplier"] = "supplier"

    supply_type: str = Field(min_length=1, max_length=50)
    delivery_details: datetime

    @property
    def identity_key(self) -> str:
        return self.name

    def __str__(self) -> str:
        return (
            f"{self.name}; Supplies: {self.supply_type}; "
            f"Next delivery: {self.delivery_details:%Y-%m-%d %H:%M}"
        )
