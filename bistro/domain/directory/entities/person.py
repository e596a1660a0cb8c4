"""Generic person entity."""

from typing import Literal

from ...shared.base import Entity
from .contact import ContactDetails


class Person(ContactDetails, Entity):
    """A contact with no particular role in the restaurant."""

    kind: Literal["person"] = "person"

    @property
    def identity_key(self) -> str:
        return self.name

    def __str__(self) -> str:
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}"
        )
