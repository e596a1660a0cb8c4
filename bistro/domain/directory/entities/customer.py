"""Customer entity."""

from typing import Literal

from pydantic import Field

from ...shared.base import Entity
from ..value_objects.common import Tag
from .contact import ContactDetails


class Customer(ContactDetails, Entity):
    """
    A guest of the restaurant.

    Customers accumulate reward points and may record allergies and
    standing special requests that front-of-house staff should see.
    """

    kind: Literal["customer"] = "customer"

    reward_points: int = Field(default=0, ge=0)
    allergies: frozenset[Tag] = Field(default_factory=frozenset)
    special_requests: frozenset[Tag] = Field(default_factory=frozenset)

    @property
    def identity_key(self) -> str:
        return self.name

    @property
    def has_allergies(self) -> bool:
        return bool(self.allergies)

    def __str__(self) -> str:
        return f"{self.name}; Phone: {self.phone}; Reward points: {self.reward_points}"
