"""Contact attributes shared by every person-family entity."""

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.common import Tag


class ContactDetails(BaseModel):
    """
    Field group contributing name, phone, email, address and tags.

    Mixed into the person-family entities next to ``Entity``; it carries no
    behaviour of its own, so the variants stay siblings rather than
    specialisations of one another.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=1, max_length=30)
    email: str = Field(min_length=1, max_length=254)
    address: str = Field(min_length=1, max_length=200)
    tags: frozenset[Tag] = Field(default_factory=frozenset)

    @property
    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags, key=lambda tag: tag.name)
