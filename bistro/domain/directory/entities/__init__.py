"""Directory entities."""

from typing import Annotated, Union

from pydantic import Field

from .contact import ContactDetails
from .customer import Customer
from .employee import Employee
from .person import Person
from .reservation import Reservation
from .supplier import Supplier

# Any directory entity, reconstructed from serialized data by its ``kind`` tag.
AnyEntity = Annotated[
    Union[Person, Customer, Employee, Supplier, Reservation],
    Field(discriminator="kind"),
]

__all__ = [
    "ContactDetails",
    "Person",
    "Customer",
    "Employee",
    "Supplier",
    "Reservation",
    "AnyEntity",
]
