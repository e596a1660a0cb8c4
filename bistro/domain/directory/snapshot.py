"""
Read-only view of the directory.

``ReadOnlyDirectory`` is the only surface that persistence and presentation
code may depend on. ``DirectorySnapshot`` is an immutable implementation of
it, used to move directory contents in and out of storage.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .entities import Customer, Employee, Person, Reservation, Supplier
from .value_objects.enums import EntityKind


@runtime_checkable
class ReadOnlyDirectory(Protocol):
    """Unmodifiable, ordered views of the five directory namespaces."""

    def get_person_list(self) -> Sequence[Person]: ...

    def get_customer_list(self) -> Sequence[Customer]: ...

    def get_employee_list(self) -> Sequence[Employee]: ...

    def get_supplier_list(self) -> Sequence[Supplier]: ...

    def get_reservation_list(self) -> Sequence[Reservation]: ...


class DirectorySnapshot(BaseModel):
    """Immutable copy of directory contents at one point in time."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    persons: tuple[Person, ...] = Field(default_factory=tuple)
    customers: tuple[Customer, ...] = Field(default_factory=tuple)
    employees: tuple[Employee, ...] = Field(default_factory=tuple)
    suppliers: tuple[Supplier, ...] = Field(default_factory=tuple)
    reservations: tuple[Reservation, ...] = Field(default_factory=tuple)

    @classmethod
    def of(cls, source: ReadOnlyDirectory) -> "DirectorySnapshot":
        """Copy the current contents of any read-only directory."""
        return cls(
            persons=tuple(source.get_person_list()),
            customers=tuple(source.get_customer_list()),
            employees=tuple(source.get_employee_list()),
            suppliers=tuple(source.get_supplier_list()),
            reservations=tuple(source.get_reservation_list()),
        )

    def get_person_list(self) -> Sequence[Person]:
        return self.persons

    def get_customer_list(self) -> Sequence[Customer]:
        return self.customers

    def get_employee_list(self) -> Sequence[Employee]:
        return self.employees

    def get_supplier_list(self) -> Sequence[Supplier]:
        return self.suppliers

    def get_reservation_list(self) -> Sequence[Reservation]:
        return self.reservations


def lists_by_kind(source: ReadOnlyDirectory) -> dict[EntityKind, Sequence]:
    """Return the five views of ``source`` keyed by namespace, in canonical order."""
    return {
        EntityKind.PERSON: source.get_person_list(),
        EntityKind.CUSTOMER: source.get_customer_list(),
        EntityKind.EMPLOYEE: source.get_employee_list(),
        EntityKind.SUPPLIER: source.get_supplier_list(),
        EntityKind.RESERVATION: source.get_reservation_list(),
    }
