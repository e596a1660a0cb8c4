"""
Directory aggregate.

Owns one identity-keyed collection per namespace (persons, customers,
employees, suppliers, reservations) and is the single point through which
they are mutated. Namespaces are independent: the same identity may appear
as, say, both a customer and an employee.
"""

import logging
from collections.abc import Callable, Iterable

from ..shared.base import DomainEvent, Entity
from ..shared.exceptions import DuplicateEntityError, require_not_none
from .collections import (
    EntityListView,
    ReservationList,
    UniqueCustomerList,
    UniqueEmployeeList,
    UniqueEntityList,
    UniquePersonList,
    UniqueSupplierList,
)
from .entities import Customer, Employee, Person, Reservation, Supplier
from .events import (
    ChangePublisher,
    CollectionReplaced,
    EntityAdded,
    EntityRemoved,
    EntityReplaced,
)
from .snapshot import DirectorySnapshot, ReadOnlyDirectory, lists_by_kind
from .value_objects.enums import EntityKind

logger = logging.getLogger(__name__)

COLLECTION_TYPES: dict[EntityKind, type[UniqueEntityList]] = {
    EntityKind.PERSON: UniquePersonList,
    EntityKind.CUSTOMER: UniqueCustomerList,
    EntityKind.EMPLOYEE: UniqueEmployeeList,
    EntityKind.SUPPLIER: UniqueSupplierList,
    EntityKind.RESERVATION: ReservationList,
}


def validate_snapshot(snapshot: ReadOnlyDirectory) -> None:
    """
    Check that every namespace of ``snapshot`` could be loaded.

    Runs the same checks ``reset_data`` applies per namespace, against
    throwaway collections, so nothing is modified.

    Raises:
        DuplicateEntityError: Naming the first namespace (in canonical order)
            whose list holds two identity-equal entities
    """
    require_not_none(snapshot, "snapshot")
    for kind, entities in lists_by_kind(snapshot).items():
        COLLECTION_TYPES[kind](entities)


class Directory:
    """
    The restaurant's directory of people and reservations.

    Implements ``ReadOnlyDirectory`` for consumers and adds mutation
    operations for command handlers. Every per-namespace operation delegates
    to that namespace's collection and raises exactly what the collection
    raises; a failed operation changes nothing.

    Not thread-safe. All mutations are expected to come from one owner; a
    caller that shares a directory between threads must serialize access
    to it, for example behind a lock or by swapping in a fresh copy.

    If an event publisher is supplied, each successful mutation publishes a
    ``DirectoryChanged`` event once the change is complete.
    """

    def __init__(
        self,
        source: ReadOnlyDirectory | None = None,
        event_bus: ChangePublisher | None = None,
    ) -> None:
        self._persons = UniquePersonList()
        self._customers = UniqueCustomerList()
        self._employees = UniqueEmployeeList()
        self._suppliers = UniqueSupplierList()
        self._reservations = ReservationList()
        self._collections: dict[EntityKind, UniqueEntityList] = {
            EntityKind.PERSON: self._persons,
            EntityKind.CUSTOMER: self._customers,
            EntityKind.EMPLOYEE: self._employees,
            EntityKind.SUPPLIER: self._suppliers,
            EntityKind.RESERVATION: self._reservations,
        }
        self._event_bus = event_bus

        if source is not None:
            self.reset_data(source)

    # List overwrite operations

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace all persons; ``persons`` must not contain duplicates."""
        self._replace(EntityKind.PERSON, persons)

    def set_customers(self, customers: Iterable[Customer]) -> None:
        """Replace all customers; ``customers`` must not contain duplicates."""
        self._replace(EntityKind.CUSTOMER, customers)

    def set_employees(self, employees: Iterable[Employee]) -> None:
        """Replace all employees; ``employees`` must not contain duplicates."""
        self._replace(EntityKind.EMPLOYEE, employees)

    def set_suppliers(self, suppliers: Iterable[Supplier]) -> None:
        """Replace all suppliers; ``suppliers`` must not contain duplicates."""
        self._replace(EntityKind.SUPPLIER, suppliers)

    def set_reservations(self, reservations: Iterable[Reservation]) -> None:
        """Replace all reservations; ``reservations`` must not contain duplicates."""
        self._replace(EntityKind.RESERVATION, reservations)

    def reset_data(self, new_data: ReadOnlyDirectory, atomic: bool = False) -> None:
        """
        Replace every namespace with the contents of ``new_data``.

        Namespaces are replaced one at a time in canonical order (persons,
        customers, employees, suppliers, reservations). By default a
        duplicate in one namespace raises after the earlier namespaces have
        already been replaced. With ``atomic=True`` all five lists are
        validated first and nothing changes unless all of them pass.

        Raises:
            NullArgumentError: If ``new_data`` is None
            DuplicateEntityError: If one of the incoming lists has duplicates
        """
        require_not_none(new_data, "new_data")
        if atomic:
            validate_snapshot(new_data)

        for kind, entities in lists_by_kind(new_data).items():
            self._replace(kind, entities)

    # Person-level operations

    def has_person(self, person: Person) -> bool:
        """Check if a person with the same identity as ``person`` exists."""
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        """Add a person; it must not already exist."""
        self._add(EntityKind.PERSON, person)

    def set_person(self, target: Person, edited_person: Person) -> None:
        """
        Replace ``target`` with ``edited_person``.

        ``target`` must exist, and ``edited_person`` must not share its
        identity with any other person.
        """
        self._set(EntityKind.PERSON, target, edited_person)

    def remove_person(self, key: Person) -> None:
        """Remove ``key``; it must exist."""
        self._remove(EntityKind.PERSON, key)

    # Customer-level operations

    def has_customer(self, customer: Customer) -> bool:
        return self._customers.contains(customer)

    def add_customer(self, customer: Customer) -> None:
        self._add(EntityKind.CUSTOMER, customer)

    def set_customer(self, target: Customer, edited_customer: Customer) -> None:
        self._set(EntityKind.CUSTOMER, target, edited_customer)

    def remove_customer(self, key: Customer) -> None:
        self._remove(EntityKind.CUSTOMER, key)

    # Employee-level operations

    def has_employee(self, employee: Employee) -> bool:
        return self._employees.contains(employee)

    def add_employee(self, employee: Employee) -> None:
        self._add(EntityKind.EMPLOYEE, employee)

    def set_employee(self, target: Employee, edited_employee: Employee) -> None:
        self._set(EntityKind.EMPLOYEE, target, edited_employee)

    def remove_employee(self, key: Employee) -> None:
        self._remove(EntityKind.EMPLOYEE, key)

    # Supplier-level operations

    def has_supplier(self, supplier: Supplier) -> bool:
        return self._suppliers.contains(supplier)

    def add_supplier(self, supplier: Supplier) -> None:
        self._add(EntityKind.SUPPLIER, supplier)

    def set_supplier(self, target: Supplier, edited_supplier: Supplier) -> None:
        self._set(EntityKind.SUPPLIER, target, edited_supplier)

    def remove_supplier(self, key: Supplier) -> None:
        self._remove(EntityKind.SUPPLIER, key)

    # Reservation-level operations

    def has_reservation(self, reservation: Reservation) -> bool:
        return self._reservations.contains(reservation)

    def add_reservation(self, reservation: Reservation) -> None:
        self._add(EntityKind.RESERVATION, reservation)

    def set_reservation(
        self, target: Reservation, edited_reservation: Reservation
    ) -> None:
        self._set(EntityKind.RESERVATION, target, edited_reservation)

    def remove_reservation(self, key: Reservation) -> None:
        self._remove(EntityKind.RESERVATION, key)

    # Polymorphic operations, dispatched on the entity's kind

    def has_entity(self, entity: Entity) -> bool:
        """Check if ``entity``'s namespace holds an entry with the same identity."""
        return self._collections[self._kind_of(entity)].contains(entity)

    def add_entity(self, entity: Entity) -> None:
        self._add(self._kind_of(entity), entity)

    def set_entity(self, target: Entity, edited: Entity) -> None:
        self._set(self._kind_of(target), target, edited)

    def remove_entity(self, entity: Entity) -> None:
        self._remove(self._kind_of(entity), entity)

    # Read-only views

    def get_person_list(self) -> EntityListView[Person]:
        return self._persons.as_view()

    def get_customer_list(self) -> EntityListView[Customer]:
        return self._customers.as_view()

    def get_employee_list(self) -> EntityListView[Employee]:
        return self._employees.as_view()

    def get_supplier_list(self) -> EntityListView[Supplier]:
        return self._suppliers.as_view()

    def get_reservation_list(self) -> EntityListView[Reservation]:
        return self._reservations.as_view()

    def get_list(self, kind: EntityKind) -> EntityListView:
        """Return the read-only view of the namespace ``kind``."""
        return self._collections[EntityKind(kind)].as_view()

    def as_snapshot(self) -> DirectorySnapshot:
        """Return an immutable copy of the current contents."""
        return DirectorySnapshot.of(self)

    # Change notifications

    def subscribe(
        self, event_type: type[DomainEvent], handler: Callable[[DomainEvent], None]
    ) -> None:
        """
        Register ``handler`` for change notifications of ``event_type``.

        Raises:
            RuntimeError: If the directory was created without an event bus
        """
        if self._event_bus is None:
            raise RuntimeError("Directory was created without an event bus")
        self._event_bus.subscribe(event_type, handler)

    # Util methods

    def counts(self) -> dict[EntityKind, int]:
        """Number of entries per namespace, in canonical order."""
        return {kind: len(collection) for kind, collection in self._collections.items()}

    def describe(self) -> str:
        """Diagnostic summary of how many entries each namespace holds."""
        return "".join(
            f"{count} {kind.plural}\n" for kind, count in self.counts().items()
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        summary = ", ".join(
            f"{kind.plural}={count}" for kind, count in self.counts().items()
        )
        return f"{self.__class__.__name__}({summary})"

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Directory):
            return NotImplemented
        return (
            self._persons == other._persons
            and self._customers == other._customers
            and self._employees == other._employees
            and self._suppliers == other._suppliers
            and self._reservations == other._reservations
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._persons,
                self._customers,
                self._employees,
                self._suppliers,
                self._reservations,
            )
        )

    # Internals

    @staticmethod
    def _kind_of(entity: Entity) -> EntityKind:
        require_not_none(entity, "entity")
        kind = getattr(entity, "kind", None)
        if kind is None:
            raise TypeError(f"{type(entity).__name__} is not a directory entity")
        return EntityKind(kind)

    def _add(self, kind: EntityKind, entity: Entity) -> None:
        self._collections[kind].add(entity)
        self._publish(EntityAdded(entity_kind=kind, entity=entity))

    def _set(self, kind: EntityKind, target: Entity, edited: Entity) -> None:
        require_not_none(edited, "edited")
        position = self._collections[kind].set_entity(target, edited)
        self._publish(
            EntityReplaced(
                entity_kind=kind, target=target, edited=edited, position=position
            )
        )

    def _remove(self, kind: EntityKind, entity: Entity) -> None:
        self._collections[kind].remove(entity)
        self._publish(EntityRemoved(entity_kind=kind, entity=entity))

    def _replace(self, kind: EntityKind, entities: Iterable[Entity]) -> None:
        collection = self._collections[kind]
        try:
            collection.set_entities(entities)
        except DuplicateEntityError:
            logger.warning(f"Rejected {kind.plural} list containing duplicates")
            raise
        self._publish(CollectionReplaced(entity_kind=kind, size=len(collection)))

    def _publish(self, event: DomainEvent) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)
