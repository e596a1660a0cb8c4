"""Directory domain: people, reservations and the aggregate that owns them."""

from .collections import (
    EntityListView,
    ReservationList,
    UniqueCustomerList,
    UniqueEmployeeList,
    UniqueEntityList,
    UniquePersonList,
    UniqueSupplierList,
)
from .directory import Directory, validate_snapshot
from .entities import AnyEntity, Customer, Employee, Person, Reservation, Supplier
from .events import (
    CollectionReplaced,
    DirectoryChanged,
    EntityAdded,
    EntityRemoved,
    EntityReplaced,
)
from .snapshot import DirectorySnapshot, ReadOnlyDirectory
from .value_objects import DayOfWeek, EntityKind, Shift, ShiftSlot, Tag

__all__ = [
    # Aggregate
    "Directory",
    "validate_snapshot",
    "ReadOnlyDirectory",
    "DirectorySnapshot",
    # Collections
    "UniqueEntityList",
    "UniquePersonList",
    "UniqueCustomerList",
    "UniqueEmployeeList",
    "UniqueSupplierList",
    "ReservationList",
    "EntityListView",
    # Entities
    "Person",
    "Customer",
    "Employee",
    "Supplier",
    "Reservation",
    "AnyEntity",
    # Value objects
    "Tag",
    "Shift",
    "DayOfWeek",
    "ShiftSlot",
    "EntityKind",
    # Change notifications
    "DirectoryChanged",
    "EntityAdded",
    "EntityReplaced",
    "EntityRemoved",
    "CollectionReplaced",
]
