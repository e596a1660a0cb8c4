"""
Identity-keyed collections.

A ``UniqueEntityList`` is an ordered list of one entity variant in which no
two elements are identity-equal (see ``Entity.is_same``). Every mutator
validates first and mutates second, so a rejected call leaves the contents
and their order untouched.

The collections perform no locking. They expect a single owner to drive all
mutations; concurrent writers need an external lock around the owning
``Directory``.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, ClassVar, Generic, TypeVar, overload

from ..shared.base import Entity
from ..shared.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    require_not_none,
)
from .entities import Customer, Employee, Person, Reservation, Supplier
from .value_objects.enums import EntityKind

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class EntityListView(Sequence[E]):
    """
    Live, read-only projection of a ``UniqueEntityList``.

    The view shares the backing list, so later mutations of the collection
    are visible through it. It exposes no way to insert, remove or reorder
    elements; slicing returns a tuple copy.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[E]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> E: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[E, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EntityListView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"


class UniqueEntityList(Generic[E]):
    """
    Duplicate-free, order-preserving list of one entity variant.

    Identity equality is used for ``contains``, duplicate detection and for
    locating edit and removal targets. Full equality is used when comparing
    two lists.
    """

    entity_type: ClassVar[type[Entity]] = Entity
    entity_kind: ClassVar[EntityKind]

    def __init__(self, entities: Iterable[E] | None = None) -> None:
        self._items: list[E] = []
        self._view: EntityListView[E] = EntityListView(self._items)
        if entities is not None:
            self.set_entities(entities)

    @property
    def kind_name(self) -> str:
        return self.entity_kind.value

    def contains(self, entity: E) -> bool:
        """Check if an element identity-equal to ``entity`` is present."""
        require_not_none(entity, "entity")
        return any(item.is_same(entity) for item in self._items)

    def add(self, entity: E) -> None:
        """
        Append an entity.

        Raises:
            DuplicateEntityError: If an identity-equal element already exists
        """
        self._check_entity(entity, "entity")
        if self.contains(entity):
            raise DuplicateEntityError(self.kind_name)

        self._items.append(entity)
        logger.debug(f"Added {self.kind_name} {entity.identity_key!r}")

    def set_entity(self, target: E, edited: E) -> int:
        """
        Replace ``target`` with ``edited`` in place and return its position.

        ``edited`` may differ from ``target`` in every attribute, including
        its identity, as long as it does not collide with another element.

        Raises:
            EntityNotFoundError: If no element is identity-equal to ``target``
            DuplicateEntityError: If ``edited`` is identity-equal to an
                element other than ``target``
        """
        self._check_entity(target, "target")
        self._check_entity(edited, "edited")

        index = self._index_of(target)
        if any(
            position != index and item.is_same(edited)
            for position, item in enumerate(self._items)
        ):
            raise DuplicateEntityError(self.kind_name)

        self._items[index] = edited
        logger.debug(
            f"Replaced {self.kind_name} {target.identity_key!r} "
            f"with {edited.identity_key!r}"
        )
        return index

    def set_entities(self, entities: "Iterable[E] | UniqueEntityList[E]") -> None:
        """
        Replace the whole contents with ``entities``, keeping their order.

        All elements are validated before anything changes; on failure the
        previous contents remain in place.

        Raises:
            DuplicateEntityError: If ``entities`` holds two identity-equal elements
        """
        require_not_none(entities, "entities")
        replacement = list(entities)
        for entity in replacement:
            self._check_entity(entity, "entities")
        if not self.are_unique(replacement):
            raise DuplicateEntityError(self.kind_name)

        # In-place slice assignment keeps existing views live.
        self._items[:] = replacement
        logger.debug(f"Replaced all {self.entity_kind.plural} ({len(replacement)})")

    def remove(self, entity: E) -> None:
        """
        Remove the element identity-equal to ``entity``.

        Raises:
            EntityNotFoundError: If there is no such element
        """
        self._check_entity(entity, "entity")
        index = self._index_of(entity)
        removed = self._items.pop(index)
        logger.debug(f"Removed {self.kind_name} {removed.identity_key!r}")

    def as_view(self) -> EntityListView[E]:
        """Return the live read-only view of this list."""
        return self._view

    @staticmethod
    def are_unique(entities: Sequence[Entity]) -> bool:
        """Check that no two of ``entities`` are identity-equal."""
        seen: set[Any] = set()
        for entity in entities:
            key = (type(entity), entity.identity_key)
            if key in seen:
                return False
            seen.add(key)
        return True

    def _index_of(self, entity: E) -> int:
        for position, item in enumerate(self._items):
            if item.is_same(entity):
                return position
        raise EntityNotFoundError(self.kind_name)

    def _check_entity(self, entity: Any, argument: str) -> None:
        require_not_none(entity, argument)
        if not isinstance(entity, self.entity_type):
            raise TypeError(
                f"{self.__class__.__name__} holds {self.entity_type.__name__} "
                f"values, got {type(entity).__name__}"
            )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __contains__(self, entity: object) -> bool:
        if entity is None:
            return False
        return any(item.is_same(entity) for item in self._items)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueEntityList):
            return NotImplemented
        return (
            self.entity_kind is other.entity_kind and self._items == other._items
        )

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"


class UniquePersonList(UniqueEntityList[Person]):
    entity_type = Person
    entity_kind = EntityKind.PERSON


class UniqueCustomerList(UniqueEntityList[Customer]):
    entity_type = Customer
    entity_kind = EntityKind.CUSTOMER


class UniqueEmployeeList(UniqueEntityList[Employee]):
    entity_type = Employee
    entity_kind = EntityKind.EMPLOYEE


class UniqueSupplierList(UniqueEntityList[Supplier]):
    entity_type = Supplier
    entity_kind = EntityKind.SUPPLIER


class ReservationList(UniqueEntityList[Reservation]):
    entity_type = Reservation
    entity_kind = EntityKind.RESERVATION
