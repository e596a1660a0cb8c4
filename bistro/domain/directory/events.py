"""Change notifications published by the directory after a successful mutation."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from ..shared.base import DomainEvent
from .entities import AnyEntity
from .value_objects.enums import EntityKind


class DirectoryChanged(DomainEvent):
    """Base event: something in one namespace of the directory changed."""

    entity_kind: EntityKind


class EntityAdded(DirectoryChanged):
    entity: AnyEntity


class EntityReplaced(DirectoryChanged):
    target: AnyEntity
    edited: AnyEntity
    position: int


class EntityRemoved(DirectoryChanged):
    entity: AnyEntity


class CollectionReplaced(DirectoryChanged):
    """Raised when a whole namespace is overwritten, e.g. by ``reset_data``."""

    size: int


@runtime_checkable
class ChangePublisher(Protocol):
    """Where the directory sends its change notifications."""

    def publish(self, event: DomainEvent) -> None: ...

    def subscribe(
        self, event_type: type[DomainEvent], handler: Callable[[DomainEvent], None]
    ) -> None: ...
