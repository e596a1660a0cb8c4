"""
Event infrastructure.

In-process publish/subscribe used to notify observers of directory changes.
"""

from .event_bus import EventBusInterface, InMemoryEventBus

__all__ = [
    "EventBusInterface",
    "InMemoryEventBus",
]
