import pytest

from bistro.domain.directory import Directory
from bistro.infrastructure.events import InMemoryEventBus

from .factories import (
    build_customer,
    build_employee,
    build_person,
    build_reservation,
    build_supplier,
)


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus(max_history_size=100)


@pytest.fixture
def directory() -> Directory:
    return Directory()


@pytest.fixture
def observed_directory(event_bus: InMemoryEventBus) -> Directory:
    return Directory(event_bus=event_bus)


@pytest.fixture
def typical_directory() -> Directory:
    """2 customers, 1 employee, no suppliers, 3 reservations and one plain contact."""
    directory = Directory()
    directory.add_person(build_person("Alice Pauline"))
    directory.add_customer(build_customer("Benson Meier"))
    directory.add_customer(build_customer("Elle Meyer", reward_points=0))
    directory.add_employee(build_employee("Carl Kurz"))
    directory.add_reservation(build_reservation("98765432"))
    directory.add_reservation(build_reservation("91234567"))
    directory.add_reservation(build_reservation("87654321", number_of_people=2))
    return directory
