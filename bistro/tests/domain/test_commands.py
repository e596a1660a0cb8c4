"""
Tests for directory commands and the command bus.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from bistro.domain.directory import AnyEntity, EntityKind
from bistro.domain.directory.cqrs import (
    AddEntityCommand,
    ClearDirectoryCommand,
    Command,
    DeleteEntityCommand,
    EditEntityCommand,
    create_command_bus,
)
from bistro.domain.directory.cqrs.handlers import (
    MESSAGE_CLEARED,
    MESSAGE_INVALID_INDEX,
    MESSAGE_NOT_EDITED,
)
from bistro.domain.shared.exceptions import NullArgumentError

from ..factories import build_customer, build_person, build_supplier


@pytest.fixture
def bus(typical_directory):
    return create_command_bus(typical_directory)


class TestAddEntityCommand:
    def test_adds_new_entity(self, bus, typical_directory):
        supplier = build_supplier("Fiona Kunz")

        result = bus.execute(AddEntityCommand(entity=supplier))

        assert result.success
        assert result.message == f"New supplier added: {supplier}"
        assert typical_directory.has_supplier(supplier)

    def test_duplicate_is_reported_not_raised(self, bus, typical_directory):
        before = typical_directory.as_snapshot()

        result = bus.execute(AddEntityCommand(entity=build_customer("Benson Meier")))

        assert not result.success
        assert result.message == "This customer already exists in the directory"
        assert result.errors == [result.message]
        assert typical_directory.as_snapshot() == before

    def test_entity_parsed_from_plain_data(self):
        command = AddEntityCommand.model_validate(
            {
                "entity": {
                    "kind": "person",
                    "name": "Fiona Kunz",
                    "phone": "9482427",
                    "email": "lydia@example.com",
                    "address": "little india",
                }
            }
        )

        assert command.entity == build_person(
            "Fiona Kunz",
            phone="9482427",
            email="lydia@example.com",
            address="little india",
        )

    def test_unknown_kind_rejected(self):
        adapter = TypeAdapter(AnyEntity)
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "waiter", "name": "X"})


class TestEditEntityCommand:
    def test_edits_entry_at_index(self, bus, typical_directory):
        result = bus.execute(
            EditEntityCommand(
                entity_kind=EntityKind.CUSTOMER,
                index=2,
                changes={"reward_points": 50},
            )
        )

        assert result.success
        assert result.message.startswith("Edited customer: ")
        assert typical_directory.get_customer_list()[1].reward_points == 50

    def test_index_out_of_range(self, bus):
        result = bus.execute(
            EditEntityCommand(
                entity_kind=EntityKind.PERSON, index=2, changes={"phone": "1"}
            )
        )

        assert not result.success
        assert result.message == MESSAGE_INVALID_INDEX

    def test_no_changes(self, bus):
        result = bus.execute(EditEntityCommand(entity_kind=EntityKind.PERSON, index=1))

        assert not result.success
        assert result.message == MESSAGE_NOT_EDITED

    def test_rename_onto_existing_entry(self, bus, typical_directory):
        result = bus.execute(
            EditEntityCommand(
                entity_kind=EntityKind.CUSTOMER,
                index=2,
                changes={"name": "Benson Meier"},
            )
        )

        assert not result.success
        assert "duplicate customers" in result.message
        assert [c.name for c in typical_directory.get_customer_list()] == [
            "Benson Meier",
            "Elle Meyer",
        ]

    def test_invalid_field_value(self, bus):
        result = bus.execute(
            EditEntityCommand(
                entity_kind=EntityKind.RESERVATION,
                index=1,
                changes={"number_of_people": 0},
            )
        )

        assert not result.success
        assert result.message.startswith("Invalid reservation details")

    def test_index_must_be_positive(self):
        with pytest.raises(ValidationError):
            DeleteEntityCommand(entity_kind=EntityKind.PERSON, index=0)


class TestDeleteEntityCommand:
    def test_deletes_entry_at_index(self, bus, typical_directory):
        first = typical_directory.get_reservation_list()[0]

        result = bus.execute(
            DeleteEntityCommand(entity_kind=EntityKind.RESERVATION, index=1)
        )

        assert result.success
        assert result.message == f"Deleted reservation: {first}"
        assert len(typical_directory.get_reservation_list()) == 2

    def test_empty_namespace(self, bus):
        result = bus.execute(
            DeleteEntityCommand(entity_kind=EntityKind.SUPPLIER, index=1)
        )

        assert not result.success
        assert result.message == MESSAGE_INVALID_INDEX


class TestClearDirectoryCommand:
    def test_clears_every_namespace(self, bus, typical_directory):
        result = bus.execute(ClearDirectoryCommand())

        assert result.success
        assert result.message == MESSAGE_CLEARED
        assert all(count == 0 for count in typical_directory.counts().values())


class TestCommandBus:
    def test_result_carries_command_id_and_timing(self, bus):
        command = ClearDirectoryCommand()

        result = bus.execute(command)

        assert result.command_id == command.command_id
        assert result.processing_time_ms >= 0

    def test_unhandled_command(self, bus):
        class UnknownCommand(Command):
            pass

        result = bus.execute(UnknownCommand())

        assert not result.success
        assert result.errors == ["Unhandled command type: UnknownCommand"]

    def test_programming_errors_propagate(self, typical_directory, monkeypatch):
        bus = create_command_bus(typical_directory)

        def broken_add(entity):
            raise NullArgumentError("entity")

        monkeypatch.setattr(typical_directory, "add_entity", broken_add)

        with pytest.raises(NullArgumentError):
            bus.execute(AddEntityCommand(entity=build_supplier("Fiona Kunz")))
