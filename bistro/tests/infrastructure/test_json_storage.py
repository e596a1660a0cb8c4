"""
Tests for JSON directory storage.
"""

import json

import pytest

from bistro.domain.directory import Directory, DirectorySnapshot
from bistro.domain.shared.exceptions import DataLoadingError, DuplicateEntityError
from bistro.infrastructure.storage import JsonDirectoryStorage

from ..factories import (
    build_customer,
    build_employee,
    build_person,
    build_reservation,
    build_supplier,
)


@pytest.fixture
def storage(tmp_path) -> JsonDirectoryStorage:
    return JsonDirectoryStorage(tmp_path / "directory.json")


class TestSaveAndRead:
    def test_round_trip(self, storage, typical_directory):
        storage.save_directory(typical_directory)

        snapshot = storage.read_directory()

        assert snapshot == typical_directory.as_snapshot()
        assert Directory(snapshot) == typical_directory

    def test_every_variant_survives(self, storage, directory):
        for entity in (
            build_person(),
            build_customer(),
            build_employee(),
            build_supplier(),
            build_reservation(),
        ):
            directory.add_entity(entity)

        storage.save_directory(directory)

        assert Directory(storage.read_directory()) == directory

    def test_save_creates_parent_directories(self, tmp_path, directory):
        path = tmp_path / "nested" / "data" / "directory.json"

        JsonDirectoryStorage(path).save_directory(directory)

        assert path.exists()

    def test_explicit_path_overrides_default(self, storage, tmp_path, directory):
        other = tmp_path / "other.json"

        storage.save_directory(directory, other)

        assert other.exists()
        assert not storage.file_path.exists()
        assert storage.read_directory(other) == DirectorySnapshot()

    def test_saved_file_is_readable_json(self, storage, typical_directory):
        storage.save_directory(typical_directory)

        document = json.loads(storage.file_path.read_text(encoding="utf-8"))

        assert set(document) == {
            "persons",
            "customers",
            "employees",
            "suppliers",
            "reservations",
        }
        assert document["persons"][0]["kind"] == "person"


class TestLoadingFailures:
    def test_missing_file_returns_none(self, storage):
        assert storage.read_directory() is None

    def test_malformed_json_raises(self, storage):
        storage.file_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataLoadingError) as exc_info:
            storage.read_directory()

        assert exc_info.value.source == str(storage.file_path)

    def test_invalid_entity_raises(self, storage):
        storage.file_path.write_text(
            json.dumps({"reservations": [{"phone": "1", "number_of_people": 0}]}),
            encoding="utf-8",
        )

        with pytest.raises(DataLoadingError):
            storage.read_directory()

    def test_duplicates_load_but_are_rejected_by_directory(self, storage):
        person = build_person().model_dump(mode="json")
        storage.file_path.write_text(
            json.dumps({"persons": [person, person]}), encoding="utf-8"
        )

        snapshot = storage.read_directory()
        assert len(snapshot.persons) == 2

        with pytest.raises(DuplicateEntityError):
            Directory(snapshot)

    def test_save_none_raises(self, storage):
        with pytest.raises(ValueError):
            storage.save_directory(None)
