"""
JSON persistence for the directory.

Stores the five namespaces of a ``ReadOnlyDirectory`` in a single JSON
document and reads them back as a ``DirectorySnapshot``. Identity checks are
left to the directory: a stored file with duplicate entries loads fine and
is rejected when handed to ``Directory``.
"""

from pathlib import Path

from pydantic import ValidationError

from bistro.core.config import settings
from bistro.core.observability import get_logger
from bistro.domain.directory.snapshot import DirectorySnapshot, ReadOnlyDirectory
from bistro.domain.shared.exceptions import DataLoadingError, require_not_none

logger = get_logger(__name__)


class JsonDirectoryStorage:
    """Reads and writes directory snapshots as JSON on the local file system."""

    def __init__(self, file_path: Path | str | None = None) -> None:
        self._file_path = Path(file_path) if file_path else settings.DATA_FILE_PATH

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read_directory(self, file_path: Path | None = None) -> DirectorySnapshot | None:
        """
        Read a snapshot from disk.

        Args:
            file_path: Overrides the storage's own file path

        Returns:
            The stored snapshot, or None if the file does not exist

        Raises:
            DataLoadingError: If the file is unreadable, not JSON, or does not
                describe valid entities
        """
        path = Path(file_path) if file_path else self._file_path
        if not path.exists():
            logger.info("directory_file_missing", path=str(path))
            return None

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DataLoadingError(str(path), str(e)) from e

        try:
            snapshot = DirectorySnapshot.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "directory_file_invalid", path=str(path), errors=e.error_count()
            )
            raise DataLoadingError(
                str(path), f"{e.error_count()} invalid value(s)"
            ) from e

        logger.info(
            "directory_loaded",
            path=str(path),
            persons=len(snapshot.persons),
            customers=len(snapshot.customers),
            employees=len(snapshot.employees),
            suppliers=len(snapshot.suppliers),
            reservations=len(snapshot.reservations),
        )
        return snapshot

    def save_directory(
        self, directory: ReadOnlyDirectory, file_path: Path | None = None
    ) -> None:
        """
        Write every namespace of ``directory`` to disk, replacing the file.

        Args:
            directory: Any read-only directory, e.g. a ``Directory``
            file_path: Overrides the storage's own file path
        """
        require_not_none(directory, "directory")
        path = Path(file_path) if file_path else self._file_path
        snapshot = DirectorySnapshot.of(directory)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        logger.info("directory_saved", path=str(path))
