"""JSON file implementation of the DocumentStore port.

The whole database lives in one pretty-printed UTF-8 JSON file:

    {
      "users": [
        {"id": {"UUID": "1111..."}, "name": {"TEXT": "kk"}}
      ]
    }

Writes replace the document whole. With atomic writes enabled the new
contents go to a temporary file in the same directory, which is then renamed
over the document, so readers see either the old or the new version. A
symlinked document is written through to its target, and the document keeps
its permission bits across saves.

Recovery Policy:
    A document that exists and is readable but cannot be decoded (invalid
    JSON, empty file, wrong shape, unknown value tag) is handled according to
    StorageConfig.recovery_policy. "empty" substitutes an empty database and
    logs a warning; the next save then overwrites the unreadable contents.
    "strict" raises CorruptDocumentError instead.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path

from localdb.domain.errors import CorruptDocumentError, DatabaseNotFoundError, StorageError
from localdb.domain.values import Database, decode_database, encode_database
from localdb.infrastructure.config import StorageConfig, get_config
from localdb.infrastructure.logging import get_logger
from localdb.infrastructure.metrics import MetricsRegistry, get_metrics


EMPTY_DOCUMENT = "{}"


class JsonDocumentStore:
    """File-based implementation of the DocumentStore protocol.

    The store holds no open file handles and caches nothing; every call goes
    to disk.
    """

    def __init__(
        self,
        config: StorageConfig | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            config: Storage configuration (default from global config).
            metrics: Metrics registry (default is the global registry).
        """
        self._config = config or get_config().storage
        self._metrics = metrics or get_metrics()
        self._logger = get_logger(__name__)

    @property
    def config(self) -> StorageConfig:
        return self._config

    def initialize(self, location: str | Path) -> None:
        path = Path(location)
        self._write(path, EMPTY_DOCUMENT)
        self._logger.info("document_initialized", path=str(path))

    def attach(self, location: str | Path) -> None:
        path = Path(location)
        if not path.exists():
            raise DatabaseNotFoundError(f"Database file not found: {path}", path=str(path))
        self._logger.debug("document_attached", path=str(path))

    def load(self, location: str | Path) -> Database:
        """Read and decode the whole document.

        Raises:
            StorageError: If the file is missing or unreadable.
            CorruptDocumentError: If decoding fails under the strict policy.
        """
        path = Path(location)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read database file {path}: {e}", path=str(path)) from e

        self._metrics.document_loads_total.inc()

        try:
            database = decode_database(json.loads(content))
        except (json.JSONDecodeError, CorruptDocumentError) as e:
            if self._config.recovery_policy == "strict":
                if isinstance(e, CorruptDocumentError):
                    e.path = str(path)
                    raise
                raise CorruptDocumentError(
                    f"Database file {path} is not valid JSON: {e}", path=str(path)
                ) from e
            self._metrics.document_recoveries_total.inc()
            self._logger.warning(
                "document_recovered",
                path=str(path),
                reason=str(e),
                policy=self._config.recovery_policy,
            )
            return {}

        self._logger.debug("document_loaded", path=str(path), collections=len(database))
        return database

    def save(self, location: str | Path, database: Database) -> None:
        path = Path(location)
        indent = self._config.indent or None
        content = json.dumps(encode_database(database), indent=indent, ensure_ascii=False)
        self._write(path, content)
        self._metrics.document_saves_total.inc()
        self._logger.debug(
            "document_saved",
            path=str(path),
            collections=len(database),
            bytes=len(content),
        )

    def _write(self, path: Path, content: str) -> None:
        """Replace the file at path with content."""
        try:
            if self._config.atomic_writes:
                self._write_atomic(path, content)
            else:
                path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write database file {path}: {e}", path=str(path)) from e

    def _write_atomic(self, path: Path, content: str) -> None:
        # Write through symlinks to the real document
        path = path.resolve()
        if path.is_dir():
            raise IsADirectoryError(f"Is a directory: {path}")

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(content)
                tmp.flush()
                if self._config.sync_mode == "fsync":
                    os.fsync(tmp.fileno())
            if path.exists():
                shutil.copymode(path, tmp_name)
            else:
                os.chmod(tmp_name, _default_file_mode())
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


def _default_file_mode() -> int:
    """Mode a newly created file gets under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
