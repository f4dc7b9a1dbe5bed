"""File-backed store of saved codes.

The store is a single JSON array rewritten in full on every append.
"""

import os
import stat
import tempfile
import threading
from pathlib import Path

import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from rafflecode.core.modules.code.models import AppendResult, CodeRecord, CodeType

logger = structlog.get_logger(__name__)

_records_adapter = TypeAdapter(list[CodeRecord])


def _file_mode(path: Path) -> int:
    """Mode for a rewritten file: keep the existing mode, else the umask default for new files."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class CodeStore:
    """Reads and writes code records kept in one JSON document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def load_all(self) -> list[CodeRecord]:
        """Load all records in file order.

        Returns an empty list when the file is missing or cannot be parsed.
        """
        if not self.path.exists():
            return []
        try:
            return _records_adapter.validate_json(self.path.read_bytes())
        except (OSError, PydanticValidationError) as e:
            logger.error("Error reading codes file", path=str(self.path), error=str(e))
            return []

    def exists(self, code: str) -> bool:
        return any(record.code == code for record in self.load_all())

    def append(self, code: str, code_type: CodeType) -> AppendResult:
        """Save a code unless it is already stored.

        The read, duplicate check and rewrite happen under one lock.
        """
        with self._lock:
            records = self.load_all()
            if any(record.code == code for record in records):
                return AppendResult(success=False, message="Duplicate code rejected", is_duplicate=True)

            record = CodeRecord(code=code, type=code_type, id=len(records) + 1)
            records.append(record)
            try:
                self._write(records)
            except OSError as e:
                logger.error("Error saving code", path=str(self.path), error=str(e))
                return AppendResult(success=False, message=f"Error saving code: {e}")

        logger.debug("Code saved", code=code, id=record.id)
        return AppendResult(success=True, message="Code saved", record=record)

    def clear(self) -> None:
        """Delete the backing file.

        Raises:
            OSError: If the file cannot be deleted, including when it does not exist
        """
        with self._lock:
            self.path.unlink()

    def _write(self, records: list[CodeRecord]) -> None:
        """Replace the file contents through a temporary file in the same directory."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = _records_adapter.dump_json(records, indent=2, by_alias=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp creates the file as 0600
            os.chmod(tmp_name, _file_mode(self.path))
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
