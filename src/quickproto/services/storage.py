"""
Prototype Storage
In-memory and JSON-file backends for prototype records
"""

import logging
import os
import threading
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from ..core.json import JSONParseError, load_json_object, safe_json_dumps
from ..core.validate import ConfigurationError
from .types import Prototype

logger = logging.getLogger(__name__)

SEQUENCE_FILE = "sequence"


class InMemoryPrototypeStore:
    """
    Process-local store.
    Records are kept as immutable pydantic copies keyed by id.
    """

    def __init__(self) -> None:
        self._records: dict[int, Prototype] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id

    def insert(self, prototype: Prototype) -> Prototype:
        with self._lock:
            if prototype.id in self._records:
                raise ValueError(f"Prototype {prototype.id} already exists")
            self._records[prototype.id] = prototype.model_copy(deep=True)
        return prototype

    def get(self, prototype_id: int) -> Prototype | None:
        with self._lock:
            record = self._records.get(prototype_id)
        return record.model_copy(deep=True) if record else None

    def list_all(self) -> list[Prototype]:
        with self._lock:
            records = [self._records[key] for key in sorted(self._records)]
        return [record.model_copy(deep=True) for record in records]

    def replace(self, prototype: Prototype) -> Prototype | None:
        with self._lock:
            if prototype.id not in self._records:
                return None
            self._records[prototype.id] = prototype.model_copy(deep=True)
        return prototype

    def delete(self, prototype_id: int) -> bool:
        with self._lock:
            return self._records.pop(prototype_id, None) is not None


class JsonFilePrototypeStore:
    """
    Directory-backed store.
    One JSON document per record, named <id>.json, written atomically.
    The last issued id is kept in a sequence file so ids of deleted
    records are never handed out again.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._last_id = max(self._stored_sequence(), *self._existing_ids(), 0)
        logger.info(f"JSON prototype store at {self.root} (last id {self._last_id})")

    def _path(self, prototype_id: int) -> Path:
        return self.root / f"{prototype_id}.json"

    def _existing_ids(self) -> list[int]:
        return [int(path.stem) for path in self.root.glob("*.json") if path.stem.isdigit()]

    def _stored_sequence(self) -> int:
        path = self.root / SEQUENCE_FILE
        if not path.exists():
            return 0
        try:
            return int(path.read_text(encoding="utf-8").strip())
        except ValueError:
            logger.warning(f"Unreadable sequence file {path}, falling back to stored records")
            return 0

    def _atomic_write(self, path: Path, content: str) -> None:
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)

    def _write(self, prototype: Prototype) -> None:
        self._atomic_write(self._path(prototype.id), safe_json_dumps(prototype.to_document()))

    def _read(self, path: Path) -> Prototype:
        """Load one record; unparseable or invalid documents raise ConfigurationError."""
        try:
            return Prototype.model_validate(load_json_object(path.read_bytes()))
        except (JSONParseError, PydanticValidationError) as e:
            logger.error(f"Corrupt prototype document {path}: {e}")
            raise ConfigurationError(f"Corrupt prototype document: {path.name}") from e

    def next_id(self) -> int:
        with self._lock:
            self._last_id += 1
            self._atomic_write(self.root / SEQUENCE_FILE, str(self._last_id))
            return self._last_id

    def insert(self, prototype: Prototype) -> Prototype:
        with self._lock:
            if self._path(prototype.id).exists():
                raise ValueError(f"Prototype {prototype.id} already exists")
            self._write(prototype)
        return prototype

    def get(self, prototype_id: int) -> Prototype | None:
        with self._lock:
            path = self._path(prototype_id)
            if not path.exists():
                return None
            return self._read(path)

    def list_all(self) -> list[Prototype]:
        """All readable records by id; corrupt documents are logged and skipped."""
        records = []
        with self._lock:
            for prototype_id in sorted(self._existing_ids()):
                try:
                    records.append(self._read(self._path(prototype_id)))
                except ConfigurationError:
                    continue
        return records

    def replace(self, prototype: Prototype) -> Prototype | None:
        with self._lock:
            if not self._path(prototype.id).exists():
                return None
            self._write(prototype)
        return prototype

    def delete(self, prototype_id: int) -> bool:
        with self._lock:
            path = self._path(prototype_id)
            if not path.exists():
                return False
            path.unlink()
            return True
