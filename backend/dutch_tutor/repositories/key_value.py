"""
Key/Value Repository
Storage for learner state (gamification, learning path progress, review items).

Services receive a repository instead of touching storage directly, so the
same service code runs against memory in tests and against JSON files on disk
in a deployment.
"""
import json
import logging
import re
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class KeyValueRepository(ABC):
    """Load and save JSON-compatible documents by key"""

    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError


class InMemoryRepository(KeyValueRepository):
    """Process-local storage, lost on restart."""

    def __init__(self):
        self._items: dict[str, str] = {}
        self._lock = threading.Lock()

    def load(self, key: str) -> Optional[Any]:
        with self._lock:
            raw = self._items.get(key)
        # Stored as JSON so callers never share mutable state with the store
        return json.loads(raw) if raw is not None else None

    def save(self, key: str, value: Any) -> None:
        raw = json.dumps(value)
        with self._lock:
            self._items[key] = raw

    def delete(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._items)


class JsonFileRepository(KeyValueRepository):
    """One JSON document per key inside a data directory."""

    _UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"JSON file repository ready at {self.data_dir}")

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{self._UNSAFE_CHARS.sub('_', key)}.json"

    def load(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load '{key}' from {path}: {e}")
            return None

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            logger.error(f"Failed to save '{key}' to {path}: {e}")
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
