import copy
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from threading import Lock, RLock

from flask import current_app


logger = logging.getLogger(__name__)

USERS = "users"
POSTS = "posts"


class CollectionStore(ABC):
    """
    Whole-collection document store.

    A collection is loaded and saved as a complete list of records; there is
    no partial write. Callers that read-modify-write a collection must hold
    ``lock(name)`` for the full cycle.
    """

    def __init__(self):
        self._locks = {}
        self._locks_guard = Lock()

    def lock(self, name: str):
        with self._locks_guard:
            collection_lock = self._locks.get(name)
            if collection_lock is None:
                collection_lock = RLock()
                self._locks[name] = collection_lock
            return collection_lock

    @abstractmethod
    def load(self, name: str) -> list:
        ...

    @abstractmethod
    def save(self, name: str, records: list) -> bool:
        ...


class JsonFileStore(CollectionStore):
    def __init__(self, data_dir: str, indent: int | None = 2):
        super().__init__()
        self.data_dir = data_dir
        self.indent = indent

    def path_for(self, name: str) -> str:
        return os.path.join(self.data_dir, f"{name}.json")

    def load(self, name: str) -> list:
        path = self.path_for(name)
        if not os.path.exists(path):
            logger.debug("Collection %s has no file yet at %s", name, path)
            return []

        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError):
            logger.exception("Failed to read collection %s from %s", name, path)
            return []

        if not isinstance(data, list):
            logger.error(
                "Collection %s at %s is not a JSON array, treating as empty",
                name,
                path,
            )
            return []

        bad = sum(1 for record in data if not isinstance(record, dict))
        if bad:
            logger.error(
                "Collection %s at %s holds %d non-object record(s), treating as empty",
                name,
                path,
                bad,
            )
            return []

        return data

    def save(self, name: str, records: list) -> bool:
        path = self.path_for(name)
        tmp_path = None
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{name}.", suffix=".tmp", dir=self.data_dir
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(records, fh, indent=self.indent, ensure_ascii=False)
            os.replace(tmp_path, path)
            tmp_path = None
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to write collection %s to %s", name, path)
            return False
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_path)

        logger.debug("Saved %d record(s) to collection %s", len(records), name)
        return True


class MemoryStore(CollectionStore):
    """Process-local store; records are copied on every load and save."""

    def __init__(self, collections: dict | None = None):
        super().__init__()
        self._collections = {
            name: copy.deepcopy(records)
            for name, records in (collections or {}).items()
        }

    def load(self, name: str) -> list:
        return copy.deepcopy(self._collections.get(name, []))

    def save(self, name: str, records: list) -> bool:
        self._collections[name] = copy.deepcopy(list(records))
        return True


def build_store(config) -> CollectionStore:
    backend = config.get("STORAGE_BACKEND", "json")
    if backend == "memory":
        return MemoryStore()
    if backend != "json":
        raise ValueError(f"Unsupported storage backend: {backend}")
    return JsonFileStore(config["DATA_DIR"], indent=config.get("JSON_INDENT", 2))


def init_json_store(app, store: CollectionStore | None = None) -> CollectionStore:
    if store is None:
        store = build_store(app.config)
    app.extensions["json_store"] = store
    return store


def get_json_store() -> CollectionStore:
    return current_app.extensions["json_store"]
