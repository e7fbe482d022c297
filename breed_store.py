import json
import logging
import os
import threading

logger = logging.getLogger(__name__)

SAVED = "saved"
IDENTIFIED = "identified"
CUSTOM = "custom"

FILENAMES = {
    SAVED: "saved_breeds.json",
    IDENTIFIED: "identified_breeds.json",
    CUSTOM: "custom_breeds.json",
}


class StoreError(Exception):
    """A breed list could not be written; memory still matches disk."""


class BreedStore:
    """Saved, identified and custom breed lists, each kept in its own JSON file."""

    def __init__(self, data_dir):
        self.data_dir = data_dir
        os.makedirs(data_dir, exist_ok=True)
        self._lock = threading.Lock()
        self._lists = {kind: self._load(kind) for kind in FILENAMES}

    def _path(self, kind):
        return os.path.join(self.data_dir, FILENAMES[kind])

    def _load(self, kind):
        path = self._path(kind)
        if not os.path.exists(path):
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("could not read %s, starting empty: %s", path, e)
            return []
        if not isinstance(data, list):
            logger.warning("%s does not hold a list, starting empty", path)
            return []
        return data

    def _write(self, kind, breeds):
        path = self._path(kind)
        tmp = path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(breeds, f, indent=2)
            os.replace(tmp, path)
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"could not write {path}: {e}") from e
        finally:
            if os.path.exists(tmp):
                os.remove(tmp)

    def _commit(self, kind, breeds):
        # caller holds the lock; memory changes only once the file is written
        self._write(kind, breeds)
        self._lists[kind] = breeds

    def breeds(self, kind):
        with self._lock:
            return list(self._lists[kind])

    # saved

    def is_saved(self, breed_id):
        return any(b["id"] == breed_id for b in self.breeds(SAVED))

    def _save_locked(self, breed):
        if any(b["id"] == breed["id"] for b in self._lists[SAVED]):
            return False
        self._commit(SAVED, self._lists[SAVED] + [breed])
        return True

    def save_breed(self, breed):
        with self._lock:
            return self._save_locked(breed)

    def remove_breed(self, breed_id):
        return self._remove(SAVED, breed_id)

    def toggle_saved(self, breed):
        """Flip the saved state of `breed`; returns the new state."""
        with self._lock:
            if self._save_locked(breed):
                return True
            self._commit(SAVED, [b for b in self._lists[SAVED] if b["id"] != breed["id"]])
            return False

    # identified

    def add_identified(self, breed):
        """Record a matched breed once per name; it is saved as well."""
        with self._lock:
            if any(b["name"] == breed["name"] for b in self._lists[IDENTIFIED]):
                return False
            self._commit(IDENTIFIED, self._lists[IDENTIFIED] + [breed])
            self._save_locked(breed)
            return True

    def remove_identified(self, breed_id):
        return self._remove(IDENTIFIED, breed_id)

    # custom

    def add_custom(self, breed):
        with self._lock:
            self._commit(CUSTOM, self._lists[CUSTOM] + [breed])

    def remove_custom(self, breed_id):
        return self._remove(CUSTOM, breed_id)

    def _remove(self, kind, breed_id):
        with self._lock:
            kept = [b for b in self._lists[kind] if b["id"] != breed_id]
            if len(kept) == len(self._lists[kind]):
                return False
            self._commit(kind, kept)
            return True
