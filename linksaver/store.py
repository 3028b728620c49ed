"""JSON-file link store.

Holds every saved link in one JSON file keyed by link id. All access is
owner-scoped except insert. Stores opened on the same file share one lock,
so read-modify-write cycles within a process never interleave.
"""

import json
import os
import tempfile
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import get_store_path

_path_locks: Dict[Path, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    """Get the process-wide lock for a store file."""
    key = path.resolve()
    with _path_locks_guard:
        if key not in _path_locks:
            _path_locks[key] = threading.Lock()
        return _path_locks[key]


class PersistenceError(Exception):
    """Raised when the link store cannot be read or written."""
    pass


class LinkStore:
    """Link storage backed by a single JSON file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or get_store_path())
        self._lock = _lock_for(self.path)

    def _load(self) -> Dict[str, Dict[str, Any]]:
        """Load all links.

        Returns:
            Dict of link id -> link, or empty dict if the file doesn't exist
        """
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            raise PersistenceError(f"Cannot read link store {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise PersistenceError(f"Cannot read link store {self.path}: unexpected format")
        return data

    def _save(self, data: Dict[str, Dict[str, Any]]) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=self.path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write link store {self.path}: {e}") from e
            raise PersistenceError(f"Cannot write link store {self.path}: {e}") from e

    def insert(self, link: Dict[str, Any]) -> Dict[str, Any]:
        """Store a new link, assigning id and created_at.

        Args:
            link: Link fields (owner_id, url, title, description, image_url,
                domain, tags, summary)

        Returns:
            The stored link, including id and created_at
        """
        record = dict(link)
        record["tags"] = list(record.get("tags", []))
        record["id"] = str(uuid.uuid4())
        record["created_at"] = datetime.now(timezone.utc).isoformat()

        with self._lock:
            data = self._load()
            data[record["id"]] = record
            self._save(data)

        return dict(record)

    def list_by_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        """List an owner's links, newest first."""
        with self._lock:
            data = self._load()
        links = [link for link in data.values() if link.get("owner_id") == owner_id]
        return sorted(links, key=lambda x: x.get("created_at", ""), reverse=True)

    def get_by_id_and_owner(self, link_id: str, owner_id: str) -> Optional[Dict[str, Any]]:
        """Get one link, or None if it doesn't exist or belongs to someone else."""
        with self._lock:
            data = self._load()
        link = data.get(link_id)
        if link is None or link.get("owner_id") != owner_id:
            return None
        return link

    def delete_by_id_and_owner(self, link_id: str, owner_id: str) -> bool:
        """Delete one link.

        Returns:
            True if a link was deleted, False if not found for this owner
        """
        with self._lock:
            data = self._load()
            link = data.get(link_id)
            if link is None or link.get("owner_id") != owner_id:
                return False
            del data[link_id]
            self._save(data)
        return True

    def delete_by_owner(self, owner_id: str) -> int:
        """Delete all links of an owner (account deletion).

        Returns:
            Number of links deleted
        """
        with self._lock:
            data = self._load()
            remaining = {k: v for k, v in data.items() if v.get("owner_id") != owner_id}
            deleted = len(data) - len(remaining)
            if deleted:
                self._save(remaining)
        return deleted
