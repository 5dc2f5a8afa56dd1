"""
Flat‑file record store.

Each collection (``users``, ``bookings``, ``technicians``,
``services``) lives in its own JSON document under the data
directory.  Reads return the whole collection and writes replace the
whole file; callers do all filtering and id assignment on the
in‑memory snapshot and then hand the full snapshot back to ``save``.

Reads never fail: a missing, empty or corrupt file yields an empty
collection and a warning in the log.  Writes go to a temporary file
in the same directory which is then moved over the target with
``os.replace``, so readers see either the old or the new document.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

from .config import settings

logger = logging.getLogger(__name__)

Snapshot = Union[List[Dict[str, Any]], Dict[str, Any]]

# Collections stored as a JSON object rather than an array.
MAPPING_COLLECTIONS = frozenset({"services"})

_locks: Dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()


class StoreError(Exception):
    """Raised when a collection cannot be written."""


def get_data_dir() -> Path:
    """Return the directory holding the collection files.

    If ``settings.data_dir`` is absolute it is used as is, otherwise it
    is resolved relative to the ``home_service_api`` package.
    """
    data_dir = Path(settings.data_dir)
    if data_dir.is_absolute():
        return data_dir
    base_dir = Path(__file__).resolve().parent.parent.parent  # home_service_api/
    return (base_dir / data_dir).resolve()


def collection_path(collection: str) -> Path:
    return get_data_dir() / f"{collection}.json"


def empty_snapshot(collection: str) -> Snapshot:
    return {} if collection in MAPPING_COLLECTIONS else []


def load(collection: str) -> Snapshot:
    """Load the full snapshot of ``collection``.

    Returns an empty list (or an empty dict for mapping collections)
    when the file does not exist, cannot be read, is empty or does not
    contain valid JSON of the expected shape.  Entries of a list
    collection that are not JSON objects are dropped.
    """
    path = collection_path(collection)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Collection file %s does not exist yet", path.name)
        return empty_snapshot(collection)
    except OSError as exc:
        logger.warning("Error loading %s: %s", path.name, exc)
        return empty_snapshot(collection)
    if not raw.strip():
        return empty_snapshot(collection)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Error loading %s: %s", path.name, exc)
        return empty_snapshot(collection)
    expected = dict if collection in MAPPING_COLLECTIONS else list
    if not isinstance(data, expected):
        logger.warning(
            "Error loading %s: expected a JSON %s, got %s",
            path.name,
            "object" if expected is dict else "array",
            type(data).__name__,
        )
        return empty_snapshot(collection)
    if expected is list:
        records = [record for record in data if isinstance(record, dict)]
        if len(records) != len(data):
            logger.warning(
                "Skipping %d non-object entries in %s", len(data) - len(records), path.name
            )
        return records
    return data


def save(collection: str, snapshot: Snapshot) -> None:
    """Serialize ``snapshot`` and replace the collection file with it.

    Raises
    ------
    StoreError
        If the data directory cannot be created, the snapshot cannot be
        serialized or the file cannot be written.
    """
    path = collection_path(collection)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(snapshot, indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{collection}.", suffix=".tmp", dir=str(path.parent)
        )
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, TypeError, ValueError) as exc:
        logger.error("Error saving %s: %s", path.name, exc)
        raise StoreError(f"Failed to save {path.name}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
    logger.info("Saved %s successfully", path.name)


def next_id(snapshot: List[Dict[str, Any]]) -> int:
    """Return the id for a new record: max existing id + 1, or 1 if empty."""
    ids = [record["id"] for record in snapshot
           if isinstance(record, dict) and isinstance(record.get("id"), int)]
    return max(ids) + 1 if ids else 1


@contextmanager
def collection_lock(collection: str) -> Iterator[None]:
    """Hold the per‑collection lock for a load‑mutate‑save sequence.

    The lock serialises writers on different threads of one process;
    it does nothing across processes.  Coroutines on the event loop are
    not kept apart by it; their critical sections are safe only because
    they contain no ``await``.
    """
    with _locks_guard:
        lock = _locks.setdefault(collection, threading.RLock())
    with lock:
        yield
