"""
In-memory record store for the catalogue.

A single ``CatalogStore`` is created by the application factory and
passed to everything that needs it (the interpreter, the commands and
the API routes). Records are keyed by identifier; adding a record whose
identifier is already present replaces the old one.

FastAPI runs plain ``def`` endpoints on a worker thread pool, so every
public method takes the store lock for its whole duration.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from .models import Record


logger = logging.getLogger(__name__)


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison.

    Parameters
    ----------
    s : Optional[str]
        The string to normalize.

    Returns
    -------
    str
        The normalized string (lowercased and stripped). An empty string is
        returned when the input is ``None`` or empty.
    """
    return (s or "").strip().lower()


class CatalogStore:
    """Keyed collection of :class:`Record` objects."""

    def __init__(self) -> None:
        self._records: Dict[str, Record] = {}
        self._lock = threading.Lock()

    def add(self, record: Record) -> None:
        with self._lock:
            replaced = record.identifier in self._records
            self._records[record.identifier] = record
        logger.info(
            "%s record %s (%s by %s)",
            "Replaced" if replaced else "Added",
            record.identifier,
            record.title,
            record.author,
        )

    def remove(self, identifier: str) -> bool:
        """Delete the record with ``identifier``.

        Removing an identifier that is not present is a no-op.

        Returns
        -------
        bool
            ``True`` when a record was actually deleted.
        """
        with self._lock:
            removed = self._records.pop(identifier, None) is not None
        if removed:
            logger.info("Removed record %s", identifier)
        return removed

    def get(self, identifier: str) -> Optional[Record]:
        with self._lock:
            return self._records.get(identifier)

    def search(self, query: Optional[str]) -> List[Record]:
        """Return records whose title or author contains ``query``.

        Matching is a case-insensitive literal substring test on the
        trimmed query; there is no tokenisation or fuzzy matching. An
        empty query matches every record. Results keep the store's
        iteration order.
        """
        nq = _norm(query)
        with self._lock:
            items = list(self._records.values())
        if not nq:
            return items
        return [
            r for r in items if nq in r.title.lower() or nq in r.author.lower()
        ]

    def list_records(self) -> List[Record]:
        with self._lock:
            return list(self._records.values())

    def clear_all(self) -> None:
        with self._lock:
            count = len(self._records)
            self._records.clear()
        logger.info("Cleared %d record(s) from the catalogue", count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._records
