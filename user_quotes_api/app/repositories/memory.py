"""
In‑memory repository.

Stores dataclass entities in an insertion‑ordered ``dict`` keyed by
an integer id.  Any dataclass with an ``id: int`` field works, so the
same class backs users in tests and in ``STORAGE_BACKEND=memory``
deployments.  A lock makes id assignment atomic and lets each read
take a consistent snapshot.  Entities are copied on the way in and
out so callers can never mutate stored state.
"""

import logging
import threading
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from ..core.exceptions import InvalidArgumentError
from .base import E, Repository, select_page

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[E, int]):
    """Dictionary backed repository with auto‑incrementing ids starting at 1."""

    def __init__(self) -> None:
        self._items: Dict[int, E] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def save(self, entity: E) -> E:
        if entity.id:
            raise InvalidArgumentError(f"Entity already has id {entity.id}; records cannot be re-saved")
        with self._lock:
            self._last_id += 1
            stored = replace(entity, id=self._last_id)
            self._items[stored.id] = stored
        logger.debug("Stored %s with id %s", type(entity).__name__, stored.id)
        return replace(stored)

    def find_by_id(self, entity_id: int) -> Optional[E]:
        with self._lock:
            stored = self._items.get(entity_id)
        return replace(stored) if stored is not None else None

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def find_all(self, predicate: Callable[[E], bool], page: int, size: int) -> List[E]:
        with self._lock:
            snapshot = [replace(item) for item in self._items.values()]
        return select_page(snapshot, predicate, page, size)
