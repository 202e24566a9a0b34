"""
Generic repository contract.

``Repository[E, ID]`` is the storage interface every backend
implements.  It is parameterised over the entity type ``E`` and the
identifier type ``ID`` and offers four operations: ``save``,
``find_by_id``, ``count`` and the combined filter and pagination scan
``find_all``.

The scan semantics are shared by all backends through
``select_page``: records are enumerated in insertion order, the
predicate is applied lazily in that order, and the window
``[page * size, page * size + size)`` of the matching records is
returned.  ``size == 0`` always yields an empty page.
"""

import sys
from abc import ABC, abstractmethod
from itertools import islice
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

E = TypeVar("E")
ID = TypeVar("ID")

Predicate = Callable[[E], bool]


def select_page(entities: Iterable[E], predicate: Predicate, page: int, size: int) -> List[E]:
    """Return the ``page``‑th window of ``size`` entities matching ``predicate``.

    Negative values are not validated here (that is the service's job);
    they simply produce an empty page.  Offsets beyond ``sys.maxsize``
    cannot be reached by any sequence, so such a page is empty too.
    """
    if page < 0 or size <= 0:
        return []
    start = page * size
    if start > sys.maxsize:
        return []
    stop = min(start + size, sys.maxsize)
    matches = (entity for entity in entities if predicate(entity))
    return list(islice(matches, start, stop))


class Repository(ABC, Generic[E, ID]):
    """Abstract storage interface for an entity type and its identifier."""

    @abstractmethod
    def save(self, entity: E) -> E:
        """Persist a new entity and return a copy with its id assigned.

        Raises ``InvalidArgumentError`` if the entity already carries an
        id; records are append‑only.
        """

    @abstractmethod
    def find_by_id(self, entity_id: ID) -> Optional[E]:
        """Return the entity with the given id, or ``None`` if there is none."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of persisted entities."""

    @abstractmethod
    def find_all(self, predicate: Predicate, page: int, size: int) -> List[E]:
        """Return one page of the entities accepted by ``predicate``."""
