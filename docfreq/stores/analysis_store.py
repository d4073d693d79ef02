"""Thread-safe in-memory store of completed analyses."""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Callable, Dict, Iterable, List

from ..errors import AnalysisNotFoundError, IdentifierCollisionError
from ..logging import get_logger
from ..models import Analysis, WordFrequency
from .locks import ReadWriteLock


def new_identifier() -> str:
    """Return a fresh globally unique identifier."""
    return str(uuid.uuid4())


class AnalysisStore:
    """Holds analyses keyed by identifier for the lifetime of the process.

    Entries are only ever added and read. Lookups share the lock; inserts
    hold it exclusively for the dictionary mutation alone, so callers must
    compute frequencies before calling :meth:`create`.
    """

    def __init__(self, id_factory: Callable[[], str] = new_identifier) -> None:
        self._id_factory = id_factory
        self._analyses: Dict[str, Analysis] = {}
        self._lock = ReadWriteLock()
        self.logger = get_logger("store")

    def create(self, frequencies: Iterable[WordFrequency]) -> str:
        """Store ``frequencies`` under a new identifier and return it."""
        identifier = self._id_factory()
        analysis = Analysis(id=identifier, frequencies=list(frequencies))
        with self._lock.write_locked():
            if identifier in self._analyses:
                raise IdentifierCollisionError(
                    f"Identifier factory produced an existing key: {identifier}"
                )
            self._analyses[identifier] = analysis
        self.logger.debug(
            "Stored analysis %s with %d distinct words", identifier, analysis.unique_words
        )
        return identifier

    def get(self, identifier: str) -> Analysis:
        """Return a copy of the analysis stored under ``identifier``.

        The stored frequency list never leaves the store, so callers cannot
        alter a committed analysis.
        """
        with self._lock.read_locked():
            analysis = self._analyses.get(identifier)
        if analysis is None:
            raise AnalysisNotFoundError(identifier)
        return replace(analysis, frequencies=list(analysis.frequencies))

    def identifiers(self) -> List[str]:
        """Return a snapshot of stored identifiers."""
        with self._lock.read_locked():
            return list(self._analyses)

    def __contains__(self, identifier: object) -> bool:
        with self._lock.read_locked():
            return identifier in self._analyses

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._analyses)


__all__ = ["AnalysisStore", "new_identifier"]
