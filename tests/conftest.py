from __future__ import annotations

import logging
from typing import Dict, Iterator

import pytest

from docfreq.ingestion import DocumentIngestor
from docfreq.stores import AnalysisStore


def _sequential_ids(prefix: str = "analysis") -> Iterator[str]:
    counter = 0
    while True:
        counter += 1
        yield f"{prefix}-{counter}"


@pytest.fixture
def store() -> AnalysisStore:
    """Provide a store with predictable identifiers."""
    ids = _sequential_ids()
    return AnalysisStore(id_factory=lambda: next(ids))


@pytest.fixture
def ingestor(store: AnalysisStore) -> DocumentIngestor:
    return DocumentIngestor(store)


@pytest.fixture
def sample_counts() -> Dict[str, int]:
    return {"the": 3, "cat": 2, "mat": 1, "on": 1, "ran": 1, "sat": 1}


@pytest.fixture(autouse=True)
def _reset_docfreq_logger() -> Iterator[None]:
    """Drop handlers installed by CLI runs so captured streams are not reused."""
    yield
    for name in ("docfreq", "pypdf"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
