"""In-memory stores for completed analyses."""

from .analysis_store import AnalysisStore, new_identifier
from .locks import ReadWriteLock

__all__ = ["AnalysisStore", "ReadWriteLock", "new_identifier"]
