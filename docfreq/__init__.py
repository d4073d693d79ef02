"""Word-frequency analysis for uploaded text and PDF documents."""

from .ingestion import DocumentIngestor
from .models import Analysis, WordFrequency
from .stores import AnalysisStore

__all__ = ["Analysis", "AnalysisStore", "DocumentIngestor", "WordFrequency"]
