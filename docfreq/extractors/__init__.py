"""Adapters that turn uploaded binary documents into plain text."""

from .base import PdfDocument, PdfExtractor
from .pdf import PypdfExtractor

__all__ = ["PdfDocument", "PdfExtractor", "PypdfExtractor"]
