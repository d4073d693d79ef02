"""Base classes for PDF text extraction backends."""

from abc import ABC, abstractmethod


class PdfDocument(ABC):
    """An opened PDF whose pages can be read individually."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages in the document."""

    @abstractmethod
    def page_text(self, index: int) -> str:
        """Return the plain text of page ``index`` (1-based).

        Implementations may raise for pages that cannot be extracted; the
        caller decides whether that fails the whole document.
        """


class PdfExtractor(ABC):
    """Contract for backends that open PDF bytes."""

    @abstractmethod
    def open(self, data: bytes) -> PdfDocument:
        """Parse ``data`` or raise :class:`docfreq.errors.DecodeError`."""
