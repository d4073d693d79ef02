"""PDF text extraction backed by pypdf."""

from __future__ import annotations

import io

from pypdf import PasswordType, PdfReader
from pypdf.errors import PyPdfError

from ..errors import DecodeError
from .base import PdfDocument, PdfExtractor


class PypdfDocument(PdfDocument):
    """Wraps a :class:`pypdf.PdfReader` behind the page-text contract."""

    def __init__(self, reader: PdfReader, page_count: int) -> None:
        self._reader = reader
        self._page_count = page_count

    @property
    def page_count(self) -> int:
        return self._page_count

    def page_text(self, index: int) -> str:
        if index < 1 or index > self._page_count:
            raise IndexError(f"Page {index} out of range 1..{self._page_count}")
        page = self._reader.pages[index - 1]
        return page.extract_text() or ""


class PypdfExtractor(PdfExtractor):
    """Opens PDF bytes with pypdf, reporting malformed input as DecodeError."""

    def open(self, data: bytes) -> PypdfDocument:
        try:
            reader = PdfReader(io.BytesIO(data))
            # Owner-password-only documents open with an empty user password.
            if reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED:
                raise DecodeError("PDF document requires a user password")
            page_count = len(reader.pages)
        except DecodeError:
            raise
        except (PyPdfError, ValueError, KeyError, TypeError) as exc:
            raise DecodeError(f"Error creating PDF reader: {exc}") from exc
        return PypdfDocument(reader, page_count)


__all__ = ["PypdfDocument", "PypdfExtractor"]
