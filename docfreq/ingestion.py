"""Ingestion pipeline: uploaded bytes to a stored, ranked analysis."""

from __future__ import annotations

from typing import BinaryIO, List, Optional, Tuple, Union

from .errors import DecodeError, ReadError, UnsupportedMediaTypeError
from .extractors import PdfExtractor, PypdfExtractor
from .logging import get_logger
from .models import Analysis, WordFrequency
from .stores import AnalysisStore
from .text import aggregate, normalize_and_tokenize

TEXT_PLAIN = "text/plain"
APPLICATION_PDF = "application/pdf"
SUPPORTED_MEDIA_TYPES = (TEXT_PLAIN, APPLICATION_PDF)

Payload = Union[bytes, bytearray, memoryview, BinaryIO]


def parse_media_type(declared: str | None) -> Tuple[str, Optional[str]]:
    """Split a Content-Type value into its lowercase type and optional charset."""
    if not declared:
        return "", None
    parts = declared.split(";")
    media_type = parts[0].strip().lower()
    charset: Optional[str] = None
    for param in parts[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset" and value.strip():
            charset = value.strip().strip('"')
    return media_type, charset


class DocumentIngestor:
    """Turns uploaded documents into analyses committed to an :class:`AnalysisStore`.

    ``ignore_page_errors`` controls what happens when a single PDF page
    cannot be extracted: when true the page contributes no text and the
    analysis silently covers the remaining pages; when false the whole
    upload fails with :class:`DecodeError`.
    """

    def __init__(
        self,
        store: AnalysisStore,
        *,
        pdf_extractor: PdfExtractor | None = None,
        ignore_page_errors: bool = True,
    ) -> None:
        self.store = store
        self.pdf_extractor = pdf_extractor or PypdfExtractor()
        self.ignore_page_errors = ignore_page_errors
        self.logger = get_logger("ingestion")

    def ingest(self, data: Payload, media_type: str | None) -> str:
        """Analyze ``data`` and store the result, returning its identifier."""
        frequencies = self.analyze(data, media_type)
        identifier = self.store.create(frequencies)
        self.logger.info(
            "Stored analysis %s (%d distinct words)", identifier, len(frequencies)
        )
        return identifier

    def analyze(self, data: Payload, media_type: str | None) -> List[WordFrequency]:
        """Run the extraction and ranking pipeline without storing the result."""
        kind, charset = parse_media_type(media_type)
        if kind not in SUPPORTED_MEDIA_TYPES:
            raise UnsupportedMediaTypeError(media_type)

        content = self._read(data)
        if kind == APPLICATION_PDF:
            text = self._extract_pdf_text(content)
        else:
            text = self._decode_text(content, charset)

        tokens = normalize_and_tokenize(text)
        self.logger.debug("Extracted %d tokens from %s upload", len(tokens), kind)
        return aggregate(tokens)

    def get(self, identifier: str) -> Analysis:
        """Return a previously stored analysis."""
        return self.store.get(identifier)

    # ------------------------------------------------------------------
    # Internal helpers

    def _read(self, data: Payload) -> bytes:
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        try:
            content = data.read()
        except (OSError, ValueError) as exc:
            raise ReadError(f"Error reading file content: {exc}") from exc
        if not isinstance(content, (bytes, bytearray)):
            raise ReadError("Upload stream did not return bytes")
        return bytes(content)

    def _decode_text(self, content: bytes, charset: str | None) -> str:
        encoding = charset or "utf-8"
        try:
            return content.decode(encoding, errors="replace")
        except LookupError as exc:
            raise ReadError(f"Unknown charset {encoding!r}") from exc

    def _extract_pdf_text(self, content: bytes) -> str:
        document = self.pdf_extractor.open(content)
        chunks: List[str] = []
        for index in range(1, document.page_count + 1):
            try:
                chunks.append(document.page_text(index))
            except Exception as exc:
                if not self.ignore_page_errors:
                    raise DecodeError(
                        f"Failed to extract text from PDF page {index}: {exc}"
                    ) from exc
                self.logger.warning("Skipping PDF page %d: %s", index, exc)
        return "".join(chunks)


__all__ = [
    "APPLICATION_PDF",
    "DocumentIngestor",
    "SUPPORTED_MEDIA_TYPES",
    "TEXT_PLAIN",
    "parse_media_type",
]
