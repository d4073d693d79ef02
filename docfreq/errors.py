"""Error taxonomy surfaced by the analysis pipeline and store."""

from __future__ import annotations


class DocFreqError(RuntimeError):
    """Base class for docfreq failures."""


class UnsupportedMediaTypeError(DocFreqError):
    """Raised when an upload declares a media type outside the allowed set."""

    def __init__(self, media_type: str | None) -> None:
        self.media_type = media_type
        super().__init__(
            f"Unsupported media type {media_type!r}. "
            "Only text/plain and application/pdf are supported"
        )


class ReadError(DocFreqError):
    """Raised when the uploaded byte stream cannot be fully consumed."""


class DecodeError(DocFreqError):
    """Raised when a PDF document is structurally malformed."""


class AnalysisNotFoundError(DocFreqError, KeyError):
    """Raised when an identifier has no stored analysis."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Analysis not found: {identifier}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class IdentifierCollisionError(DocFreqError):
    """Raised when the identifier factory returns a key that is already stored."""


class ConfigError(DocFreqError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "AnalysisNotFoundError",
    "ConfigError",
    "DecodeError",
    "DocFreqError",
    "IdentifierCollisionError",
    "ReadError",
    "UnsupportedMediaTypeError",
]
