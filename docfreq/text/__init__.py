"""Text normalization, tokenization and frequency ranking."""

from .frequency import aggregate, analyze_text
from .tokenizer import iter_tokens, normalize_and_tokenize

__all__ = ["aggregate", "analyze_text", "iter_tokens", "normalize_and_tokenize"]
