"""Frequency aggregation and deterministic ranking of tokens."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from ..models import WordFrequency
from .tokenizer import iter_tokens


def aggregate(tokens: Iterable[str]) -> List[WordFrequency]:
    """Count distinct tokens and rank them.

    Entries are ordered by frequency descending; equal frequencies are
    ordered by word ascending so repeated runs produce identical output.
    """
    counts = Counter(tokens)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [WordFrequency(word=word, frequency=count) for word, count in ranked]


def analyze_text(text: str) -> List[WordFrequency]:
    """Tokenize ``text`` and return its ranked word frequencies."""
    return aggregate(iter_tokens(text))


__all__ = ["aggregate", "analyze_text"]
