"""Tests for docfreq.text.frequency."""

from __future__ import annotations

from docfreq.models import WordFrequency
from docfreq.text import aggregate, analyze_text, normalize_and_tokenize


def test_aggregate_ranks_sample_sentence(sample_counts) -> None:
    result = analyze_text("The cat sat on the mat. THE CAT ran.")

    assert result[0] == WordFrequency(word="the", frequency=3)
    assert result[1] == WordFrequency(word="cat", frequency=2)
    assert {entry.word: entry.frequency for entry in result} == sample_counts


def test_aggregate_breaks_ties_alphabetically() -> None:
    result = aggregate(["pear", "apple", "fig", "apple", "pear", "kiwi"])

    assert [(entry.word, entry.frequency) for entry in result] == [
        ("apple", 2),
        ("pear", 2),
        ("fig", 1),
        ("kiwi", 1),
    ]


def test_aggregate_of_empty_sequence_is_empty() -> None:
    assert aggregate([]) == []
    assert analyze_text("") == []


def test_aggregate_preserves_token_totals_and_vocabulary() -> None:
    tokens = normalize_and_tokenize(
        "It was the best of times, it was the worst of times, "
        "it was the age of wisdom, it was the age of foolishness"
    )

    result = aggregate(tokens)

    assert sum(entry.frequency for entry in result) == len(tokens)
    assert {entry.word for entry in result} == set(tokens)
    assert len({entry.word for entry in result}) == len(result)
    for current, following in zip(result, result[1:]):
        assert current.frequency >= following.frequency


def test_aggregate_accepts_generators() -> None:
    result = aggregate(word for word in ["a", "b", "a"])

    assert result == [WordFrequency("a", 2), WordFrequency("b", 1)]
