"""Core data models shared across docfreq components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class WordFrequency:
    """Occurrence count for a single normalized word."""

    word: str
    frequency: int

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "frequency": self.frequency}


@dataclass(frozen=True)
class Analysis:
    """Stored result of one document: identifier plus ranked frequencies."""

    id: str
    frequencies: List[WordFrequency] = field(default_factory=list)

    @property
    def total_words(self) -> int:
        return sum(entry.frequency for entry in self.frequencies)

    @property
    def unique_words(self) -> int:
        return len(self.frequencies)

    def top(self, count: int) -> List[WordFrequency]:
        if count <= 0:
            return []
        return list(self.frequencies[:count])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "frequencies": [entry.to_dict() for entry in self.frequencies],
        }
