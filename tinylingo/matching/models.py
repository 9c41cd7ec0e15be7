# TinyLingo Matching - Models
# ===========================
"""
Result types shared by the matching stages.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class MatchSource(str, Enum):
    """Stage that produced a match."""
    EXACT = "exact"  # Literal substring of the message
    SMART = "smart"  # Fuzzy candidate confirmed by the LLM


@dataclass
class FuzzyCandidate:
    """A glossary term whose similarity to the message passed the threshold."""
    term: str
    explanation: str
    score: float  # 0-1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "term": self.term,
            "explanation": self.explanation,
            "score": self.score,
        }


@dataclass
class MatchResult:
    """A glossary entry matched to the message."""
    term: str
    explanation: str
    source: MatchSource

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "term": self.term,
            "explanation": self.explanation,
            "source": self.source.value,
        }
