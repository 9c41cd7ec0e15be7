# TinyLingo Matching Module
# =========================
"""
Glossary matching engine.

Matches a free-text user message against the glossary in stages:

Components:
- Bigram engine: character-bigram multiset Jaccard similarity
- Fuzzy matcher: word-level (ASCII terms) or sliding-window (CJK terms) scoring
- Exact matcher: case-sensitive substring containment
- Smart matcher: LLM confirmation of fuzzy candidates
- Pipeline: exact -> fuzzy pre-filter -> smart, exact results take priority
"""

from .models import (
    MatchSource,
    MatchResult,
    FuzzyCandidate,
)

from .bigram import (
    bigram_counts,
    bigram_overlap,
    bigram_similarity,
)

from .fuzzy_matcher import (
    is_ascii_term,
    word_level_score,
    sliding_window_score,
    term_score,
    fuzzy_match,
    MAX_CANDIDATES,
    MIN_BIGRAM_OVERLAP,
    WINDOW_SLACK,
)

from .exact_matcher import exact_match

from .smart_matcher import (
    smart_match,
    build_prompt,
    parse_indices,
    DEFAULT_PROMPT,
)

from .pipeline import match_all


__all__ = [
    # Models
    "MatchSource",
    "MatchResult",
    "FuzzyCandidate",

    # Bigram engine
    "bigram_counts",
    "bigram_overlap",
    "bigram_similarity",

    # Fuzzy matcher
    "is_ascii_term",
    "word_level_score",
    "sliding_window_score",
    "term_score",
    "fuzzy_match",
    "MAX_CANDIDATES",
    "MIN_BIGRAM_OVERLAP",
    "WINDOW_SLACK",

    # Exact matcher
    "exact_match",

    # Smart matcher
    "smart_match",
    "build_prompt",
    "parse_indices",
    "DEFAULT_PROMPT",

    # Pipeline
    "match_all",
]
