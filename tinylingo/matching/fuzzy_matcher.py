# TinyLingo Matching - Fuzzy Matcher
# ==================================
"""
Bigram-based fuzzy pre-filter for the smart matching stage.

The scoring strategy depends on the term's script:
- ASCII terms (English words, identifiers, version strings) are compared
  word by word against tokens extracted from the message.
- Other terms (CJK and anything non-ASCII) are compared against every
  window of the message that is about as long as the term.

Candidates above the threshold are sorted by score and capped, so the
LLM prompt stays small.
"""

import logging
import re
from typing import Dict, List

from .bigram import bigram_counts, bigram_overlap, bigram_similarity
from .models import FuzzyCandidate

logger = logging.getLogger(__name__)

# Maximum number of candidates handed to the smart matcher
MAX_CANDIDATES = 12

# Shared bigrams a message word needs before it is scored against an ASCII
# term. Keeps "undo" from matching "godot" through the single bigram "do".
MIN_BIGRAM_OVERLAP = 2

# Extra characters a sliding window may have beyond the term length
WINDOW_SLACK = 2

_ASCII_TERM_PATTERN = re.compile(r'[a-zA-Z0-9_.\-]+')


def is_ascii_term(term: str) -> bool:
    """True if the whole term is made of [a-zA-Z0-9_.-] characters."""
    return _ASCII_TERM_PATTERN.fullmatch(term) is not None


def extract_words(message: str) -> List[str]:
    """Maximal [a-zA-Z0-9_.-] runs of the message."""
    return _ASCII_TERM_PATTERN.findall(message)


def word_level_score(
    message: str,
    term: str,
    min_overlap: int = MIN_BIGRAM_OVERLAP
) -> float:
    """
    Score an ASCII term against the words of a message.

    Comparison is case-insensitive. Words sharing fewer than min_overlap
    bigrams with the term are skipped.

    Args:
        message: User message
        term: ASCII glossary term
        min_overlap: Shared-bigram floor for a word to be scored

    Returns:
        Best bigram similarity over qualifying words, 0.0 if none qualify
    """
    words = extract_words(message)
    if not words:
        return 0.0

    term_lower = term.lower()
    term_bigrams = bigram_counts(term_lower)

    best = 0.0
    for word in words:
        word_lower = word.lower()
        if bigram_overlap(term_bigrams, bigram_counts(word_lower)) < min_overlap:
            continue
        score = bigram_similarity(word_lower, term_lower)
        if score > best:
            best = score
    return best


def sliding_window_score(
    message: str,
    term: str,
    slack: int = WINDOW_SLACK
) -> float:
    """
    Score a non-ASCII term against windows of the message.

    Window sizes run from max(2, len(term)) to len(term) + slack, at every
    offset. Messages no longer than len(term) + slack are compared whole.

    Args:
        message: User message
        term: Glossary term (typically CJK)
        slack: Extra window length tolerated around the term

    Returns:
        Best bigram similarity over all windows
    """
    term_len = len(term)
    if len(message) <= term_len + slack:
        return bigram_similarity(message, term)

    best = 0.0
    for size in range(max(2, term_len), term_len + slack + 1):
        for start in range(len(message) - size + 1):
            score = bigram_similarity(message[start:start + size], term)
            if score > best:
                best = score
    return best


def term_score(message: str, term: str) -> float:
    """Similarity of a term to a message, using the strategy for its script."""
    if is_ascii_term(term):
        return word_level_score(message, term)
    return sliding_window_score(message, term)


def fuzzy_match(
    message: str,
    glossary: Dict[str, str],
    threshold: float,
    limit: int = MAX_CANDIDATES
) -> List[FuzzyCandidate]:
    """
    Find glossary terms similar to the message.

    Args:
        message: User message
        glossary: term -> explanation
        threshold: Scores must be strictly greater than this to qualify
        limit: Maximum number of candidates returned

    Returns:
        Candidates sorted by score descending, at most `limit` of them
    """
    if not message:
        return []

    candidates = []
    for term, explanation in glossary.items():
        score = term_score(message, term)
        if score > threshold:
            candidates.append(FuzzyCandidate(term=term, explanation=explanation, score=score))

    candidates.sort(key=lambda c: c.score, reverse=True)
    candidates = candidates[:limit]

    if candidates:
        logger.debug(
            "Fuzzy candidates: " +
            ", ".join(f"{c.term}={c.score:.3f}" for c in candidates)
        )
    return candidates
