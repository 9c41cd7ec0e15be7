# TinyLingo Matching - Bigram Engine
# ==================================
"""
Character bigram multisets and Jaccard similarity.

A bigram is every contiguous 2-character substring of a string. Counts are
kept per bigram, so "aaa" has the bigram "aa" twice. Similarity is the
multiset Jaccard index:

    sum(min(countA[k], countB[k])) / sum(max(countA[k], countB[k]))
"""

from collections import Counter


def bigram_counts(text: str) -> Counter:
    """Multiset of the contiguous 2-character substrings of text."""
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def bigram_overlap(a: Counter, b: Counter) -> int:
    """Number of bigrams shared by two multisets, counting multiplicity."""
    return sum((a & b).values())


def bigram_similarity(a: str, b: str) -> float:
    """
    Bigram Jaccard similarity between two strings.

    Strings shorter than 2 characters have no bigrams, so they fall back to
    equality: 1.0 when both are the same non-empty string, otherwise 0.0.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity in [0, 1]; symmetric in its arguments
    """
    if len(a) < 2 or len(b) < 2:
        if not a or not b:
            return 0.0
        return 1.0 if a == b else 0.0

    counts_a = bigram_counts(a)
    counts_b = bigram_counts(b)

    union = sum((counts_a | counts_b).values())
    if union == 0:
        return 0.0
    return bigram_overlap(counts_a, counts_b) / union
