# TinyLingo Matching - Exact Matcher
# ==================================

import logging
from typing import Dict, List

from .models import MatchResult, MatchSource

logger = logging.getLogger(__name__)


def exact_match(message: str, glossary: Dict[str, str]) -> List[MatchResult]:
    """
    Find every glossary term contained in the message.

    Containment is case-sensitive and unnormalized. Results follow glossary
    iteration order. Empty terms never match.
    """
    if not message:
        return []

    results = []
    for term, explanation in glossary.items():
        if term and term in message:
            results.append(MatchResult(term=term, explanation=explanation, source=MatchSource.EXACT))

    if results:
        logger.debug(f"Exact matches: {[r.term for r in results]}")
    return results
