# TinyLingo Matching - Pipeline
# =============================
"""
Full matching pipeline.

Flow:
1. Exact substring matching over the whole glossary (always runs)
2. Smart matching, only when config.smart.enabled:
   a. Fuzzy pre-filter over the terms exact matching did not find
   b. LLM confirmation of the fuzzy candidates (skipped when there are none)
3. Merge: exact results first, then smart results whose term is new
"""

import logging
from typing import Dict, List

from tinylingo.settings.schemas import TinyLingoConfig
from .exact_matcher import exact_match
from .fuzzy_matcher import fuzzy_match
from .models import MatchResult
from .smart_matcher import smart_match

logger = logging.getLogger(__name__)


def match_all(
    message: str,
    glossary: Dict[str, str],
    config: TinyLingoConfig
) -> List[MatchResult]:
    """
    Match a message against the glossary.

    Args:
        message: User message
        glossary: term -> explanation
        config: Configuration; config.smart controls the fuzzy/LLM stages

    Returns:
        Exact results in glossary order, then smart results in reply order.
        Each term appears at most once; exact wins over smart.
    """
    exact_results = exact_match(message, glossary)

    if not config.smart.enabled:
        return exact_results

    seen = {r.term for r in exact_results}
    remaining = {
        term: explanation
        for term, explanation in glossary.items()
        if term not in seen
    }

    candidates = fuzzy_match(message, remaining, config.smart.fuzzy_threshold)
    if not candidates:
        logger.debug("No fuzzy candidates, skipping smart match")
        return exact_results

    merged = list(exact_results)
    for result in smart_match(message, candidates, config):
        if result.term not in seen:
            seen.add(result.term)
            merged.append(result)

    logger.debug(
        f"Matched {len(merged)} terms "
        f"({len(exact_results)} exact, {len(merged) - len(exact_results)} smart)"
    )
    return merged
