# TinyLingo Matching - Smart Matcher
# ==================================
"""
LLM confirmation of fuzzy candidates.

Sends the user message and a numbered candidate list to an
OpenAI-compatible chat completion endpoint and keeps the candidates whose
indices the model returns.

The call runs on the prompt-submit hook path, so it is bounded by a short
timeout and every failure (HTTP status, timeout, network error, unparsable
reply) degrades to "no smart matches".

Reply parsing is an ordered chain:
1. Strip <think> blocks and code fences
2. JSON object with a "relevant" list of indices
3. Bare integers separated by commas/whitespace
"""

import json
import logging
import re
import time
from typing import Any, Dict, List, Optional

import httpx

from tinylingo.settings.schemas import SmartSettings, TinyLingoConfig
from .models import FuzzyCandidate, MatchResult, MatchSource

logger = logging.getLogger(__name__)


DEFAULT_PROMPT = """You match a user's message against terms from their personal project glossary.

User message: "{message}"

Candidate terms:
{candidates}

Which candidates does the message actually refer to? Judge by meaning, not by shared characters.
Respond with ONLY a JSON object listing the relevant candidate numbers, for example:
{"relevant": [1, 3]}
If none are relevant, respond with {"relevant": []}. /no_think"""


_THINK_BLOCK = re.compile(r'<think>.*?</think>', re.DOTALL | re.IGNORECASE)
_UNCLOSED_THINK = re.compile(r'<think>.*', re.DOTALL | re.IGNORECASE)
_CODE_FENCE = re.compile(r'```[a-zA-Z]*')
_JSON_OBJECT = re.compile(r'\{[\s\S]*\}')
_TOKEN_SEPARATORS = re.compile(r'[,，、;；\s]+')
_INTEGER = re.compile(r'[0-9]+')


def build_prompt(
    message: str,
    candidates: List[FuzzyCandidate],
    template: Optional[str] = None
) -> str:
    """Fill the prompt template with the message and a 1-indexed candidate list."""
    candidate_list = "\n".join(
        f"{i + 1}. {c.term}: {c.explanation}"
        for i, c in enumerate(candidates)
    )
    return (
        (template or DEFAULT_PROMPT)
        .replace("{message}", message)
        .replace("{candidates}", candidate_list)
    )


def _strip_markup(text: str) -> str:
    """Remove reasoning blocks and code fence markers."""
    text = _THINK_BLOCK.sub("", text)
    text = _UNCLOSED_THINK.sub("", text)
    text = _CODE_FENCE.sub("", text)
    return text.strip()


def _coerce_index(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value.strip())
    return None


def _parse_json_indices(text: str) -> Optional[List[int]]:
    """Indices from a {"relevant": [...]} object, or None if there is none."""
    match = _JSON_OBJECT.search(text)
    if not match:
        return None
    try:
        parsed = json.loads(match.group())
    except json.JSONDecodeError:
        return None
    if not isinstance(parsed, dict) or not isinstance(parsed.get("relevant"), list):
        return None

    indices = []
    for value in parsed["relevant"]:
        index = _coerce_index(value)
        if index is not None:
            indices.append(index)
    return indices


def _parse_plain_indices(text: str) -> Optional[List[int]]:
    """Bare integers separated by commas or whitespace."""
    indices = []
    for token in _TOKEN_SEPARATORS.split(text):
        token = token.strip("[](){}.。\"'")
        if _INTEGER.fullmatch(token):
            indices.append(int(token))
    return indices


_INDEX_PARSERS = (_parse_json_indices, _parse_plain_indices)


def parse_indices(content: str, candidate_count: int) -> List[int]:
    """
    Parse the model reply into 1-based candidate indices.

    Out-of-range and non-numeric entries are dropped. Duplicates are kept;
    the pipeline deduplicates by term.

    Args:
        content: Raw reply text
        candidate_count: Number of candidates in the prompt

    Returns:
        Indices in reply order, each within [1, candidate_count]
    """
    cleaned = _strip_markup(content or "")

    indices: List[int] = []
    for parser in _INDEX_PARSERS:
        parsed = parser(cleaned)
        if parsed is not None:
            indices = parsed
            break

    return [i for i in indices if 1 <= i <= candidate_count]


def _extract_content(data: Any) -> str:
    """Pull choices[0].message.content out of a chat completion body."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


def _request_completion(prompt: str, smart: SmartSettings) -> str:
    """POST a single-turn chat completion and return the reply text."""
    payload: Dict[str, Any] = {
        "model": smart.model,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": 0,
        "max_tokens": smart.max_tokens,
    }
    headers = {"Content-Type": "application/json"}
    if smart.api_key:
        headers["Authorization"] = f"Bearer {smart.api_key}"

    # httpx timeouts are per phase and per read; the deadline caps the whole call
    deadline = time.monotonic() + smart.timeout
    body = bytearray()
    with httpx.Client(timeout=smart.timeout) as client:
        with client.stream("POST", smart.endpoint, json=payload, headers=headers) as response:
            response.raise_for_status()
            for chunk in response.iter_bytes():
                if time.monotonic() > deadline:
                    raise httpx.ReadTimeout(f"Response not complete within {smart.timeout}s")
                body.extend(chunk)

    return _extract_content(json.loads(bytes(body)))


def smart_match(
    message: str,
    candidates: List[FuzzyCandidate],
    config: TinyLingoConfig
) -> List[MatchResult]:
    """
    Ask the LLM which fuzzy candidates are relevant to the message.

    Never raises: any failure of the request or the reply yields [].

    Args:
        message: User message
        candidates: Fuzzy candidates, in prompt order
        config: Configuration (uses config.smart)

    Returns:
        Confirmed candidates tagged MatchSource.SMART, in reply order
    """
    if not candidates:
        return []

    smart = config.smart
    prompt = build_prompt(message, candidates, smart.prompt)

    start_time = time.time()
    try:
        content = _request_completion(prompt, smart)
    except httpx.TimeoutException:
        logger.warning(f"Smart match timed out after {smart.timeout}s ({smart.endpoint})")
        return []
    except httpx.HTTPStatusError as e:
        logger.warning(f"Smart match endpoint returned HTTP {e.response.status_code}")
        return []
    except Exception as e:
        logger.warning(f"Smart match request failed: {e}")
        return []

    elapsed_ms = (time.time() - start_time) * 1000
    indices = parse_indices(content, len(candidates))
    logger.debug(f"Smart match reply in {elapsed_ms:.0f}ms: {content!r} -> {indices}")

    return [
        MatchResult(
            term=candidates[i - 1].term,
            explanation=candidates[i - 1].explanation,
            source=MatchSource.SMART
        )
        for i in indices
    ]
