#!/usr/bin/env python
# TinyLingo - Prompt Hook
# =======================
"""
UserPromptSubmit hook handler.

Reads the hook event JSON from stdin, matches the prompt against the
glossary and writes the hook response JSON to stdout:

    match found: {"hookSpecificOutput": {"hookEventName": "UserPromptSubmit",
                  "additionalContext": "<system-reminder>..."}}
    no match:    {}

The hook must never break the host tool, so every failure prints "{}".
"""

import json
import logging
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from tinylingo.glossary import GlossaryStore
from tinylingo.log_setup import configure_debug_log
from tinylingo.matching import MatchResult, match_all
from tinylingo.settings import TinyLingoConfig, load_config

logger = logging.getLogger(__name__)

HOOK_EVENT = "UserPromptSubmit"
EMPTY_RESPONSE = "{}"


def format_reminder(results: List[MatchResult]) -> str:
    """Wrap match results in a system-reminder block for the assistant."""
    lines = "\n".join(f"- {r.term}: {r.explanation}" for r in results)
    return f"<system-reminder>\n[TinyLingo]\n{lines}\n</system-reminder>"


def _extract_prompt(event: Dict[str, Any]) -> Optional[str]:
    prompt = event.get("prompt")
    if prompt is None and isinstance(event.get("data"), dict):
        prompt = event["data"].get("prompt")
    return prompt if isinstance(prompt, str) and prompt else None


def process_hook_event(
    raw: str,
    glossary: Optional[Dict[str, str]] = None,
    config: Optional[TinyLingoConfig] = None
) -> str:
    """
    Process one hook event.

    Args:
        raw: Event JSON read from stdin
        glossary: Glossary to use (read from the store if None)
        config: Configuration to use (loaded from disk if None)

    Returns:
        Response JSON for stdout
    """
    try:
        event = json.loads(raw)
        if not isinstance(event, dict):
            return EMPTY_RESPONSE

        event_name = event.get("hook_event_name") or event.get("event")
        if event_name != HOOK_EVENT:
            return EMPTY_RESPONSE

        prompt = _extract_prompt(event)
        if not prompt:
            return EMPTY_RESPONSE

        if config is None:
            config = load_config()
        configure_debug_log(config.debug)
        if glossary is None:
            glossary = GlossaryStore().read()

        results = match_all(prompt, glossary, config)
        logger.debug(f"Hook prompt {prompt!r} matched {[r.to_dict() for r in results]}")
        if not results:
            return EMPTY_RESPONSE

        return json.dumps({
            "hookSpecificOutput": {
                "hookEventName": HOOK_EVENT,
                "additionalContext": format_reminder(results),
            }
        }, ensure_ascii=False)

    except Exception as e:
        logger.error(f"Hook processing failed: {e}")
        return EMPTY_RESPONSE


def main() -> None:
    """Read the event from stdin and write the response to stdout."""
    try:
        load_dotenv()
        raw = sys.stdin.buffer.read().decode("utf-8", errors="replace")
        response = process_hook_event(raw)
    except Exception as e:
        logger.error(f"Hook input failed: {e}")
        response = EMPTY_RESPONSE

    # Bytes, so the reply does not depend on the console encoding
    try:
        sys.stdout.buffer.write(response.encode("utf-8"))
        sys.stdout.buffer.flush()
    except Exception as e:
        logger.error(f"Hook output failed: {e}")


if __name__ == "__main__":
    main()
