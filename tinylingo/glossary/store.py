# TinyLingo Glossary - Store
# ==========================
"""
JSON-file persistence for the glossary (term -> explanation).

The file is a flat JSON object. Insertion order is preserved, which is the
order exact matches are reported in.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from tinylingo import GlossaryError
from tinylingo.settings.paths import get_glossary_path

logger = logging.getLogger(__name__)


class GlossaryStore:
    """Reads and writes the glossary file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            path: Glossary file (defaults to glossary.json in the config dir)
        """
        self.path = Path(path) if path else get_glossary_path()

    def read(self) -> Dict[str, str]:
        """
        Read the glossary.

        Returns:
            term -> explanation, {} if the file does not exist

        Raises:
            GlossaryError: If the file is not a JSON object of strings
        """
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise GlossaryError(f"Cannot read glossary {self.path}: {e}")

        if not isinstance(data, dict):
            raise GlossaryError(f"Glossary {self.path} must contain a JSON object")
        for term, explanation in data.items():
            if not isinstance(explanation, str):
                raise GlossaryError(f"Explanation for '{term}' must be a string")
        return data

    def write(self, glossary: Dict[str, str]) -> None:
        """Write the glossary as pretty JSON, keeping non-ASCII text readable."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(glossary, indent=2, ensure_ascii=False),
            encoding="utf-8"
        )

    def add(self, term: str, explanation: str) -> None:
        """Add or update an entry."""
        term = term.strip()
        if not term:
            raise GlossaryError("Term must not be empty")

        glossary = self.read()
        updated = term in glossary
        glossary[term] = explanation.strip()
        self.write(glossary)
        logger.info(f"{'Updated' if updated else 'Recorded'} glossary term '{term}'")

    def remove(self, term: str) -> bool:
        """
        Remove an entry.

        Returns:
            True if the entry existed and was removed
        """
        glossary = self.read()
        if term not in glossary:
            return False
        del glossary[term]
        self.write(glossary)
        logger.info(f"Removed glossary term '{term}'")
        return True

    def list(self) -> Dict[str, str]:
        """All entries in insertion order."""
        return self.read()
