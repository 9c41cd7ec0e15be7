# TinyLingo
# =========
"""
Personal glossary matcher for AI coding assistants.

Records project-specific terms ("term -> explanation") and matches incoming
user messages against them so the assistant gets a contextual reminder.

Subpackages:
- matching: exact / fuzzy / smart matching engine
- settings: configuration loading and dot-path access
- glossary: glossary persistence
- hook: UserPromptSubmit hook handler
"""

__version__ = "0.3.0"


class TinyLingoError(Exception):
    """Base error for the persistence and settings layers."""


class ConfigError(TinyLingoError):
    """Configuration file is unreadable or a value fails validation."""


class GlossaryError(TinyLingoError):
    """Glossary file is malformed or an entry is invalid."""


__all__ = [
    "__version__",
    "TinyLingoError",
    "ConfigError",
    "GlossaryError",
]
