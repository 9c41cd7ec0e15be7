# TinyLingo Glossary Module
"""
Glossary persistence: the term -> explanation mapping the matcher consumes.
"""

from .store import GlossaryStore

__all__ = [
    "GlossaryStore",
]
