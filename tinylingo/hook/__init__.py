from .entry import process_hook_event, format_reminder, main

__all__ = [
    "process_hook_event",
    "format_reminder",
    "main",
]
