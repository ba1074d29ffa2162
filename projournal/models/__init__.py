"""Data models for projournal."""

from projournal.models.entry import (
    DEFAULT_LOCATION,
    EntryDraft,
    JournalEntry,
    Status,
)

__all__ = [
    "DEFAULT_LOCATION",
    "EntryDraft",
    "JournalEntry",
    "Status",
]
