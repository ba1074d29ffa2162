"""Journal storage, parsing and entry construction."""

from projournal.journal.builder import (
    EntryBuilder,
    EntryState,
    SubmitResult,
    build_timestamp,
    parse_changes,
    render,
    render_entry,
    resolve_status,
)
from projournal.journal.errors import (
    EntryValidationError,
    JournalError,
    JournalExists,
    JournalIOError,
    JournalNotFound,
)
from projournal.journal.scaffold import SEED_CHANGES, render_header, scaffold_project
from projournal.journal.store import JOURNAL_FILENAME, JournalStore, locate_journal

__all__ = [
    "EntryBuilder",
    "EntryState",
    "SubmitResult",
    "build_timestamp",
    "parse_changes",
    "render",
    "render_entry",
    "resolve_status",
    "EntryValidationError",
    "JournalError",
    "JournalExists",
    "JournalIOError",
    "JournalNotFound",
    "SEED_CHANGES",
    "render_header",
    "scaffold_project",
    "JOURNAL_FILENAME",
    "JournalStore",
    "locate_journal",
]
