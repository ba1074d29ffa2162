"""Construction and submission of new journal entries.

An add-entry operation runs through the states in ``EntryState``:

    COLLECTING_INPUT -> VALIDATING -> AWAITING_CONFIRMATION -> APPENDED
                                                             -> DISCARDED
                                   -> REJECTED

An I/O failure while reading or writing the journal ends in FAILED.

Validation happens before the confirmation callback is consulted, so a
rejected entry never reaches the file.
"""

import logging
import re
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Optional

from projournal.journal.errors import EntryValidationError, JournalIOError
from projournal.journal.store import JournalStore
from projournal.models import DEFAULT_LOCATION, EntryDraft, JournalEntry, Status

logger = logging.getLogger(__name__)

VALID_STATUSES = frozenset(s.value for s in Status)

# Everything str.splitlines() treats as a line boundary
LINE_BREAKS = re.compile(r"[\r\n\v\f\x1c\x1d\x1e\x85\u2028\u2029]+")

# Receives the built entry and its rendered block, returns True to append
ConfirmCallback = Callable[[JournalEntry, str], bool]


class EntryState(str, Enum):
    COLLECTING_INPUT = "collecting_input"
    VALIDATING = "validating"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    APPENDED = "appended"
    DISCARDED = "discarded"
    REJECTED = "rejected"
    FAILED = "failed"


class SubmitResult(str, Enum):
    APPENDED = "appended"
    DISCARDED = "discarded"


def single_line(text: str) -> str:
    """Collapse line breaks to spaces so text stays on its journal line."""
    return LINE_BREAKS.sub(" ", text).strip()


def _format_offset(offset: timedelta) -> str:
    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def build_timestamp(
    now: datetime,
    utc_offset: Optional[timedelta] = None,
    location_code: Optional[str] = None,
) -> str:
    """Format an entry timestamp as ``YYYY-MM-DDTHH:MM:SS±HH:MM@LOCATION``.

    Args:
        now: Local wall-clock time of the entry.
        utc_offset: Offset from UTC. Falls back to the offset of an aware
            ``now``, then to the machine's local offset.
        location_code: Where the entry was written. Blank means EARTH.

    Returns:
        The formatted timestamp.
    """
    if utc_offset is None:
        utc_offset = now.utcoffset()
    if utc_offset is None:
        utc_offset = now.astimezone().utcoffset() or timedelta(0)

    location = single_line(location_code or "") or DEFAULT_LOCATION

    return f"{now.strftime('%Y-%m-%dT%H:%M:%S')}{_format_offset(utc_offset)}@{location}"


def resolve_status(user_input: Optional[str], previous_status: str) -> str:
    """Resolve the status for a new entry.

    Args:
        user_input: Status typed by the user; blank keeps the previous one.
        previous_status: Status of the last entry in the journal.

    Returns:
        The status to record.

    Raises:
        EntryValidationError: If the input is not WIP, BETA, C or R.
    """
    value = (user_input or "").strip()
    if not value:
        return previous_status

    value = value.upper()
    if value not in VALID_STATUSES:
        raise EntryValidationError("invalid status")
    return value


def parse_changes(raw: Optional[str]) -> list[str]:
    """Split comma-separated changes, dropping blank pieces.

    Line breaks inside a piece become spaces.
    """
    if not raw:
        return []
    pieces = (single_line(piece) for piece in raw.split(","))
    return [piece for piece in pieces if piece]


def render(revision: int, timestamp: str, status: str, changes: list[str]) -> str:
    """Render an entry block exactly as it is stored in journal.md."""
    lines = [
        "",
        f"### Revision {revision} – {single_line(timestamp)}",
        f"**Status:** {single_line(status)}",
        "**Changes:**",
    ]
    lines.extend(f"- {single_line(change)}" for change in changes)
    return "\n".join(lines)


def render_entry(entry: JournalEntry) -> str:
    """Render a JournalEntry model."""
    return render(entry.revision, entry.timestamp, entry.status, entry.changes)


class EntryBuilder:
    """Builds validated entries and hands them to a JournalStore."""

    def __init__(self, store: JournalStore):
        self.store = store
        self.state = EntryState.COLLECTING_INPUT

    def build(self, draft: EntryDraft) -> JournalEntry:
        """Validate a draft and resolve its defaults against the journal.

        Raises:
            EntryValidationError: If the status is invalid.
            JournalIOError: If the journal cannot be read.
        """
        self.state = EntryState.VALIDATING
        try:
            previous = self.store.current_status()
            revision = self.store.next_revision()
        except JournalIOError:
            self.state = EntryState.FAILED
            raise

        try:
            status = resolve_status(draft.status, previous)
        except EntryValidationError:
            self.state = EntryState.REJECTED
            logger.debug("Rejected status %r for %s", draft.status, self.store.path)
            raise

        now = draft.now or datetime.now()
        return JournalEntry(
            revision=revision,
            timestamp=build_timestamp(now, location_code=draft.location),
            status=status,
            changes=parse_changes(draft.changes),
        )

    def submit(self, draft: EntryDraft, confirm: ConfirmCallback) -> SubmitResult:
        """Build an entry, ask for confirmation and append it.

        Args:
            draft: Raw user input.
            confirm: Called with the entry and its rendered text; the entry
                is only written when it returns True.

        Returns:
            SubmitResult.APPENDED or SubmitResult.DISCARDED.

        Raises:
            EntryValidationError: If the draft is invalid. Nothing is written.
            JournalIOError: If the journal cannot be read or written.
        """
        self.state = EntryState.COLLECTING_INPUT
        entry = self.build(draft)
        text = render_entry(entry)

        self.state = EntryState.AWAITING_CONFIRMATION
        if not confirm(entry, text):
            self.state = EntryState.DISCARDED
            logger.info("Discarded revision %d for %s", entry.revision, self.store.path)
            return SubmitResult.DISCARDED

        try:
            self.store.append(text)
        except JournalIOError:
            self.state = EntryState.FAILED
            raise
        self.state = EntryState.APPENDED
        return SubmitResult.APPENDED
