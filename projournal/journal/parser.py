"""Line parser for journal.md files.

Every line of a journal is classified by exactly one pattern:

    REVISION  ``### Revision <n> – <timestamp>``
    STATUS    ``**Status:** <value>``
    CHANGES   ``**Changes:**``
    BULLET    ``- <text>``
    TEXT      anything else (header, divider, headings, blank lines)
"""

import re
from enum import Enum
from typing import Iterable, NamedTuple, Optional

from projournal.models import JournalEntry


REVISION_MARKER = "### Revision "

REVISION_PATTERN = re.compile(r"^### Revision (?P<number>\d+) – (?P<timestamp>.+?)\s*$")
STATUS_PATTERN = re.compile(r"^\*\*Status:\*\*\s*(?P<value>.*?)\s*$")
CHANGES_PATTERN = re.compile(r"^\*\*Changes:\*\*\s*$")
BULLET_PATTERN = re.compile(r"^- (?P<text>.*?)\s*$")


class LineKind(str, Enum):
    REVISION = "revision"
    STATUS = "status"
    CHANGES = "changes"
    BULLET = "bullet"
    TEXT = "text"


class ParsedLine(NamedTuple):
    """A classified journal line.

    ``value`` is the status text for STATUS lines, the bullet text for
    BULLET lines and the timestamp for REVISION lines.
    """

    kind: LineKind
    value: Optional[str] = None
    number: Optional[int] = None


def parse_line(line: str) -> ParsedLine:
    """Classify a single journal line."""
    line = line.rstrip("\r\n")

    if line.startswith(REVISION_MARKER):
        match = REVISION_PATTERN.match(line)
        if match:
            return ParsedLine(
                LineKind.REVISION,
                value=match.group("timestamp"),
                number=int(match.group("number")),
            )
        # Malformed heading still counts as an entry
        return ParsedLine(LineKind.REVISION)

    match = STATUS_PATTERN.match(line)
    if match:
        return ParsedLine(LineKind.STATUS, value=match.group("value"))

    if CHANGES_PATTERN.match(line):
        return ParsedLine(LineKind.CHANGES)

    match = BULLET_PATTERN.match(line)
    if match:
        return ParsedLine(LineKind.BULLET, value=match.group("text"))

    return ParsedLine(LineKind.TEXT)


def count_revisions(lines: Iterable[str]) -> int:
    """Count revision headings in ``lines``."""
    return sum(1 for line in lines if parse_line(line).kind is LineKind.REVISION)


def last_status(lines: list[str]) -> Optional[str]:
    """Return the status of the last entry, or None if no entry has one.

    Status lines only count below a revision heading; anything in the
    header is ignored.
    """
    pending = None
    for line in reversed(lines):
        parsed = parse_line(line)
        if parsed.kind is LineKind.STATUS:
            if pending is None:
                pending = parsed.value
        elif parsed.kind is LineKind.REVISION and pending is not None:
            return pending
    return None


def parse_entries(lines: Iterable[str]) -> list[JournalEntry]:
    """Group journal lines into entries.

    Entries are numbered by position when the heading has no readable
    revision number. Bullets are only collected after the entry's
    ``**Changes:**`` line.
    """
    entries: list[JournalEntry] = []
    current: Optional[dict] = None
    in_changes = False

    def flush() -> None:
        if current is not None:
            entries.append(JournalEntry(**current))

    for line in lines:
        parsed = parse_line(line)

        if parsed.kind is LineKind.REVISION:
            flush()
            current = {
                "revision": parsed.number or len(entries) + 1,
                "timestamp": parsed.value or "?",
                "status": "",
                "changes": [],
            }
            in_changes = False
        elif current is None:
            continue
        elif parsed.kind is LineKind.STATUS:
            current["status"] = parsed.value
        elif parsed.kind is LineKind.CHANGES:
            in_changes = True
        elif parsed.kind is LineKind.BULLET and in_changes:
            if parsed.value:
                current["changes"].append(parsed.value)
        elif parsed.kind is LineKind.TEXT and line.strip():
            in_changes = False

    flush()
    return entries
