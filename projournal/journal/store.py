"""File-backed journal store for projournal."""

import logging
from pathlib import Path
from typing import Union

from projournal.journal.errors import JournalExists, JournalIOError, JournalNotFound
from projournal.journal.parser import count_revisions, last_status, parse_entries
from projournal.models import JournalEntry, Status

logger = logging.getLogger(__name__)

JOURNAL_FILENAME = "journal.md"


def locate_journal(candidate: Union[str, Path]) -> Path:
    """Resolve a user-supplied file or directory to a journal file.

    Args:
        candidate: Path to a project folder or directly to a journal file.

    Returns:
        Path of the journal file.

    Raises:
        JournalNotFound: If neither ``<candidate>/journal.md`` nor
            ``candidate`` itself is an existing file.
    """
    path = Path(candidate).expanduser()

    if path.is_dir():
        journal = path / JOURNAL_FILENAME
        if journal.is_file():
            return journal
        raise JournalNotFound(f"No {JOURNAL_FILENAME} found in {path}")

    if path.is_file():
        return path

    raise JournalNotFound(f"Journal not found: {path}")


class JournalStore:
    """Append-only access to a single journal file.

    Nothing is cached between calls: revision counts and the current
    status are recomputed from the file every time.
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Path to the journal file.
        """
        self.path = Path(path)

    @classmethod
    def locate(cls, candidate: Union[str, Path]) -> "JournalStore":
        """Create a store for the journal found at ``candidate``."""
        return cls(locate_journal(candidate))

    def read_lines(self) -> list[str]:
        """Read every line of the journal, without line endings.

        Raises:
            JournalIOError: If the file cannot be read.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise JournalIOError(f"Cannot read {self.path}: {e}") from e
        return text.splitlines()

    def current_status(self) -> str:
        """Get the status of the last entry in file order.

        Returns:
            The status text, or WIP for a journal without entries.
        """
        status = last_status(self.read_lines())
        if status is None:
            logger.debug("No status line in %s, defaulting to WIP", self.path)
            return Status.WIP.value
        return status

    def count_entries(self) -> int:
        """Count the revision headings in the journal."""
        return count_revisions(self.read_lines())

    def next_revision(self) -> int:
        """Get the revision number the next appended entry will carry."""
        return self.count_entries() + 1

    def entries(self) -> list[JournalEntry]:
        """Parse all entries, in file order."""
        return parse_entries(self.read_lines())

    def append(self, text: str) -> None:
        """Append a rendered entry block to the end of the journal.

        The write is not transactional; a failure part way through can
        leave a truncated last entry.

        Raises:
            JournalIOError: If the file cannot be opened or written.
        """
        if not text.endswith("\n"):
            text += "\n"
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise JournalIOError(f"Cannot write {self.path}: {e}") from e
        logger.info("Appended %d bytes to %s", len(text.encode("utf-8")), self.path)

    def create(self, header: str) -> None:
        """Write a new journal containing only ``header``.

        Raises:
            JournalExists: If the file already exists.
            JournalIOError: If the file cannot be written.
        """
        if not header.endswith("\n"):
            header += "\n"
        try:
            with open(self.path, "x", encoding="utf-8") as f:
                f.write(header)
        except FileExistsError as e:
            raise JournalExists(f"Journal already exists: {self.path}") from e
        except OSError as e:
            raise JournalIOError(f"Cannot create {self.path}: {e}") from e
        logger.info("Created journal %s", self.path)
