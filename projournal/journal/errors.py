"""Exceptions raised by the journal layer."""


class JournalError(Exception):
    """Base class for all journal errors."""


class JournalNotFound(JournalError, FileNotFoundError):
    """The journal path could not be resolved."""


class JournalExists(JournalError, FileExistsError):
    """A journal already exists where a new one was to be created."""


class JournalIOError(JournalError, OSError):
    """Reading or writing the journal failed."""


class EntryValidationError(JournalError, ValueError):
    """User input for an entry was rejected."""
