"""Project folder initializer."""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Union

from projournal.journal.builder import (
    LINE_BREAKS,
    build_timestamp,
    render,
    resolve_status,
    single_line,
)
from projournal.journal.errors import EntryValidationError, JournalIOError
from projournal.journal.store import JOURNAL_FILENAME, JournalStore
from projournal.models import Status

logger = logging.getLogger(__name__)

SEED_CHANGES = ["Project created", "Folder initialized"]


def render_header(name: str, start_date: date, version: str, summary: str) -> str:
    """Render the free-form header that precedes the change log."""
    return "\n".join([
        f"# {single_line(name)}",
        "",
        f"**Start Date:** {start_date.isoformat()}",
        f"**Version:** {single_line(version)}",
        f"**Summary:** {single_line(summary)}",
        "",
        "---",
        "",
        "## Change Log",
    ])


def scaffold_project(
    parent_dir: Union[str, Path],
    name: str,
    status: Optional[str] = None,
    version: str = "0.1.0",
    summary: str = "",
    location: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Path:
    """Create a project folder and seed its journal with revision 1.

    Args:
        parent_dir: Directory the project folder is created in.
        name: Project name, also used as the folder name.
        status: Initial status; blank means WIP.
        version: Initial version string.
        summary: One-line project summary.
        location: Location code for the seed entry.
        now: Creation time (defaults to the current local time).

    Returns:
        Path of the new journal file.

    Raises:
        EntryValidationError: If the name is blank, is . or .., contains a
            path separator or line break, or the status is invalid.
        JournalExists: If the folder already holds a journal.
        JournalIOError: If the folder or file cannot be created.
    """
    name = name.strip()
    if not name:
        raise EntryValidationError("project name is required")
    if name in (".", "..") or "/" in name or "\\" in name or LINE_BREAKS.search(name):
        raise EntryValidationError(f"invalid project name: {name}")

    # Validate before anything touches the disk
    initial_status = resolve_status(status, Status.WIP.value)
    now = now or datetime.now()

    project_dir = Path(parent_dir).expanduser() / name
    try:
        project_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise JournalIOError(f"Cannot create {project_dir}: {e}") from e

    store = JournalStore(project_dir / JOURNAL_FILENAME)
    store.create(render_header(name, now.date(), version, summary.strip()))
    store.append(render(1, build_timestamp(now, location_code=location), initial_status, SEED_CHANGES))

    logger.info("Initialized project %s at %s", name, project_dir)
    return store.path
