"""JournalEntry and EntryDraft data models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


DEFAULT_LOCATION = "EARTH"


class Status(str, Enum):
    """Lifecycle stage of a project."""

    WIP = "WIP"
    BETA = "BETA"
    C = "C"
    R = "R"

    @property
    def label(self) -> str:
        return {
            Status.WIP: "Work in progress",
            Status.BETA: "Beta",
            Status.C: "Complete",
            Status.R: "Released",
        }[self]


class JournalEntry(BaseModel):
    """Represents one revision recorded in a project journal."""

    revision: int = Field(..., gt=0, description="Revision number, starting at 1")
    timestamp: str = Field(
        ..., min_length=1, description="Timestamp as YYYY-MM-DDTHH:MM:SS+HH:MM@LOCATION"
    )
    status: str = Field(..., description="Status recorded for this revision")
    changes: list[str] = Field(default_factory=list, description="Changes, in order")

    model_config = {"frozen": True}


class EntryDraft(BaseModel):
    """Raw user input for a new entry, before validation."""

    location: Optional[str] = Field(default=None, description="Location code")
    status: Optional[str] = Field(
        default=None, description="Status; blank carries the previous one forward"
    )
    changes: Optional[str] = Field(default=None, description="Comma-separated changes")
    now: Optional[datetime] = Field(
        default=None, description="Entry time (defaults to the current local time)"
    )

    model_config = {"frozen": True}
