"""Tests for project initialization.

**Feature: project-journal**
"""

from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import pytest

from projournal.journal import (
    EntryValidationError,
    JournalExists,
    JournalStore,
    SEED_CHANGES,
    render_header,
    scaffold_project,
)


NOW = datetime(2024, 3, 9, 18, 0, 0, tzinfo=timezone(timedelta(hours=1)))


class TestRenderHeader:
    def test_header_layout(self):
        header = render_header("Demo", date(2024, 3, 9), "1.2.0", "A tool")
        assert header.splitlines() == [
            "# Demo",
            "",
            "**Start Date:** 2024-03-09",
            "**Version:** 1.2.0",
            "**Summary:** A tool",
            "",
            "---",
            "",
            "## Change Log",
        ]


class TestScaffoldProject:
    def test_creates_folder_and_seed_entry(self, tmp_path: Path):
        journal = scaffold_project(tmp_path, "demo", status="beta", summary="Test", now=NOW)

        assert journal == tmp_path / "demo" / "journal.md"
        store = JournalStore(journal)
        entries = store.entries()
        assert len(entries) == 1
        assert entries[0].revision == 1
        assert entries[0].status == "BETA"
        assert entries[0].changes == SEED_CHANGES
        assert entries[0].timestamp == "2024-03-09T18:00:00+01:00@EARTH"

    def test_header_preserved(self, tmp_path: Path):
        journal = scaffold_project(tmp_path, "demo", version="2.0", summary=" Notes ", now=NOW)
        lines = JournalStore(journal).read_lines()
        assert lines[0] == "# demo"
        assert "**Version:** 2.0" in lines
        assert "**Summary:** Notes" in lines
        assert "**Start Date:** 2024-03-09" in lines

    def test_blank_status_is_wip(self, tmp_path: Path):
        journal = scaffold_project(tmp_path, "demo", now=NOW)
        assert JournalStore(journal).current_status() == "WIP"

    def test_location_in_seed_entry(self, tmp_path: Path):
        journal = scaffold_project(tmp_path, "demo", location="Office", now=NOW)
        assert JournalStore(journal).entries()[0].timestamp.endswith("@Office")

    def test_next_revision_after_seed(self, tmp_path: Path):
        journal = scaffold_project(tmp_path, "demo", now=NOW)
        assert JournalStore(journal).next_revision() == 2

    def test_invalid_status_creates_nothing(self, tmp_path: Path):
        with pytest.raises(EntryValidationError):
            scaffold_project(tmp_path, "demo", status="shipped", now=NOW)
        assert not (tmp_path / "demo").exists()

    def test_blank_name_rejected(self, tmp_path: Path):
        with pytest.raises(EntryValidationError):
            scaffold_project(tmp_path, "   ", now=NOW)

    @pytest.mark.parametrize("name", ["../x", "a/b", "a\\b", "..", ".", "a\nb"])
    def test_name_must_be_a_single_folder(self, tmp_path: Path, name: str):
        parent = tmp_path / "projects"

        with pytest.raises(EntryValidationError):
            scaffold_project(parent, name, now=NOW)

        assert not parent.exists()
        assert not (tmp_path / "x").exists()

    def test_dots_inside_name_allowed(self, tmp_path: Path):
        journal = scaffold_project(tmp_path, "v1..2", now=NOW)
        assert journal.parent == tmp_path / "v1..2"

    def test_multiline_header_fields_stay_in_header(self, tmp_path: Path):
        journal = scaffold_project(
            tmp_path, "demo", version="1\n**Status:** R", summary="a\n### Revision 5 – x", now=NOW
        )
        store = JournalStore(journal)

        assert store.count_entries() == 1
        assert store.current_status() == "WIP"
        assert "**Summary:** a ### Revision 5 – x" in store.read_lines()

    def test_existing_journal_untouched(self, tmp_path: Path):
        journal = scaffold_project(tmp_path, "demo", now=NOW)
        before = journal.read_bytes()

        with pytest.raises(JournalExists):
            scaffold_project(tmp_path, "demo", status="r", now=NOW)

        assert journal.read_bytes() == before

    def test_existing_folder_without_journal(self, tmp_path: Path):
        (tmp_path / "demo").mkdir()
        (tmp_path / "demo" / "README.md").write_text("hi", encoding="utf-8")

        journal = scaffold_project(tmp_path, "demo", now=NOW)

        assert journal.exists()
        assert (tmp_path / "demo" / "README.md").read_text(encoding="utf-8") == "hi"
