"""Entry commands for projournal CLI.

Handles recording a new revision in a project journal.
"""

from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from projournal.cli.view import status_text
from projournal.journal import (
    EntryBuilder,
    EntryValidationError,
    JournalError,
    JournalStore,
    SubmitResult,
)
from projournal.models import EntryDraft, JournalEntry

console = Console()


@click.command("add")
@click.argument("path", default=".", type=click.Path(path_type=str))
@click.option("--location", "-l", default=None, help="Location code (default from config).")
@click.option("--status", "-s", "status_input", default=None, help="WIP, BETA, C or R. Blank keeps the current status.")
@click.option("--changes", "-c", default=None, help="Comma-separated list of changes.")
@click.option("--yes", "-y", is_flag=True, help="Append without asking for confirmation.")
@click.pass_context
def add(
    ctx: click.Context,
    path: str,
    location: Optional[str],
    status_input: Optional[str],
    changes: Optional[str],
    yes: bool,
) -> None:
    """Record a new revision in a project journal.
    
    PATH is a project folder or a journal file (default: current folder).
    Fields not given as options are prompted for; leave the status blank
    to carry the current one forward.
    
    \b
    Examples:
      projournal add
      projournal add my-project -s beta -c "Add parser, Fix typo"
      projournal add my-project -c "Release notes" -y
    """
    config = ctx.obj["config"]
    
    try:
        store = JournalStore.locate(path)
        current = store.current_status()
        revision = store.next_revision()
    except JournalError as e:
        console.print(Panel(
            f"[red]Failed to open journal:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)
    
    header = Text(f"Revision {revision} for {store.path}\nCurrent status: ")
    header.append_text(status_text(current))
    console.print(header)
    
    if location is None:
        location = click.prompt("Location code", default=config.journal.location)
    if status_input is None:
        status_input = click.prompt(
            f"Status [WIP/BETA/C/R, blank keeps {current}]",
            default="",
            show_default=False,
        )
    if changes is None:
        changes = click.prompt("Changes (comma-separated)", default="", show_default=False)
    
    def confirm(entry: JournalEntry, text: str) -> bool:
        if yes:
            return True
        console.print(Panel(
            Text(text.strip("\n")),
            title=f"[bold]Revision {entry.revision}[/bold]",
            border_style="cyan",
        ))
        return click.confirm("Append this entry?", default=True)
    
    draft = EntryDraft(location=location, status=status_input, changes=changes)
    
    try:
        result = EntryBuilder(store).submit(draft, confirm)
    except EntryValidationError as e:
        console.print(Panel(
            f"[red]Entry rejected: {str(e)}[/red]\n\n"
            "Valid statuses: WIP, BETA, C, R. Nothing was written.",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)
    except JournalError as e:
        console.print(Panel(
            f"[red]Failed to write entry:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)
    
    if result is SubmitResult.DISCARDED:
        console.print("[yellow]Entry discarded[/yellow]")
        return
    
    console.print(f"[green]✓ Added revision {revision} to {store.path}[/green]")
