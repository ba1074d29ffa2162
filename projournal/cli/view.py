"""Journal viewing commands for projournal CLI.

Handles printing the change log and the current project status.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from projournal.journal import JournalError, JournalStore
from projournal.models import Status

console = Console()


STATUS_STYLES = {
    Status.WIP.value: "yellow",
    Status.BETA.value: "cyan",
    Status.C.value: "green",
    Status.R.value: "bold green",
}


def status_text(status: str) -> Text:
    """Colored status for console output."""
    style = STATUS_STYLES.get(status.upper(), "magenta")
    try:
        label = Status(status.upper()).label
    except ValueError:
        return Text(status or "-", style=style)
    return Text(f"{status} ({label})", style=style)


def _print_error(message: str, error: Exception) -> None:
    console.print(Panel(
        f"[red]{message}[/red]\n\n{str(error)}",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))


@click.command("show")
@click.argument("path", default=".", type=click.Path(path_type=str))
@click.option("--raw", is_flag=True, help="Print the journal file as-is.")
def show(path: str, raw: bool) -> None:
    """Display the change log of a project journal.
    
    PATH is a project folder or a journal file (default: current folder).
    
    \b
    Examples:
      projournal show                # Journal in current folder
      projournal show my-project     # Journal in my-project/
      projournal show notes.md --raw # Print the file unformatted
    """
    try:
        store = JournalStore.locate(path)
        
        if raw:
            for line in store.read_lines():
                console.print(line, markup=False, highlight=False)
            return
        
        entries = store.entries()
    except JournalError as e:
        _print_error("Failed to read journal:", e)
        raise SystemExit(1)
    
    if not entries:
        console.print(Panel(
            "[dim]No revisions recorded yet. Use 'projournal add' to create one.[/dim]",
            title=f"[bold]{store.path}[/bold]",
            border_style="dim",
        ))
        return
    
    table = Table(
        title=str(store.path),
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Rev", style="dim", justify="right")
    table.add_column("Timestamp")
    table.add_column("Status")
    table.add_column("Changes")
    
    for entry in entries:
        table.add_row(
            str(entry.revision),
            entry.timestamp,
            status_text(entry.status),
            Text("\n".join(entry.changes) if entry.changes else "-"),
        )
    
    console.print(table)
    console.print(f"\n[dim]Total: {len(entries)} revisions[/dim]")


@click.command("status")
@click.argument("path", default=".", type=click.Path(path_type=str))
def status(path: str) -> None:
    """Show the current status of a project.
    
    The current status is the status of the last entry in the
    journal, or WIP when no entry exists.
    
    \b
    Examples:
      projournal status
      projournal status my-project
    """
    try:
        store = JournalStore.locate(path)
        current = store.current_status()
        count = store.count_entries()
    except JournalError as e:
        _print_error("Failed to read journal:", e)
        raise SystemExit(1)
    
    body = Text()
    body.append("Status:        ")
    body.append_text(status_text(current))
    body.append(f"\nRevisions:     {count}")
    body.append(f"\nNext revision: {count + 1}")
    
    console.print(Panel(
        body,
        title=f"[bold]{store.path}[/bold]",
        border_style="cyan",
    ))
