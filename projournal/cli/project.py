"""Project initialization command for projournal CLI."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from projournal.journal import EntryValidationError, JournalError, scaffold_project

console = Console()


@click.command("init")
@click.argument("name")
@click.option(
    "--parent", "-p",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Folder to create the project in (default from config).",
)
@click.option("--status", "-s", "status_input", default=None, help="Initial status (default WIP).")
@click.option("--version", "version", default=None, help="Initial version (default from config).")
@click.option("--summary", default=None, help="One-line project summary.")
@click.option("--location", "-l", default=None, help="Location code for the first entry.")
@click.pass_context
def init(
    ctx: click.Context,
    name: str,
    parent: Optional[Path],
    status_input: Optional[str],
    version: Optional[str],
    summary: Optional[str],
    location: Optional[str],
) -> None:
    """Create a project folder with a seeded journal.
    
    NAME is the project name; the folder is created as PARENT/NAME
    and its journal.md starts with revision 1.
    
    \b
    Examples:
      projournal init my-project
      projournal init my-project --parent ~/projects --status wip --summary "CLI tool"
    """
    config = ctx.obj["config"]
    
    if summary is None:
        summary = click.prompt("Summary", default="", show_default=False)
    if status_input is None:
        status_input = click.prompt("Status [WIP/BETA/C/R]", default="WIP")
    
    try:
        journal_path = scaffold_project(
            parent or config.journal.projects_dir,
            name,
            status=status_input,
            version=version or config.journal.default_version,
            summary=summary,
            location=location or config.journal.location,
        )
    except EntryValidationError as e:
        console.print(Panel(
            f"[red]Invalid input: {str(e)}[/red]\n\n"
            "Nothing was created.",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)
    except JournalError as e:
        console.print(Panel(
            f"[red]Failed to create project:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)
    
    console.print(Panel(
        f"[bold green]Project created[/bold green]\n\n"
        f"Folder:  {journal_path.parent}\n"
        f"Journal: {journal_path}",
        title=f"[bold]{name}[/bold]",
        border_style="green",
    ))
