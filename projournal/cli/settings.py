"""Configuration command for projournal CLI."""

import click
import toml
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from projournal.config import write_template_config

console = Console()


@click.command("config")
@click.option("--init", "init_config", is_flag=True, help="Write a config file with default settings.")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_context
def config(ctx: click.Context, init_config: bool, force: bool) -> None:
    """Show the effective configuration.
    
    \b
    Examples:
      projournal config          # Print settings in use
      projournal config --init   # Create ~/.config/projournal/config.toml
    """
    config_path = ctx.obj["config_path"]
    
    if init_config:
        if config_path.exists() and not force:
            console.print(f"[yellow]Config already exists at {config_path} (use --force to overwrite)[/yellow]")
            return
        try:
            written = write_template_config(config_path)
        except OSError as e:
            console.print(Panel(
                f"[red]Failed to write config:[/red]\n\n{str(e)}",
                title="[bold red]Error[/bold red]",
                border_style="red",
            ))
            raise SystemExit(1)
        console.print(f"[green]✓ Wrote config to {written}[/green]")
        return
    
    settings = ctx.obj["config"].model_dump(mode="json")
    source = str(config_path) if config_path.exists() else "defaults"
    console.print(Panel(
        Text(toml.dumps(settings).strip()),
        title=f"[bold]Config ({source})[/bold]",
        border_style="cyan",
    ))
