"""Main CLI entry point for projournal.

This module provides the main click group and lazy loading
of the command modules.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.
    
    Command modules are only imported when the command is invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.
        
        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]
        
        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)
        
        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib
        
        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)
        
        cmd = None
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                cmd = attr
                break
        
        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")
        
        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "init": "projournal.cli.project",
    "add": "projournal.cli.entry",
    "show": "projournal.cli.view",
    "status": "projournal.cli.view",
    "config": "projournal.cli.settings",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(level: str, verbose: bool = False) -> None:
    """Configure the root logger once for the whole process."""
    if verbose:
        level = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="projournal")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of ~/.config/projournal/config.toml.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """projournal - keep a revision log for each project folder.
    
    Every project folder holds a journal.md with a header and a
    change log. Each revision records a timestamp, a status
    (WIP, BETA, C=complete, R=released) and a list of changes.
    
    \b
    Quick Start:
      projournal init my-project      # Create folder and journal
      projournal add my-project       # Record a new revision
      projournal show my-project      # Print the change log
    """
    from projournal.config import get_config_path, load_config

    config = load_config(config_path)
    setup_logging(config.logging.level, verbose)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["config_path"] = get_config_path(config_path)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
