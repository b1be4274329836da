"""Main CLI entry point for TradeJournal.

This module provides the main click group and lazy loading
of subcommand modules.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when they are actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
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

        attr = getattr(module, cmd_name, None)
        if not isinstance(attr, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(attr)
        return attr


LAZY_SUBCOMMANDS = {
    "session": "tradejournal.cli.session",
    "sentiment": "tradejournal.cli.analyze",
    "positions": "tradejournal.cli.analyze",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def error_panel(message: str, title: str = "Error") -> None:
    console.print(Panel(
        f"[red]{message}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tradejournal")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (default: ~/.config/tradejournal/config.toml).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """TradeJournal - a trading journal for the terminal.

    Log trades with notes or dictation, get a quick sentiment read
    on what you wrote, and chart your net position per symbol.

    \b
    Quick Start:
      tradejournal session               # Open the interactive journal
      tradejournal sentiment "text"      # Classify a note
      tradejournal positions -e ABC:buy:10:5
    """
    from tradejournal.config import load_config, setup_logging

    try:
        settings = load_config(config_path)
    except ValueError as e:
        error_panel(str(e), title="Configuration Error")
        raise SystemExit(1)

    setup_logging("DEBUG" if verbose else settings.logging.level)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


def load_scorer(ctx: click.Context):
    """Build the sentiment scorer from the loaded settings."""
    from tradejournal.analysis.sentiment import LexiconError, SentimentScorer

    settings = ctx.obj["settings"]
    try:
        lexicon = settings.load_lexicon()
    except (LexiconError, ValueError) as e:
        error_panel(str(e), title="Lexicon Error")
        raise SystemExit(1)
    return SentimentScorer(lexicon)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
