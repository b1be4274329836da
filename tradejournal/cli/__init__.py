"""CLI commands for TradeJournal.

This package provides the command-line interface for TradeJournal:
the interactive journal session and one-shot analysis commands.
"""

from tradejournal.cli.main import cli, main

__all__ = ["cli", "main"]
