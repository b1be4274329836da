"""TradeJournal - a terminal trading journal with sentiment insights."""

__version__ = "0.1.0"
