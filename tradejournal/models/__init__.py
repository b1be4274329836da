"""Data models for TradeJournal."""

from tradejournal.models.insight import Insight, Sentiment
from tradejournal.models.journal import JournalEntry, TradeAction
from tradejournal.models.position import PositionSummary

__all__ = [
    "Insight",
    "JournalEntry",
    "PositionSummary",
    "Sentiment",
    "TradeAction",
]
