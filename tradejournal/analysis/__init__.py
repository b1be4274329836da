"""Sentiment, position and insight analysis for TradeJournal."""

from tradejournal.analysis.insights import generate_insights
from tradejournal.analysis.positions import PositionAggregator, aggregate
from tradejournal.analysis.sentiment import (
    Lexicon,
    LexiconError,
    SentimentScorer,
    format_key_words,
    key_words,
    tokenize,
)

__all__ = [
    "Lexicon",
    "LexiconError",
    "PositionAggregator",
    "SentimentScorer",
    "aggregate",
    "format_key_words",
    "generate_insights",
    "key_words",
    "tokenize",
]
