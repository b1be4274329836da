"""Word-list sentiment scoring.

Text is lower-cased and split on runs of non-word characters. Every token
found in the positive word set adds one to the score, every token found in
the negative set subtracts one. The sign of the total decides the label.
"""

import logging
import re
from pathlib import Path

import toml
from pydantic import BaseModel, Field, field_validator, model_validator

from tradejournal.models import Sentiment

logger = logging.getLogger(__name__)

_SPLIT_RE = re.compile(r"\W+", re.ASCII)

DEFAULT_POSITIVE_WORDS = (
    "good",
    "great",
    "excellent",
    "profit",
    "gain",
    "up",
    "bullish",
    "confident",
)

DEFAULT_NEGATIVE_WORDS = (
    "bad",
    "poor",
    "loss",
    "down",
    "bearish",
    "worried",
    "concerned",
)

KEY_WORD_LIMIT = 5
KEY_WORD_MIN_LENGTH = 4


class LexiconError(Exception):
    """Raised when a lexicon file cannot be read."""


class Lexicon(BaseModel):
    """Positive and negative word sets used by the scorer."""

    positive: frozenset[str] = Field(..., description="Words scoring +1")
    negative: frozenset[str] = Field(..., description="Words scoring -1")

    model_config = {"frozen": True}

    @field_validator("positive", "negative", mode="before")
    @classmethod
    def _lowercase(cls, value):
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("expected a list of words")
        if not all(isinstance(word, str) for word in value):
            raise ValueError("every word must be a string")
        return frozenset(word.strip().lower() for word in value if word.strip())

    @model_validator(mode="after")
    def _check_words(self) -> "Lexicon":
        if not self.positive and not self.negative:
            raise ValueError("lexicon has no words")
        overlap = self.positive & self.negative
        if overlap:
            raise ValueError(f"words listed as both positive and negative: {sorted(overlap)}")
        return self

    @classmethod
    def default(cls) -> "Lexicon":
        """Return the built-in lexicon."""
        return cls(positive=DEFAULT_POSITIVE_WORDS, negative=DEFAULT_NEGATIVE_WORDS)

    @classmethod
    def from_file(cls, path: Path) -> "Lexicon":
        """Load a lexicon from a TOML file.

        The file holds two arrays, ``positive`` and ``negative``.

        Args:
            path: Path to the TOML file.

        Raises:
            LexiconError: If the file cannot be read, is not valid TOML,
                or lacks either word list.
            ValueError: If the word lists are malformed or overlap.
        """
        path = Path(path)
        try:
            data = toml.load(path)
        except FileNotFoundError as e:
            raise LexiconError(f"Lexicon file not found: {path}") from e
        except OSError as e:
            raise LexiconError(f"Cannot read lexicon file {path}: {e}") from e
        except toml.TomlDecodeError as e:
            raise LexiconError(f"Invalid lexicon file {path}: {e}") from e

        missing = [key for key in ("positive", "negative") if key not in data]
        if missing:
            raise LexiconError(f"Lexicon file {path} is missing: {', '.join(missing)}")

        lexicon = cls(positive=data["positive"], negative=data["negative"])
        logger.debug(
            "Loaded lexicon from %s (%d positive, %d negative)",
            path,
            len(lexicon.positive),
            len(lexicon.negative),
        )
        return lexicon


def tokenize(text: str) -> list[str]:
    """Lower-case text and split it on runs of non-word characters."""
    return [token for token in _SPLIT_RE.split(text.lower()) if token]


def key_words(text: str, limit: int = KEY_WORD_LIMIT) -> list[str]:
    """Return the first distinct tokens longer than three characters.

    Args:
        text: Text to sample.
        limit: Maximum number of words to return.

    Returns:
        Words in first-occurrence order.
    """
    seen: list[str] = []
    for token in tokenize(text):
        if len(token) < KEY_WORD_MIN_LENGTH or token in seen:
            continue
        seen.append(token)
        if len(seen) >= limit:
            break
    return seen


def format_key_words(words: list[str]) -> str:
    return ", ".join(words)


class SentimentScorer:
    """Classifies free text as Positive, Negative or Neutral."""

    def __init__(self, lexicon: Lexicon | None = None):
        self.lexicon = lexicon or Lexicon.default()

    def score(self, text: str) -> int:
        """Net count of positive minus negative words in the text."""
        total = 0
        for token in tokenize(text):
            if token in self.lexicon.positive:
                total += 1
            if token in self.lexicon.negative:
                total -= 1
        return total

    def classify(self, text: str) -> Sentiment:
        """Classify text by the sign of its score."""
        value = self.score(text)
        if value > 0:
            return Sentiment.POSITIVE
        if value < 0:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL
