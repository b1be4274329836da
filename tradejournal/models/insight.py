"""Insight data model."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Sentiment(str, Enum):
    """Coarse sentiment label."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class Insight(BaseModel):
    """Insight report generated for a submitted journal entry."""

    entry_id: int = Field(..., description="Entry the insight was generated for")
    sentiment: Sentiment = Field(..., description="Sentiment of notes and voice input")
    key_words: list[str] = Field(default_factory=list, description="Sampled key words")
    action_summary: str = Field(..., description="Summary of the trade action")
    next_step: str = Field(..., description="Suggested next step")
    voice_analysis: Optional[str] = Field(default=None, description="Voice input analysis")

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        """Render the full insight report."""
        lines = [
            f"Sentiment Analysis: {self.sentiment.value}",
            f"Key words: {', '.join(self.key_words)}",
            f"Action taken: {self.action_summary}",
            f"Potential next steps: {self.next_step}",
        ]
        text = "\n".join(lines)
        if self.voice_analysis:
            text += f"\n\nVoice Input Analysis:\n{self.voice_analysis}"
        return text
