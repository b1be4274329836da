"""JournalEntry data model."""

from datetime import date as date_type
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class TradeAction(str, Enum):
    """Side of a logged trade."""

    BUY = "buy"
    SELL = "sell"


class JournalEntry(BaseModel):
    """Represents a single logged trade action."""

    id: int = Field(..., ge=1, description="Creation-order token")
    date: date_type = Field(..., description="Trade date")
    symbol: str = Field(..., min_length=1, description="Trading symbol")
    action: TradeAction = Field(..., description="Trade side (buy/sell)")
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Price per unit")
    quantity: int = Field(..., gt=0, description="Units traded")
    notes: str = Field(default="", description="Trader notes")
    voice_input: str = Field(default="", description="Dictated transcript")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")

    model_config = {"frozen": True}

    @field_validator("symbol")
    @classmethod
    def _symbol_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("symbol must not be blank")
        return value

    @property
    def combined_text(self) -> str:
        """Notes and voice input joined for analysis."""
        return f"{self.notes} {self.voice_input}"
