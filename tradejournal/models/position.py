"""PositionSummary data model."""

from typing import Optional

from pydantic import BaseModel, Field


class PositionSummary(BaseModel):
    """Per-symbol net position derived from journal entries."""

    symbol: str = Field(..., min_length=1, description="Trading symbol")
    buys: int = Field(..., ge=0, description="Cumulative bought quantity")
    sells: int = Field(..., ge=0, description="Cumulative sold quantity")
    quantity: int = Field(..., description="Net quantity (negative when oversold)")
    total_cost: float = Field(..., description="Net cost basis")
    average_cost: Optional[float] = Field(
        default=None, description="Average cost, None when buys equal sells"
    )

    model_config = {"frozen": True}

    @property
    def has_position(self) -> bool:
        return self.quantity != 0
