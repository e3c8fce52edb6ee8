"""
Subscription resource as returned by the subscription and price interval
endpoints. Attributes not declared here are kept in ``model_extra``.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .prices import Price


class PriceInterval(BaseModel):
    """A period during which ``price`` bills on the subscription."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    start_date: datetime
    end_date: Optional[datetime] = None
    price: Price


class AdjustmentInterval(BaseModel):
    """A period during which an adjustment applies to some price intervals."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    start_date: datetime
    end_date: Optional[datetime] = None
    applies_to_price_interval_ids: List[str] = Field(default_factory=list)
    adjustment: Dict[str, Any] = Field(default_factory=dict)


class Subscription(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    status: Literal["active", "ended", "upcoming"]
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    price_intervals: List[PriceInterval] = Field(default_factory=list)
    adjustment_intervals: List[AdjustmentInterval] = Field(default_factory=list)
