"""
Price resource.

A price can be billed on a subscription, producing an invoice line item.
Only the identifiers are modelled as typed fields; every other attribute
Orb returns is kept in ``model_extra``.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Price(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    external_price_id: Optional[str] = None
