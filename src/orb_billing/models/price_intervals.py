"""
Request models for the price interval endpoint.

A subscription's price intervals define its billing behaviour; the
``/subscriptions/{id}/price_intervals`` endpoint adds and edits them
atomically.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class PercentageDiscount(BaseModel):
    """A discount expressed as a fraction of the price (0.1 is 10%)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    adjustment_type: Literal["percentage_discount"] = "percentage_discount"
    applies_to_price_ids: List[str]
    percentage_discount: float


class AmountDiscount(BaseModel):
    """A fixed discount; the amount is a decimal string such as ``"10.00"``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    adjustment_type: Literal["amount_discount"] = "amount_discount"
    applies_to_price_ids: List[str]
    amount_discount: str


NewAdjustment = Annotated[
    Union[PercentageDiscount, AmountDiscount],
    Field(discriminator="adjustment_type"),
]


class AddAdjustmentIntervalParams(BaseModel):
    """Parameters for adding a new adjustment interval to a subscription."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    adjustment: NewAdjustment
    start_date: Optional[AwareDatetime] = None
    end_date: Optional[AwareDatetime] = None

    @model_serializer(mode="wrap")
    def _omit_unset_dates(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        # unset dates are left out of the body, never sent as null
        data = handler(self)
        for key in ("start_date", "end_date"):
            if data.get(key) is None:
                data.pop(key, None)
        return data


class ReservedIntervalChange(BaseModel):
    """Placeholder for the interval changes this client does not model yet.

    ``add``, ``edit`` and ``edit_adjustments`` are typed against this model
    and capped at zero entries until their shapes are implemented.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class AddEditPriceIntervalParams(BaseModel):
    """Body of an add/edit price intervals request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    add_adjustments: List[AddAdjustmentIntervalParams] = Field(default_factory=list)
    add: List[ReservedIntervalChange] = Field(default_factory=list, max_length=0)
    edit: List[ReservedIntervalChange] = Field(default_factory=list, max_length=0)
    edit_adjustments: List[ReservedIntervalChange] = Field(default_factory=list, max_length=0)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready request body."""
        return self.model_dump(mode="json")
