from .price_intervals import (
    AddAdjustmentIntervalParams,
    AddEditPriceIntervalParams,
    AmountDiscount,
    NewAdjustment,
    PercentageDiscount,
    ReservedIntervalChange,
)
from .prices import Price
from .subscriptions import AdjustmentInterval, PriceInterval, Subscription

__all__ = [
    "AddAdjustmentIntervalParams",
    "AddEditPriceIntervalParams",
    "AdjustmentInterval",
    "AmountDiscount",
    "NewAdjustment",
    "PercentageDiscount",
    "Price",
    "PriceInterval",
    "ReservedIntervalChange",
    "Subscription",
]
