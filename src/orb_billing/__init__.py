"""Async client for the Orb subscription billing API."""

from .clients import OrbClient
from .config import Settings, get_settings
from .errors import ApiError, DecodeError, OrbError, TransportError
from .models import (
    AddAdjustmentIntervalParams,
    AddEditPriceIntervalParams,
    AdjustmentInterval,
    AmountDiscount,
    NewAdjustment,
    PercentageDiscount,
    Price,
    PriceInterval,
    ReservedIntervalChange,
    Subscription,
)

__all__ = [
    "AddAdjustmentIntervalParams",
    "AddEditPriceIntervalParams",
    "AdjustmentInterval",
    "AmountDiscount",
    "ApiError",
    "DecodeError",
    "NewAdjustment",
    "OrbClient",
    "OrbError",
    "PercentageDiscount",
    "Price",
    "PriceInterval",
    "ReservedIntervalChange",
    "Settings",
    "Subscription",
    "TransportError",
    "get_settings",
]
