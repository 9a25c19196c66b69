from margin_engine.core.exceptions import (
    MarginEngineError,
    ConfigurationError,
    ValidationError,
    SigningError,
    TransportError,
    ApiError,
    DeserializationError,
)
from margin_engine.enums.types import OrderSide, OrderType, TimeInForce, SideEffectType
from margin_engine.models.order import CustomOrderIntent, QuoteQuantityOrderIntent, OrderIntent
from margin_engine.models.transaction import Transaction, FillInfo
from margin_engine.services.order_params import build_order_params
from margin_engine.services.margin_account import MarginAccount

__all__ = [
    "MarginEngineError",
    "ConfigurationError",
    "ValidationError",
    "SigningError",
    "TransportError",
    "ApiError",
    "DeserializationError",
    "OrderSide",
    "OrderType",
    "TimeInForce",
    "SideEffectType",
    "CustomOrderIntent",
    "QuoteQuantityOrderIntent",
    "OrderIntent",
    "Transaction",
    "FillInfo",
    "build_order_params",
    "MarginAccount",
]
