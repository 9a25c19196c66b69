from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from margin_engine.core.exceptions import ValidationError
from margin_engine.enums.types import OrderSide, OrderType, SideEffectType, TimeInForce


class _MarginOrderIntent(BaseModel):
    """
    杠杆下单意图的公共字段
    isIsolated / sideEffectType 每笔杠杆订单都必须带上
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    symbol: str = Field(..., min_length=1, description="交易对，如 BTCUSDT")
    side: OrderSide
    time_in_force: TimeInForce = TimeInForce.GTC
    client_order_id: Optional[str] = Field(None, min_length=1, description="newClientOrderId, 用于幂等")
    is_isolated: bool = False
    side_effect: SideEffectType = SideEffectType.NO_SIDE_EFFECT

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid {type(self).__name__}: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

    @property
    def effective_price(self) -> float:
        """
        Price as seen by the parameter builder.

        0.0 is the "no price" sentinel: an unset price and a literal zero are
        indistinguishable on the wire, and neither emits ``price`` or
        ``timeInForce``.
        """
        return self.price or 0.0


class CustomOrderIntent(_MarginOrderIntent):
    """
    自定义杠杆订单 (数量以 base asset 计)

    price 为 None 或 0.0 时视为没有价格, 此时不会发送 price / timeInForce。
    """

    quantity: float = Field(..., gt=0, allow_inf_nan=False)
    order_type: OrderType
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    stop_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


class QuoteQuantityOrderIntent(_MarginOrderIntent):
    """
    按计价资产数量下的市价单 (quoteOrderQty)

    类型固定为 MARKET。price 默认为 0.0 (不发送); 如果调用方给了非零价格,
    price 和 timeInForce 会照常发送, 即使类型是 MARKET。
    """

    quote_order_qty: float = Field(..., gt=0, allow_inf_nan=False)
    order_type: Literal[OrderType.MARKET] = OrderType.MARKET
    price: float = Field(0.0, ge=0, allow_inf_nan=False)


OrderIntent = Union[CustomOrderIntent, QuoteQuantityOrderIntent]
