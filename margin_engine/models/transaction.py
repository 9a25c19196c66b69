from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from margin_engine.core.exceptions import DeserializationError


class _ExchangeModel(BaseModel):
    # 交易所字段是 camelCase; 数值字段可能是 "1.5" 也可能是 1.5, 交给 pydantic lax 模式转换
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class FillInfo(_ExchangeModel):
    price: float
    qty: float
    commission: float
    commission_asset: str
    trade_id: Optional[int] = None


class Transaction(_ExchangeModel):
    """
    杠杆下单回执 (POST /sapi/v1/margin/order)
    """

    symbol: str
    order_id: int = Field(..., ge=0)
    order_list_id: Optional[int] = None
    client_order_id: str
    transact_time: int = Field(..., ge=0)
    price: float
    orig_qty: float
    executed_qty: float
    # 交易所拼写就是 cummulative
    cummulative_quote_qty: float
    stop_price: float = 0.0
    status: str
    time_in_force: str
    type_name: str = Field(..., alias="type")
    side: str
    fills: Optional[List[FillInfo]] = None
    is_isolated: bool
    margin_buy_borrow_amount: Optional[float] = None
    # 文档里叫 marginBuyBorrowAsset
    margin_borrow_asset: Optional[str] = Field(
        None, validation_alias=AliasChoices("marginBuyBorrowAsset", "marginBorrowAsset", "margin_borrow_asset")
    )

    @classmethod
    def from_payload(cls, payload: Any) -> "Transaction":
        """Parse a decoded JSON body; any missing or malformed field fails the whole parse."""
        if not isinstance(payload, dict):
            raise DeserializationError(
                f"Expected a JSON object, got {type(payload).__name__}",
                details={"payload": payload},
            )
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            raise DeserializationError(
                f"Malformed order response: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e
