"""
杠杆订单参数构建

把 OrderIntent 转成交易所需要的字符串参数。返回的 dict 按 key 字典序排列,
签名就是对这个顺序的 urlencode 结果计算的, 后续环节不能再改动顺序。
"""
from decimal import Decimal
from typing import Dict, Union

from margin_engine.enums.codec import to_wire
from margin_engine.models.order import CustomOrderIntent, OrderIntent, QuoteQuantityOrderIntent


def format_decimal(value: Union[float, int, Decimal]) -> str:
    """
    Shortest round-trip decimal text, never in exponent notation.

    >>> format_decimal(20000.0)
    '20000'
    >>> format_decimal(1e-08)
    '0.00000001'
    """
    text = format(Decimal(str(value)).normalize(), "f")
    return "0" if text == "-0" else text


def _format_bool(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def build_order_params(intent: OrderIntent) -> Dict[str, str]:
    if not isinstance(intent, (CustomOrderIntent, QuoteQuantityOrderIntent)):
        raise TypeError(f"Unsupported order intent: {type(intent).__name__}")

    params: Dict[str, str] = {
        "symbol": intent.symbol,
        "side": to_wire(intent.side),
        "type": to_wire(intent.order_type),
        # isIsolated / sideEffectType are required on every margin order
        "isIsolated": _format_bool(intent.is_isolated),
        "sideEffectType": to_wire(intent.side_effect),
    }

    if isinstance(intent, QuoteQuantityOrderIntent):
        params["quoteOrderQty"] = format_decimal(intent.quote_order_qty)
    else:
        params["quantity"] = format_decimal(intent.quantity)
        if intent.stop_price is not None:
            params["stopPrice"] = format_decimal(intent.stop_price)

    # 0.0 表示没有价格
    price = intent.effective_price
    if price != 0.0:
        params["price"] = format_decimal(price)
        params["timeInForce"] = to_wire(intent.time_in_force)

    if intent.client_order_id is not None:
        params["newClientOrderId"] = intent.client_order_id

    return dict(sorted(params.items()))
