from typing import Optional

from margin_engine.core.config import Settings
from margin_engine.core.exceptions import MarginEngineError
from margin_engine.core.logger import get_logger
from margin_engine.enums.types import OrderSide, OrderType, SideEffectType, TimeInForce
from margin_engine.exchange.base import BaseSigner
from margin_engine.exchange.signer import BinanceSigner
from margin_engine.models.order import CustomOrderIntent, OrderIntent, QuoteQuantityOrderIntent
from margin_engine.models.transaction import Transaction
from margin_engine.services.order_params import build_order_params

logger = get_logger("MarginAccount")

MARGIN_ORDER_PATH = "/sapi/v1/margin/order"


class MarginAccount:
    """
    杠杆账户下单

    不保存任何调用间状态, 只持有 signer 和 recv_window, 可以在多个线程间共享。
    下单不是幂等的; 需要幂等请自己传 new_client_order_id, 这里不做重试。
    """

    def __init__(self, signer: BaseSigner, recv_window: int = 5000):
        self.signer = signer
        self.recv_window = recv_window

    @classmethod
    def from_settings(cls, settings: Settings) -> "MarginAccount":
        api_key, secret_key = settings.get_api_keys()
        signer = BinanceSigner(
            api_key,
            secret_key,
            base_url=settings.urls.base_url,
            timeout=settings.margin.timeout,
        )
        return cls(signer, recv_window=settings.margin.recv_window)

    def place_order(self, intent: OrderIntent) -> Transaction:
        """
        构建参数 -> 签名发送 -> 解析回执
        """
        params = build_order_params(intent)
        logger.info(f"Sending margin order to Binance: {params}")
        try:
            response = self.signer.post_signed(MARGIN_ORDER_PATH, params, self.recv_window)
            transaction = Transaction.from_payload(response)
        except MarginEngineError as e:
            logger.error(f"Margin order failed for {intent.symbol}: {e}")
            raise

        logger.info(
            f"Margin order placed: {transaction.order_id} {transaction.symbol} "
            f"{transaction.side} {transaction.status}"
        )
        return transaction

    def market_buy_using_quote_quantity(
        self,
        symbol: str,
        quote_order_qty: float,
        is_isolated: bool = False,
        side_effect: SideEffectType = SideEffectType.NO_SIDE_EFFECT,
    ) -> Transaction:
        """Margin MARKET buy spending ``quote_order_qty`` of the quote asset."""
        intent = QuoteQuantityOrderIntent(
            symbol=symbol,
            quote_order_qty=quote_order_qty,
            side=OrderSide.BUY,
            is_isolated=is_isolated,
            side_effect=side_effect,
        )
        return self.place_order(intent)

    def market_sell_using_quote_quantity(
        self,
        symbol: str,
        quote_order_qty: float,
        is_isolated: bool = False,
        side_effect: SideEffectType = SideEffectType.NO_SIDE_EFFECT,
    ) -> Transaction:
        """Margin MARKET sell receiving ``quote_order_qty`` of the quote asset."""
        intent = QuoteQuantityOrderIntent(
            symbol=symbol,
            quote_order_qty=quote_order_qty,
            side=OrderSide.SELL,
            is_isolated=is_isolated,
            side_effect=side_effect,
        )
        return self.place_order(intent)

    def custom_order(
        self,
        symbol: str,
        quantity: float,
        side: OrderSide,
        order_type: OrderType,
        price: Optional[float] = None,
        stop_price: Optional[float] = None,
        time_in_force: TimeInForce = TimeInForce.GTC,
        new_client_order_id: Optional[str] = None,
        is_isolated: bool = False,
        side_effect: SideEffectType = SideEffectType.NO_SIDE_EFFECT,
    ) -> Transaction:
        intent = CustomOrderIntent(
            symbol=symbol,
            quantity=quantity,
            price=price,
            stop_price=stop_price,
            side=side,
            order_type=order_type,
            time_in_force=time_in_force,
            client_order_id=new_client_order_id,
            is_isolated=is_isolated,
            side_effect=side_effect,
        )
        return self.place_order(intent)
