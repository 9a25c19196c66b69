"""Pytest configuration shared by the margin engine tests.

Puts the project root on ``sys.path`` so ``margin_engine`` imports without an
editable install, and provides a canned margin order acknowledgement.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]

root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


@pytest.fixture
def order_ack() -> dict:
    # Shape of POST /sapi/v1/margin/order with newOrderRespType=FULL
    return {
        "symbol": "BTCUSDT",
        "orderId": 28,
        "clientOrderId": "6gCrw2kRUAF9CvJDGP16IP",
        "transactTime": 1507725176595,
        "price": "1.00000000",
        "origQty": "10.00000000",
        "executedQty": "10.00000000",
        "cummulativeQuoteQty": "10.00000000",
        "status": "FILLED",
        "timeInForce": "GTC",
        "type": "MARKET",
        "side": "SELL",
        "marginBuyBorrowAmount": 5,
        "marginBuyBorrowAsset": "BTC",
        "isIsolated": True,
        "fills": [
            {
                "price": "4000.00000000",
                "qty": "1.00000000",
                "commission": "4.00000000",
                "commissionAsset": "USDT",
            },
            {
                "price": "3999.00000000",
                "qty": "5.00000000",
                "commission": "19.99500000",
                "commissionAsset": "USDT",
                "tradeId": 57,
            },
        ],
    }
