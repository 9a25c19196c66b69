import pytest

from margin_engine.core.exceptions import DeserializationError
from margin_engine.models.transaction import Transaction


def test_parses_string_encoded_numbers(order_ack):
    tx = Transaction.from_payload(order_ack)
    assert tx.symbol == "BTCUSDT"
    assert tx.order_id == 28
    assert tx.transact_time == 1507725176595
    assert tx.price == 1.0
    assert tx.orig_qty == 10.0
    assert tx.cummulative_quote_qty == 10.0
    assert tx.type_name == "MARKET"
    assert tx.is_isolated is True
    assert tx.margin_buy_borrow_amount == 5.0
    assert tx.margin_borrow_asset == "BTC"
    assert tx.order_list_id is None


def test_stop_price_defaults_to_zero(order_ack):
    assert Transaction.from_payload(order_ack).stop_price == 0.0

    order_ack["stopPrice"] = "19500.50000000"
    assert Transaction.from_payload(order_ack).stop_price == 19500.5


def test_accepts_unquoted_numbers(order_ack):
    order_ack.update({"price": 20000, "origQty": 1.5, "executedQty": 0, "cummulativeQuoteQty": 0.0})
    tx = Transaction.from_payload(order_ack)
    assert tx.price == 20000.0
    assert tx.orig_qty == 1.5
    assert tx.executed_qty == 0.0


def test_fills(order_ack):
    fills = Transaction.from_payload(order_ack).fills
    assert len(fills) == 2
    assert fills[0].price == 4000.0
    assert fills[0].commission_asset == "USDT"
    assert fills[0].trade_id is None
    assert fills[1].commission == 19.995
    assert fills[1].trade_id == 57


def test_fills_optional(order_ack):
    del order_ack["fills"]
    assert Transaction.from_payload(order_ack).fills is None


def test_missing_order_id_fails(order_ack):
    del order_ack["orderId"]
    with pytest.raises(DeserializationError) as exc_info:
        Transaction.from_payload(order_ack)
    assert any("orderId" in err["loc"] for err in exc_info.value.details["errors"])


@pytest.mark.parametrize(
    "field, value",
    [
        ("price", "not-a-number"),
        ("orderId", -1),
        ("fills", "none"),
        ("isIsolated", "maybe"),
    ],
)
def test_wrong_shape_fails(order_ack, field, value):
    order_ack[field] = value
    with pytest.raises(DeserializationError):
        Transaction.from_payload(order_ack)


@pytest.mark.parametrize("payload", ["<html>502 Bad Gateway</html>", None, [1, 2]])
def test_non_object_body_fails(payload):
    with pytest.raises(DeserializationError):
        Transaction.from_payload(payload)
