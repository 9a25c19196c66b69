from typing import Any, Dict, Optional

import requests
from binance.error import ClientError, ServerError
from binance.lib.authentication import hmac_hashing
from binance.lib.utils import encoded_string, get_timestamp
from binance.spot import Spot

from margin_engine.core.exceptions import ApiError, SigningError, TransportError
from margin_engine.core.logger import get_logger
from margin_engine.exchange.base import BaseSigner

logger = get_logger("BinanceSigner")


class BinanceSigner(BaseSigner):
    """
    HMAC-SHA256 签名 + binance-connector 发送
    """

    def __init__(
        self,
        api_key: Optional[str],
        secret_key: Optional[str],
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.api_key = api_key
        self.secret_key = secret_key

        kwargs: Dict[str, Any] = {"timeout": timeout}
        if base_url:
            kwargs["base_url"] = base_url
        # Spot 只用作 HTTP transport (session, X-MBX-APIKEY, 错误码解析), 签名在这里做
        self.client = Spot(api_key, secret_key, **kwargs)

    def sign(self, params: Dict[str, Any], recv_window: int) -> Dict[str, Any]:
        """
        Return a copy of ``params`` with recvWindow, timestamp and signature appended.
        """
        if not self.api_key or not self.secret_key:
            raise SigningError("API key and secret are required to sign requests")

        payload: Dict[str, Any] = dict(params)
        if recv_window > 0:
            payload["recvWindow"] = recv_window
        payload["timestamp"] = get_timestamp()
        try:
            payload["signature"] = hmac_hashing(self.secret_key, encoded_string(payload))
        except (TypeError, ValueError) as e:
            raise SigningError(f"Failed to sign request: {e}") from e
        return payload

    def post_signed(self, url_path: str, params: Dict[str, str], recv_window: int) -> Any:
        payload = self.sign(params, recv_window)
        try:
            return self.client.send_request("POST", url_path, payload)
        except ClientError as e:
            raise ApiError(
                e.status_code,
                e.error_code,
                e.error_message,
                details={"error_data": e.error_data},
            ) from e
        except ServerError as e:
            raise ApiError(e.status_code, None, e.message) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Transport failure on POST {url_path}: {e}")
            raise TransportError(f"POST {url_path} failed: {e}") from e
