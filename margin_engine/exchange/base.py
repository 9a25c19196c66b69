from abc import ABC, abstractmethod
from typing import Any, Dict


class BaseSigner(ABC):
    """
    签名 / 发送 基类 (Signer/Dispatcher Interface)
    负责追加 timestamp / recvWindow、计算签名并发出请求
    """

    @abstractmethod
    def post_signed(self, url_path: str, params: Dict[str, str], recv_window: int) -> Any:
        """
        Sign ``params`` in the order given and POST them to ``url_path``.

        Implementations must not reorder ``params``; the signature covers the
        exact encoded sequence. Returns the decoded response body.
        """
        pass
