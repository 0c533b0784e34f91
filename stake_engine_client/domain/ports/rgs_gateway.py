"""RGSゲートウェイインターフェース."""
from abc import ABC, abstractmethod
from typing import Any


class RgsGatewayError(Exception):
    """RGS 通信エラー."""

    pass


class RgsApiError(RgsGatewayError):
    """RGS が 200 以外のステータスを返したエラー."""

    def __init__(
        self,
        message: str,
        status_code: int,
        status_text: str = "",
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


class RgsResponseError(RgsGatewayError):
    """RGS のレスポンスボディが想定した形式でないエラー."""

    pass


class RgsGateway(ABC):
    """RGS HTTP API のインターフェース.

    1回の呼び出しにつき1回だけリクエストを送信する。
    """

    @abstractmethod
    def post(self, rgs_url: str, path: str, body: dict[str, Any]) -> Any:
        """JSONボディ付きでPOSTし、パース済みのレスポンスを返す."""
        pass

    @abstractmethod
    def get(self, rgs_url: str, path: str) -> Any:
        """GETし、パース済みのレスポンスを返す."""
        pass
