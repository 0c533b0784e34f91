"""RGSゲートウェイのモック実装."""
from typing import Any

from stake_engine_client.domain.ports import RgsGateway


class MockRgsGateway(RgsGateway):
    """RGSゲートウェイのモック実装（テスト・ローカル開発用、エラー設定可能）.

    送信したリクエストを requests に記録する。
    """

    def __init__(self) -> None:
        """初期化."""
        self.requests: list[dict[str, Any]] = []
        self._responses: dict[str, Any] = {}
        self._error: Exception | None = None

    def set_response(self, path: str, response: Any) -> None:
        """指定パスへのレスポンスを設定する."""
        self._responses[path] = response

    def set_error(self, error: Exception) -> None:
        """リクエスト時にエラーを発生させる設定."""
        self._error = error

    def post(self, rgs_url: str, path: str, body: dict[str, Any]) -> Any:
        """POSTを記録する（エラー設定時は例外送出）."""
        self.requests.append({"method": "POST", "rgs_url": rgs_url, "path": path, "body": body})
        return self._respond(path)

    def get(self, rgs_url: str, path: str) -> Any:
        """GETを記録する（エラー設定時は例外送出）."""
        self.requests.append({"method": "GET", "rgs_url": rgs_url, "path": path, "body": None})
        return self._respond(path)

    def _respond(self, path: str) -> Any:
        if self._error:
            raise self._error
        return self._responses.get(path, {"status": {"statusCode": "SUCCESS"}})
