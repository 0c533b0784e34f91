"""StakeEngineClient のテスト."""
import json
import unittest
from unittest.mock import MagicMock, patch

import requests

from stake_engine_client.domain.ports import RgsApiError, RgsGatewayError
from stake_engine_client.infrastructure.clients.stake_engine_client import StakeEngineClient


def _response(status_code: int = 200, body=None, reason: str = "OK", invalid_json: bool = False) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if invalid_json:
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
    else:
        response.json.return_value = body
    return response


class TestStakeEngineClient(unittest.TestCase):
    """StakeEngineClient のテスト."""

    def setUp(self) -> None:
        self.session = MagicMock()
        self.client = StakeEngineClient(session=self.session)

    def test_POST正常(self) -> None:
        body = {"balance": {"amount": 1_000_000, "currency": "USD"}}
        self.session.post.return_value = _response(body=body)

        result = self.client.post("rgs.example.com", "/wallet/balance", {"sessionID": "s1"})

        assert result == body
        call_args = self.session.post.call_args
        assert call_args[0][0] == "https://rgs.example.com/wallet/balance"
        assert call_args[1]["json"] == {"sessionID": "s1"}
        assert call_args[1]["headers"] == {"Content-Type": "application/json"}

    def test_レスポンスは変更せずに返す(self) -> None:
        body = {"round": {"amount": 1_000_000, "state": [{"a": 1}]}, "extra": "kept"}
        self.session.post.return_value = _response(body=body)

        result = self.client.post("h", "/wallet/play", {})

        assert result is body

    def test_GET正常(self) -> None:
        body = {"payoutMultiplier": 2.5}
        self.session.get.return_value = _response(body=body)

        result = self.client.get("rgs.example.com", "/bet/replay/g/1.0.0/base/abc")

        assert result == body
        call_args = self.session.get.call_args
        assert call_args[0][0] == "https://rgs.example.com/bet/replay/g/1.0.0/base/abc"
        assert "json" not in call_args[1]
        assert "params" not in call_args[1]

    def test_タイムアウトは既定で設定しない(self) -> None:
        self.session.post.return_value = _response(body={})

        self.client.post("h", "/wallet/balance", {})

        assert self.session.post.call_args[1]["timeout"] is None

    def test_タイムアウトを指定できる(self) -> None:
        client = StakeEngineClient(session=self.session, timeout=5)
        self.session.get.return_value = _response(body={})

        client.get("h", "/bet/replay/a/b/c/d")

        assert self.session.get.call_args[1]["timeout"] == 5

    def test_スキームを指定できる(self) -> None:
        client = StakeEngineClient(session=self.session, scheme="http")
        self.session.post.return_value = _response(body={})

        client.post("localhost:8080", "/wallet/balance", {})

        assert self.session.post.call_args[0][0] == "http://localhost:8080/wallet/balance"

    def test_200以外はボディのmessageをエラーにする(self) -> None:
        self.session.post.return_value = _response(
            status_code=400, reason="Bad Request", body={"message": "bad session"}
        )

        with self.assertRaises(RgsApiError) as ctx:
            self.client.post("h", "/wallet/authenticate", {})

        assert str(ctx.exception) == "bad session"
        assert ctx.exception.message == "bad session"
        assert ctx.exception.status_code == 400
        assert ctx.exception.status_text == "Bad Request"
        assert ctx.exception.body == {"message": "bad session"}

    def test_200以外でJSONでないボディはステータスをエラーにする(self) -> None:
        self.session.get.return_value = _response(
            status_code=502, reason="Bad Gateway", invalid_json=True
        )

        with self.assertRaises(RgsApiError) as ctx:
            self.client.get("h", "/bet/replay/a/b/c/d")

        assert "502" in str(ctx.exception)
        assert "Bad Gateway" in str(ctx.exception)
        assert ctx.exception.status_code == 502

    def test_200以外でmessageがないボディはステータスをエラーにする(self) -> None:
        self.session.post.return_value = _response(
            status_code=500, reason="Internal Server Error", body={"error": "oops"}
        )

        with self.assertRaises(RgsApiError) as ctx:
            self.client.post("h", "/wallet/play", {})

        assert str(ctx.exception) == "RGS API error: 500 Internal Server Error"

    def test_200以外でJSONが配列でもクラッシュしない(self) -> None:
        self.session.post.return_value = _response(status_code=404, reason="Not Found", body=["x"])

        with self.assertRaises(RgsApiError) as ctx:
            self.client.post("h", "/wallet/play", {})

        assert str(ctx.exception) == "RGS API error: 404 Not Found"

    def test_messageが文字列でない場合はステータスをエラーにする(self) -> None:
        self.session.post.return_value = _response(
            status_code=400, reason="Bad Request", body={"message": {"code": 7}}
        )

        with self.assertRaises(RgsApiError) as ctx:
            self.client.post("h", "/wallet/play", {})

        assert ctx.exception.message == "RGS API error: 400 Bad Request"
        assert ctx.exception.body == {"message": {"code": 7}}

    def test_201も失敗として扱う(self) -> None:
        self.session.post.return_value = _response(status_code=201, reason="Created", body={})

        with self.assertRaises(RgsApiError):
            self.client.post("h", "/wallet/play", {})

    def test_APIエラーはRgsGatewayErrorとして捕捉できる(self) -> None:
        self.session.post.return_value = _response(status_code=401, reason="Unauthorized", body={})

        with self.assertRaises(RgsGatewayError):
            self.client.post("h", "/wallet/balance", {})

    def test_ネットワークエラー(self) -> None:
        self.session.post.side_effect = requests.ConnectionError("Connection refused")

        with self.assertRaises(RgsGatewayError) as ctx:
            self.client.post("h", "/wallet/balance", {})

        assert isinstance(ctx.exception.__cause__, requests.ConnectionError)

    def test_200でJSONでないボディはエラー(self) -> None:
        self.session.get.return_value = _response(invalid_json=True)

        with self.assertRaises(RgsGatewayError):
            self.client.get("h", "/bet/replay/a/b/c/d")

    def test_1回の呼び出しで1回だけ送信する(self) -> None:
        self.session.post.return_value = _response(status_code=503, reason="Service Unavailable", body={})

        with self.assertRaises(RgsApiError):
            self.client.post("h", "/wallet/play", {})

        assert self.session.post.call_count == 1

    @patch("stake_engine_client.infrastructure.clients.stake_engine_client.requests.Session")
    def test_セッションはリトライなしで作成する(self, mock_session_cls: MagicMock) -> None:
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session

        client = StakeEngineClient()

        assert client._session is mock_session
        mounted = {call[0][0]: call[0][1] for call in mock_session.mount.call_args_list}
        assert set(mounted) == {"http://", "https://"}
        for adapter in mounted.values():
            assert adapter.max_retries.total == 0
