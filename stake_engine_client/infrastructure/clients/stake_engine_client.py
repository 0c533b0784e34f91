"""Stake Engine RGS HTTP クライアント.

RGS API にPOST/GETを送信し、パース済みのJSONを返す。
"""
import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from stake_engine_client.domain.ports import RgsApiError, RgsGateway, RgsGatewayError

logger = logging.getLogger(__name__)


class StakeEngineClient(RgsGateway):
    """requests を使った RGS ゲートウェイ.

    タイムアウトは既定で設定しない。必要な場合は timeout を渡すか、
    呼び出し側でラップする。
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
        scheme: str = "https",
    ) -> None:
        self._session = session or self._create_session()
        self._timeout = timeout
        self._scheme = scheme

    def _create_session(self) -> requests.Session:
        """HTTP セッションを作成する.

        ベットの重複実行リスクがあるためリトライは行わない。
        """
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def _endpoint(self, rgs_url: str, path: str) -> str:
        return f"{self._scheme}://{rgs_url}{path}"

    def post(self, rgs_url: str, path: str, body: dict[str, Any]) -> Any:
        """JSONボディ付きでPOSTする."""
        endpoint = self._endpoint(rgs_url, path)
        logger.debug("POST %s", endpoint)
        try:
            response = self._session.post(
                endpoint,
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise RgsGatewayError(f"RGS request failed: POST {path}: {e}") from e
        return self._handle_response(response, path)

    def get(self, rgs_url: str, path: str) -> Any:
        """GETする."""
        endpoint = self._endpoint(rgs_url, path)
        logger.debug("GET %s", endpoint)
        try:
            response = self._session.get(endpoint, timeout=self._timeout)
        except requests.RequestException as e:
            raise RgsGatewayError(f"RGS request failed: GET {path}: {e}") from e
        return self._handle_response(response, path)

    def _handle_response(self, response: requests.Response, path: str) -> Any:
        """ステータスを検証してJSONを返す.

        200 以外はボディの message を優先してエラーメッセージとする。
        """
        if response.status_code != 200:
            error_data = self._parse_error_body(response)
            message = error_data.get("message") if isinstance(error_data, dict) else None
            if not isinstance(message, str):
                message = None
            logger.error(f"RGS API error: {message}")
            raise RgsApiError(
                message or f"RGS API error: {response.status_code} {response.reason}",
                status_code=response.status_code,
                status_text=response.reason or "",
                body=error_data,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RgsGatewayError(f"Invalid JSON in RGS response: {path}") from e

    @staticmethod
    def _parse_error_body(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return {}
