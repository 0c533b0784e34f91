"""ゲーム起動URLのクエリからコンテキストを取得するプロバイダー."""
from urllib.parse import parse_qsl, urlsplit

from stake_engine_client.domain.ports import ContextProvider
from stake_engine_client.domain.value_objects import AmbientContext, ReplayParams


class UrlContextProvider(ContextProvider):
    """ブラウザの location（URL全体または "?query"）を読むプロバイダー.

    例: https://game.example.com/?sessionID=abc&rgs_url=rgs.example.com&lang=ja
    """

    def __init__(self, location: str) -> None:
        """初期化."""
        self._location = location

    def _params(self) -> dict[str, str]:
        query = urlsplit(self._location).query
        # 同じキーが複数ある場合は先頭の値を使う
        params: dict[str, str] = {}
        for key, value in parse_qsl(query, keep_blank_values=True):
            params.setdefault(key, value)
        return params

    def get_context(self) -> AmbientContext:
        """URLクエリからコンテキストを取得する."""
        return AmbientContext.from_params(self._params())

    def get_replay_params(self) -> ReplayParams:
        """URLクエリからリプレイパラメータを取得する."""
        return ReplayParams.from_params(self._params())
