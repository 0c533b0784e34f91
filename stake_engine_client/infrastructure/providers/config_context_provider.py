"""明示的な設定値からコンテキストを取得するプロバイダー."""
from __future__ import annotations

import os
from collections.abc import Mapping

from stake_engine_client.domain.ports import ContextProvider
from stake_engine_client.domain.value_objects import AmbientContext, ReplayParams

# 環境変数名 → クエリパラメータ名
ENV_KEYS = {
    "RGS_SESSION_ID": "sessionID",
    "RGS_URL": "rgs_url",
    "RGS_LANG": "lang",
    "RGS_CURRENCY": "currency",
    "RGS_REPLAY": "replay",
    "RGS_REPLAY_GAME": "game",
    "RGS_REPLAY_VERSION": "version",
    "RGS_REPLAY_MODE": "mode",
    "RGS_REPLAY_EVENT": "event",
    "RGS_REPLAY_AMOUNT": "amount",
}


class ConfigContextProvider(ContextProvider):
    """ブラウザ外のホスト向けに、キー・値の設定からコンテキストを返す.

    キー名はURLクエリと同じ（sessionID, rgs_url, lang, currency, replay, ...）。
    """

    def __init__(self, config: Mapping[str, str | None] | None = None) -> None:
        """初期化."""
        self._config = dict(config or {})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ConfigContextProvider:
        """環境変数（RGS_SESSION_ID, RGS_URL など）から生成する."""
        environ = os.environ if environ is None else environ
        return cls({param: environ.get(env_key) for env_key, param in ENV_KEYS.items()})

    def get_context(self) -> AmbientContext:
        """設定からコンテキストを取得する."""
        return AmbientContext.from_params(self._config)

    def get_replay_params(self) -> ReplayParams:
        """設定からリプレイパラメータを取得する."""
        return ReplayParams.from_params(self._config)
