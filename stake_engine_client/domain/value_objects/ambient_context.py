"""アンビエントコンテキストを表現する値オブジェクト."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_LANGUAGE = "en"
DEFAULT_CURRENCY = "USD"


def _non_empty(value: str | None) -> str | None:
    return value if value else None


@dataclass(frozen=True)
class AmbientContext:
    """URLクエリや設定から得られる呼び出し外部のパラメータ.

    キー名はゲーム起動URLのクエリパラメータに合わせる:
    sessionID, rgs_url, lang, currency
    """

    session_id: str | None = None
    rgs_url: str | None = None
    language: str = DEFAULT_LANGUAGE
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_params(cls, params: Mapping[str, str | None]) -> AmbientContext:
        """クエリパラメータ形式の辞書から生成する."""
        return cls(
            session_id=_non_empty(params.get("sessionID")),
            rgs_url=_non_empty(params.get("rgs_url")),
            language=params.get("lang") or DEFAULT_LANGUAGE,
            currency=params.get("currency") or DEFAULT_CURRENCY,
        )

    @classmethod
    def empty(cls) -> AmbientContext:
        """値を持たないコンテキストを生成する."""
        return cls()
