"""RGSステータスコードの列挙型."""
from __future__ import annotations

from enum import Enum


class StatusCode(Enum):
    """RGSがレスポンスの status.statusCode で返すコード."""

    SUCCESS = "SUCCESS"
    ERR_VAL = "ERR_VAL"  # 不正なリクエスト
    ERR_IPB = "ERR_IPB"  # 残高不足
    ERR_IS = "ERR_IS"  # セッション不正・期限切れ
    ERR_ATE = "ERR_ATE"  # 認証失敗・トークン期限切れ
    ERR_GLE = "ERR_GLE"  # 賭け上限超過
    ERR_LOC = "ERR_LOC"  # 利用不可の地域
    ERR_UE = "ERR_UE"  # 不明なサーバーエラー
    ERR_BNF = "ERR_BNF"  # ベットが見つからない
    ERR_PAB = "ERR_PAB"  # プレイヤーが既にアクティブなベットを持っている
    ERR_IB = "ERR_IB"  # 不正なベット
    ERR_GEN = "ERR_GEN"  # 一般的なサーバーエラー
    ERR_MAINTENANCE = "ERR_MAINTENANCE"  # メンテナンス中

    @classmethod
    def from_value(cls, value: str | None) -> StatusCode | None:
        """文字列から変換する（未知のコードは None）."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_error(self) -> bool:
        """エラーコードか判定する."""
        return self is not StatusCode.SUCCESS
