"""操作コンテキストを表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationContext:
    """1回のAPI呼び出しで使う解決済みパラメータ.

    呼び出しごとに生成し、リクエスト送信後は破棄する。
    """

    session_id: str | None
    rgs_url: str | None
    language: str
    currency: str
