"""リプレイ用パラメータを表現する値オブジェクト."""
from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass


def _parse_amount(value: str | None) -> float:
    """表示用の賭け金を数値化する（不正値・未指定・非有限値は0）."""
    if not value or "_" in value:
        return 0
    try:
        amount = float(value)
    except ValueError:
        return 0
    if not math.isfinite(amount):
        return 0
    return amount


@dataclass(frozen=True)
class ReplayParams:
    """リプレイモードの起動パラメータ.

    amount は元の賭け金の表示専用値で、サーバーへのリクエストには使わない。
    """

    replay: bool = False
    amount: float = 0
    game: str = ""
    version: str = ""
    mode: str = ""
    event: str = ""

    @classmethod
    def from_params(cls, params: Mapping[str, str | None]) -> ReplayParams:
        """クエリパラメータ形式の辞書から生成する.

        replay は文字列 "true" のときのみ有効とする。
        """
        return cls(
            replay=params.get("replay") == "true",
            amount=_parse_amount(params.get("amount")),
            game=params.get("game") or "",
            version=params.get("version") or "",
            mode=params.get("mode") or "",
            event=params.get("event") or "",
        )
