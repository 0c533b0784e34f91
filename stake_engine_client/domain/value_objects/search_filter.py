"""強制結果検索の条件を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SearchFilter:
    """/game/search に渡す検索条件（テスト・デバッグ用）."""

    book_id: int | None = None
    kind: int | None = None
    symbol: str | None = None
    has_wild: bool | None = None
    wild_mult: float | None = None
    game_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """APIのリクエスト形式に変換する（未指定の項目は含めない）."""
        fields = {
            "bookID": self.book_id,
            "kind": self.kind,
            "symbol": self.symbol,
            "hasWild": self.has_wild,
            "wildMult": self.wild_mult,
            "gameType": self.game_type,
        }
        return {key: value for key, value in fields.items() if value is not None}
