"""RGS APIレスポンスを表現する値オブジェクト.

各レスポンスは受信したJSONをそのまま raw に保持し、型付きの項目は
raw から読み出す。サーバーはドメインエラーを HTTP 200 + status で返す
ことがあるため、status 以外の項目はすべて省略可能とする。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..enums import StatusCode


def _require_object(data: Any, name: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


def _optional_object(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    return _require_object(value, key)


@dataclass(frozen=True)
class BalanceObject:
    """残高（amount はAPI単位の整数）."""

    amount: int | None = None
    currency: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BalanceObject:
        return cls(amount=data.get("amount"), currency=data.get("currency"))


@dataclass(frozen=True)
class RoundDetailObject:
    """ラウンドの詳細."""

    bet_id: int | None = None
    amount: int | None = None
    payout: int | None = None
    payout_multiplier: float | None = None
    active: bool | None = None
    mode: str | None = None
    event: str | None = None
    state: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RoundDetailObject:
        return cls(
            bet_id=data.get("betID"),
            amount=data.get("amount"),
            payout=data.get("payout"),
            payout_multiplier=data.get("payoutMultiplier"),
            active=data.get("active"),
            mode=data.get("mode"),
            event=data.get("event"),
            state=data.get("state"),
        )


@dataclass(frozen=True)
class ConfigObject:
    """ゲーム設定（ベット額はAPI単位の整数）."""

    min_bet: int | None = None
    max_bet: int | None = None
    step_bet: int | None = None
    default_bet_level: int | None = None
    bet_levels: list[int] = field(default_factory=list)
    jurisdiction: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConfigObject:
        bet_levels = data.get("betLevels") or []
        if not isinstance(bet_levels, list):
            raise ValueError("betLevels must be a JSON array")
        return cls(
            min_bet=data.get("minBet"),
            max_bet=data.get("maxBet"),
            step_bet=data.get("stepBet"),
            default_bet_level=data.get("defaultBetLevel"),
            bet_levels=list(bet_levels),
            jurisdiction=_optional_object(data, "jurisdiction") or {},
        )


@dataclass(frozen=True)
class StatusObject:
    """ステータスコードとメッセージの組."""

    status_code: str | None = None
    status_message: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StatusObject:
        return cls(
            status_code=data.get("statusCode"),
            status_message=data.get("statusMessage"),
        )

    @property
    def code(self) -> StatusCode | None:
        """既知のステータスコード（未知のコードは None）."""
        return StatusCode.from_value(self.status_code)

    @property
    def is_success(self) -> bool:
        return self.status_code == StatusCode.SUCCESS.value


def _balance(data: dict[str, Any]) -> BalanceObject | None:
    obj = _optional_object(data, "balance")
    return BalanceObject.from_dict(obj) if obj is not None else None


def _round(data: dict[str, Any]) -> RoundDetailObject | None:
    obj = _optional_object(data, "round")
    return RoundDetailObject.from_dict(obj) if obj is not None else None


def _status(data: dict[str, Any]) -> StatusObject | None:
    obj = _optional_object(data, "status")
    return StatusObject.from_dict(obj) if obj is not None else None


@dataclass(frozen=True)
class AuthenticateResponse:
    """/wallet/authenticate のレスポンス."""

    raw: dict[str, Any]
    balance: BalanceObject | None = None
    config: ConfigObject | None = None
    round: RoundDetailObject | None = None
    status: StatusObject | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AuthenticateResponse:
        data = _require_object(data, "AuthenticateResponse")
        config = _optional_object(data, "config")
        return cls(
            raw=data,
            balance=_balance(data),
            config=ConfigObject.from_dict(config) if config is not None else None,
            round=_round(data),
            status=_status(data),
        )


@dataclass(frozen=True)
class PlayResponse:
    """/wallet/play のレスポンス."""

    raw: dict[str, Any]
    balance: BalanceObject | None = None
    round: RoundDetailObject | None = None
    status: StatusObject | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PlayResponse:
        data = _require_object(data, "PlayResponse")
        return cls(raw=data, balance=_balance(data), round=_round(data), status=_status(data))


@dataclass(frozen=True)
class EndRoundResponse:
    """/wallet/end-round のレスポンス."""

    raw: dict[str, Any]
    balance: BalanceObject | None = None
    status: StatusObject | None = None

    @classmethod
    def from_dict(cls, data: Any) -> EndRoundResponse:
        data = _require_object(data, "EndRoundResponse")
        return cls(raw=data, balance=_balance(data), status=_status(data))


@dataclass(frozen=True)
class BalanceResponse:
    """/wallet/balance のレスポンス."""

    raw: dict[str, Any]
    balance: BalanceObject | None = None
    status: StatusObject | None = None

    @classmethod
    def from_dict(cls, data: Any) -> BalanceResponse:
        data = _require_object(data, "BalanceResponse")
        return cls(raw=data, balance=_balance(data), status=_status(data))


@dataclass(frozen=True)
class EventResponse:
    """/bet/event のレスポンス."""

    raw: dict[str, Any]
    event: str | None = None
    status: StatusObject | None = None

    @classmethod
    def from_dict(cls, data: Any) -> EventResponse:
        data = _require_object(data, "EventResponse")
        return cls(raw=data, event=data.get("event"), status=_status(data))


@dataclass(frozen=True)
class SearchResponse:
    """/game/search のレスポンス.

    検索結果はリストで返ることがあるため raw はボディの型をそのまま保持する。
    """

    raw: Any
    status: StatusObject | None = None

    @classmethod
    def from_dict(cls, data: Any) -> SearchResponse:
        if not isinstance(data, dict):
            return cls(raw=data)
        return cls(raw=data, status=_status(data))

    @property
    def results(self) -> list[Any]:
        """検索結果の一覧（ボディがリストでない場合は空）."""
        return list(self.raw) if isinstance(self.raw, list) else []


@dataclass(frozen=True)
class ReplayResponse:
    """/bet/replay のレスポンス."""

    raw: Any
    payout_multiplier: float | None = None
    cost_multiplier: float | None = None
    state: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> ReplayResponse:
        if not isinstance(data, dict):
            return cls(raw=data)
        return cls(
            raw=data,
            payout_multiplier=data.get("payoutMultiplier"),
            cost_multiplier=data.get("costMultiplier"),
            state=data.get("state"),
        )
