"""RGS API 操作の公開関数.

引数で渡されなかったセッションID・RGSホスト・言語・通貨は
Dependencies のコンテキストプロバイダーから補完する。

使用例:
    >>> from stake_engine_client import play
    >>> result = play(amount=1.00, mode="base", session_id="s1", rgs_url="rgs.example.com")
    >>> result.round.payout_multiplier
"""
from decimal import Decimal
from typing import Any

from stake_engine_client.application.use_cases import (
    AuthenticateUseCase,
    EndEventUseCase,
    EndRoundUseCase,
    ForceResultUseCase,
    GetBalanceUseCase,
    PlayUseCase,
    ReplayUseCase,
)
from stake_engine_client.domain.services import ParameterResolver
from stake_engine_client.domain.value_objects import (
    AuthenticateResponse,
    BalanceResponse,
    EndRoundResponse,
    EventResponse,
    PlayResponse,
    ReplayParams,
    ReplayResponse,
    SearchFilter,
    SearchResponse,
)

from .dependencies import Dependencies


def _resolver() -> ParameterResolver:
    return ParameterResolver(Dependencies.get_context_provider())


def authenticate(
    session_id: str | None = None,
    rgs_url: str | None = None,
    language: str | None = None,
) -> AuthenticateResponse:
    """プレイヤーのセッションを認証する."""
    use_case = AuthenticateUseCase(_resolver(), Dependencies.get_rgs_gateway())
    return use_case.execute(session_id=session_id, rgs_url=rgs_url, language=language)


def play(
    amount: int | float | Decimal,
    mode: str,
    currency: str | None = None,
    session_id: str | None = None,
    rgs_url: str | None = None,
) -> PlayResponse:
    """ベットしてラウンドを開始する（amount は 1.00 = 1通貨単位）."""
    use_case = PlayUseCase(_resolver(), Dependencies.get_rgs_gateway())
    return use_case.execute(
        amount=amount,
        mode=mode,
        currency=currency,
        session_id=session_id,
        rgs_url=rgs_url,
    )


def end_round(session_id: str | None = None, rgs_url: str | None = None) -> EndRoundResponse:
    """進行中のラウンドを終了する."""
    use_case = EndRoundUseCase(_resolver(), Dependencies.get_rgs_gateway())
    return use_case.execute(session_id=session_id, rgs_url=rgs_url)


def end_event(
    event_index: int,
    session_id: str | None = None,
    rgs_url: str | None = None,
) -> EventResponse:
    """イベントの進捗を記録する."""
    use_case = EndEventUseCase(_resolver(), Dependencies.get_rgs_gateway())
    return use_case.execute(event_index=event_index, session_id=session_id, rgs_url=rgs_url)


def get_balance(session_id: str | None = None, rgs_url: str | None = None) -> BalanceResponse:
    """現在の残高を取得する."""
    use_case = GetBalanceUseCase(_resolver(), Dependencies.get_rgs_gateway())
    return use_case.execute(session_id=session_id, rgs_url=rgs_url)


def force_result(
    mode: str,
    search: SearchFilter | dict[str, Any],
    rgs_url: str | None = None,
) -> SearchResponse:
    """条件に合うゲーム結果を検索する（テスト・デバッグ用）."""
    use_case = ForceResultUseCase(_resolver(), Dependencies.get_rgs_gateway())
    return use_case.execute(mode=mode, search=search, rgs_url=rgs_url)


def replay(
    game: str,
    version: str,
    mode: str,
    event: str,
    rgs_url: str | None = None,
) -> ReplayResponse:
    """過去のベットのリプレイデータを取得する."""
    use_case = ReplayUseCase(_resolver(), Dependencies.get_rgs_gateway())
    return use_case.execute(game=game, version=version, mode=mode, event=event, rgs_url=rgs_url)


def get_replay_url_params() -> ReplayParams:
    """リプレイモードのパラメータを取得する."""
    return Dependencies.get_context_provider().get_replay_params()


def is_replay_mode() -> bool:
    """リプレイモード（replay=true）か判定する."""
    return get_replay_url_params().replay


# 後方互換エイリアス（非推奨）
request_authenticate = authenticate
request_balance = get_balance
request_play = play
request_bet = play
bet = play
request_end_round = end_round
request_end_event = end_event
request_force_result = force_result
request_replay = replay
