"""Stake Engine RGS クライアント.

RGS（Remote Gaming Server）APIとの通信用クライアント。認証・ベット・
残高照会・イベント記録・リプレイ取得を提供し、賭け金はAPI単位へ自動変換する。
"""
from .api import (
    Dependencies,
    authenticate,
    bet,
    end_event,
    end_round,
    force_result,
    get_balance,
    get_replay_url_params,
    is_replay_mode,
    play,
    replay,
    request_authenticate,
    request_balance,
    request_bet,
    request_end_event,
    request_end_round,
    request_force_result,
    request_play,
    request_replay,
)
from .domain import (
    API_AMOUNT_MULTIPLIER,
    BOOK_AMOUNT_MULTIPLIER,
    AmbientContext,
    AmountConversionError,
    ContextProvider,
    MissingParameterError,
    MissingServerError,
    MissingSessionError,
    OperationContext,
    ParameterResolver,
    ReplayParams,
    RgsApiError,
    RgsGateway,
    RgsGatewayError,
    RgsResponseError,
    SearchFilter,
    StatusCode,
    to_api_amount,
)
from .domain.value_objects import (
    AuthenticateResponse,
    BalanceObject,
    BalanceResponse,
    ConfigObject,
    EndRoundResponse,
    EventResponse,
    PlayResponse,
    ReplayResponse,
    RoundDetailObject,
    SearchResponse,
    StatusObject,
)
from .infrastructure import (
    ConfigContextProvider,
    MockRgsGateway,
    StakeEngineClient,
    UrlContextProvider,
)

__version__ = "1.0.0"

__all__ = [
    # Operations
    "authenticate",
    "end_event",
    "end_round",
    "force_result",
    "get_balance",
    "get_replay_url_params",
    "is_replay_mode",
    "play",
    "replay",
    # Deprecated aliases
    "bet",
    "request_authenticate",
    "request_balance",
    "request_bet",
    "request_end_event",
    "request_end_round",
    "request_force_result",
    "request_play",
    "request_replay",
    # Wiring
    "ConfigContextProvider",
    "ContextProvider",
    "Dependencies",
    "MockRgsGateway",
    "ParameterResolver",
    "RgsGateway",
    "StakeEngineClient",
    "UrlContextProvider",
    # Amounts
    "API_AMOUNT_MULTIPLIER",
    "BOOK_AMOUNT_MULTIPLIER",
    "to_api_amount",
    # Errors
    "AmountConversionError",
    "MissingParameterError",
    "MissingServerError",
    "MissingSessionError",
    "RgsApiError",
    "RgsGatewayError",
    "RgsResponseError",
    # Types
    "AmbientContext",
    "AuthenticateResponse",
    "BalanceObject",
    "BalanceResponse",
    "ConfigObject",
    "EndRoundResponse",
    "EventResponse",
    "OperationContext",
    "PlayResponse",
    "ReplayParams",
    "ReplayResponse",
    "RoundDetailObject",
    "SearchFilter",
    "SearchResponse",
    "StatusCode",
    "StatusObject",
]
