"""値オブジェクトモジュール."""
from .ambient_context import DEFAULT_CURRENCY, DEFAULT_LANGUAGE, AmbientContext
from .operation_context import OperationContext
from .replay_params import ReplayParams
from .rgs_responses import (
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
from .search_filter import SearchFilter

__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_LANGUAGE",
    "AmbientContext",
    "OperationContext",
    "ReplayParams",
    "SearchFilter",
    # Responses
    "AuthenticateResponse",
    "BalanceObject",
    "BalanceResponse",
    "ConfigObject",
    "EndRoundResponse",
    "EventResponse",
    "PlayResponse",
    "ReplayResponse",
    "RoundDetailObject",
    "SearchResponse",
    "StatusObject",
]
