"""公開API層モジュール."""
from .dependencies import Dependencies
from .operations import (
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

__all__ = [
    "Dependencies",
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
]
