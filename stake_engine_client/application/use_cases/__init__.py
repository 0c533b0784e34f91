"""ユースケースモジュール."""
from .authenticate import AuthenticateUseCase
from .end_event import EndEventUseCase
from .end_round import EndRoundUseCase
from .force_result import ForceResultUseCase
from .get_balance import GetBalanceUseCase
from .play import PlayUseCase
from .replay import ReplayUseCase

__all__ = [
    "AuthenticateUseCase",
    "EndEventUseCase",
    "EndRoundUseCase",
    "ForceResultUseCase",
    "GetBalanceUseCase",
    "PlayUseCase",
    "ReplayUseCase",
]
