"""クライアント実装."""
from .stake_engine_client import StakeEngineClient

__all__ = ["StakeEngineClient"]
