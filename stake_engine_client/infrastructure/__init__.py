"""インフラストラクチャ層モジュール."""
from .clients import StakeEngineClient
from .providers import (
    ConfigContextProvider,
    MockRgsGateway,
    UrlContextProvider,
    create_context_provider,
    create_rgs_gateway,
)

__all__ = [
    "ConfigContextProvider",
    "MockRgsGateway",
    "StakeEngineClient",
    "UrlContextProvider",
    "create_context_provider",
    "create_rgs_gateway",
]
