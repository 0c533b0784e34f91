"""ポートモジュール."""
from .context_provider import ContextProvider
from .rgs_gateway import RgsApiError, RgsGateway, RgsGatewayError, RgsResponseError

__all__ = [
    "ContextProvider",
    "RgsApiError",
    "RgsGateway",
    "RgsGatewayError",
    "RgsResponseError",
]
