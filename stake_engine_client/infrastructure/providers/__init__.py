"""プロバイダー実装."""
from .config_context_provider import ConfigContextProvider
from .context_provider_factory import create_context_provider
from .mock_rgs_gateway import MockRgsGateway
from .rgs_gateway_factory import create_rgs_gateway
from .url_context_provider import UrlContextProvider

__all__ = [
    "ConfigContextProvider",
    "MockRgsGateway",
    "UrlContextProvider",
    "create_context_provider",
    "create_rgs_gateway",
]
