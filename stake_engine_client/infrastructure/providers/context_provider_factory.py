"""ContextProvider ファクトリ."""
import logging
import os

from stake_engine_client.domain.ports import ContextProvider

from .config_context_provider import ConfigContextProvider
from .url_context_provider import UrlContextProvider

logger = logging.getLogger(__name__)


def create_context_provider() -> ContextProvider:
    """環境変数に基づいてContextProviderを生成する.

    RGS_CONTEXT_PROVIDER:
        "url" → UrlContextProvider（RGS_LOCATION のURLを読む）
        "env" → ConfigContextProvider.from_env()
        未設定 → ConfigContextProvider.from_env()（デフォルト）
    """
    provider_type = os.environ.get("RGS_CONTEXT_PROVIDER")
    if provider_type == "url":
        return UrlContextProvider(os.environ.get("RGS_LOCATION", ""))

    if provider_type and provider_type != "env":
        logger.warning("Unknown RGS_CONTEXT_PROVIDER=%s, falling back to env", provider_type)

    return ConfigContextProvider.from_env()
