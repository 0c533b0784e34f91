"""RgsGateway ファクトリ."""
import logging
import os

from stake_engine_client.domain.ports import RgsGateway

logger = logging.getLogger(__name__)


def _timeout_from_env() -> float | None:
    value = os.environ.get("RGS_TIMEOUT")
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Invalid RGS_TIMEOUT=%s, requests will not time out", value)
        return None


def create_rgs_gateway() -> RgsGateway:
    """環境変数に基づいてRgsGatewayを生成する.

    RGS_GATEWAY:
        "mock" → MockRgsGateway（ローカル開発・テスト用）
        "http" → StakeEngineClient
        未設定  → StakeEngineClient（デフォルト）
    RGS_TIMEOUT:
        リクエストのタイムアウト秒数（未設定ならタイムアウトなし）
    """
    gateway_type = os.environ.get("RGS_GATEWAY")
    if gateway_type == "mock":
        from stake_engine_client.infrastructure.providers.mock_rgs_gateway import MockRgsGateway

        return MockRgsGateway()

    if gateway_type and gateway_type != "http":
        logger.warning("Unknown RGS_GATEWAY=%s, falling back to http", gateway_type)

    from stake_engine_client.infrastructure.clients.stake_engine_client import StakeEngineClient

    return StakeEngineClient(timeout=_timeout_from_env())
