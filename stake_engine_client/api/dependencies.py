"""依存性注入コンテナ."""
from stake_engine_client.domain.ports import ContextProvider, RgsGateway
from stake_engine_client.infrastructure.providers import (
    create_context_provider,
    create_rgs_gateway,
)


class Dependencies:
    """依存性を管理するコンテナ.

    未設定の場合は環境変数に基づいて生成する（RGS_GATEWAY, RGS_CONTEXT_PROVIDER）。
    ブラウザ相当のホストは set_context_provider で UrlContextProvider を設定する。
    """

    _context_provider: ContextProvider | None = None
    _rgs_gateway: RgsGateway | None = None

    @classmethod
    def get_context_provider(cls) -> ContextProvider:
        """コンテキストプロバイダーを取得する."""
        if cls._context_provider is None:
            cls._context_provider = create_context_provider()
        return cls._context_provider

    @classmethod
    def set_context_provider(cls, provider: ContextProvider) -> None:
        """コンテキストプロバイダーを設定する."""
        cls._context_provider = provider

    @classmethod
    def get_rgs_gateway(cls) -> RgsGateway:
        """RGSゲートウェイを取得する."""
        if cls._rgs_gateway is None:
            cls._rgs_gateway = create_rgs_gateway()
        return cls._rgs_gateway

    @classmethod
    def set_rgs_gateway(cls, gateway: RgsGateway) -> None:
        """RGSゲートウェイを設定する."""
        cls._rgs_gateway = gateway

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._context_provider = None
        cls._rgs_gateway = None
