"""アンビエントコンテキストプロバイダーインターフェース."""
from abc import ABC, abstractmethod

from ..value_objects import AmbientContext, ReplayParams


class ContextProvider(ABC):
    """呼び出し外部のパラメータ（URLクエリ・設定）の取得インターフェース."""

    @abstractmethod
    def get_context(self) -> AmbientContext:
        """セッションID・RGSホスト・言語・通貨を取得する."""
        pass

    @abstractmethod
    def get_replay_params(self) -> ReplayParams:
        """リプレイモードのパラメータを取得する."""
        pass
