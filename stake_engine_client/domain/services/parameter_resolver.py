"""操作パラメータの解決サービス."""
from __future__ import annotations

from ..ports import ContextProvider
from ..value_objects import DEFAULT_CURRENCY, DEFAULT_LANGUAGE, OperationContext


class MissingParameterError(Exception):
    """必須パラメータが解決できないエラー."""

    pass


class MissingSessionError(MissingParameterError):
    """セッションIDが解決できないエラー."""

    def __init__(self) -> None:
        super().__init__("sessionID is required (provide in options or sessionID URL param)")


class MissingServerError(MissingParameterError):
    """RGSホストが解決できないエラー."""

    def __init__(self) -> None:
        super().__init__("rgsUrl is required (provide in options or rgs_url URL param)")


def _first(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None


class ParameterResolver:
    """明示的な引数 > アンビエントコンテキスト > 既定値 の順でパラメータを解決する.

    セッションIDとRGSホストには既定値がない。
    """

    def __init__(self, context_provider: ContextProvider) -> None:
        """初期化."""
        self._context_provider = context_provider

    def resolve(
        self,
        session_id: str | None = None,
        rgs_url: str | None = None,
        language: str | None = None,
        currency: str | None = None,
        *,
        require_session: bool = True,
        require_server: bool = True,
    ) -> OperationContext:
        """パラメータを解決する.

        Raises:
            MissingSessionError: セッションIDが必須で解決できない場合
            MissingServerError: RGSホストが必須で解決できない場合
        """
        ambient = self._context_provider.get_context()
        context = OperationContext(
            session_id=_first(session_id, ambient.session_id),
            rgs_url=_first(rgs_url, ambient.rgs_url),
            language=_first(language, ambient.language) or DEFAULT_LANGUAGE,
            currency=_first(currency, ambient.currency) or DEFAULT_CURRENCY,
        )
        if require_session and not context.session_id:
            raise MissingSessionError()
        if require_server and not context.rgs_url:
            raise MissingServerError()
        return context
