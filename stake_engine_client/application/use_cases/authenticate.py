"""プレイヤー認証ユースケース."""
from stake_engine_client.domain.ports import RgsGateway
from stake_engine_client.domain.services import ParameterResolver
from stake_engine_client.domain.value_objects import AuthenticateResponse

from .response_decoder import decode_response

AUTHENTICATE_PATH = "/wallet/authenticate"


class AuthenticateUseCase:
    """プレイヤーのセッションをRGSで認証するユースケース."""

    def __init__(self, resolver: ParameterResolver, rgs_gateway: RgsGateway) -> None:
        """初期化."""
        self._resolver = resolver
        self._rgs_gateway = rgs_gateway

    def execute(
        self,
        session_id: str | None = None,
        rgs_url: str | None = None,
        language: str | None = None,
    ) -> AuthenticateResponse:
        """認証し、残高・ゲーム設定・進行中ラウンドを返す."""
        context = self._resolver.resolve(session_id=session_id, rgs_url=rgs_url, language=language)
        data = self._rgs_gateway.post(
            context.rgs_url,
            AUTHENTICATE_PATH,
            {
                "sessionID": context.session_id,
                "language": context.language,
            },
        )
        return decode_response(AuthenticateResponse.from_dict, data)
