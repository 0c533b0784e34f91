"""ラウンド終了ユースケース."""
from stake_engine_client.domain.ports import RgsGateway
from stake_engine_client.domain.services import ParameterResolver
from stake_engine_client.domain.value_objects import EndRoundResponse

from .response_decoder import decode_response

END_ROUND_PATH = "/wallet/end-round"


class EndRoundUseCase:
    """進行中のラウンドを終了するユースケース."""

    def __init__(self, resolver: ParameterResolver, rgs_gateway: RgsGateway) -> None:
        """初期化."""
        self._resolver = resolver
        self._rgs_gateway = rgs_gateway

    def execute(self, session_id: str | None = None, rgs_url: str | None = None) -> EndRoundResponse:
        """ラウンドを終了する."""
        context = self._resolver.resolve(session_id=session_id, rgs_url=rgs_url)
        data = self._rgs_gateway.post(
            context.rgs_url,
            END_ROUND_PATH,
            {"sessionID": context.session_id},
        )
        return decode_response(EndRoundResponse.from_dict, data)
