"""残高取得ユースケース."""
from stake_engine_client.domain.ports import RgsGateway
from stake_engine_client.domain.services import ParameterResolver
from stake_engine_client.domain.value_objects import BalanceResponse

from .response_decoder import decode_response

BALANCE_PATH = "/wallet/balance"


class GetBalanceUseCase:
    """プレイヤーの残高を取得するユースケース."""

    def __init__(self, resolver: ParameterResolver, rgs_gateway: RgsGateway) -> None:
        """初期化."""
        self._resolver = resolver
        self._rgs_gateway = rgs_gateway

    def execute(self, session_id: str | None = None, rgs_url: str | None = None) -> BalanceResponse:
        """残高を取得する."""
        context = self._resolver.resolve(session_id=session_id, rgs_url=rgs_url)
        data = self._rgs_gateway.post(
            context.rgs_url,
            BALANCE_PATH,
            {"sessionID": context.session_id},
        )
        return decode_response(BalanceResponse.from_dict, data)
