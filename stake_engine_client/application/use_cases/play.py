"""ベット（ラウンド開始）ユースケース."""
from decimal import Decimal

from stake_engine_client.domain.ports import RgsGateway
from stake_engine_client.domain.services import ParameterResolver, to_api_amount
from stake_engine_client.domain.value_objects import PlayResponse

from .response_decoder import decode_response

PLAY_PATH = "/wallet/play"


class PlayUseCase:
    """ベットして新しいラウンドを開始するユースケース."""

    def __init__(self, resolver: ParameterResolver, rgs_gateway: RgsGateway) -> None:
        """初期化."""
        self._resolver = resolver
        self._rgs_gateway = rgs_gateway

    def execute(
        self,
        amount: int | float | Decimal,
        mode: str,
        currency: str | None = None,
        session_id: str | None = None,
        rgs_url: str | None = None,
    ) -> PlayResponse:
        """ベットする.

        Args:
            amount: 表示用の金額（例: 1.00）。API単位へは自動変換する
            mode: ベットモード（例: "base"）
        """
        context = self._resolver.resolve(session_id=session_id, rgs_url=rgs_url, currency=currency)
        api_amount = to_api_amount(amount)
        data = self._rgs_gateway.post(
            context.rgs_url,
            PLAY_PATH,
            {
                "mode": mode,
                "currency": context.currency,
                "sessionID": context.session_id,
                "amount": api_amount,
            },
        )
        return decode_response(PlayResponse.from_dict, data)
