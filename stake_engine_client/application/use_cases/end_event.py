"""イベント進捗記録ユースケース."""
from stake_engine_client.domain.ports import RgsGateway
from stake_engine_client.domain.services import ParameterResolver
from stake_engine_client.domain.value_objects import EventResponse

from .response_decoder import decode_response

EVENT_PATH = "/bet/event"


class EndEventUseCase:
    """ラウンド内のイベント進捗をRGSに記録するユースケース."""

    def __init__(self, resolver: ParameterResolver, rgs_gateway: RgsGateway) -> None:
        """初期化."""
        self._resolver = resolver
        self._rgs_gateway = rgs_gateway

    def execute(
        self,
        event_index: int,
        session_id: str | None = None,
        rgs_url: str | None = None,
    ) -> EventResponse:
        """イベント番号を記録する."""
        context = self._resolver.resolve(session_id=session_id, rgs_url=rgs_url)
        data = self._rgs_gateway.post(
            context.rgs_url,
            EVENT_PATH,
            {
                "sessionID": context.session_id,
                "event": str(event_index),
            },
        )
        return decode_response(EventResponse.from_dict, data)
