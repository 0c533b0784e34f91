"""リプレイ取得ユースケース."""
from stake_engine_client.domain.ports import RgsGateway
from stake_engine_client.domain.services import ParameterResolver
from stake_engine_client.domain.value_objects import ReplayResponse

from .response_decoder import decode_response


def replay_path(game: str, version: str, mode: str, event: str) -> str:
    """リプレイ取得パスを組み立てる（各セグメントはそのまま埋め込む）."""
    return f"/bet/replay/{game}/{version}/{mode}/{event}"


class ReplayUseCase:
    """過去のベットのリプレイデータを取得するユースケース.

    セッションIDは不要。
    """

    def __init__(self, resolver: ParameterResolver, rgs_gateway: RgsGateway) -> None:
        """初期化."""
        self._resolver = resolver
        self._rgs_gateway = rgs_gateway

    def execute(
        self,
        game: str,
        version: str,
        mode: str,
        event: str,
        rgs_url: str | None = None,
    ) -> ReplayResponse:
        """リプレイデータを取得する."""
        context = self._resolver.resolve(rgs_url=rgs_url, require_session=False)
        data = self._rgs_gateway.get(context.rgs_url, replay_path(game, version, mode, event))
        return decode_response(ReplayResponse.from_dict, data)
