"""結果検索ユースケース（テスト・デバッグ用）."""
from typing import Any

from stake_engine_client.domain.ports import RgsGateway
from stake_engine_client.domain.services import ParameterResolver
from stake_engine_client.domain.value_objects import SearchFilter, SearchResponse

from .response_decoder import decode_response

SEARCH_PATH = "/game/search"


class ForceResultUseCase:
    """条件に合うゲーム結果を検索するユースケース.

    セッションIDは不要。
    """

    def __init__(self, resolver: ParameterResolver, rgs_gateway: RgsGateway) -> None:
        """初期化."""
        self._resolver = resolver
        self._rgs_gateway = rgs_gateway

    def execute(
        self,
        mode: str,
        search: SearchFilter | dict[str, Any],
        rgs_url: str | None = None,
    ) -> SearchResponse:
        """結果を検索する."""
        context = self._resolver.resolve(rgs_url=rgs_url, require_session=False)
        search_body = search.to_dict() if isinstance(search, SearchFilter) else dict(search)
        data = self._rgs_gateway.post(
            context.rgs_url,
            SEARCH_PATH,
            {
                "mode": mode,
                "search": search_body,
            },
        )
        return decode_response(SearchResponse.from_dict, data)
