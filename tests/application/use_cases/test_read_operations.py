"""セッション不要の操作（結果検索・リプレイ）のテスト."""
import pytest

from stake_engine_client.application.use_cases.force_result import ForceResultUseCase
from stake_engine_client.application.use_cases.replay import ReplayUseCase, replay_path
from stake_engine_client.domain.services import MissingServerError, ParameterResolver
from stake_engine_client.domain.value_objects import SearchFilter
from stake_engine_client.infrastructure.providers.config_context_provider import (
    ConfigContextProvider,
)
from stake_engine_client.infrastructure.providers.mock_rgs_gateway import MockRgsGateway


def _resolver(config: dict | None = None) -> ParameterResolver:
    return ParameterResolver(ConfigContextProvider(config))


class TestForceResultUseCase:
    """ForceResultUseCase のテスト."""

    def test_SearchFilterで検索する(self) -> None:
        gateway = MockRgsGateway()

        ForceResultUseCase(_resolver(), gateway).execute(
            mode="base", search=SearchFilter(book_id=42, kind=1, symbol="BONUS"), rgs_url="h"
        )

        request = gateway.requests[0]
        assert request["path"] == "/game/search"
        assert request["body"] == {
            "mode": "base",
            "search": {"bookID": 42, "kind": 1, "symbol": "BONUS"},
        }

    def test_辞書で検索条件を渡せる(self) -> None:
        gateway = MockRgsGateway()

        ForceResultUseCase(_resolver(), gateway).execute(mode="bonus", search={"hasWild": True}, rgs_url="h")

        assert gateway.requests[0]["body"]["search"] == {"hasWild": True}

    def test_セッションIDは不要(self) -> None:
        gateway = MockRgsGateway()

        ForceResultUseCase(_resolver({"rgs_url": "h"}), gateway).execute(mode="base", search={})

        assert "sessionID" not in gateway.requests[0]["body"]

    def test_RGSホストがない場合は送信しない(self) -> None:
        gateway = MockRgsGateway()

        with pytest.raises(MissingServerError):
            ForceResultUseCase(_resolver(), gateway).execute(mode="base", search={})
        assert gateway.requests == []


class TestReplayUseCase:
    """ReplayUseCase のテスト."""

    def test_パスにセグメントを埋め込んでGETする(self) -> None:
        gateway = MockRgsGateway()
        path = "/bet/replay/slots-adventure/1.0.0/base/abc123"
        gateway.set_response(path, {"payoutMultiplier": 2.5, "costMultiplier": 1, "state": []})

        result = ReplayUseCase(_resolver(), gateway).execute(
            game="slots-adventure", version="1.0.0", mode="base", event="abc123", rgs_url="h"
        )

        assert gateway.requests == [{"method": "GET", "rgs_url": "h", "path": path, "body": None}]
        assert result.payout_multiplier == 2.5

    def test_セッションIDは不要(self) -> None:
        gateway = MockRgsGateway()

        ReplayUseCase(_resolver({"rgs_url": "h"}), gateway).execute(game="g", version="v", mode="m", event="e")

        assert gateway.requests[0]["path"] == "/bet/replay/g/v/m/e"

    def test_RGSホストがない場合は送信しない(self) -> None:
        gateway = MockRgsGateway()

        with pytest.raises(MissingServerError):
            ReplayUseCase(_resolver({"sessionID": "s"}), gateway).execute(game="g", version="v", mode="m", event="e")
        assert gateway.requests == []

    def test_replay_path(self) -> None:
        assert replay_path("g", "1.2.3", "base", "99") == "/bet/replay/g/1.2.3/base/99"


class TestForceResultListResponse:
    """検索結果がリストで返る場合のテスト."""

    def test_リストのレスポンスを返す(self) -> None:
        gateway = MockRgsGateway()
        gateway.set_response("/game/search", [{"bookID": 42}, {"bookID": 43}])

        result = ForceResultUseCase(_resolver(), gateway).execute(
            mode="base", search={"kind": 1}, rgs_url="h"
        )

        assert result.raw == [{"bookID": 42}, {"bookID": 43}]
        assert result.results == [{"bookID": 42}, {"bookID": 43}]
        assert len(gateway.requests) == 1

    def test_リプレイがリストのレスポンスでも返す(self) -> None:
        gateway = MockRgsGateway()
        gateway.set_response("/bet/replay/g/v/m/e", [{"index": 0}])

        result = ReplayUseCase(_resolver(), gateway).execute(
            game="g", version="v", mode="m", event="e", rgs_url="h"
        )

        assert result.raw == [{"index": 0}]
