"""ReplayParams のテスト."""
from stake_engine_client.domain.value_objects import ReplayParams


class TestReplayParams:
    """ReplayParams の単体テスト."""

    def test_クエリパラメータから生成できる(self) -> None:
        params = ReplayParams.from_params(
            {
                "replay": "true",
                "amount": "2.5",
                "game": "slots-adventure",
                "version": "1.0.0",
                "mode": "base",
                "event": "abc123",
            }
        )
        assert params.replay is True
        assert params.amount == 2.5
        assert params.game == "slots-adventure"
        assert params.version == "1.0.0"
        assert params.mode == "base"
        assert params.event == "abc123"

    def test_replayは文字列trueのときのみ有効(self) -> None:
        assert ReplayParams.from_params({"replay": "true"}).replay is True
        assert ReplayParams.from_params({"replay": "True"}).replay is False
        assert ReplayParams.from_params({"replay": "1"}).replay is False
        assert ReplayParams.from_params({}).replay is False

    def test_未指定の項目は既定値(self) -> None:
        params = ReplayParams.from_params({})
        assert params.amount == 0
        assert params.game == ""
        assert params.version == ""
        assert params.mode == ""
        assert params.event == ""

    def test_数値でないamountは0(self) -> None:
        assert ReplayParams.from_params({"amount": "abc"}).amount == 0
        assert ReplayParams.from_params({"amount": "nan"}).amount == 0

    def test_アンダースコアを含むamountは0(self) -> None:
        assert ReplayParams.from_params({"amount": "1_000"}).amount == 0

    def test_非有限のamountは0(self) -> None:
        assert ReplayParams.from_params({"amount": "infinity"}).amount == 0
        assert ReplayParams.from_params({"amount": "-inf"}).amount == 0
