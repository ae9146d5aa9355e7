from packview_app.lib.probes import ProbeKind, ProbeResult, ProbeStatus
from packview_app.lib.run_state import ProbeRunState
from packview_app.ui.lib.probe_panel import header_text, results_frame


def _settled(*statuses: ProbeStatus) -> ProbeRunState:
    state = ProbeRunState()
    state.begin()
    state.settle(ProbeResult(kind, status, kind.value) for kind, status in zip(ProbeKind, statuses))
    return state


class TestHeaderText:
    """Header line per run state"""

    def test_loading(self, texts: dict) -> None:
        state = ProbeRunState()
        state.begin()
        assert header_text(state, texts) == "🔄 Testando conexão..."

    def test_all_ok(self, texts: dict) -> None:
        state = _settled(*[ProbeStatus.SUCCESS] * 4)
        assert header_text(state, texts) == "✅ Packview configurado com sucesso!"

    def test_some_failed(self, texts: dict) -> None:
        state = _settled(ProbeStatus.SUCCESS, ProbeStatus.ERROR, ProbeStatus.SUCCESS, ProbeStatus.SUCCESS)
        assert header_text(state, texts) == "⚠️ Alguns testes falharam"

    def test_not_started(self, texts: dict) -> None:
        assert header_text(ProbeRunState(), texts) == "🎯 Testes completos"


class TestResultsFrame:
    """Details table"""

    def test_rows_in_order(self) -> None:
        state = _settled(ProbeStatus.SUCCESS, ProbeStatus.ERROR, ProbeStatus.SUCCESS, ProbeStatus.ERROR)
        df = results_frame(state.results)

        assert list(df.columns) == ["probe", "status", "message"]
        assert df["probe"].tolist() == ["configuration", "authentication", "database", "storage"]
        assert df["status"].tolist() == ["success", "error", "success", "error"]

    def test_empty(self) -> None:
        df = results_frame([])
        assert df.empty
        assert list(df.columns) == ["probe", "status", "message"]
