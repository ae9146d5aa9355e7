import pytest

from packview_app.lib.config import Settings
from packview_app.lib.messages import get_messages
from packview_app.lib.probes import ProbeRunner
from tests.mocks.mock_backend import MockBackend


@pytest.fixture()
def settings() -> Settings:
    """Settings with both credentials present."""
    return Settings(
        supabase_url="https://abcdefghijklmnopqrst.supabase.co",
        supabase_anon_key="eyJhbGciOiJIUzI1NiJ9.test-anon-key",
    )


@pytest.fixture()
def texts() -> dict:
    """pt-BR text catalogue."""
    return get_messages("pt-BR")


@pytest.fixture()
def backend() -> MockBackend:
    """Healthy backend: no session, post-images bucket present."""
    return MockBackend()


@pytest.fixture()
def runner(backend: MockBackend, settings: Settings, texts: dict) -> ProbeRunner:
    """Runner wired to the mock backend and fixed settings."""
    return ProbeRunner(backend, settings_loader=lambda: settings, messages=texts)
