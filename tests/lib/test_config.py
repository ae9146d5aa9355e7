import pytest

from packview_app.lib import config


@pytest.fixture(autouse=True)
def no_streamlit_secrets(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of any local secrets.toml"""
    monkeypatch.setattr(config, "_from_streamlit", lambda name: None)
    for name in (
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "APP_LOCALE",
        "LOG_LEVEL",
        "APP_ENV",
        "PROD_PROJECT_ID",
        "STAGING_PROJECT_ID",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """Settings snapshot from the environment"""

    def test_defaults(self) -> None:
        s = config.load_settings()
        assert s.supabase_url == ""
        assert s.supabase_anon_key == ""
        assert s.locale == "pt-BR"
        assert s.log_level == "INFO"
        assert s.app_env == "local"
        assert not s.has_credentials

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUPABASE_URL", "https://abcdefghijklmnopqrst.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("PROD_PROJECT_ID", "ABCDEFGHIJKLMNOPQRST")

        s = config.load_settings()
        assert s.has_credentials
        assert s.log_level == "DEBUG"
        assert s.prod_project_id == "abcdefghijklmnopqrst"

    def test_blank_values_are_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUPABASE_URL", "   ")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        assert not config.load_settings().has_credentials


class TestGet:
    """Lookup order"""

    def test_env_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUPABASE_URL", "from-env")
        monkeypatch.setattr(config, "_from_streamlit", lambda name: "from-secrets")
        assert config.get("SUPABASE_URL") == "from-env"

    def test_secrets_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "_from_streamlit", lambda name: "from-secrets")
        assert config.get("SUPABASE_URL") == "from-secrets"

    def test_default(self) -> None:
        assert config.get("SUPABASE_URL", "fallback") == "fallback"

    def test_empty_env_falls_through(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUPABASE_URL", "")
        assert config.get("SUPABASE_URL", "fallback") == "fallback"
