# packview_app/lib/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from functools import lru_cache

import streamlit as st
from dotenv import load_dotenv

# local runs keep credentials in .env; Streamlit Cloud uses st.secrets
load_dotenv()

DEFAULT_LOCALE = "pt-BR"


def _from_env(name: str) -> str | None:
    v = os.getenv(name)
    return v if v else None


def _from_streamlit(name: str) -> str | None:
    try:
        v = st.secrets.get(name)
    except FileNotFoundError:
        # no secrets.toml anywhere
        return None
    return v if isinstance(v, str) and v else None


def get(name: str, default: str | None = None) -> str | None:
    """Environment first, then Streamlit secrets, then ``default``."""
    return _from_env(name) or _from_streamlit(name) or default


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_anon_key: str
    locale: str = DEFAULT_LOCALE
    log_level: str = "INFO"
    app_env: str = "local"
    prod_project_id: str = ""
    staging_project_id: str = ""

    @property
    def has_credentials(self) -> bool:
        return bool(self.supabase_url.strip()) and bool(self.supabase_anon_key.strip())


def load_settings() -> Settings:
    """Read a fresh snapshot of the configuration."""
    return Settings(
        supabase_url=get("SUPABASE_URL", "") or "",
        supabase_anon_key=get("SUPABASE_ANON_KEY", "") or "",
        locale=get("APP_LOCALE", DEFAULT_LOCALE) or DEFAULT_LOCALE,
        log_level=(get("LOG_LEVEL", "INFO") or "INFO").upper(),
        app_env=(get("APP_ENV", "local") or "local").lower(),
        prod_project_id=(get("PROD_PROJECT_ID", "") or "").lower(),
        staging_project_id=(get("STAGING_PROJECT_ID", "") or "").lower(),
    )


@lru_cache
def get_settings() -> Settings:
    """Settings as seen at process start."""
    return load_settings()
