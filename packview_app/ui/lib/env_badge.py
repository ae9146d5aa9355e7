import re, urllib.parse
import streamlit as st

from packview_app.lib.config import Settings, get_settings

_REF_RE = re.compile(r"^([a-z0-9]{20})\.supabase\.co$")
_LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1", "0.0.0.0"}

def _env_from_supabase_url(u: str, prod: str = "", stag: str = ""):
    p = urllib.parse.urlparse(u or "")
    host = (p.hostname or "").lower()
    m = _REF_RE.match(host)
    proj = m.group(1) if m else ""

    if proj and proj == prod:
        env = "PROD"
    elif proj and proj == stag:
        env = "STAGING"
    elif host in _LOCAL_HOSTS:
        env = "LOCAL"  # supabase start (CLI stack)
    elif host.endswith(".supabase.co"):
        env = "CLOUD"  # hosted but not one of ours
    else:
        env = "UNKNOWN"

    return env, proj or "?", host or "?"

def _mask_key(key: str) -> str:
    key = (key or "").strip()
    if not key:
        return "<missing>"
    if len(key) <= 12:
        return "***"
    return f"{key[:4]}…{key[-4:]}"

def show_env_badge(settings: Settings | None = None):
    s = settings or get_settings()
    env, proj, host = _env_from_supabase_url(s.supabase_url, s.prod_project_id, s.staging_project_id)
    st.caption(f"Environment: {env} • Project: {proj} • Host: {host} • Key: `{_mask_key(s.supabase_anon_key)}`")
