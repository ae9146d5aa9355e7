# packview_app/lib/supabase_client.py
from __future__ import annotations
import asyncio
from typing import Any, Callable, List, TypeVar

import streamlit as st
from supabase import Client, create_client

from packview_app.lib.config import get_settings
from packview_app.lib.log import get_logger
from packview_app.lib.probes import BackendError, error_message

log = get_logger("supabase")

T = TypeVar("T")


class MissingCredentialsError(RuntimeError):
    pass


def create_supabase_client(url: str, key: str) -> Client:
    """Build a client, refusing to start without credentials."""
    if not (url or "").strip() or not (key or "").strip():
        raise MissingCredentialsError("SUPABASE_URL / SUPABASE_ANON_KEY not set")
    return create_client(url.strip(), key.strip())


@st.cache_resource(show_spinner=False)
def get_client() -> Client:
    """One client per process, built from the settings seen at start-up."""
    s = get_settings()
    log.info("creating Supabase client for %s", s.supabase_url)
    return create_supabase_client(s.supabase_url, s.supabase_anon_key)


class SupabaseBackend:
    """
    Async face of the (blocking) supabase-py client.

    Calls run in a worker thread; any SDK failure is re-raised as BackendError
    with the SDK's message text.
    """

    def __init__(self, client: Client):
        self.client = client

    async def _call(self, fn: Callable[[], T]) -> T:
        try:
            return await asyncio.to_thread(fn)
        except Exception as exc:
            raise BackendError(error_message(exc)) from exc

    async def get_session(self) -> Any:
        return await self._call(self.client.auth.get_session)

    async def query_count(self, table: str) -> Any:
        return await self._call(lambda: self.client.table(table).select("count").execute())

    async def list_buckets(self) -> List[Any]:
        buckets = await self._call(self.client.storage.list_buckets)
        return list(buckets or [])
