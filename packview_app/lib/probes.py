# packview_app/lib/probes.py
"""
Connectivity probes for the Packview Supabase project.

Four checks run in a fixed order, one at a time:
  1) configuration  -- SUPABASE_URL / SUPABASE_ANON_KEY present (no network)
  2) authentication -- auth.get_session() answers
  3) database       -- select("count") on the profiles table answers
  4) storage        -- the post-images bucket is listed

Each check yields exactly one ProbeResult. Errors are caught at the check
site, so one failing service never hides the state of the others.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Sequence

from packview_app.lib.config import Settings, load_settings
from packview_app.lib.log import get_logger
from packview_app.lib.messages import get_messages

log = get_logger("probes")

PROFILES_TABLE = "profiles"
EXPECTED_BUCKET = "post-images"


class ProbeStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ProbeKind(str, Enum):
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    STORAGE = "storage"


@dataclass(frozen=True)
class ProbeResult:
    probe: ProbeKind
    status: ProbeStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status is ProbeStatus.SUCCESS


class BackendError(Exception):
    """A failed backend call. ``message`` is the only contract callers rely on."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def error_message(exc: BaseException) -> str:
    """Best-effort human text for any exception raised by the SDK."""
    msg = getattr(exc, "message", None)
    if isinstance(msg, str) and msg:
        return msg
    # storage3 raises StorageException(dict)
    if exc.args and isinstance(exc.args[0], dict):
        payload = exc.args[0]
        for key in ("message", "error", "msg"):
            if payload.get(key):
                return str(payload[key])
    return str(exc) or type(exc).__name__


class BackendClient(Protocol):
    async def get_session(self) -> Any: ...

    async def query_count(self, table: str) -> Any: ...

    async def list_buckets(self) -> Sequence[Any]: ...


def bucket_name(bucket: Any) -> Optional[str]:
    if isinstance(bucket, dict):
        return bucket.get("name")
    return getattr(bucket, "name", None)


def all_success(results: Iterable[ProbeResult]) -> bool:
    return all(r.status is ProbeStatus.SUCCESS for r in results)


def has_errors(results: Iterable[ProbeResult]) -> bool:
    return any(r.status is ProbeStatus.ERROR for r in results)


class ProbeRunner:
    def __init__(
        self,
        backend: BackendClient,
        settings_loader: Callable[[], Settings] = load_settings,
        messages: Optional[Dict[str, str]] = None,
        profiles_table: str = PROFILES_TABLE,
        expected_bucket: str = EXPECTED_BUCKET,
    ):
        self.backend = backend
        self.settings_loader = settings_loader
        self.messages = messages or get_messages()
        self.profiles_table = profiles_table
        self.expected_bucket = expected_bucket

    def _result(self, kind: ProbeKind, status: ProbeStatus, key: str, **fmt: str) -> ProbeResult:
        result = ProbeResult(kind, status, self.messages[key].format(**fmt))
        if result.ok:
            log.info("%s: %s", kind.value, result.message)
        else:
            log.warning("%s: %s", kind.value, result.message)
        return result

    def check_configuration(self) -> ProbeResult:
        try:
            settings = self.settings_loader()
        except Exception as exc:
            return self._result(
                ProbeKind.CONFIGURATION, ProbeStatus.ERROR, "config_error", error=error_message(exc)
            )
        if settings.has_credentials:
            return self._result(ProbeKind.CONFIGURATION, ProbeStatus.SUCCESS, "config_ok")
        return self._result(ProbeKind.CONFIGURATION, ProbeStatus.ERROR, "config_missing")

    async def check_authentication(self) -> ProbeResult:
        try:
            # a missing session is fine; only an error fails the probe
            await self.backend.get_session()
        except Exception as exc:
            return self._result(
                ProbeKind.AUTHENTICATION, ProbeStatus.ERROR, "auth_error", error=error_message(exc)
            )
        return self._result(ProbeKind.AUTHENTICATION, ProbeStatus.SUCCESS, "auth_ok")

    async def check_database(self) -> ProbeResult:
        try:
            await self.backend.query_count(self.profiles_table)
        except Exception as exc:
            return self._result(
                ProbeKind.DATABASE, ProbeStatus.ERROR, "db_error", error=error_message(exc)
            )
        return self._result(
            ProbeKind.DATABASE, ProbeStatus.SUCCESS, "db_ok", table=self.profiles_table
        )

    async def check_storage(self) -> ProbeResult:
        try:
            buckets = await self.backend.list_buckets()
        except Exception as exc:
            return self._result(
                ProbeKind.STORAGE, ProbeStatus.ERROR, "storage_error", error=error_message(exc)
            )
        if any(bucket_name(b) == self.expected_bucket for b in buckets or []):
            return self._result(
                ProbeKind.STORAGE, ProbeStatus.SUCCESS, "storage_ok", bucket=self.expected_bucket
            )
        return self._result(
            ProbeKind.STORAGE, ProbeStatus.ERROR, "bucket_missing", bucket=self.expected_bucket
        )

    async def run(self) -> List[ProbeResult]:
        """Run every probe in order and return one result per probe."""
        log.info("probe run started")
        results = [self.check_configuration()]
        results.append(await self.check_authentication())
        results.append(await self.check_database())
        results.append(await self.check_storage())
        failed = sum(1 for r in results if not r.ok)
        log.info("probe run settled: %d/%d passed", len(results) - failed, len(results))
        return results
