"""
Caller-scoped Supabase client.

Talks to the two Supabase endpoints this service needs over httpx:

- GoTrue ``/auth/v1/user`` to resolve the caller behind a bearer credential
- PostgREST ``/rest/v1/<table>`` to insert rows

Every request carries the public anon key as ``apikey`` and the caller's
``Authorization`` header verbatim, so row-level security policies are
evaluated against the caller and not against the service.

Backend rejections come back as result objects. Transport failures
(connection errors, timeouts) are raised as ``httpx.HTTPError``.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from send_reminder.core.logging import get_logger

if TYPE_CHECKING:
    from send_reminder.services.reminder_handler import WorkflowRunRecord

logger = get_logger(__name__)

AUTH_USER_PATH = "/auth/v1/user"
REST_PATH = "/rest/v1"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of resolving the current user."""
    user_id: Optional[str] = None
    email: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.user_id)


@dataclass(frozen=True)
class InsertResult:
    """Outcome of a single row insert."""
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _error_message(response: httpx.Response, *keys: str) -> str:
    """Pull a human readable error out of a Supabase error response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        for key in keys:
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value

    text = response.text.strip()
    if text:
        return text
    return response.reason_phrase or f"HTTP {response.status_code}"


class SupabaseClient:
    """
    One client per request, bound to the caller's credential.

    Usage:
        async with SupabaseClient(url, anon_key, authorization) as client:
            auth = await client.get_user()
    """

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        authorization: str = "",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.authorization = authorization or ""
        headers = {"apikey": anon_key}
        if self.authorization:
            headers["Authorization"] = self.authorization
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> "SupabaseClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def get_user(self) -> AuthResult:
        """Resolve the user the forwarded credential belongs to."""
        if not self.authorization:
            return AuthResult(error="Auth session missing")

        response = await self._http.get(AUTH_USER_PATH)

        if not response.is_success:
            message = _error_message(response, "msg", "message", "error_description", "error")
            logger.info(f"User lookup rejected with HTTP {response.status_code}: {message}")
            return AuthResult(error=message)

        try:
            payload = response.json()
        except ValueError:
            return AuthResult(error="Invalid user payload")

        user_id = payload.get("id") if isinstance(payload, dict) else None
        if not user_id:
            return AuthResult(error="No user for credential")

        return AuthResult(user_id=str(user_id), email=payload.get("email"))

    async def insert(self, table: str, row: Dict[str, Any]) -> InsertResult:
        """Insert one row into ``table`` under the caller's credential."""
        response = await self._http.post(
            f"{REST_PATH}/{table}",
            json=row,
            headers={"Prefer": "return=minimal"},
        )

        if not response.is_success:
            message = _error_message(response, "message", "msg", "error")
            logger.warning(f"Insert into {table} rejected with HTTP {response.status_code}: {message}")
            return InsertResult(error=message, status_code=response.status_code)

        return InsertResult(status_code=response.status_code)

    async def insert_workflow_run(self, record: "WorkflowRunRecord", table: str) -> InsertResult:
        return await self.insert(table, record.to_row())
