"""
Reminder submission handler.

Authenticates the caller, normalizes the request body and records one
completed demo automation in ``workflow_runs`` under the caller's
credential. Transport independent: the API layer converts HTTP requests
into ``ReminderRequest`` and ``HandlerResponse`` back into HTTP.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel

from send_reminder.core.config import Settings
from send_reminder.core.logging import get_logger, audit_logger
from send_reminder.services.supabase_client import SupabaseClient

logger = get_logger(__name__)

DEFAULT_INTENT = "Demo reminder"
COMPLETED_STATUS = "Completed"
SUCCESS_MESSAGE = "Demo automation executed and saved to workflow history."


# ============= TYPES =============

class ReminderInput(BaseModel):
    """Request body. ``intent`` may be any JSON value; only non-blank strings are kept."""
    intent: Any = None

    def normalized_intent(self) -> str:
        if isinstance(self.intent, str) and self.intent.strip():
            return self.intent.strip()
        return DEFAULT_INTENT


@dataclass(frozen=True)
class WorkflowRunRecord:
    user_id: str
    intent: str
    status: str = COMPLETED_STATUS

    def to_row(self) -> Dict[str, str]:
        return {
            "user_id": self.user_id,
            "intent": self.intent,
            "status": self.status,
        }


@dataclass(frozen=True)
class ReminderRequest:
    method: str
    authorization: str = ""
    body: bytes = b""


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def error(cls, status_code: int, message: str) -> "HandlerResponse":
        return cls(status_code=status_code, body={"error": message})


ClientFactory = Callable[[str, str, str], SupabaseClient]


# ============= STEPS =============

def check_method(method: str) -> Optional[HandlerResponse]:
    if (method or "").upper() != "POST":
        return HandlerResponse.error(405, "Method not allowed")
    return None


def check_config(settings: Settings) -> Optional[HandlerResponse]:
    if not settings.is_configured:
        return HandlerResponse.error(500, settings.missing_config_message())
    return None


def parse_body(raw: bytes) -> ReminderInput:
    """
    Parse the request body.

    A missing, malformed or non-object body is treated as ``{}``.
    """
    if not raw:
        return ReminderInput()
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError, RecursionError):
        return ReminderInput()
    if not isinstance(data, dict):
        return ReminderInput()
    return ReminderInput(intent=data.get("intent"))


# ============= HANDLER =============

class ReminderHandler:
    """Runs the submission pipeline for one request at a time; holds no per-request state."""

    def __init__(self, settings: Settings, client_factory: Optional[ClientFactory] = None):
        self.settings = settings
        self.client_factory = client_factory or SupabaseClient

    async def handle(self, request: ReminderRequest) -> HandlerResponse:
        try:
            return await self._handle(request)
        except Exception as e:
            logger.exception(f"send-reminder failed: {e}")
            return HandlerResponse.error(500, str(e))

    async def _handle(self, request: ReminderRequest) -> HandlerResponse:
        rejection = check_method(request.method) or check_config(self.settings)
        if rejection is not None:
            return rejection

        client = self.client_factory(
            self.settings.SUPABASE_URL,
            self.settings.SUPABASE_ANON_KEY,
            request.authorization or "",
        )
        async with client:
            auth = await client.get_user()
            if not auth.ok:
                return HandlerResponse.error(401, "Unauthorized")

            record = WorkflowRunRecord(
                user_id=auth.user_id,
                intent=parse_body(request.body).normalized_intent(),
            )
            result = await client.insert_workflow_run(
                record, table=self.settings.WORKFLOW_RUNS_TABLE
            )

        if not result.ok:
            return HandlerResponse.error(400, result.error)

        audit_logger.log(
            action="workflow_run.create",
            user_id=record.user_id,
            entity_type=self.settings.WORKFLOW_RUNS_TABLE,
            details={"intent": record.intent, "status": record.status},
        )
        return HandlerResponse(
            status_code=200,
            body={"ok": True, "message": SUCCESS_MESSAGE},
        )
