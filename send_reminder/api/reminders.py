"""
Send-reminder API route.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from send_reminder.core.config import Settings, get_settings
from send_reminder.services.reminder_handler import ReminderHandler, ReminderRequest

router = APIRouter(tags=["Reminders"])

# Every method is routed here so the handler can answer 405 with its own body.
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def get_handler(settings: Settings = Depends(get_settings)) -> ReminderHandler:
    return ReminderHandler(settings)


@router.api_route("/send-reminder", methods=ALL_METHODS)
@router.api_route("/functions/v1/send-reminder", methods=ALL_METHODS, include_in_schema=False)
async def send_reminder(
    request: Request,
    handler: ReminderHandler = Depends(get_handler),
):
    """
    Record a completed demo automation for the authenticated caller.

    Body: ``{"intent": "..."}`` (optional). Returns ``{"ok": true, "message": ...}``
    or ``{"error": ...}`` with the matching status code.
    """
    body = await request.body()
    result = await handler.handle(
        ReminderRequest(
            method=request.method,
            authorization=request.headers.get("Authorization", ""),
            body=body,
        )
    )
    return JSONResponse(status_code=result.status_code, content=result.body)
