"""
Fake Supabase backend (GoTrue + PostgREST) built on httpx.MockTransport.
"""
import json
from typing import List, Optional

import httpx

from send_reminder.services.supabase_client import SupabaseClient

SUPABASE_URL = "https://demo-project.supabase.co"
ANON_KEY = "anon-key-for-tests"
VALID_TOKEN = "Bearer valid-user-jwt"
USER_ID = "8f14e45f-ceea-467f-a0e6-c1f0b0a9d5e1"


class FakeSupabase:
    """In-memory stand-in for the auth and REST endpoints."""

    def __init__(self):
        self.tokens = {VALID_TOKEN: {"id": USER_ID, "email": "demo@example.com"}}
        self.rows: List[dict] = []
        self.requests: List[httpx.Request] = []
        self.insert_error: Optional[dict] = None
        self.insert_status = 400
        self.raise_on: Optional[str] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if self.raise_on and path.startswith(self.raise_on):
            raise httpx.ConnectError("connection refused", request=request)

        if path == "/auth/v1/user" and request.method == "GET":
            user = self.tokens.get(request.headers.get("Authorization", ""))
            if user is None:
                return httpx.Response(
                    401,
                    json={"code": 401, "error_code": "bad_jwt", "msg": "invalid JWT"},
                )
            return httpx.Response(200, json=user)

        if path.startswith("/rest/v1/") and request.method == "POST":
            if self.insert_error is not None:
                return httpx.Response(self.insert_status, json=self.insert_error)
            self.rows.append(json.loads(request.content))
            return httpx.Response(201)

        return httpx.Response(404, json={"message": "not found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client_factory(self, base_url: str, anon_key: str, authorization: str) -> SupabaseClient:
        return SupabaseClient(base_url, anon_key, authorization, transport=self.transport)

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]
