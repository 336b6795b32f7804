"""
Shared pytest fixtures for portal tests.

Sets required environment variables BEFORE any portal module is imported so
that pydantic-settings initialisation uses safe test values.

The Registration Service is replaced by a scripted aiohttp.web application
served on a local TestServer, so client tests exercise real HTTP.
"""
from __future__ import annotations

import os
from typing import Any, AsyncGenerator, Dict, List, Optional, Tuple

# ── Set env vars before any portal import ─────────────────────────────────────
os.environ.setdefault("BOT_TOKEN", "123456:test-token-for-pytest")
os.environ.setdefault("BACKEND_URL", "http://localhost:8000")

# ── Third-party ───────────────────────────────────────────────────────────────
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

# ── Portal imports (safe after env vars are set) ──────────────────────────────
from portal.services import RegistrationServiceClient
from portal.validators import RegistrationDraft

PLAYERS = ["Rohit", "Shubman", "Virat", "Shreyas", "Rishabh", "Hardik", "Ravindra", "Jasprit"]


# ── Fake Registration Service ─────────────────────────────────────────────────

class FakeRegistrationService:
    """
    In-memory stand-in for the Registration Service.

    ``list_response`` / ``create_response`` override the default behaviour
    with a fixed (status, body) pair; a str body is sent as raw text.
    """

    def __init__(self) -> None:
        self.items: List[Dict[str, Any]] = []
        self.posted: List[Dict[str, Any]] = []
        self.list_calls = 0
        self.list_response: Optional[Tuple[int, Any]] = None
        self.create_response: Optional[Tuple[int, Any]] = None

    @staticmethod
    def _reply(status: int, body: Any) -> web.Response:
        if isinstance(body, str):
            return web.Response(text=body, status=status)
        return web.json_response(body, status=status)

    async def _root(self, request: web.Request) -> web.Response:
        return web.json_response({"message": "Hello from the registration backend"})

    async def _list(self, request: web.Request) -> web.Response:
        self.list_calls += 1
        if self.list_response is not None:
            return self._reply(*self.list_response)
        return web.json_response({"items": self.items})

    async def _create(self, request: web.Request) -> web.Response:
        body = await request.json()
        self.posted.append(body)
        if self.create_response is not None:
            return self._reply(*self.create_response)
        record = {"_id": f"id-{len(self.items) + 1}", **body}
        self.items.append(record)
        return web.json_response(record)

    def build_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/", self._root)
        app.router.add_get("/api/registrations", self._list)
        app.router.add_post("/api/registrations", self._create)
        return app


@pytest.fixture
async def fake_service() -> AsyncGenerator[Tuple[FakeRegistrationService, TestServer], None]:
    """Yield the fake service and its running server; always shut down on teardown."""
    service = FakeRegistrationService()
    server = TestServer(service.build_app())
    await server.start_server()
    try:
        yield service, server
    finally:
        await server.close()


@pytest.fixture
def service(fake_service) -> FakeRegistrationService:
    return fake_service[0]


@pytest.fixture
async def client(fake_service) -> AsyncGenerator[RegistrationServiceClient, None]:
    _, server = fake_service
    api = RegistrationServiceClient(str(server.make_url("/")))
    try:
        yield api
    finally:
        await api.close()


@pytest.fixture
async def unreachable_client() -> AsyncGenerator[RegistrationServiceClient, None]:
    """Client pointed at a port nothing listens on."""
    api = RegistrationServiceClient("http://127.0.0.1:1")
    try:
        yield api
    finally:
        await api.close()


# ── Draft helpers ─────────────────────────────────────────────────────────────

def make_draft(
    captain_name: str = "A Kapoor",
    contact_number: str = "+91-99999",
    team_name: str = "Falcons",
    players: Optional[List[str]] = None,
    fees_input: str = "25.00",
) -> RegistrationDraft:
    draft = RegistrationDraft.empty()
    draft = draft.set_field("captain_name", captain_name)
    draft = draft.set_field("contact_number", contact_number)
    draft = draft.set_field("team_name", team_name)
    draft = draft.set_field("fees_input", fees_input)
    for idx, name in enumerate(PLAYERS if players is None else players):
        draft = draft.set_player(idx, name)
    return draft


@pytest.fixture
def valid_draft() -> RegistrationDraft:
    return make_draft()
