"""
Registration Service HTTP client.

Thin async wrapper over aiohttp for the two endpoints the portal consumes:

    GET  /api/registrations   → {"items": [...]}
    POST /api/registrations   → JSON body on success, {"detail": "..."} on failure

No retries and no cancellation: every call is a single outstanding request.
Failures are raised as SubmissionError / FetchError for the caller to render.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import aiohttp

from portal.errors import FetchError, SubmissionError
from portal.models import RegistrationRecord
from portal.validators import ValidatedRegistration

logger = logging.getLogger(__name__)

REGISTRATIONS_PATH = "/api/registrations"

_TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


@dataclass(frozen=True)
class ConnectionReport:
    """Outcome of a backend reachability probe."""
    ok:     bool
    status: int = 0
    detail: str = ""


def _is_success(status: int) -> bool:
    return 200 <= status < 300


async def _read_json(resp: aiohttp.ClientResponse) -> Any:
    """Decode a JSON body regardless of Content-Type; raises ValueError if it is not JSON."""
    return await resp.json(content_type=None)


class RegistrationServiceClient:
    """
    Client for the external Registration Service.

    Parameters
    ----------
    base_url : service root, e.g. ``http://localhost:8000``
    session  : optional shared aiohttp session; when omitted the client
               creates one lazily and closes it in ``close()``
    """

    def __init__(self, base_url: str, session: Optional[aiohttp.ClientSession] = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "RegistrationServiceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ── POST ──────────────────────────────────────────────────────────────────

    async def submit_registration(self, registration: ValidatedRegistration) -> Any:
        """
        Create a registration. Returns the decoded response body.

        Raises SubmissionError with the server ``detail`` when present,
        otherwise with a generic message.
        """
        url = f"{self._base_url}{REGISTRATIONS_PATH}"
        try:
            async with self._get_session().post(url, json=registration.to_payload()) as resp:
                if not _is_success(resp.status):
                    detail = None
                    try:
                        body = await _read_json(resp)
                    except ValueError:
                        body = None
                    if isinstance(body, dict) and isinstance(body.get("detail"), str):
                        detail = body["detail"] or None
                    logger.warning(
                        "Registration rejected (HTTP %s) for team %r: %s",
                        resp.status, registration.team_name, detail,
                    )
                    raise SubmissionError(detail, status=resp.status)

                try:
                    return await _read_json(resp)
                except ValueError:
                    logger.warning("Registration response (HTTP %s) is not JSON", resp.status)
                    raise SubmissionError(status=resp.status) from None
        except _TRANSPORT_ERRORS as exc:
            logger.warning("Registration request failed: %r", exc)
            raise SubmissionError(str(exc) or None) from exc

    # ── GET ───────────────────────────────────────────────────────────────────

    async def fetch_registrations(self) -> List[RegistrationRecord]:
        """
        Load the full registrations collection in server order.

        A missing or non-list ``items`` is an empty collection, not an error.
        Raises FetchError on non-success status, a non-JSON body or transport failure.
        """
        url = f"{self._base_url}{REGISTRATIONS_PATH}"
        try:
            async with self._get_session().get(url) as resp:
                if not _is_success(resp.status):
                    logger.warning("Registrations fetch failed: HTTP %s", resp.status)
                    raise FetchError(f"Failed to load: {resp.status}", status=resp.status)
                try:
                    body = await _read_json(resp)
                except ValueError:
                    logger.warning("Registrations response is not JSON")
                    raise FetchError("Failed to load: invalid response", status=resp.status) from None
        except _TRANSPORT_ERRORS as exc:
            logger.warning("Registrations request failed: %r", exc)
            raise FetchError(str(exc) or None) from exc

        items = body.get("items") if isinstance(body, dict) else None
        if not isinstance(items, list):
            return []

        records: List[RegistrationRecord] = []
        for item in items:
            if not isinstance(item, dict):
                logger.warning("Skipping malformed registration item: %r", item)
                continue
            records.append(RegistrationRecord.from_api(item))
        return records

    # ── Diagnostics ───────────────────────────────────────────────────────────

    async def check_connection(self) -> ConnectionReport:
        """Probe the service root. Never raises."""
        try:
            async with self._get_session().get(f"{self._base_url}/") as resp:
                text = await resp.text(errors="replace")
                return ConnectionReport(ok=_is_success(resp.status), status=resp.status, detail=text[:200])
        except _TRANSPORT_ERRORS as exc:
            logger.warning("Backend connection check failed: %r", exc)
            return ConnectionReport(ok=False, detail=str(exc) or exc.__class__.__name__)
