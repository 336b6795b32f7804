"""
Unit + integration tests — Registrations list view (listing.py).

Coverage:
  - strict (host) consumer surfaces fetch failures with the status code
  - lenient (registration page) consumer shows an empty list instead
  - cache is replaced wholesale on refresh; loading flag only during fetch
"""
from __future__ import annotations

import asyncio
from typing import List

from portal.errors import FetchError
from portal.listing import RegistrationListView
from portal.models import RegistrationRecord
from tests.conftest import PLAYERS


class _StubFetcher:
    def __init__(self, results: List[object]) -> None:
        self._results = list(results)
        self.release: asyncio.Event | None = None

    async def fetch_registrations(self) -> List[RegistrationRecord]:
        if self.release is not None:
            await self.release.wait()
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result  # type: ignore[return-value]


def _record(team: str, fees: object = 10.0) -> RegistrationRecord:
    return RegistrationRecord.from_api({"_id": team, "team_name": team, "players": PLAYERS, "fees": fees})


class TestStrictView:
    async def test_scenario_host_view_500(self, client, service) -> None:
        service.list_response = (500, {"detail": "db down"})
        view = RegistrationListView(client, strict=True)
        await view.refresh()
        assert view.error == "Failed to load: 500"
        assert "500" in view.error
        assert view.records == ()
        assert view.loading is False

    async def test_error_cleared_by_next_success(self) -> None:
        stub = _StubFetcher([FetchError("Failed to load: 502", 502), [_record("Falcons")]])
        view = RegistrationListView(stub, strict=True)
        await view.refresh()
        assert view.error == "Failed to load: 502"
        await view.refresh()
        assert view.error is None
        assert [r.team_name for r in view.records] == ["Falcons"]


    async def test_unreadable_success_body_is_error(self, client, service) -> None:
        service.list_response = (200, "<html>oops</html>")
        view = RegistrationListView(client, strict=True)
        await view.refresh()
        assert view.error == "Failed to load: invalid response"
        assert view.records == ()


class TestLenientView:
    async def test_failure_shows_empty_list(self, client, service) -> None:
        service.list_response = (500, {})
        view = RegistrationListView(client)
        await view.refresh()
        assert view.error is None
        assert view.records == ()

    async def test_failure_discards_previous_cache(self) -> None:
        stub = _StubFetcher([[_record("Falcons")], FetchError("down")])
        view = RegistrationListView(stub)
        await view.refresh()
        assert len(view.records) == 1
        await view.refresh()
        assert view.records == ()
        assert view.error is None


    async def test_unreadable_success_body_shows_empty_list(self, client, service) -> None:
        service.list_response = (200, "<html>oops</html>")
        view = RegistrationListView(client)
        await view.refresh()
        assert view.error is None
        assert view.records == ()


class TestRefresh:
    async def test_cache_replaced_wholesale(self) -> None:
        stub = _StubFetcher([[_record("A"), _record("B")], [_record("C")]])
        view = RegistrationListView(stub, strict=True)
        await view.refresh()
        await view.refresh()
        assert [r.team_name for r in view.records] == ["C"]

    async def test_total_fees(self, client, service) -> None:
        service.items = [
            {"_id": "1", "team_name": "A", "fees": 12.5},
            {"_id": "2", "team_name": "B"},
            {"_id": "3", "team_name": "C", "fees": "20"},
            {"_id": "4", "team_name": "D", "fees": 7},
        ]
        view = RegistrationListView(client, strict=True)
        await view.refresh()
        assert view.total_fees == 19.5

    async def test_loading_only_while_in_flight(self) -> None:
        stub = _StubFetcher([[]])
        stub.release = asyncio.Event()
        view = RegistrationListView(stub, strict=True)
        assert view.loading is False

        task = asyncio.create_task(view.refresh())
        await asyncio.sleep(0)
        assert view.loading is True

        stub.release.set()
        await task
        assert view.loading is False
