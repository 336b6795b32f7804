"""
Registrations list view.

Holds a read-only cache of the latest successful fetch and replaces it
wholesale on every refresh. Two consumers differ only in failure policy:

- strict (host dashboard): a failed fetch becomes an explicit error state
- lenient (registration page): a failed fetch shows as an empty list
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple

from portal.errors import FetchError
from portal.models import RegistrationRecord
from portal.services.aggregation import compute_total_fees

logger = logging.getLogger(__name__)


class RegistrationFetcher(Protocol):
    async def fetch_registrations(self) -> List[RegistrationRecord]: ...


class RegistrationListView:
    def __init__(self, client: RegistrationFetcher, strict: bool = False) -> None:
        self._client = client
        self.strict = strict
        self._records: Tuple[RegistrationRecord, ...] = ()
        self._error: Optional[str] = None
        self._loading = False

    @property
    def records(self) -> Tuple[RegistrationRecord, ...]:
        return self._records

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def total_fees(self) -> float:
        return compute_total_fees(self._records)

    async def refresh(self) -> None:
        """Fetch the collection and replace the cache."""
        self._loading = True
        try:
            records = await self._client.fetch_registrations()
        except FetchError as exc:
            self._records = ()
            if self.strict:
                self._error = exc.message
            else:
                logger.debug("Ignoring registrations fetch failure: %s", exc.message)
                self._error = None
        else:
            self._records = tuple(records)
            self._error = None
        finally:
            self._loading = False
