"""
Registration form controller.

Drives one draft through validate → submit → interpret response.
The status is an explicit variant, so "submitting while showing an error"
cannot be represented:

    Idle ──submit──▶ (validate) ──fail──▶ Errored(msg)
                         │
                         └─ok──▶ Submitting ──2xx──▶ Succeeded(msg)  + draft reset + listeners
                                     │
                                     └──error──▶ Errored(detail)     draft kept

A submit issued while Submitting is ignored; that is the only duplicate guard.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional, Protocol, Union

from portal.errors import RegistrationValidationError, SubmissionError
from portal.validators import RegistrationDraft, ValidatedRegistration, validate_draft

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Registration submitted successfully!"


# ── Status variant ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Submitting:
    pass


@dataclass(frozen=True)
class Errored:
    message: str


@dataclass(frozen=True)
class Succeeded:
    message: str


FormStatus = Union[Idle, Submitting, Errored, Succeeded]


class RegistrationSubmitter(Protocol):
    async def submit_registration(self, registration: ValidatedRegistration) -> object: ...


SuccessListener = Callable[[], Awaitable[None]]


# ── Controller ────────────────────────────────────────────────────────────────

class RegistrationForm:
    """
    Owns the draft and submission status for one user.

    Parameters
    ----------
    client : anything with ``submit_registration`` (normally RegistrationServiceClient)
    """

    def __init__(self, client: RegistrationSubmitter) -> None:
        self._client = client
        self._draft = RegistrationDraft.empty()
        self._status: FormStatus = Idle()
        self._on_success: List[SuccessListener] = []

    # ── Read-only state ───────────────────────────────────────────────────────

    @property
    def draft(self) -> RegistrationDraft:
        return self._draft

    @property
    def status(self) -> FormStatus:
        return self._status

    @property
    def submitting(self) -> bool:
        return isinstance(self._status, Submitting)

    @property
    def error(self) -> Optional[str]:
        return self._status.message if isinstance(self._status, Errored) else None

    @property
    def message(self) -> Optional[str]:
        return self._status.message if isinstance(self._status, Succeeded) else None

    # ── Editing ───────────────────────────────────────────────────────────────

    def set_field(self, key: str, value: str) -> None:
        self._draft = self._draft.set_field(key, value)

    def set_player(self, index: int, value: str) -> None:
        self._draft = self._draft.set_player(index, value)

    def on_success(self, listener: SuccessListener) -> None:
        """Register a coroutine to await after each successful submission (e.g. list refresh)."""
        self._on_success.append(listener)

    # ── Submission ────────────────────────────────────────────────────────────

    async def submit(self) -> FormStatus:
        if self.submitting:
            logger.debug("Submit ignored: a submission is already in flight")
            return self._status

        # Clear any previous message before validating
        self._status = Idle()
        try:
            registration = validate_draft(self._draft)
        except RegistrationValidationError as exc:
            self._status = Errored(exc.message)
            return self._status

        self._status = Submitting()
        try:
            await self._client.submit_registration(registration)
        except SubmissionError as exc:
            self._status = Errored(exc.message)
            return self._status
        except Exception:
            logger.exception("Unexpected error submitting team %r", registration.team_name)
            self._status = Errored(SubmissionError.default_message)
            return self._status

        logger.info("Registration submitted for team %r", registration.team_name)
        self._draft = RegistrationDraft.empty()
        self._status = Succeeded(SUCCESS_MESSAGE)

        for listener in self._on_success:
            await listener()
        return self._status
