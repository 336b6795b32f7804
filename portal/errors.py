"""
Error taxonomy for the registration pipeline.

Every error here is terminal at the UI boundary: the form and list view
catch them and turn them into a user-visible message.
"""
from __future__ import annotations

from typing import Optional


class PortalError(Exception):
    """Base class for all portal errors. ``message`` is user-facing."""

    default_message = "Something went wrong."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# ── Local validation ──────────────────────────────────────────────────────────

class RegistrationValidationError(PortalError):
    """Draft rejected before any network call."""


class MissingRequiredField(RegistrationValidationError):
    default_message = "Please fill in captain name, contact number, and team name."


class IncompleteRoster(RegistrationValidationError):
    default_message = "Please provide names for all 8 players."


class InvalidFee(RegistrationValidationError):
    default_message = "Please enter a valid non-negative fees amount."


# ── Transport ─────────────────────────────────────────────────────────────────

class SubmissionError(PortalError):
    """POST failed: transport error or server-side rejection."""

    default_message = "Submission failed"

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)


class FetchError(PortalError):
    """GET of the registrations collection failed."""

    default_message = "Failed to load registrations"

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)
