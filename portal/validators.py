"""
Registration draft and validation — Pydantic v2 models.

The draft is an immutable value replaced wholesale on every edit; the roster
is a fixed 8-tuple so its size is part of the type, not a runtime check.
``validate_draft`` is the only way to obtain a ValidatedRegistration.
"""
from __future__ import annotations

import math
import re
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from portal.errors import IncompleteRoster, InvalidFee, MissingRequiredField

ROSTER_SIZE = 8

Roster = Tuple[str, str, str, str, str, str, str, str]

EMPTY_ROSTER: Roster = ("",) * ROSTER_SIZE  # type: ignore[assignment]

# Scalar fields editable through set_field (players go through set_player)
SCALAR_FIELDS = ("captain_name", "contact_number", "team_name", "fees_input")
REQUIRED_FIELDS = ("captain_name", "contact_number", "team_name")

# Plain decimal notation: optional sign, digits with optional point, optional exponent
_FEE_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


class RegistrationDraft(BaseModel):
    """
    In-progress registration owned by a single form.

    Attributes
    ----------
    captain_name   : raw text as typed
    contact_number : raw text as typed
    team_name      : raw text as typed
    players        : exactly 8 slots, possibly empty while editing
    fees_input     : raw fee text, parsed only at validation time
    """

    model_config = ConfigDict(frozen=True)

    captain_name: str = ""
    contact_number: str = ""
    team_name: str = ""
    players: Roster = EMPTY_ROSTER
    fees_input: str = ""

    @classmethod
    def empty(cls) -> "RegistrationDraft":
        return cls()

    def set_field(self, key: str, value: str) -> "RegistrationDraft":
        """Return a copy with one scalar field replaced. Never validates."""
        if key not in SCALAR_FIELDS:
            raise KeyError(f"Unknown draft field: {key!r}")
        return self.model_copy(update={key: value})

    def set_player(self, index: int, value: str) -> "RegistrationDraft":
        """Return a copy with roster slot ``index`` replaced; other slots keep their order."""
        if not 0 <= index < ROSTER_SIZE:
            raise IndexError(f"Player slot {index} out of range 0..{ROSTER_SIZE - 1}")
        players = list(self.players)
        players[index] = value
        return self.model_copy(update={"players": tuple(players)})

    @property
    def filled_players(self) -> int:
        return sum(1 for p in self.players if p and p.strip())


class ValidatedRegistration(BaseModel):
    """
    Submit-ready registration. Strings are kept exactly as entered;
    only the fee is converted.
    """

    model_config = ConfigDict(frozen=True)

    captain_name: str
    contact_number: str
    team_name: str
    players: Roster
    fees: float = Field(ge=0, allow_inf_nan=False)

    @field_validator("captain_name", "contact_number", "team_name")
    @classmethod
    def validate_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field must not be blank")
        return v

    @field_validator("players")
    @classmethod
    def validate_players(cls, v: Roster) -> Roster:
        if any(not p.strip() for p in v):
            raise ValueError(f"All {ROSTER_SIZE} player names are required")
        return v

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for ``POST /api/registrations``."""
        return {
            "captain_name": self.captain_name,
            "contact_number": self.contact_number,
            "team_name": self.team_name,
            "players": list(self.players),
            "fees": self.fees,
        }


def parse_fee(raw: str) -> float:
    """Parse fee text; raises InvalidFee for non-numeric, negative or non-finite input."""
    text = raw.strip()
    if not _FEE_RE.match(text):
        raise InvalidFee()
    value = float(text)
    if not math.isfinite(value) or value < 0:
        raise InvalidFee()
    # "-0" parses as -0.0
    return value + 0.0


def validate_draft(draft: RegistrationDraft) -> ValidatedRegistration:
    """
    Check a draft in fixed order and stop at the first failing rule:
    required fields, then roster completeness, then fee.
    """
    if any(not getattr(draft, key).strip() for key in REQUIRED_FIELDS):
        raise MissingRequiredField()

    if draft.filled_players != ROSTER_SIZE:
        raise IncompleteRoster()

    fees = parse_fee(draft.fees_input)

    return ValidatedRegistration(
        captain_name=draft.captain_name,
        contact_number=draft.contact_number,
        team_name=draft.team_name,
        players=draft.players,
        fees=fees,
    )
