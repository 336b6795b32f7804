"""
Read-only view of a registration as returned by the Registration Service.

Records are parsed leniently: the host table must render whatever the
server stored, so malformed optional fields degrade instead of failing.
"""
from __future__ import annotations

from typing import Any, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class RegistrationRecord(BaseModel):
    """
    Server-confirmed registration.

    ``fees`` keeps the raw JSON value; ``has_fee`` tells an absent key
    apart from an explicit value so the host table can show "-" vs. $0.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(default="", validation_alias=AliasChoices("_id", "id"))
    captain_name: str = ""
    contact_number: str = ""
    team_name: str = ""
    players: List[str] = Field(default_factory=list)
    fees: Any = None
    has_fee: bool = False

    @classmethod
    def from_api(cls, item: dict) -> "RegistrationRecord":
        return cls.model_validate({**item, "has_fee": "fees" in item})

    @field_validator("id", "captain_name", "contact_number", "team_name", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("players", mode="before")
    @classmethod
    def coerce_players(cls, v: Any) -> List[str]:
        if not isinstance(v, list):
            return []
        return [p if isinstance(p, str) else str(p) for p in v]
