"""
Presentation helpers for the registrations collection.

Pure functions: no I/O, never mutate records.
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable, List

from aiogram.utils.text_decorations import html_decoration as hd

from portal.models import RegistrationRecord


def _fee_value(fees: Any) -> float:
    """A record's contribution to the total: finite numbers only, else 0."""
    if isinstance(fees, bool) or not isinstance(fees, Real):
        return 0.0
    try:
        value = float(fees)
    except OverflowError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def compute_total_fees(records: Iterable[RegistrationRecord]) -> float:
    """Sum of numeric fees; records with a missing / non-numeric fee count as 0."""
    values = [_fee_value(r.fees) for r in records]
    try:
        return math.fsum(values)
    except OverflowError:
        return math.inf


def format_currency(value: Any) -> str:
    """USD rendering, e.g. ``$1,234.50``; empty string for non-numbers."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return ""
    try:
        value = float(value) + 0.0
    except OverflowError:
        return ""
    if not math.isfinite(value):
        return ""
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def format_fee_cell(record: RegistrationRecord) -> str:
    """Host table fee cell: "-" means no fee recorded at all, distinct from $0.00."""
    if not record.has_fee:
        return "-"
    return format_currency(record.fees)


def format_players(record: RegistrationRecord) -> str:
    return ", ".join(record.players)


def format_registrations_text(
    records: List[RegistrationRecord],
    total_fees: float,
) -> str:
    """Render the host dashboard body as Telegram HTML."""
    lines = [
        "<b>🏏 Registrations</b>",
        f"Total fees collected: <b>{format_currency(total_fees)}</b>",
        "",
    ]
    if not records:
        lines.append("<i>No registrations yet.</i>")
        return "\n".join(lines)

    for idx, r in enumerate(records, start=1):
        lines.append(f"<b>{idx}. {hd.quote(r.team_name)}</b>")
        lines.append(f"👤 Captain: {hd.quote(r.captain_name)}")
        lines.append(f"📞 Contact: {hd.quote(r.contact_number)}")
        lines.append(f"👥 Players (8): {hd.quote(format_players(r))}")
        lines.append(f"💵 Fees: {format_fee_cell(r)}")
        lines.append("")
    return "\n".join(lines).rstrip()
