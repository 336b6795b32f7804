"""
Unit tests — Aggregation and presentation helpers (services/aggregation.py).

Pure functions; no network required.
"""
from __future__ import annotations

import math

import pytest

from portal.models import RegistrationRecord
from portal.services.aggregation import (
    compute_total_fees,
    format_currency,
    format_fee_cell,
    format_players,
    format_registrations_text,
)


def _rec(**fields) -> RegistrationRecord:
    return RegistrationRecord.from_api({"_id": "x", "team_name": "T", **fields})


class TestComputeTotalFees:
    def test_empty_collection_is_zero(self) -> None:
        assert compute_total_fees([]) == 0

    def test_missing_fee_counts_as_zero(self) -> None:
        assert compute_total_fees([_rec(), _rec(fees=12.5)]) == 12.5

    @pytest.mark.parametrize("bad", [None, "25", True, [5], {"amount": 5}, math.nan, math.inf])
    def test_non_numeric_fee_ignored(self, bad) -> None:
        assert compute_total_fees([_rec(fees=bad), _rec(fees=5)]) == 5

    def test_order_independent(self) -> None:
        records = [_rec(fees=0.1), _rec(fees=0.2), _rec(fees=0.3), _rec(fees=1e16)]
        assert compute_total_fees(records) == compute_total_fees(list(reversed(records)))

    def test_ints_and_floats_mix(self) -> None:
        assert compute_total_fees([_rec(fees=10), _rec(fees=2.5)]) == 12.5


    def test_huge_integer_fee_counts_as_zero(self) -> None:
        assert compute_total_fees([_rec(fees=10**400), _rec(fees=5)]) == 5

    def test_overflowing_sum_does_not_raise(self) -> None:
        assert compute_total_fees([_rec(fees=1e308), _rec(fees=1e308)]) == math.inf


class TestFormatCurrency:
    @pytest.mark.parametrize("value,expected", [
        (0, "$0.00"),
        (25, "$25.00"),
        (12.5, "$12.50"),
        (1234.567, "$1,234.57"),
        (-5, "-$5.00"),
    ])
    def test_numbers(self, value, expected: str) -> None:
        assert format_currency(value) == expected

    def test_negative_zero_renders_as_zero(self) -> None:
        assert format_currency(-0.0) == "$0.00"

    @pytest.mark.parametrize("value", [None, "25", True, math.nan, 10**400])
    def test_non_numbers_render_empty(self, value) -> None:
        assert format_currency(value) == ""


class TestFeeCell:
    def test_absent_fee_is_dash(self) -> None:
        assert format_fee_cell(_rec()) == "-"

    def test_zero_fee_is_currency(self) -> None:
        assert format_fee_cell(_rec(fees=0)) == "$0.00"

    def test_null_fee_is_blank(self) -> None:
        assert format_fee_cell(_rec(fees=None)) == ""


class TestRecordParsing:
    def test_id_from_mongo_style_key(self) -> None:
        assert RegistrationRecord.from_api({"_id": 42}).id == "42"

    def test_plain_id_accepted(self) -> None:
        assert RegistrationRecord.from_api({"id": "abc"}).id == "abc"

    def test_players_not_a_list(self) -> None:
        r = RegistrationRecord.from_api({"players": "A, B"})
        assert r.players == []
        assert format_players(r) == ""

    def test_players_joined(self) -> None:
        assert format_players(_rec(players=["A", "B"])) == "A, B"


class TestRegistrationsText:
    def test_empty_state(self) -> None:
        text = format_registrations_text([], 0)
        assert "No registrations yet." in text
        assert "$0.00" in text

    def test_lists_teams_and_escapes_html(self) -> None:
        records = [_rec(team_name="<Falcons>", captain_name="A & B", fees=25)]
        text = format_registrations_text(records, 25)
        assert "&lt;Falcons&gt;" in text
        assert "A &amp; B" in text
        assert "Total fees collected: <b>$25.00</b>" in text
