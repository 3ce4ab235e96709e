"""Tests for payload helpers and the guest filter."""

from datetime import date

from b_types.party_types import guests_for_party, make_party_fields, parse_iso_day, to_iso_timestamp
from utils.helpers import display_day, safe_int, same_id


def test_iso_timestamp_matches_browser_format():
    assert to_iso_timestamp(date(2025, 1, 1)) == "2025-01-01T00:00:00.000Z"


def test_parse_iso_day():
    assert parse_iso_day("2025-01-01T00:00:00Z") == date(2025, 1, 1)
    assert parse_iso_day("2025-06-14") == date(2025, 6, 14)
    assert parse_iso_day("soon") is None
    assert parse_iso_day(None) is None


def test_make_party_fields_normalises_date():
    fields = make_party_fields(name="Gala", day=date(2025, 3, 1), description="Fancy", location="Hall")
    assert fields == {
        "name": "Gala",
        "date": "2025-03-01T00:00:00.000Z",
        "description": "Fancy",
        "location": "Hall",
    }


def test_guests_for_party_is_exact(launch_party, rsvps, guests):
    assert [g["name"] for g in guests_for_party(launch_party, rsvps, guests)] == ["Ada"]


def test_guests_for_party_without_selection(rsvps, guests):
    assert guests_for_party(None, rsvps, guests) == []


def test_guests_for_party_ignores_rsvps_of_other_events(guests):
    rsvps = [{"guestId": 11, "eventId": 2}, {"guestId": 9, "eventId": 3}]
    assert guests_for_party({"id": 1}, rsvps, guests) == []


def test_guests_keep_guest_list_order(guests):
    rsvps = [{"guestId": 11, "eventId": 5}, {"guestId": 9, "eventId": 5}]
    assert [g["name"] for g in guests_for_party({"id": 5}, rsvps, guests)] == ["Ada", "Linus"]


def test_helpers():
    assert display_day("2025-01-01T00:00:00Z") == "2025-01-01"
    assert display_day(None) == ""
    assert safe_int(" 4 ") == 4
    assert safe_int("x") is None
    assert same_id("1", 1)
    assert not same_id(None, None)
