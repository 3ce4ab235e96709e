from __future__ import annotations
from datetime import date
from typing import List, Optional, TypedDict

class Party(TypedDict, total=False):
    id: int
    name: str
    date: str           # e.g. "2025-01-01T00:00:00.000Z"
    description: str
    location: str
    cohortId: int       # set by the API, ignored here

class PartyFields(TypedDict):
    # Body of POST /events and PUT /events/{id}
    name: str
    date: str
    description: str
    location: str

class Rsvp(TypedDict, total=False):
    id: int
    guestId: int
    eventId: int

class Guest(TypedDict, total=False):
    id: int
    name: str
    email: str
    phone: str

PARTY_FIELD_NAMES = ("name", "date", "description", "location")


def to_iso_timestamp(day: date) -> str:
    """Midnight UTC of `day`, formatted like JavaScript's Date.toISOString()."""
    return f"{day.isoformat()}T00:00:00.000Z"


def parse_iso_day(value: Optional[str]) -> Optional[date]:
    """Calendar day of an ISO-8601 string ("2025-01-01T..." -> date(2025, 1, 1))."""
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


# Convenience: build the request body from form values
def make_party_fields(
    *,
    name: str,
    day: date,
    description: str,
    location: str,
) -> PartyFields:
    return PartyFields(
        name=name,
        date=to_iso_timestamp(day),
        description=description,
        location=location,
    )


def guests_for_party(party: Optional[Party], rsvps: List[Rsvp], guests: List[Guest]) -> List[Guest]:
    """Guests holding an rsvp for `party`, in guest-list order."""
    if not party:
        return []
    party_id = party.get("id")
    attending = {r.get("guestId") for r in rsvps if r.get("eventId") == party_id}
    return [g for g in guests if g.get("id") in attending]
