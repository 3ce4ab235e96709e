# tests/conftest.py
"""
Shared fixtures: sample API payloads and a fake `requests` response.
"""
from unittest.mock import Mock

import pytest

from utils.state import AppState


@pytest.fixture
def launch_party():
    return {
        "id": 1,
        "name": "Launch",
        "date": "2025-01-01T00:00:00Z",
        "description": "Product launch",
        "location": "Rooftop",
    }


@pytest.fixture
def parties(launch_party):
    return [
        launch_party,
        {
            "id": 2,
            "name": "Picnic",
            "date": "2025-06-14T00:00:00.000Z",
            "description": "Sandwiches",
            "location": "Park",
        },
    ]


@pytest.fixture
def rsvps():
    return [
        {"id": 100, "guestId": 9, "eventId": 1},
        {"id": 101, "guestId": 10, "eventId": 2},
    ]


@pytest.fixture
def guests():
    return [
        {"id": 9, "name": "Ada"},
        {"id": 10, "name": "Grace"},
        {"id": 11, "name": "Linus"},
    ]


@pytest.fixture
def state(parties, rsvps, guests):
    return AppState(parties=list(parties), rsvps=list(rsvps), guests=list(guests), loaded=True)


def fake_response(data=None, *, body=None, json_error=None, status_error=None):
    """Mock of requests.Response carrying `{"data": data}` (or `body` verbatim)."""
    r = Mock()
    if json_error is not None:
        r.json.side_effect = json_error
    else:
        r.json.return_value = {"data": data} if body is None else body
    if status_error is not None:
        r.raise_for_status.side_effect = status_error
    else:
        r.raise_for_status.return_value = None
    return r
