# party_api.py
from __future__ import annotations
from typing import Any, Dict, List, Optional

import logging
import requests

from b_types.party_types import Guest, Party, PartyFields, Rsvp
from utils import settings

logger = logging.getLogger(__name__)


class RetrievalError(RuntimeError):
    """A request to the party API failed (network, HTTP status or payload)."""

    def __init__(self, method: str, url: str, reason: Any) -> None:
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


# --- Helpers -----------------------------------------------------------------
def endpoint(path: str) -> str:
    return f"{settings.API}/{path.lstrip('/')}"


def _send(method: str, path: str, payload: Optional[PartyFields] = None) -> requests.Response:
    """Thin wrapper around requests.request with a timeout and status check."""
    url = endpoint(path)
    try:
        r = requests.request(
            method,
            url,
            json=payload,
            headers={"Content-Type": "application/json"} if payload is not None else None,
            timeout=settings.PARTY_API_TIMEOUT,
        )
        r.raise_for_status()
        return r
    except requests.RequestException as e:
        logger.error(f"[party_api] {method} {url} failed: {e}")
        raise RetrievalError(method, url, e) from e


def _get_data(path: str) -> Any:
    """GET `path` and unwrap the `{data: ...}` envelope."""
    r = _send("GET", path)
    try:
        body = r.json()
    except ValueError as e:
        logger.error(f"[party_api] GET {endpoint(path)} returned non-JSON body: {e}")
        raise RetrievalError("GET", endpoint(path), e) from e
    if not isinstance(body, dict) or "data" not in body:
        logger.error(f"[party_api] GET {endpoint(path)} returned no data: {body!r:.200}")
        raise RetrievalError("GET", endpoint(path), "response has no 'data' field")
    return body["data"]


def _as_list(data: Any, path: str) -> List[Dict[str, Any]]:
    if not isinstance(data, list):
        raise RetrievalError("GET", endpoint(path), f"expected a list, got {type(data).__name__}")
    return data


# --- Events ------------------------------------------------------------------
def list_parties() -> List[Party]:
    return _as_list(_get_data("events"), "events")


def get_party(party_id: int) -> Party:
    path = f"events/{party_id}"
    data = _get_data(path)
    if not isinstance(data, dict):
        raise RetrievalError("GET", endpoint(path), f"expected an object, got {type(data).__name__}")
    return data


def create_party(fields: PartyFields) -> None:
    """POST a new event. The created record is not returned; re-list to see it."""
    _send("POST", "events", dict(fields))


def update_party(party_id: int, fields: PartyFields) -> None:
    _send("PUT", f"events/{party_id}", dict(fields))


def delete_party(party_id: int) -> None:
    _send("DELETE", f"events/{party_id}")


# --- RSVPs / guests ----------------------------------------------------------
def list_rsvps() -> List[Rsvp]:
    return _as_list(_get_data("rsvps"), "rsvps")


def list_guests() -> List[Guest]:
    return _as_list(_get_data("guests"), "guests")
