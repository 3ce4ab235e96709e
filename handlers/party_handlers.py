# handlers/party_handlers.py
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional

import logging

from b_types.party_types import PartyFields, make_party_fields
from b_types.ui_types import CREATE, DELETE, SELECT, TOGGLE_EDIT, UPDATE, Action
from utils import party_api
from utils.helpers import same_id
from utils.party_api import RetrievalError
from utils.state import AppState

logger = logging.getLogger(__name__)


def fields_from_form(values: Mapping[str, Any]) -> Optional[PartyFields]:
    """Build a request body from submitted form values; None when the date is missing."""
    day = values.get("date")
    if not isinstance(day, date):
        return None
    return make_party_fields(
        name=values.get("name") or "",
        day=day,
        description=values.get("description") or "",
        location=values.get("location") or "",
    )


class PartyController:
    """Owns the AppState and applies user actions to it.

    Every handler calls the API, catches RetrievalError, logs it and leaves
    the affected state untouched. Streamlit reruns the page afterwards, which
    is the re-render.
    """

    def __init__(self, state: Optional[AppState] = None) -> None:
        self.state = state or AppState()

    # ───────────────────────── Reads ─────────────────────────
    def load_all(self) -> None:
        """Fetch parties, rsvps and guests concurrently; keep going on partial failure."""
        loaders: Dict[str, Callable[[], Any]] = {
            "parties": party_api.list_parties,
            "rsvps": party_api.list_rsvps,
            "guests": party_api.list_guests,
        }
        with ThreadPoolExecutor(max_workers=len(loaders)) as executor:
            futures = {slot: executor.submit(fn) for slot, fn in loaders.items()}
            for slot, future in futures.items():
                try:
                    setattr(self.state, slot, future.result())
                except RetrievalError as e:
                    logger.error(f"Could not load {slot}: {e}")
        self.state.loaded = True

    def refresh_parties(self) -> None:
        try:
            self.state.parties = party_api.list_parties()
        except RetrievalError as e:
            logger.error(f"Could not refresh parties: {e}")

    def select_party(self, party_id: int) -> None:
        try:
            party = party_api.get_party(party_id)
        except RetrievalError as e:
            logger.error(f"Could not load party {party_id}: {e}")
            return
        self.state.selected_party = party
        self.state.editing = False

    # ───────────────────────── Mutations ─────────────────────────
    def toggle_edit(self) -> None:
        self.state.editing = not self.state.editing

    def add_party(self, values: Mapping[str, Any]) -> None:
        fields = fields_from_form(values)
        if fields is None:
            logger.warning("New party not submitted: a date is required")
            return
        try:
            party_api.create_party(fields)
        except RetrievalError as e:
            logger.error(f"Error with POST add_party: {e}")
            return
        # The API does not echo the new party back; re-list to pick it up
        self.refresh_parties()

    def update_party(self, party_id: int, values: Mapping[str, Any]) -> None:
        fields = fields_from_form(values)
        if fields is None:
            logger.warning(f"Party {party_id} not updated: a date is required")
            return
        self.state.editing = False
        try:
            party_api.update_party(party_id, fields)
        except RetrievalError as e:
            logger.error(f"Error with PUT update_party: {e}")
            return
        self.refresh_parties()
        if same_id(self.state.selected_id, party_id):
            self.select_party(party_id)

    def delete_party(self, party_id: int) -> None:
        try:
            party_api.delete_party(party_id)
        except RetrievalError as e:
            logger.error(f"Error with DELETE delete_party: {e}")
            return
        # Always drop the selection so the user has to pick again
        self.state.selected_party = None
        self.state.editing = False
        self.refresh_parties()

    # ───────────────────────── Dispatch ─────────────────────────
    def dispatch(self, action: Action, values: Optional[Mapping[str, Any]] = None) -> None:
        values = values or {}
        if action.kind == SELECT:
            self.select_party(action.party_id)
        elif action.kind == TOGGLE_EDIT:
            self.toggle_edit()
        elif action.kind == CREATE:
            self.add_party(values)
        elif action.kind == UPDATE:
            self.update_party(action.party_id, values)
        elif action.kind == DELETE:
            self.delete_party(action.party_id)
        else:
            raise ValueError(f"Unknown action: {action.kind}")
