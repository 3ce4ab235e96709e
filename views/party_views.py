# views/party_views.py
"""Pure view builders: AppState in, UI tree out. Nothing here touches Streamlit."""
from __future__ import annotations
from typing import List, Optional

from b_types.party_types import Party, guests_for_party, parse_iso_day
from b_types.ui_types import (
    CREATE, DELETE, SELECT, TOGGLE_EDIT, UPDATE,
    Action, Button, Download, Field, Form, Heading, NameList, Node, Section, Text,
)
from utils.export import build_party_pdf, party_file_name
from utils.helpers import coalesce_str, display_day, same_id
from utils.state import AppState

APP_TITLE = "Party Planner"
SELECT_PROMPT = "Please select a party to learn more."
NEW_PARTY_FORM = "new-party-form"
EDIT_PARTY_FORM = "edit-party-form"


def _party_fields(party: Optional[Party] = None) -> List[Field]:
    party = party or {}
    return [
        Field("name", "Name", "text", party.get("name", "")),
        Field("date", "Date", "date", parse_iso_day(party.get("date"))),
        Field("description", "Description", "text", party.get("description", "")),
        Field("location", "Location", "text", party.get("location", "")),
    ]


# ───────────────────────── Components ─────────────────────────
def party_list_item(party: Party, state: AppState) -> Button:
    """Party name that shows more details about the party when clicked."""
    return Button(
        label=coalesce_str(party.get("name"), f"Party #{party.get('id')}"),
        key=f"party-{party.get('id')}",
        action=Action(SELECT, party.get("id")),
        selected=same_id(party.get("id"), state.selected_id),
    )


def party_list(state: AppState) -> Section:
    return Section(None, [party_list_item(p, state) for p in state.parties], anchor="parties")


def guest_list(state: AppState) -> NameList:
    guests = guests_for_party(state.selected_party, state.rsvps, state.guests)
    return NameList([g.get("name", "") for g in guests])


def selected_party(state: AppState) -> Node:
    party = state.selected_party
    if not party:
        return Text(SELECT_PROMPT, role="prompt")

    party_id = party.get("id")
    children: List[Node] = [
        Heading(f"{coalesce_str(party.get('name'))} #{party_id}", level=3),
        Text(display_day(party.get("date")), role="time"),
        Text(coalesce_str(party.get("location")), role="address"),
        Text(coalesce_str(party.get("description"))),
        guest_list(state),
    ]
    if state.editing:
        children.append(Form(
            key=f"{EDIT_PARTY_FORM}-{party_id}",
            fields=_party_fields(party),
            submit_label="Save",
            action=Action(UPDATE, party_id),
        ))
    else:
        children.append(Button("Edit", key="edit-party", action=Action(TOGGLE_EDIT, party_id)))
    children.append(Button("Delete", key="delete-party", action=Action(DELETE, party_id)))

    attending = guests_for_party(party, state.rsvps, state.guests)
    children.append(Download(
        label="Download party sheet (PDF)",
        data=build_party_pdf(party, attending),
        file_name=party_file_name(party),
    ))
    return Section(None, children)


def add_new_party_form() -> Form:
    return Form(
        key=NEW_PARTY_FORM,
        fields=_party_fields(),
        submit_label="Add New Party",
        action=Action(CREATE),
        clear_on_submit=True,
    )


# ───────────────────────── Page ─────────────────────────
def render(state: AppState) -> Section:
    """Build the whole page from scratch."""
    return Section(APP_TITLE, [
        Section("Upcoming Parties", [party_list(state)]),
        Section("Party Details", [selected_party(state)], anchor="selected"),
        Section("Add A New Party", [add_new_party_form()]),
    ])
