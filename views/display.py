# views/display.py
"""Commit a UI tree to the Streamlit page and wire its actions to the controller."""
from __future__ import annotations
from typing import Any, Dict

import streamlit as st

from b_types.ui_types import Button, Download, Form, Heading, NameList, Node, Section, Text
from handlers.party_handlers import PartyController


def widget_key(form_key: str, field_name: str) -> str:
    return f"{form_key}:{field_name}"


def _on_click(controller: PartyController, button: Button) -> None:
    controller.dispatch(button.action)


def _on_submit(controller: PartyController, form: Form) -> None:
    values: Dict[str, Any] = {
        f.name: st.session_state.get(widget_key(form.key, f.name)) for f in form.fields
    }
    controller.dispatch(form.action, values)


# ───────────────────────── Render helpers ─────────────────────────
def _commit_text(node: Text) -> None:
    if node.role == "prompt":
        st.info(node.text)
    elif node.role == "time":
        st.caption(f"📅 {node.text}")
    elif node.role == "address":
        st.markdown(f"📍 {node.text}")
    elif node.text:
        st.write(node.text)


def _commit_names(node: NameList) -> None:
    st.markdown("**Guests**")
    if node.names:
        st.markdown("\n".join(f"- {name}" for name in node.names))
    else:
        st.caption("No RSVPs yet.")


def _commit_form(node: Form, controller: PartyController) -> None:
    with st.form(node.key, clear_on_submit=node.clear_on_submit):
        for f in node.fields:
            key = widget_key(node.key, f.name)
            if f.kind == "date":
                st.date_input(f.label, value=f.value, key=key)
            else:
                st.text_input(f.label, value=f.value or "", placeholder=f.label, key=key)
        st.form_submit_button(node.submit_label, on_click=_on_submit, args=(controller, node))


def commit(node: Node, controller: PartyController, depth: int = 0) -> None:
    """Draw `node` and everything below it."""
    if isinstance(node, Section):
        if node.title:
            if depth == 0:
                st.title(f"🎉 {node.title}")
            else:
                st.header(node.title, anchor=node.anchor)
        for child in node.children:
            commit(child, controller, depth + 1)
    elif isinstance(node, Heading):
        if node.level <= 2:
            st.header(node.text)
        else:
            st.subheader(node.text)
    elif isinstance(node, Text):
        _commit_text(node)
    elif isinstance(node, NameList):
        _commit_names(node)
    elif isinstance(node, Button):
        st.button(
            node.label,
            key=node.key,
            type="primary" if node.selected else "secondary",
            on_click=_on_click,
            args=(controller, node),
        )
    elif isinstance(node, Form):
        _commit_form(node, controller)
    elif isinstance(node, Download):
        st.download_button(
            label=f"⬇️ {node.label}",
            data=node.data,
            file_name=node.file_name,
            mime=node.mime,
        )
    else:
        raise TypeError(f"Cannot display {type(node).__name__}")
