"""Display-independent UI tree produced by the view builders.

Nodes are plain dataclasses so a rendered page can be inspected in tests
without a running Streamlit server. `views.display.commit` turns a tree
into Streamlit calls.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union

# Action kinds understood by PartyController.dispatch
SELECT = "select"
TOGGLE_EDIT = "toggle_edit"
CREATE = "create"
UPDATE = "update"
DELETE = "delete"


@dataclass(frozen=True)
class Action:
    kind: str
    party_id: Optional[int] = None


@dataclass
class Heading:
    text: str
    level: int = 2


@dataclass
class Text:
    text: str
    role: str = "paragraph"   # "paragraph" | "time" | "address" | "prompt"


@dataclass
class NameList:
    names: List[str] = field(default_factory=list)


@dataclass
class Button:
    label: str
    key: str
    action: Action
    selected: bool = False


@dataclass
class Field:
    name: str
    label: str
    kind: str = "text"        # "text" | "date"
    value: Union[str, date, None] = None


@dataclass
class Form:
    key: str
    fields: List[Field]
    submit_label: str
    action: Action
    clear_on_submit: bool = False

    def field(self, name: str) -> Field:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)


@dataclass
class Download:
    label: str
    data: bytes
    file_name: str
    mime: str = "application/pdf"


@dataclass
class Section:
    title: Optional[str]
    children: List["Node"] = field(default_factory=list)
    anchor: Optional[str] = None

    def walk(self):
        """Depth-first iteration over every node below this section."""
        for child in self.children:
            yield child
            if isinstance(child, Section):
                yield from child.walk()


Node = Union[Heading, Text, NameList, Button, Form, Download, Section]
