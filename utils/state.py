from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from b_types.party_types import Guest, Party, Rsvp


@dataclass
class AppState:
    """Everything the page shows. Views read it, PartyController writes it."""

    parties: List[Party] = field(default_factory=list)
    selected_party: Optional[Party] = None
    rsvps: List[Rsvp] = field(default_factory=list)
    guests: List[Guest] = field(default_factory=list)

    # Display-only: edit form of the selected party is open
    editing: bool = False

    # Set once the startup fetches have run for this session
    loaded: bool = False

    @property
    def selected_id(self) -> Optional[int]:
        return self.selected_party.get("id") if self.selected_party else None
