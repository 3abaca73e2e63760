from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Item:
    """A named object that lives either in a room or in the player's inventory."""

    name: str

    def matches(self, name: str) -> bool:
        """Return True if ``name`` refers to this item, ignoring case."""
        return self.name.lower() == name.lower()


@dataclass(frozen=True)
class NPC:
    """A non-player character occupying a room. Purely descriptive."""

    name: str


@dataclass
class Room:
    """A node of the world graph.

    Exits reference other rooms by id; the ``World`` resolves them. The door
    state is a single flag for the whole room: whichever exit was added last
    decides it, and opening the door opens every exit out of the room.
    """

    room_id: str
    name: str
    description: str
    items: List[Item] = field(default_factory=list)
    exits: Dict[str, str] = field(default_factory=dict)
    door_closed: bool = False
    npc: Optional[NPC] = None

    # --- Exits ---

    def add_exit(self, direction: str, target_id: str, door_closed: bool = False) -> None:
        self.exits[direction] = target_id
        self.door_closed = door_closed
        logger.debug(
            "Room %s: exit %r -> %s (door_closed=%s)", self.room_id, direction, target_id, door_closed
        )

    def exit_to(self, direction: str) -> Optional[str]:
        """Return the id of the room in ``direction`` or None if there is no such exit."""
        return self.exits.get(direction)

    def open_door(self) -> None:
        self.door_closed = False

    # --- Items ---

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def remove_item(self, item: Item) -> None:
        try:
            self.items.remove(item)
        except ValueError:
            logger.debug("Room %s: %s not present; nothing removed", self.room_id, item)

    def find_item(self, name: str) -> Optional[Item]:
        for item in self.items:
            if item.matches(name):
                return item
        return None

    # --- NPC ---

    def set_npc(self, name: Optional[str]) -> None:
        self.npc = NPC(name) if name is not None else None

    def has_npc(self) -> bool:
        return self.npc is not None

    @property
    def npc_name(self) -> Optional[str]:
        return self.npc.name if self.npc is not None else None

    # --- Rendering ---

    def describe(self) -> str:
        listing = ", ".join(item.name for item in self.items) if self.items else "None"
        text = f"{self.name} - {self.description}\nItems here: {listing}"
        if self.npc is not None:
            text += f"\nYou see {self.npc.name} here."
        return text


class Player:
    """The single player: a location (room id) and an inventory.

    ``relocate`` performs no validation; legality of a move is decided by the
    dispatcher before calling it.
    """

    def __init__(self, location: str, inventory: Optional[List[Item]] = None) -> None:
        self.location = location
        self._inventory: List[Item] = list(inventory) if inventory else []

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Player location={self.location} items={len(self._inventory)}>"

    def relocate(self, room_id: str) -> None:
        logger.debug("Player relocated: %s -> %s", self.location, room_id)
        self.location = room_id

    def add_to_inventory(self, item: Item) -> None:
        self._inventory.append(item)

    @property
    def inventory(self) -> Tuple[Item, ...]:
        return tuple(self._inventory)


__all__ = ["Item", "NPC", "Room", "Player"]
