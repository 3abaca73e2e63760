from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Outcome(Enum):
    """Whether the game loop keeps reading commands after this one.

    CONTINUE: prompt for the next line.

    STOP: the player asked to leave; the loop ends with a success status.
    """

    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True)
class ParsedCommand:
    """A line split into a lower-cased verb and the argument exactly as typed."""

    verb: str
    argument: str = ""


@dataclass(frozen=True)
class CommandResult:
    """Text produced by one command plus the loop outcome."""

    lines: Tuple[str, ...]
    outcome: Outcome = Outcome.CONTINUE

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def should_stop(self) -> bool:
        return self.outcome is Outcome.STOP


def parse_command(line: str) -> ParsedCommand:
    """Split a trimmed line on its first space.

    >>> parse_command("  Pick up Sword ")
    ParsedCommand(verb='pick', argument='up Sword')
    """
    verb, _, argument = line.strip().partition(" ")
    return ParsedCommand(verb=verb.lower(), argument=argument)


# Literal prefix of the item name in "pick up <item>"
PICK_UP_PREFIX = "up "

# Player-facing texts
MSG_MOVED = "You moved {direction}."
MSG_DOOR_CLOSED = "The door is closed. Try opening it first."
MSG_NO_EXIT = "You can't go that way!"
MSG_PICKED_UP = "You picked up the {item}."
MSG_NO_ITEM = "No item named {item} here!"
MSG_INVENTORY_EMPTY = "Your inventory is empty."
MSG_INVENTORY_HEADER = "You are carrying: "
MSG_INVENTORY_ENTRY = "- {item}"
MSG_ATTACK = "You attack {npc}! They run away."
MSG_NO_ATTACK_TARGET = "There is no one to attack here."
MSG_DOOR_OPENED = "You open the door."
MSG_DOOR_ALREADY_OPEN = "The door is already open."
MSG_CANNOT_OPEN = "You can't open that."
MSG_TALK = "You talk to {npc}. They greet you warmly."
MSG_NO_TALK_TARGET = "There is no one to talk to."
MSG_GOODBYE = "Exiting game. Goodbye!"
MSG_UNKNOWN = "Unknown command."

HELP_LINES: Tuple[str, ...] = (
    "Available commands:",
    "look - Describe the current room",
    "move <forward|back|left|right> - Move in a direction",
    "pick up <itemName> - Pick up an item",
    "inventory - Show your items",
    "attack - Attack an NPC",
    "open door - Open a closed door",
    "talk - Talk to an NPC",
    "help - Show this help menu",
    "quit/exit - Leave the game",
)


__all__ = [
    "Outcome",
    "ParsedCommand",
    "CommandResult",
    "parse_command",
    "HELP_LINES",
]
