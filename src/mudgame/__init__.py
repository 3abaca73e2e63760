"""
mudgame: a small single-player text adventure.

The package is split into a headless core and a thin line shell:
- models: items, NPCs, rooms and the player
- world: the room arena plus YAML world loading
- dispatcher: the command interpreter mapping input lines to state changes
- shell: the prompt/read/print loop driving the dispatcher

Front ends should build a World, create a Player with ``World.new_player``
and feed lines to ``CommandDispatcher.handle``.
"""
from .commands import CommandResult, Outcome, ParsedCommand, parse_command
from .dispatcher import CommandDispatcher
from .errors import MudError, SettingsError, UnknownRoomError, WorldDefinitionError
from .models import NPC, Item, Player, Room
from .world import World, load_default_world, load_world

__version__ = "0.1.0"

__all__ = [
    "Item",
    "NPC",
    "Room",
    "Player",
    "World",
    "load_world",
    "load_default_world",
    "CommandDispatcher",
    "CommandResult",
    "Outcome",
    "ParsedCommand",
    "parse_command",
    "MudError",
    "WorldDefinitionError",
    "UnknownRoomError",
    "SettingsError",
]
