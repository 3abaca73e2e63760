from __future__ import annotations

import logging
from typing import Callable, Dict

from . import commands as msg
from .commands import CommandResult, Outcome, ParsedCommand, parse_command
from .models import Player, Room
from .world import World

logger = logging.getLogger(__name__)

Handler = Callable[[ParsedCommand], CommandResult]


def _say(*lines: str) -> CommandResult:
    return CommandResult(lines=tuple(lines))


class CommandDispatcher:
    """Turns one line of player input into a world state change and output text.

    The dispatcher holds no game state of its own; rooms and the player are
    mutated in place and every call returns a ``CommandResult`` carrying the
    lines to show and whether the loop should continue. Invalid intents
    (bad direction, missing item, closed door, nobody to talk to...) are
    reported as text and never raise.
    """

    def __init__(self, world: World, player: Player) -> None:
        self.world = world
        self.player = player
        self._handlers: Dict[str, Handler] = {
            "look": self._look,
            "move": self._move,
            "pick": self._pick,
            "inventory": self._inventory,
            "attack": self._attack,
            "open": self._open,
            "talk": self._talk,
            "help": self._help,
            "quit": self._quit,
            "exit": self._quit,
        }

    @property
    def current_room(self) -> Room:
        return self.world.current_room(self.player)

    def handle(self, line: str) -> CommandResult:
        command = parse_command(line)
        logger.debug("Command verb=%r argument=%r in %s", command.verb, command.argument, self.player.location)
        handler = self._handlers.get(command.verb)
        if handler is None:
            return _say(msg.MSG_UNKNOWN)
        return handler(command)

    # --- Handlers ---

    def _look(self, command: ParsedCommand) -> CommandResult:
        return _say(self.current_room.describe())

    def _move(self, command: ParsedCommand) -> CommandResult:
        direction = command.argument
        room = self.current_room
        target = self.world.room_in_direction(room, direction)
        if target is None:
            return _say(msg.MSG_NO_EXIT)
        if room.door_closed:
            logger.debug("Move %r blocked by closed door in %s", direction, room.room_id)
            return _say(msg.MSG_DOOR_CLOSED)
        self.player.relocate(target.room_id)
        logger.info("Player moved %s: %s -> %s", direction, room.room_id, target.room_id)
        return _say(msg.MSG_MOVED.format(direction=direction), target.describe())

    def _pick(self, command: ParsedCommand) -> CommandResult:
        if not command.argument.startswith(msg.PICK_UP_PREFIX):
            return _say(msg.MSG_UNKNOWN)
        name = command.argument[len(msg.PICK_UP_PREFIX):]
        room = self.current_room
        item = room.find_item(name)
        if item is None:
            return _say(msg.MSG_NO_ITEM.format(item=name))
        room.remove_item(item)
        self.player.add_to_inventory(item)
        logger.info("Player picked up %s in %s", item.name, room.room_id)
        return _say(msg.MSG_PICKED_UP.format(item=name))

    def _inventory(self, command: ParsedCommand) -> CommandResult:
        items = self.player.inventory
        if not items:
            return _say(msg.MSG_INVENTORY_EMPTY)
        return _say(msg.MSG_INVENTORY_HEADER, *(msg.MSG_INVENTORY_ENTRY.format(item=i.name) for i in items))

    def _attack(self, command: ParsedCommand) -> CommandResult:
        room = self.current_room
        if not room.has_npc():
            return _say(msg.MSG_NO_ATTACK_TARGET)
        name = room.npc_name
        room.set_npc(None)
        logger.info("NPC %s fled from %s", name, room.room_id)
        return _say(msg.MSG_ATTACK.format(npc=name))

    def _open(self, command: ParsedCommand) -> CommandResult:
        if command.argument != "door":
            return _say(msg.MSG_CANNOT_OPEN)
        room = self.current_room
        if not room.door_closed:
            return _say(msg.MSG_DOOR_ALREADY_OPEN)
        room.open_door()
        logger.info("Door opened in %s", room.room_id)
        return _say(msg.MSG_DOOR_OPENED)

    def _talk(self, command: ParsedCommand) -> CommandResult:
        room = self.current_room
        if not room.has_npc():
            return _say(msg.MSG_NO_TALK_TARGET)
        return _say(msg.MSG_TALK.format(npc=room.npc_name))

    def _help(self, command: ParsedCommand) -> CommandResult:
        return _say(*msg.HELP_LINES)

    def _quit(self, command: ParsedCommand) -> CommandResult:
        logger.info("Player quit")
        return CommandResult(lines=(msg.MSG_GOODBYE,), outcome=Outcome.STOP)


__all__ = ["CommandDispatcher"]
