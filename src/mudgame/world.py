from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional

import yaml

from .errors import UnknownRoomError, WorldDefinitionError
from .models import Item, Player, Room

logger = logging.getLogger(__name__)

DEFAULT_WORLD_RESOURCE = "default_world.yaml"


class World:
    """Arena of rooms keyed by room id.

    Rooms reference each other only by id, so the graph may contain cycles
    (including a room leading back to itself) without rooms owning each other.
    The topology is fixed once built; play only mutates room contents.
    """

    def __init__(self, start: Optional[str] = None) -> None:
        self._rooms: Dict[str, Room] = {}
        self._start = start

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<World rooms={len(self._rooms)} start={self._start}>"

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms.values())

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms

    # --- Construction ---

    def add_room(self, room: Room) -> Room:
        if room.room_id in self._rooms:
            raise WorldDefinitionError(f"Duplicate room id: {room.room_id}")
        self._rooms[room.room_id] = room
        if self._start is None:
            self._start = room.room_id
        return room

    def connect(self, source_id: str, direction: str, target_id: str, door_closed: bool = False) -> None:
        """Add an exit from ``source_id`` to ``target_id``; both rooms must be registered."""
        source = self.room(source_id)
        self.room(target_id)
        source.add_exit(direction, target_id, door_closed)

    @property
    def start(self) -> str:
        if self._start is None:
            raise WorldDefinitionError("World has no rooms")
        return self._start

    @start.setter
    def start(self, room_id: str) -> None:
        self.room(room_id)
        self._start = room_id

    # --- Queries ---

    def room(self, room_id: str) -> Room:
        try:
            return self._rooms[room_id]
        except KeyError:
            raise UnknownRoomError(f"Unknown room id: {room_id}") from None

    def room_in_direction(self, room: Room, direction: str) -> Optional[Room]:
        target_id = room.exit_to(direction)
        if target_id is None:
            return None
        return self.room(target_id)

    def current_room(self, player: Player) -> Room:
        return self.room(player.location)

    def new_player(self) -> Player:
        return Player(location=self.start)

    # --- Loading ---

    @classmethod
    def from_dict(cls, data: Any) -> "World":
        """Build a world from a parsed world document.

        Rooms are registered first and exits applied afterwards, in listed
        order, so exits may point at rooms defined later in the document.
        """
        if not isinstance(data, Mapping):
            raise WorldDefinitionError("World definition must be a mapping")
        rooms = data.get("rooms")
        if not isinstance(rooms, Mapping) or not rooms:
            raise WorldDefinitionError("World definition needs a non-empty 'rooms' mapping")

        world = cls()
        for room_id, raw in rooms.items():
            world.add_room(_room_from_dict(str(room_id), raw))

        for room_id, raw in rooms.items():
            for index, exit_def in enumerate(_list_field(str(room_id), raw, "exits")):
                try:
                    direction = str(exit_def["direction"])
                    target = str(exit_def["to"])
                except (KeyError, TypeError) as exc:
                    raise WorldDefinitionError(
                        f"Room {room_id}: exit #{index} needs 'direction' and 'to'"
                    ) from exc
                door_closed = exit_def.get("door_closed", False)
                if not isinstance(door_closed, bool):
                    raise WorldDefinitionError(
                        f"Room {room_id}: exit #{index} 'door_closed' must be true or false"
                    )
                world.connect(str(room_id), direction, target, door_closed)

        if "start" in data:
            world.start = str(data["start"])
        logger.debug("World built: %d rooms, start=%s", len(world), world.start)
        return world


def _list_field(room_id: str, raw: Mapping, key: str) -> list:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise WorldDefinitionError(f"Room {room_id}: '{key}' must be a list")
    return value


def _room_from_dict(room_id: str, raw: Any) -> Room:
    if not isinstance(raw, Mapping):
        raise WorldDefinitionError(f"Room {room_id}: definition must be a mapping")
    try:
        room = Room(room_id=room_id, name=str(raw["name"]), description=str(raw["description"]))
    except KeyError as exc:
        raise WorldDefinitionError(f"Room {room_id}: missing required key {exc}") from exc
    for name in _list_field(room_id, raw, "items"):
        room.add_item(Item(str(name)))
    if raw.get("npc") is not None:
        room.set_npc(str(raw["npc"]))
    return room


def _parse_yaml(text: str, source: str) -> World:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorldDefinitionError(f"Invalid YAML in {source}: {exc}") from exc
    return World.from_dict(data)


def load_world(path: Path) -> World:
    """Load a world definition from a YAML file."""
    if not path.exists():
        raise WorldDefinitionError(f"World file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise WorldDefinitionError(f"Cannot read world file {path}: {exc}") from exc
    world = _parse_yaml(text, str(path))
    logger.info("Loaded world from %s (%d rooms)", path, len(world))
    return world


def load_default_world() -> World:
    """Load the world bundled with the package."""
    with resources.files("mudgame.data").joinpath(DEFAULT_WORLD_RESOURCE).open("r", encoding="utf-8") as f:
        return _parse_yaml(f.read(), DEFAULT_WORLD_RESOURCE)


__all__ = ["World", "load_world", "load_default_world"]
