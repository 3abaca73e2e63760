class MudError(Exception):
    """Base error for mudgame construction and configuration faults."""


class WorldDefinitionError(MudError):
    """Raised when a world definition is malformed or inconsistent."""


class UnknownRoomError(WorldDefinitionError, KeyError):
    """Raised when a room id is not registered in the world."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class SettingsError(MudError):
    """Raised when a settings file cannot be parsed."""
