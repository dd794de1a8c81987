"""
Input events for the hex tile editor, modelled as commands.

Every user interaction (click, type button, rotate key, reset) becomes a
Command executed against the EditorSession. Commands are applied strictly in
the order they are executed; there is no history.
"""
from abc import ABC, abstractmethod
from typing import Tuple

from core.types import AxialCoord, TileType


class Command(ABC):
    """Abstract base class for editor commands."""

    @abstractmethod
    def execute(self, session) -> bool:
        """Execute the command. Returns True if it was applied."""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get human-readable description of the command."""
        pass

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.get_description()}>"


class PlaceAtCommand(Command):
    """Toggle a tile at a grid cell using the current selection."""

    def __init__(self, coord: Tuple[int, int]):
        self.coord = AxialCoord(*coord)
        self.was_removed = False

    def execute(self, session) -> bool:
        applied = session.place_at(self.coord)
        if applied:
            self.was_removed = self.coord not in session.store
        return applied

    def get_description(self) -> str:
        return f"Toggle tile at {self.coord}"


class SelectTypeCommand(Command):
    """Choose the tile type for the next placement."""

    def __init__(self, tile_type: TileType):
        self.tile_type = tile_type

    def execute(self, session) -> bool:
        return session.select_type(self.tile_type)

    def get_description(self) -> str:
        return f"Select type '{self.tile_type}'"


class RotateCommand(Command):
    """Rotate the pending orientation; +1 is 60 degrees one way, -1 the other."""

    def __init__(self, direction: int):
        self.direction = direction

    def execute(self, session) -> bool:
        return session.rotate(self.direction)

    def get_description(self) -> str:
        return f"Rotate {self.direction * 60:+d}°"


class ResetCommand(Command):
    """Remove every placed tile."""

    def execute(self, session) -> bool:
        return session.reset()

    def get_description(self) -> str:
        return "Reset layout"


class SetRadiusCommand(Command):
    """Regenerate the clickable grid with a new radius."""

    def __init__(self, radius: int):
        self.radius = radius

    def execute(self, session) -> bool:
        return session.set_radius(self.radius)

    def get_description(self) -> str:
        return f"Set grid radius to {self.radius}"
