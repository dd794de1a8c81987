"""
Placement state model for the hex tile editor.

PlacementState is an immutable mapping from AxialCoord to PlacedTile. Every
change goes through ``toggle`` or ``reset`` and yields a new state value, so
snapshots handed to renderers never change underneath them.

PlacementStore wraps the current state for the single-writer editor session.
It is radius-agnostic: coordinates are opaque keys here, bounding clicks to
the generated grid is the caller's job.
"""
import logging
from collections.abc import Mapping
from typing import Dict, Iterator, Optional, Tuple

from core.types import AxialCoord, OrientationStep, PlacedTile, TileType

logger = logging.getLogger(__name__)


class PlacementState(Mapping):
    """
    Read-only coordinate -> tile mapping (one tile per cell).

    Iteration follows insertion order. Two states are equal when they hold
    the same tiles, regardless of order.
    """

    __slots__ = ("_tiles",)

    def __init__(self, tiles: Optional[Dict[AxialCoord, PlacedTile]] = None):
        self._tiles: Dict[AxialCoord, PlacedTile] = dict(tiles or {})

    @classmethod
    def from_tiles(cls, tiles) -> "PlacementState":
        """Build a state from PlacedTile values (later duplicates are rejected)."""
        mapping: Dict[AxialCoord, PlacedTile] = {}
        for tile in tiles:
            if tile.coord in mapping:
                raise ValueError(f"Duplicate tile at {tile.coord}")
            mapping[tile.coord] = tile
        return cls(mapping)

    def __getitem__(self, coord) -> PlacedTile:
        try:
            key = AxialCoord(*coord)
        except TypeError:
            raise KeyError(coord) from None
        return self._tiles[key]

    def __contains__(self, coord) -> bool:
        try:
            return AxialCoord(*coord) in self._tiles
        except TypeError:
            return False

    def __iter__(self) -> Iterator[AxialCoord]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __repr__(self):
        return f"PlacementState({list(self._tiles.values())!r})"

    def tiles(self) -> Tuple[PlacedTile, ...]:
        """Placed tiles in insertion order."""
        return tuple(self._tiles.values())


EMPTY_STATE = PlacementState()


# =============================================================================
# PURE STATE TRANSITIONS
# =============================================================================

def toggle(state: PlacementState, coord: Tuple[int, int], tile_type: TileType,
           orientation: OrientationStep) -> Tuple[PlacementState, bool]:
    """
    Place a tile on an empty cell, or clear an occupied one.

    Toggling a filled cell only removes it; the supplied type and orientation
    are ignored. There is no overwrite.

    Args:
        state: Current placement state
        coord: Target cell
        tile_type: Type for a new tile
        orientation: Orientation step for a new tile

    Returns:
        (new_state, was_removed)
    """
    key = AxialCoord(*coord)
    tiles = dict(state._tiles)

    if key in tiles:
        del tiles[key]
        return PlacementState(tiles), True

    tiles[key] = PlacedTile(key, tile_type, orientation)
    return PlacementState(tiles), False


def reset() -> PlacementState:
    """Return the empty placement state."""
    return EMPTY_STATE


# =============================================================================
# SINGLE-WRITER STORE
# =============================================================================

class PlacementStore:
    """
    Holds the current PlacementState for an editing session.

    Attributes:
        state: Current immutable placement state
    """

    def __init__(self, state: Optional[PlacementState] = None):
        self.state: PlacementState = state if state is not None else EMPTY_STATE

    def toggle(self, coord: Tuple[int, int], tile_type: TileType,
               orientation: OrientationStep) -> Tuple[PlacementState, bool]:
        """Toggle a cell and make the result the current state."""
        self.state, was_removed = toggle(self.state, coord, tile_type, orientation)
        if was_removed:
            logger.debug("Removed tile at %s", AxialCoord(*coord))
        else:
            logger.debug("Placed %s at %s (orientation %d)",
                         tile_type, AxialCoord(*coord), orientation % 6)
        return self.state, was_removed

    def reset(self) -> PlacementState:
        """Discard all placed tiles."""
        cleared = len(self.state)
        self.state = reset()
        logger.debug("Reset placement store (%d tiles cleared)", cleared)
        return self.state

    def snapshot(self) -> Tuple[PlacedTile, ...]:
        """Read-only view of placed tiles, in insertion order."""
        return self.state.tiles()

    def get(self, coord: Tuple[int, int]) -> Optional[PlacedTile]:
        return self.state.get(coord)

    def __contains__(self, coord) -> bool:
        return coord in self.state

    def __len__(self) -> int:
        return len(self.state)
