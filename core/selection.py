"""
Selection state: the tile type and orientation used for the next placement.
"""
import logging
from dataclasses import dataclass, replace

from core.types import OrientationStep, TileType, check_tile_type, normalize_orientation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    """
    Currently chosen tile type and pending orientation.

    Placed tiles copy the pending orientation when they are created, so later
    rotations never affect them.
    """
    tile_type: TileType
    pending_orientation: OrientationStep = 0

    def __post_init__(self):
        check_tile_type(self.tile_type)
        object.__setattr__(self, "pending_orientation",
                           normalize_orientation(self.pending_orientation))

    def select_type(self, tile_type: TileType) -> "SelectionState":
        """Replace the tile type, keeping the orientation."""
        new_state = replace(self, tile_type=check_tile_type(tile_type))
        logger.debug("Selected tile type %s", tile_type)
        return new_state

    def rotate(self, steps: int) -> "SelectionState":
        """Rotate the pending orientation by ``steps`` * 60 degrees."""
        new_state = replace(self, pending_orientation=normalize_orientation(
            self.pending_orientation + normalize_orientation(steps)))
        logger.debug("Rotated selection by %d -> %d", steps, new_state.pending_orientation)
        return new_state
