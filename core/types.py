"""
Shared types for the hex tile editor.
Separated to avoid circular imports between modules.
"""
from dataclasses import dataclass
from typing import NamedTuple

# Tile types come from an external catalog; the core treats them as opaque ids.
TileType = str

# Multiples of 60 degrees about the vertical axis, always kept in [0, 6).
OrientationStep = int

ORIENTATION_STEPS = 6


def normalize_orientation(step: int) -> OrientationStep:
    """
    Reduce any integer step count into [0, 6) (true modulo, also for negatives).

    Raises:
        InvalidArgument: If step is not an integer (bool included)
    """
    if isinstance(step, bool) or not isinstance(step, int):
        raise InvalidArgument(f"Orientation step must be an integer, got {step!r}")
    return step % ORIENTATION_STEPS


def check_tile_type(tile_type) -> TileType:
    """Tile types must be non-empty strings; catalog membership is not checked."""
    if not isinstance(tile_type, str) or not tile_type:
        raise InvalidArgument(f"Tile type must be a non-empty string, got {tile_type!r}")
    return tile_type


class AxialCoord(NamedTuple):
    """Axial hex coordinate. Equality is component-wise."""
    q: int
    r: int

    def __str__(self):
        return f"({self.q},{self.r})"


@dataclass(frozen=True)
class PlacedTile:
    """A tile placed on the grid. Orientation is frozen at placement time."""
    coord: AxialCoord
    tile_type: TileType
    orientation: OrientationStep = 0

    def __post_init__(self):
        # Accept plain (q, r) tuples and any integer step count
        check_tile_type(self.tile_type)
        object.__setattr__(self, "coord", AxialCoord(*self.coord))
        object.__setattr__(self, "orientation", normalize_orientation(self.orientation))


class InvalidArgument(ValueError):
    """Raised when an operation receives a value outside its contract."""


class UnresolvedAsset(LookupError):
    """Raised by the asset resolver when a tile type has no matching asset."""

    def __init__(self, tile_type: TileType, location=None):
        self.tile_type = tile_type
        self.location = location
        loc_str = f" (looked for {location})" if location else ""
        super().__init__(f"No asset for tile type '{tile_type}'{loc_str}")
