"""
Render snapshots and snapshot diffing.

The store only knows coordinates and tile records. This module turns a
placement snapshot into draw-ready entries and compares two snapshots so a
presentation layer can add and remove items incrementally (or animate
them) without the store knowing about it.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Sequence, Tuple

from core.coords import orientation_radians, to_plane
from core.types import AxialCoord, PlacedTile, TileType
from utils.axial import coord_key


@dataclass(frozen=True)
class RenderEntry:
    """One placed tile as seen by a renderer."""
    key: str
    coord: AxialCoord
    position: Tuple[float, float, float]
    tile_type: TileType
    orientation_radians: float


@dataclass(frozen=True)
class SnapshotDiff:
    """
    Difference between two render snapshots, by key.

    A key whose entry changed content between the snapshots shows up in both
    ``removed`` and ``added``.
    """
    added: Tuple[RenderEntry, ...]
    removed: Tuple[str, ...]
    kept: Tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


def build_render_entries(tiles: Iterable[PlacedTile], tile_spacing: float = 1.0,
                         ground_offset: float = 0.0) -> Tuple[RenderEntry, ...]:
    """
    Convert placed tiles to render entries.

    Args:
        tiles: Placed tiles, in the order they should be drawn
        tile_spacing: Cell size used for tile positions
        ground_offset: Fixed y position for every tile

    Returns:
        Tuple of RenderEntry in input order
    """
    entries = []
    for tile in tiles:
        x, z = to_plane(tile.coord, tile_spacing)
        entries.append(RenderEntry(
            key=coord_key(tile.coord),
            coord=tile.coord,
            position=(x, ground_offset, z),
            tile_type=tile.tile_type,
            orientation_radians=orientation_radians(tile.orientation),
        ))
    return tuple(entries)


def diff_snapshots(before: Sequence[RenderEntry], after: Sequence[RenderEntry]) -> SnapshotDiff:
    """Compare two render snapshots. Output order follows the input snapshots."""
    old: Dict[str, RenderEntry] = {e.key: e for e in before}
    new: Dict[str, RenderEntry] = {e.key: e for e in after}

    added = tuple(e for k, e in new.items() if old.get(k) != e)
    removed = tuple(k for k, e in old.items() if new.get(k) != e)
    kept = tuple(k for k, e in new.items() if old.get(k) == e)
    return SnapshotDiff(added=added, removed=removed, kept=kept)
