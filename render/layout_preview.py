# render/layout_preview.py
"""
Layout preview rendered with matplotlib.

Draws a render snapshot (and optionally the grid outline) as a static
top-down figure, e.g. for a quick look in a separate window.
"""

import numpy as np
import matplotlib.patches as patches
from typing import Iterable, Optional, Sequence, Tuple

from core.coords import to_plane
from core.reconcile import RenderEntry
from render.hex_render import tile_color

# Corner angles for hexagons of the axial layout (see render.hex_render)
_CORNER_ANGLES = np.deg2rad(30.0 + 60.0 * np.arange(6))


class LayoutPreviewRenderer:
    """
    Render placed tiles with matplotlib.
    """

    def __init__(self, tile_spacing: float = 1.0, marker_spacing: float = 1.1, padding: float = 1.0):
        """
        Args:
            tile_spacing: Cell size the tile positions were computed with
            marker_spacing: Cell size for the grid outline
            padding: Padding around the layout in units of tile size
        """
        self.tile_spacing = float(tile_spacing)
        self.marker_spacing = float(marker_spacing)
        self.pad = float(padding)

    def hex_corners(self, cx: float, cy: float, radius: float) -> np.ndarray:
        """(6, 2) array of hexagon corners around a centre."""
        return np.column_stack([cx + radius * np.cos(_CORNER_ANGLES),
                                cy + radius * np.sin(_CORNER_ANGLES)])

    def _draw_grid(self, ax, cells: Iterable[Tuple[int, int]]):
        for cell in cells:
            x, z = to_plane(cell, self.marker_spacing)
            ax.add_patch(patches.Polygon(
                self.hex_corners(x, z, self.tile_spacing * 0.95), closed=True,
                facecolor="none", edgecolor="#bbbbbb", linewidth=0.8, zorder=1
            ))

    def _draw_tile(self, ax, entry: RenderEntry):
        x, _, z = entry.position
        ax.add_patch(patches.Polygon(
            self.hex_corners(x, z, self.tile_spacing * 0.9), closed=True,
            facecolor=tile_color(entry.tile_type), edgecolor="black", linewidth=1, zorder=5
        ))
        # Facing marker
        length = 0.6 * self.tile_spacing
        ax.plot([x, x + length * np.cos(entry.orientation_radians)],
                [z, z + length * np.sin(entry.orientation_radians)],
                color="black", linewidth=2, zorder=6)

    def render_snapshot(self, entries: Sequence[RenderEntry], ax=None,
                        cells: Optional[Sequence[Tuple[int, int]]] = None):
        """
        Render a snapshot of placed tiles.

        Args:
            entries: Render entries to draw
            ax: Optional matplotlib axis (creates new figure if None)
            cells: Optional grid cells to outline underneath the tiles

        Returns:
            Matplotlib axis object
        """
        if ax is None:
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(8, 8))

        if cells:
            self._draw_grid(ax, cells)
        for entry in entries:
            self._draw_tile(ax, entry)

        # Bounds over everything drawn
        points = [to_plane(c, self.marker_spacing) for c in (cells or ())]
        points += [(e.position[0], e.position[2]) for e in entries]
        if points:
            xs, zs = np.array(points).T
            half_w = max(abs(xs.min()), abs(xs.max()))
            half_h = max(abs(zs.min()), abs(zs.max()))
        else:
            half_w = half_h = 0.0
        pad = (self.pad + 1.0) * max(self.tile_spacing, self.marker_spacing)

        ax.set_aspect('equal')
        ax.set_xlim(-half_w - pad, half_w + pad)
        ax.set_ylim(half_h + pad, -half_h - pad)  # z grows downwards, as on the canvas
        ax.axis('off')

        return ax
