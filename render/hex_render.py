"""
Hexagonal rendering geometry for the Tkinter canvas.

Maps plane positions (from core.coords) to canvas pixels, picks the grid
cell under the mouse, and builds the polygons drawn for markers and tiles.
The canvas is passed in, so the math stays usable without a display.
"""
import math
from typing import List, Tuple

from core.coords import SQRT3, to_plane
from core.types import AxialCoord

TILE_COLORS = {
    "forest": "#2e7d32",
    "rock": "#8d8d8d",
    "sand": "#e8d28a",
    "water": "#3f8fd8",
}
FALLBACK_COLOR = "#ff00ff"  # magenta: tile type without a resolvable asset


def tile_color(tile_type: str) -> str:
    """Palette colour for a tile type (fallback colour for unknown types)."""
    return TILE_COLORS.get(tile_type, FALLBACK_COLOR)


def axial_round(q: float, r: float) -> AxialCoord:
    """Round fractional axial coords to the nearest cell using cube rounding."""
    x, z = q, r
    y = -x - z

    rx, ry, rz = round(x), round(y), round(z)
    dx, dy, dz = abs(rx - x), abs(ry - y), abs(rz - z)

    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return AxialCoord(int(rx), int(rz))


class HexRenderer:
    """Handles plane/pixel conversion and hexagon drawing for the editor canvas."""

    def __init__(self, pixel_scale: float = 30.0, origin: Tuple[float, float] = (400.0, 300.0)):
        """
        Initialize hex renderer.

        Args:
            pixel_scale: Canvas pixels per plane unit
            origin: Canvas pixel of the plane origin (centre of cell (0, 0))
        """
        self.pixel_scale = pixel_scale
        self.origin_x, self.origin_y = origin

    def set_origin(self, x: float, y: float) -> None:
        self.origin_x, self.origin_y = x, y

    def plane_to_pixel(self, x: float, z: float) -> Tuple[float, float]:
        """Top-down view: plane x goes right, plane z goes down the canvas."""
        return self.origin_x + x * self.pixel_scale, self.origin_y + z * self.pixel_scale

    def axial_to_pixel(self, coord: Tuple[int, int], cell_size: float) -> Tuple[float, float]:
        return self.plane_to_pixel(*to_plane(coord, cell_size))

    def pixel_to_axial(self, pixel_x: float, pixel_y: float, cell_size: float) -> AxialCoord:
        """
        Convert a canvas pixel to the axial cell underneath it.

        Args:
            pixel_x, pixel_y: Canvas pixel coordinates
            cell_size: Cell size the cells were laid out with

        Returns:
            Nearest AxialCoord (not bounded to any grid)
        """
        x = (pixel_x - self.origin_x) / self.pixel_scale
        z = (pixel_y - self.origin_y) / self.pixel_scale
        q = (SQRT3 / 3.0 * x - z / 3.0) / cell_size
        r = (2.0 / 3.0 * z) / cell_size
        return axial_round(q, r)

    def get_hex_points(self, center_x: float, center_y: float, radius: float) -> List[float]:
        """
        Get the 6 vertices of a hexagon for Tkinter polygon drawing.

        Corners sit at 30° + 60°·i, so neighbouring cells of the axial layout
        share edges.

        Returns:
            List of coordinates [x1, y1, x2, y2, ...] for polygon
        """
        points = []
        for i in range(6):
            angle = math.radians(30 + 60 * i)
            points.extend([center_x + radius * math.cos(angle),
                           center_y + radius * math.sin(angle)])
        return points

    def orientation_tick(self, center_x: float, center_y: float, radius: float,
                         angle: float) -> Tuple[float, float, float, float]:
        """Line from the centre towards the tile's facing direction."""
        end_x = center_x + radius * math.cos(angle)
        end_y = center_y + radius * math.sin(angle)
        return center_x, center_y, end_x, end_y

    def draw_hexagon(self, canvas, center_x: float, center_y: float, radius: float,
                     fill_color: str = "white", outline_color: str = "black",
                     tags=(), **options) -> int:
        """
        Draw a single hexagon on the canvas.

        Returns:
            Canvas item ID for the drawn hexagon
        """
        points = self.get_hex_points(center_x, center_y, radius)
        return canvas.create_polygon(
            points,
            fill=fill_color,
            outline=outline_color,
            width=options.pop("width", 1),
            tags=tags,
            **options
        )
