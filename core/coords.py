"""
Axial <-> plane conversion for the hex grid.

Pure functions only: the cell size is a caller-supplied parameter, never a
property of the coordinate, so grid markers and placed tiles can be laid out
with different spacings.
"""
import math
from typing import Tuple

from core.types import AxialCoord, OrientationStep, normalize_orientation

SQRT3 = math.sqrt(3.0)


def to_plane(coord: Tuple[int, int], cell_size: float = 1.0) -> Tuple[float, float]:
    """
    Convert an axial coordinate to a planar (x, z) position.

    ``cell_size`` is the hexagon radius (centre to corner); axial neighbours
    end up sqrt(3) * ``cell_size`` apart and the cells tile the plane without
    gaps.

    Args:
        coord: (q, r) axial coordinate
        cell_size: Hexagon radius, centre to corner

    Returns:
        (x, z) position of the cell centre
    """
    q, r = coord
    x = cell_size * (SQRT3 * q + (SQRT3 / 2.0) * r)
    z = cell_size * 1.5 * r
    return x, z


def orientation_radians(step: OrientationStep) -> float:
    """Rotation about the vertical axis for an orientation step."""
    return normalize_orientation(step) * (math.pi / 3.0)


def axial_distance(a: Tuple[int, int], b: Tuple[int, int] = AxialCoord(0, 0)) -> int:
    """Hex distance between two axial coordinates (cube metric)."""
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return max(abs(dq), abs(dr), abs(dq + dr))
