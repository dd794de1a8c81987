"""
Bounded hexagonal grid enumeration.

A grid of radius R holds every axial cell within hex distance R of the
origin, i.e. |q| <= R, |r| <= R and |q + r| <= R.
"""
import logging
from typing import Tuple

from core.types import AxialCoord, InvalidArgument

logger = logging.getLogger(__name__)


def _check_radius(radius) -> int:
    # bool is an int subclass but never a meaningful radius
    if isinstance(radius, bool) or not isinstance(radius, int):
        raise InvalidArgument(f"Grid radius must be an integer, got {radius!r}")
    if radius < 0:
        raise InvalidArgument(f"Grid radius must be non-negative: {radius}")
    return radius


def generate(radius: int) -> Tuple[AxialCoord, ...]:
    """
    Enumerate all cells of a hexagonal grid.

    Cells are emitted q-major (q ascending, then r ascending), so the order is
    stable across calls.

    Args:
        radius: Grid radius (must be >= 0)

    Returns:
        Tuple of unique AxialCoord values, 3*R^2 + 3*R + 1 of them

    Raises:
        InvalidArgument: If radius is negative or not an integer
    """
    _check_radius(radius)

    cells = []
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            cells.append(AxialCoord(q, r))

    logger.debug("Generated %d cells for radius %d", len(cells), radius)
    return tuple(cells)


def grid_size(radius: int) -> int:
    """Closed-form cell count for a grid of the given radius."""
    _check_radius(radius)
    return 3 * radius * radius + 3 * radius + 1


def within_radius(coord: Tuple[int, int], radius: int) -> bool:
    """True if the coordinate belongs to the grid of the given radius."""
    q, r = coord
    return abs(q) <= radius and abs(r) <= radius and abs(q + r) <= radius
