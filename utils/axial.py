"""
Axial coordinate key helpers.
"""
from typing import Tuple


def coordinate_to_string(q: int, r: int) -> str:
    """Convert a coordinate to the stable string key used for canvas tags and render keys."""
    return f"{q},{r}"


def string_to_coordinate(coord_str: str) -> Tuple[int, int]:
    """Convert a string key back to a (q, r) tuple."""
    q, r = coord_str.split(',')
    return int(q), int(r)


def coord_key(coord: Tuple[int, int]) -> str:
    return coordinate_to_string(coord[0], coord[1])
