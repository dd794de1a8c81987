"""
Hex Tile Editor - Utilities Package
Axial coordinate key helpers.
"""
from .axial import coordinate_to_string, string_to_coordinate, coord_key

__all__ = ['coordinate_to_string', 'string_to_coordinate', 'coord_key']
