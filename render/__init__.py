"""
Hex Tile Editor - Render Package
Canvas geometry, tile asset resolution and the matplotlib layout preview.
"""
from .hex_render import HexRenderer
from .assets import TileAssetResolver
from .layout_preview import LayoutPreviewRenderer

__all__ = ['HexRenderer', 'TileAssetResolver', 'LayoutPreviewRenderer']
