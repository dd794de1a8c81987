# guis/__init__.py
"""
Hex Tile Editor - GUI Package
Tkinter interface components.
"""
from .hex_canvas import TileCanvas
from .status_bar import EditorStatusBar

__all__ = ['TileCanvas', 'EditorStatusBar']
