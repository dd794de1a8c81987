"""
Hex Tile Editor - Core Package
Hex coordinates, grid generation, placement state and the editing session.
"""
from .types import AxialCoord, PlacedTile, InvalidArgument, UnresolvedAsset
from .placement import PlacementState, PlacementStore
from .selection import SelectionState
from .config import EditorConfig
from .commands import Command, PlaceAtCommand, SelectTypeCommand, RotateCommand, ResetCommand, SetRadiusCommand
from .session import EditorSession

__all__ = ['AxialCoord', 'PlacedTile', 'InvalidArgument', 'UnresolvedAsset',
           'PlacementState', 'PlacementStore', 'SelectionState', 'EditorConfig',
           'Command', 'PlaceAtCommand', 'SelectTypeCommand', 'RotateCommand',
           'ResetCommand', 'SetRadiusCommand', 'EditorSession']
