"""
EditorSession - single-writer owner of the editing state.

Holds the generated grid cells, the PlacementStore and the SelectionState for
one editing session, applies commands in arrival order and notifies
listeners (the canvas, the status bar) after each change.
"""
import logging
from typing import Callable, List, Optional, Tuple

from core.commands import Command
from core.config import EditorConfig
from core.coords import to_plane
from core.grid import generate
from core.placement import PlacementState, PlacementStore
from core.reconcile import RenderEntry, build_render_entries
from core.selection import SelectionState
from core.types import AxialCoord, TileType

logger = logging.getLogger(__name__)

PlacementListener = Callable[[Tuple[RenderEntry, ...]], None]
SelectionListener = Callable[[SelectionState], None]
GridListener = Callable[[Tuple[AxialCoord, ...]], None]


class EditorSession:
    """
    State of one editing session.

    Attributes:
        config: Validated editor configuration
        radius: Current grid radius
        cells: Clickable grid cells for the current radius
        store: Placement store (placed tiles)
        selection: Current tile type / pending orientation
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config: EditorConfig = (config or EditorConfig()).validate()

        self.radius: int = self.config.radius
        self.cells: Tuple[AxialCoord, ...] = generate(self.radius)
        self._cell_set = frozenset(self.cells)

        self.store: PlacementStore = PlacementStore()
        self.selection: SelectionState = SelectionState(self.config.default_type)

        self._placement_listeners: List[PlacementListener] = []
        self._selection_listeners: List[SelectionListener] = []
        self._grid_listeners: List[GridListener] = []

        logger.info("Editor session started (radius %d, %d cells)", self.radius, len(self.cells))

    # =============================================================================
    # LISTENERS
    # =============================================================================

    def add_placement_listener(self, callback: PlacementListener) -> None:
        """Called with the new render snapshot after every placement change."""
        self._placement_listeners.append(callback)

    def add_selection_listener(self, callback: SelectionListener) -> None:
        """Called with the new SelectionState after a type or rotation change."""
        self._selection_listeners.append(callback)

    def add_grid_listener(self, callback: GridListener) -> None:
        """Called with the new cell list after the grid is regenerated."""
        self._grid_listeners.append(callback)

    def _notify_placement(self) -> None:
        entries = self.render_entries()
        for callback in self._placement_listeners:
            callback(entries)

    def _notify_selection(self) -> None:
        for callback in self._selection_listeners:
            callback(self.selection)

    def _notify_grid(self) -> None:
        for callback in self._grid_listeners:
            callback(self.cells)

    # =============================================================================
    # COMMANDS
    # =============================================================================

    def execute(self, command: Command) -> bool:
        """Apply a command. Commands run to completion in call order."""
        applied = command.execute(self)
        logger.debug("%s -> %s", command.get_description(), "applied" if applied else "ignored")
        return applied

    def place_at(self, coord: Tuple[int, int]) -> bool:
        """
        Toggle the tile at a grid cell using the current selection.

        Args:
            coord: Clicked cell

        Returns:
            True if the placement changed, False if the cell is not on the grid
        """
        key = AxialCoord(*coord)
        if key not in self._cell_set:
            logger.warning("Ignoring click outside the grid at %s", key)
            return False

        self.store.toggle(key, self.selection.tile_type, self.selection.pending_orientation)
        self._notify_placement()
        return True

    def select_type(self, tile_type: TileType) -> bool:
        if tile_type not in self.config.tile_types:
            logger.warning("Tile type '%s' is not in the configured catalog", tile_type)
        self.selection = self.selection.select_type(tile_type)
        self._notify_selection()
        return True

    def rotate(self, steps: int) -> bool:
        self.selection = self.selection.rotate(steps)
        self._notify_selection()
        return True

    def reset(self) -> bool:
        self.store.reset()
        self._notify_placement()
        return True

    def set_radius(self, radius: int) -> bool:
        """
        Regenerate the grid. Placed tiles are kept, even outside the new radius.

        Raises:
            InvalidArgument: If radius is negative
        """
        cells = generate(radius)
        if radius == self.radius:
            return False
        self.radius = radius
        self.cells = cells
        self._cell_set = frozenset(cells)
        logger.info("Grid radius changed to %d (%d cells)", radius, len(cells))
        self._notify_grid()
        return True

    # =============================================================================
    # SNAPSHOTS
    # =============================================================================

    @property
    def state(self) -> PlacementState:
        return self.store.state

    def is_cell(self, coord: Tuple[int, int]) -> bool:
        """True if the coordinate is a clickable cell of the current grid."""
        return AxialCoord(*coord) in self._cell_set

    def render_entries(self) -> Tuple[RenderEntry, ...]:
        """Current placements as render entries."""
        return build_render_entries(self.store.snapshot(),
                                    self.config.tile_spacing,
                                    self.config.ground_offset)

    def marker_positions(self) -> List[Tuple[AxialCoord, Tuple[float, float]]]:
        """Plane positions of the clickable grid markers, at marker spacing."""
        return [(cell, to_plane(cell, self.config.marker_spacing)) for cell in self.cells]
