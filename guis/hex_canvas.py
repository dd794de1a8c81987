"""
TileCanvas - interactive top-down view of the hex tile layout.

Draws the clickable grid markers and the placed tiles, turns clicks into
PlaceAtCommands, and applies placement snapshots incrementally by diffing
them against the last one drawn.
"""
import logging
import tkinter as tk
from typing import Callable, Dict, Optional, Set, Tuple

from core.commands import PlaceAtCommand
from core.reconcile import RenderEntry, diff_snapshots
from core.session import EditorSession
from core.types import UnresolvedAsset
from render.assets import TileAssetResolver
from render.hex_render import HexRenderer, tile_color
from utils.axial import coord_key

logger = logging.getLogger(__name__)

MARKER_SCALE = 0.95  # marker radius relative to the tile size


class TileCanvas:
    """Interactive canvas for placing tiles on a hexagonal grid."""

    def __init__(self, parent: tk.Widget, session: EditorSession,
                 resolver: Optional[TileAssetResolver] = None,
                 width: int = 800, height: int = 600):
        """Initialize the tile canvas and subscribe to session changes."""
        self.canvas = tk.Canvas(parent, width=width, height=height, bg="#20232a",
                                highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.session = session
        config = session.config
        self.resolver = resolver or TileAssetResolver(config.asset_dir, config.asset_suffix)
        self.renderer = HexRenderer(pixel_scale=config.pixel_scale,
                                    origin=(width / 2.0, height / 2.0))

        # Last snapshot drawn, used to diff the next one
        self.drawn_entries: Tuple[RenderEntry, ...] = ()

        # Tk images must stay referenced while displayed
        self._images: Dict[str, tk.PhotoImage] = {}
        self._missing_assets: Set[str] = set()

        self.position_callback: Optional[Callable] = None

        self._setup_event_bindings()
        session.add_placement_listener(self.apply_snapshot)
        session.add_grid_listener(lambda cells: self.redraw_all())

    def _setup_event_bindings(self):
        """Set up mouse event handlers."""
        self.canvas.bind("<Button-1>", self._on_left_click)
        self.canvas.bind("<Motion>", self._on_mouse_motion)
        self.canvas.bind("<Leave>", lambda e: self._report_position(None))
        self.canvas.bind("<Configure>", self._on_resize)

    def set_position_callback(self, callback: Callable):
        """Set position update callback for status bar."""
        self.position_callback = callback

    # =============================================================================
    # EVENTS
    # =============================================================================

    def _cell_at(self, event):
        """Grid cell under the pointer, or None off the grid."""
        coord = self.renderer.pixel_to_axial(event.x, event.y,
                                             self.session.config.marker_spacing)
        return coord if self.session.is_cell(coord) else None

    def _on_left_click(self, event):
        self.canvas.focus_set()
        coord = self._cell_at(event)
        if coord is None:
            return
        self.session.execute(PlaceAtCommand(coord))

    def _on_mouse_motion(self, event):
        self._report_position(self._cell_at(event))

    def _report_position(self, coord):
        if self.position_callback:
            self.position_callback(coord)

    def _on_resize(self, event):
        self.renderer.set_origin(event.width / 2.0, event.height / 2.0)
        self.redraw_all()

    # =============================================================================
    # DRAWING
    # =============================================================================

    def redraw_all(self):
        """Completely redraw markers and tiles."""
        self.canvas.delete("all")
        self._draw_markers()
        self.drawn_entries = ()
        self.apply_snapshot(self.session.render_entries())

    def _draw_markers(self):
        config = self.session.config
        radius = config.tile_spacing * MARKER_SCALE * self.renderer.pixel_scale
        for cell, (x, z) in self.session.marker_positions():
            cx, cy = self.renderer.plane_to_pixel(x, z)
            key = coord_key(cell)
            self.renderer.draw_hexagon(
                self.canvas, cx, cy, radius,
                fill_color="#5a5f6b", outline_color="#8a8f9b",
                tags=("marker", f"marker:{key}")
            )

    def apply_snapshot(self, entries: Tuple[RenderEntry, ...]):
        """Add and remove tile items so the canvas matches the snapshot."""
        diff = diff_snapshots(self.drawn_entries, entries)

        for key in diff.removed:
            self.canvas.delete(f"tile:{key}")
            self.canvas.itemconfigure(f"marker:{key}", fill="#5a5f6b")

        for entry in diff.added:
            self._draw_tile(entry)
            self.canvas.itemconfigure(f"marker:{entry.key}", fill="orange")

        self.drawn_entries = tuple(entries)

    def _draw_tile(self, entry: RenderEntry):
        x, _, z = entry.position
        cx, cy = self.renderer.plane_to_pixel(x, z)
        radius = self.session.config.tile_spacing * self.renderer.pixel_scale * 0.8
        tags = ("tile", f"tile:{entry.key}")

        image = self._load_image(entry.tile_type)
        if image is not None:
            self.canvas.create_image(cx, cy, image=image, tags=tags)
        else:
            # Visible fallback: palette-coloured hexagon with a dashed outline
            self.renderer.draw_hexagon(
                self.canvas, cx, cy, radius,
                fill_color=tile_color(entry.tile_type), outline_color="white",
                tags=tags, dash=(3, 2)
            )

        x0, y0, x1, y1 = self.renderer.orientation_tick(cx, cy, radius * 0.7,
                                                        entry.orientation_radians)
        self.canvas.create_line(x0, y0, x1, y1, fill="black", width=3, tags=tags)

    def _load_image(self, tile_type: str) -> Optional[tk.PhotoImage]:
        if tile_type in self._images:
            return self._images[tile_type]
        if tile_type in self._missing_assets:
            return None

        try:
            path = self.resolver.resolve(tile_type)
            image = tk.PhotoImage(file=str(path))
        except (UnresolvedAsset, tk.TclError) as e:
            logger.warning("Drawing fallback for tile type '%s': %s", tile_type, e)
            self._missing_assets.add(tile_type)
            return None

        self._images[tile_type] = image
        return image
