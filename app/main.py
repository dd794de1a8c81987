"""
Hex tile editor application.
Pick a tile type and orientation, click grid cells to place or remove tiles.
"""

import tkinter as tk
from tkinter import ttk, messagebox
import logging
import sys
import os
from typing import Optional

# Add project root to path first
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Then import project modules
from core.commands import ResetCommand, RotateCommand, SelectTypeCommand, SetRadiusCommand
from core.config import EditorConfig
from core.selection import SelectionState
from core.session import EditorSession
from core.types import InvalidArgument
from guis.hex_canvas import TileCanvas
from guis.status_bar import EditorStatusBar

logger = logging.getLogger(__name__)


class TileEditorApp:
    """Hex tile editor window: controls on the left, canvas on the right."""

    def __init__(self, config: Optional[EditorConfig] = None):
        """Initialize the application."""
        self.root = tk.Tk()
        self.root.title("Hex Tile Editor")
        self.root.geometry("1200x800")

        # Session lives as long as the window
        self.session = EditorSession(config)

        self.type_var = tk.StringVar(value=self.session.selection.tile_type)
        self.orientation_var = tk.StringVar()
        self.radius_var = tk.StringVar(value=str(self.session.radius))
        self.status_bar = EditorStatusBar(self.root)

        self.canvas: TileCanvas = None

        self._create_ui()
        self._bind_keys()

        self.session.add_selection_listener(self._on_selection_change)
        self.session.add_placement_listener(self._on_placement_change)
        self._on_selection_change(self.session.selection)
        self._on_placement_change(())

    def _create_ui(self):
        """Create the user interface."""
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        # Left panel for controls
        left_panel = ttk.Frame(main_frame, width=220)
        left_panel.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 5))
        left_panel.pack_propagate(False)

        # Right panel for canvas
        right_panel = ttk.Frame(main_frame)
        right_panel.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True)

        self._create_control_panel(left_panel)

        self.canvas = TileCanvas(right_panel, self.session)
        self.canvas.set_position_callback(self.status_bar.update_position)

    def _create_control_panel(self, parent):
        """Create the left control panel."""
        # Tile type section
        type_frame = ttk.LabelFrame(parent, text="Tile Type", padding=5)
        type_frame.pack(fill=tk.X, pady=(0, 10))

        for index, tile_type in enumerate(self.session.config.tile_types, start=1):
            ttk.Radiobutton(type_frame, text=f"{index}. {tile_type.title()}",
                            variable=self.type_var, value=tile_type,
                            command=self._select_type).pack(anchor=tk.W)

        # Orientation section
        rotation_frame = ttk.LabelFrame(parent, text="Orientation", padding=5)
        rotation_frame.pack(fill=tk.X, pady=(0, 10))

        button_frame = ttk.Frame(rotation_frame)
        button_frame.pack(fill=tk.X, pady=(0, 5))
        ttk.Button(button_frame, text="↺ -60°", width=8,
                   command=lambda: self._rotate(-1)).pack(side=tk.LEFT, padx=(0, 3))
        ttk.Button(button_frame, text="↻ +60°", width=8,
                   command=lambda: self._rotate(1)).pack(side=tk.LEFT)

        ttk.Label(rotation_frame, textvariable=self.orientation_var,
                  relief=tk.SUNKEN, anchor=tk.W, padding=3).pack(fill=tk.X)

        # Grid section
        grid_frame = ttk.LabelFrame(parent, text="Grid", padding=5)
        grid_frame.pack(fill=tk.X, pady=(0, 10))

        ttk.Label(grid_frame, text="Radius:").pack(anchor=tk.W)
        radius_row = ttk.Frame(grid_frame)
        radius_row.pack(fill=tk.X)
        ttk.Entry(radius_row, textvariable=self.radius_var, width=6).pack(side=tk.LEFT)
        ttk.Button(radius_row, text="Apply", command=self._apply_radius).pack(side=tk.LEFT, padx=(5, 0))

        # Layout section
        layout_frame = ttk.LabelFrame(parent, text="Layout", padding=5)
        layout_frame.pack(fill=tk.X, pady=(0, 10))

        ttk.Button(layout_frame, text="Reset", command=self._reset).pack(fill=tk.X, pady=2)
        ttk.Button(layout_frame, text="Preview", command=self._show_preview).pack(fill=tk.X, pady=2)

        ttk.Label(parent, text="Keys: Q/← rotate left, E/→ rotate right,\n1-9 select type",
                  font=("Arial", 9), foreground="gray").pack(anchor=tk.W, pady=(10, 0))

    def _bind_keys(self):
        """Keyboard shortcuts on the canvas, so typing in entries never triggers them."""
        target = self.canvas.canvas
        for key in ("q", "Q", "<Left>"):
            target.bind(key, lambda e: self._rotate(-1))
        for key in ("e", "E", "<Right>"):
            target.bind(key, lambda e: self._rotate(1))

        for index, tile_type in enumerate(self.session.config.tile_types[:9], start=1):
            target.bind(str(index), lambda e, t=tile_type: self._select_type(t))
        target.focus_set()

    # =============================================================================
    # ACTIONS
    # =============================================================================

    def _select_type(self, tile_type: Optional[str] = None):
        tile_type = tile_type or self.type_var.get()
        self.session.execute(SelectTypeCommand(tile_type))
        self.canvas.canvas.focus_set()

    def _rotate(self, direction: int):
        self.session.execute(RotateCommand(direction))
        self.canvas.canvas.focus_set()

    def _reset(self):
        if len(self.session.store) == 0:
            return
        if messagebox.askyesno("Reset Layout", "Remove all placed tiles?"):
            self.session.execute(ResetCommand())
            self.status_bar.update_main_status("Layout reset")

    def _apply_radius(self):
        try:
            radius = int(self.radius_var.get())
            changed = self.session.execute(SetRadiusCommand(radius))
        except (ValueError, InvalidArgument) as e:
            messagebox.showerror("Invalid Radius", f"Radius must be a non-negative integer.\n{e}")
            self.radius_var.set(str(self.session.radius))
            return

        if changed:
            self.status_bar.update_main_status(
                f"Grid radius {radius}: {len(self.session.cells)} cells")

    def _show_preview(self):
        """Open the current layout in a matplotlib window."""
        import matplotlib.pyplot as plt
        from render.layout_preview import LayoutPreviewRenderer

        config = self.session.config
        renderer = LayoutPreviewRenderer(config.tile_spacing, config.marker_spacing)
        ax = renderer.render_snapshot(self.session.render_entries(), cells=self.session.cells)
        ax.set_title(f"{len(self.session.store)} tiles", fontsize=14, pad=20)
        plt.tight_layout()
        plt.show(block=False)

    # =============================================================================
    # STATUS
    # =============================================================================

    def _on_selection_change(self, selection: SelectionState):
        self.type_var.set(selection.tile_type)
        self.orientation_var.set(f"Next tile faces {selection.pending_orientation * 60}°")
        self.status_bar.update_selection(selection)

    def _on_placement_change(self, entries):
        self.status_bar.update_tile_count(len(entries))

    def run(self):
        """Start the application."""
        self.root.mainloop()


def main(config_path: Optional[str] = None):
    """Main entry point. An optional JSON config path may be given on the command line."""
    if config_path is None and len(sys.argv) > 1:
        config_path = sys.argv[1]
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = EditorConfig.from_json(config_path) if config_path else EditorConfig()
        app = TileEditorApp(config)
        app.run()
    except Exception:
        logger.exception("Error starting application")
        raise


if __name__ == "__main__":
    main()
