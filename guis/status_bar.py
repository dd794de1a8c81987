import tkinter as tk
from tkinter import ttk
from typing import Optional

from core.selection import SelectionState


class EditorStatusBar:
    """Status bar with selection, tile count and pointer position zones."""

    def __init__(self, parent: tk.Widget):
        self.frame = ttk.Frame(parent)
        self.frame.pack(side=tk.BOTTOM, fill=tk.X)

        self._create_status_zones()

    def _create_status_zones(self):
        """Create different zones of the status bar."""
        # Main status (left side)
        self.main_status = tk.StringVar(value="Ready")
        main_label = ttk.Label(self.frame, textvariable=self.main_status,
                               relief=tk.SUNKEN, anchor=tk.W, padding=3)
        main_label.pack(side=tk.LEFT, fill=tk.X, expand=True)

        ttk.Separator(self.frame, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=2)

        self.selection_var = tk.StringVar(value="")
        selection_label = ttk.Label(self.frame, textvariable=self.selection_var,
                                    relief=tk.SUNKEN, anchor=tk.CENTER, padding=3, width=18)
        selection_label.pack(side=tk.LEFT)

        ttk.Separator(self.frame, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=2)

        self.count_var = tk.StringVar(value="0 tiles")
        count_label = ttk.Label(self.frame, textvariable=self.count_var,
                                relief=tk.SUNKEN, anchor=tk.CENTER, padding=3, width=10)
        count_label.pack(side=tk.LEFT)

        # Position info (right side)
        self.position_var = tk.StringVar(value="")
        position_label = ttk.Label(self.frame, textvariable=self.position_var,
                                   relief=tk.SUNKEN, anchor=tk.E, padding=3, width=12)
        position_label.pack(side=tk.RIGHT)

    def update_main_status(self, status: str):
        """Update main status message."""
        self.main_status.set(status)

    def update_selection(self, selection: SelectionState):
        self.selection_var.set(f"{selection.tile_type} · {selection.pending_orientation * 60}°")

    def update_tile_count(self, count: int):
        self.count_var.set(f"{count} tile{'' if count == 1 else 's'}")

    def update_position(self, coord: Optional[tuple] = None):
        """Update hovered cell info."""
        if coord is not None:
            self.position_var.set(f"({coord[0]},{coord[1]})")
        else:
            self.position_var.set("")
