"""
Rendering collaborator pieces:
- Pixel picking lands back on the drawn cell
- Hexagon geometry
- Asset resolution by naming convention, with UnresolvedAsset on misses
- Matplotlib preview of a snapshot
"""

import math

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from core.grid import generate
from core.placement import PlacementStore
from core.reconcile import build_render_entries
from core.types import AxialCoord, UnresolvedAsset
from render.assets import TileAssetResolver
from render.hex_render import FALLBACK_COLOR, HexRenderer, axial_round, tile_color
from render.layout_preview import LayoutPreviewRenderer


@pytest.mark.parametrize("cell_size", [1.0, 1.1])
def test_pixel_picking_round_trip(cell_size):
    renderer = HexRenderer(pixel_scale=30.0, origin=(400, 300))
    for cell in generate(3):
        px, py = renderer.axial_to_pixel(cell, cell_size)
        assert renderer.pixel_to_axial(px, py, cell_size) == cell
        # A few pixels off-centre still picks the same cell
        assert renderer.pixel_to_axial(px + 5, py - 5, cell_size) == cell


def test_axial_round():
    assert axial_round(0.1, -0.2) == AxialCoord(0, 0)
    assert axial_round(0.9, 0.05) == AxialCoord(1, 0)
    assert axial_round(-0.6, 0.55) == AxialCoord(-1, 1)


def test_hex_points_lie_on_circle():
    renderer = HexRenderer()
    points = renderer.get_hex_points(10.0, 20.0, 5.0)
    assert len(points) == 12
    for x, y in zip(points[::2], points[1::2]):
        assert math.hypot(x - 10.0, y - 20.0) == pytest.approx(5.0)


def test_orientation_tick_points_along_angle():
    renderer = HexRenderer()
    x0, y0, x1, y1 = renderer.orientation_tick(0, 0, 10, math.pi / 2)
    assert (x0, y0) == (0, 0)
    assert (x1, y1) == pytest.approx((0.0, 10.0))


def test_tile_color_fallback():
    assert tile_color("forest") != FALLBACK_COLOR
    assert tile_color("unknown-type") == FALLBACK_COLOR


def test_asset_path_is_deterministic(tmp_path):
    resolver = TileAssetResolver(tmp_path, ".png")
    assert resolver.path_for("forest") == tmp_path / "forest.png"
    assert resolver.path_for("forest") == resolver.path_for("forest")


def test_asset_resolution(tmp_path):
    (tmp_path / "rock.png").write_bytes(b"")
    resolver = TileAssetResolver(tmp_path, ".png")

    assert resolver.resolve("rock") == tmp_path / "rock.png"
    assert resolver.has_asset("rock")
    assert not resolver.has_asset("water")

    with pytest.raises(UnresolvedAsset) as exc_info:
        resolver.resolve("water")
    assert exc_info.value.tile_type == "water"


def test_unresolved_asset_leaves_tile_placed(tmp_path):
    store = PlacementStore()
    store.toggle((0, 0), "missing", 0)
    resolver = TileAssetResolver(tmp_path)
    with pytest.raises(UnresolvedAsset):
        resolver.resolve(store.snapshot()[0].tile_type)
    assert (0, 0) in store


def test_preview_renders_one_patch_per_tile_and_cell():
    store = PlacementStore()
    store.toggle((0, 0), "forest", 0)
    store.toggle((1, -1), "water", 2)
    entries = build_render_entries(store.snapshot())
    cells = generate(1)

    fig, ax = plt.subplots()
    try:
        result = LayoutPreviewRenderer().render_snapshot(entries, ax=ax, cells=cells)
        assert result is ax
        assert len(ax.patches) == len(entries) + len(cells)
        assert len(ax.lines) == len(entries)
    finally:
        plt.close(fig)


def test_preview_of_empty_layout():
    fig, ax = plt.subplots()
    try:
        LayoutPreviewRenderer().render_snapshot((), ax=ax)
        assert len(ax.patches) == 0
    finally:
        plt.close(fig)
