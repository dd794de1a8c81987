"""
Editing session driven by commands:
- Clicks toggle tiles with the current selection
- Clicks outside the generated grid are ignored
- Listeners receive snapshots / selections / grids
- Radius changes regenerate the grid and keep placements
"""

import math
import pytest

from core.commands import (PlaceAtCommand, ResetCommand, RotateCommand,
                           SelectTypeCommand, SetRadiusCommand)
from core.config import EditorConfig
from core.session import EditorSession
from core.types import InvalidArgument


def test_session_starts_empty_with_default_selection(session):
    assert len(session.cells) == 19
    assert len(session.store) == 0
    assert session.selection.tile_type == "forest"
    assert session.selection.pending_orientation == 0


def test_place_and_remove_via_commands(session, recorder):
    place = PlaceAtCommand((1, 0))
    assert session.execute(place) is True
    assert place.was_removed is False
    assert session.store.get((1, 0)).tile_type == "forest"

    remove = PlaceAtCommand((1, 0))
    assert session.execute(remove) is True
    assert remove.was_removed is True
    assert (1, 0) not in session.store

    assert [len(snap) for snap in recorder["placement"]] == [1, 0]


def test_commands_apply_in_order(session):
    commands = [
        SelectTypeCommand("water"),
        RotateCommand(1),
        PlaceAtCommand((0, 0)),
        SelectTypeCommand("rock"),
        RotateCommand(-1),
        PlaceAtCommand((0, 1)),
        PlaceAtCommand((0, 0)),
    ]
    for command in commands:
        session.execute(command)

    tiles = session.store.snapshot()
    assert [(t.coord, t.tile_type, t.orientation) for t in tiles] == [((0, 1), "rock", 0)]


def test_toggle_filled_cell_ignores_selection(session):
    session.execute(PlaceAtCommand((0, 0)))
    session.execute(SelectTypeCommand("sand"))
    session.execute(PlaceAtCommand((0, 0)))
    assert len(session.store) == 0


def test_click_outside_grid_is_ignored(session, recorder):
    assert session.execute(PlaceAtCommand((5, 5))) is False
    assert len(session.store) == 0
    assert recorder["placement"] == []


def test_selection_listener(session, recorder):
    session.execute(SelectTypeCommand("rock"))
    session.execute(RotateCommand(-1))
    assert [(s.tile_type, s.pending_orientation) for s in recorder["selection"]] == [
        ("rock", 0), ("rock", 5)]


def test_unknown_type_is_still_selected(session):
    assert session.execute(SelectTypeCommand("lava")) is True
    session.execute(PlaceAtCommand((0, 0)))
    assert session.store.get((0, 0)).tile_type == "lava"


def test_reset_command_clears_and_notifies(session, recorder):
    for coord in [(0, 0), (1, 0), (0, -1)]:
        session.execute(PlaceAtCommand(coord))
    assert session.execute(ResetCommand()) is True
    assert len(session.state) == 0
    assert session.render_entries() == ()
    assert recorder["placement"][-1] == ()


def test_set_radius_regenerates_and_keeps_tiles(session, recorder):
    session.execute(PlaceAtCommand((2, 0)))
    assert session.execute(SetRadiusCommand(1)) is True

    assert len(session.cells) == 7
    assert not session.is_cell((2, 0))
    assert (2, 0) in session.store
    assert recorder["grid"] == [session.cells]

    # Out-of-grid tiles can no longer be clicked
    assert session.execute(PlaceAtCommand((2, 0))) is False


def test_set_same_radius_is_a_no_op(session, recorder):
    assert session.execute(SetRadiusCommand(2)) is False
    assert recorder["grid"] == []


def test_negative_radius_rejected_and_grid_kept(session):
    with pytest.raises(InvalidArgument):
        session.execute(SetRadiusCommand(-1))
    assert session.radius == 2
    assert len(session.cells) == 19


def test_render_entries_use_tile_spacing_and_ground_offset():
    session = EditorSession(EditorConfig(radius=1, tile_spacing=2.0, ground_offset=0.25))
    session.rotate(3)
    session.place_at((1, 0))

    (entry,) = session.render_entries()
    assert entry.key == "1,0"
    assert entry.position == pytest.approx((2.0 * math.sqrt(3), 0.25, 0.0))
    assert entry.orientation_radians == pytest.approx(math.pi)
    assert entry.tile_type == "forest"


def test_marker_positions_use_marker_spacing():
    session = EditorSession(EditorConfig(radius=1, tile_spacing=1.0, marker_spacing=1.1))
    markers = dict(session.marker_positions())
    assert markers[(0, 1)] == pytest.approx((1.1 * math.sqrt(3) / 2, 1.1 * 1.5))
    assert len(markers) == 7


def test_command_descriptions():
    assert PlaceAtCommand((1, -1)).get_description() == "Toggle tile at (1,-1)"
    assert RotateCommand(-1).get_description() == "Rotate -60°"
    assert "water" in SelectTypeCommand("water").get_description()
