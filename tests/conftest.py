import os
import sys
import pytest

# Add project root to sys.path (so tests can import core.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from core.config import EditorConfig
from core.session import EditorSession


@pytest.fixture
def config():
    """Small default config (radius 2, 19 cells)."""
    return EditorConfig(radius=2)


@pytest.fixture
def session(config):
    return EditorSession(config)


@pytest.fixture
def recorder(session):
    """Records every notification the session sends, by kind."""
    events = {"placement": [], "selection": [], "grid": []}
    session.add_placement_listener(events["placement"].append)
    session.add_selection_listener(events["selection"].append)
    session.add_grid_listener(events["grid"].append)
    return events
