# tests/conftest.py
import os
import random
import sys
from pathlib import Path

import pytest

# Headless SDL so surfaces and fonts work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add the game directory to import search path
game_dir = Path(__file__).resolve().parents[1] / "IDLE-FOREST"
if str(game_dir) not in sys.path:
    sys.path.insert(0, str(game_dir))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_tree():
    def _tree(tid, x, y, hp=3, alive=True, respawn=0):
        return {"id":tid, "x":x, "y":y, "hp":hp, "alive":alive, "respawn":respawn}
    return _tree
