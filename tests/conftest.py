import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture
def world():
    from mudgame.world import load_default_world

    return load_default_world()


@pytest.fixture
def dispatcher(world):
    from mudgame.dispatcher import CommandDispatcher

    return CommandDispatcher(world, world.new_player())
