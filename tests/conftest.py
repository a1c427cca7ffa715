import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `game_of_life.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def empty_universe():
    """A 5x5 universe with every cell dead."""
    from game_of_life import Universe

    universe = Universe(width=5, height=5, pattern="dead")
    yield universe
    if not universe.released:
        universe.free()
