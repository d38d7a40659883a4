import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest
from pixcanvas import ViewportMapper


@pytest.fixture
def mapper() -> ViewportMapper:
    return ViewportMapper(800, 600)
