import os

# Headless backends for the plotting and preview code.
os.environ.setdefault("MPLBACKEND", "Agg")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

import logger


@pytest.fixture(autouse=True)
def reset_render_timer():
    yield
    logger.set_render_timer(None)
