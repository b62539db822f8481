import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest
from pygame.math import Vector2

from gui_utility.assets import AssetResolver, corner_surface
from gui_utility.constants import CIRCULAR_IMAGES
from gui_utility.scene import Color3, instances


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def resolver(tmp_path):
    resolver = AssetResolver(str(tmp_path))
    for radius, asset_id in CIRCULAR_IMAGES.items():
        resolver.register(asset_id, corner_surface(radius))
    return resolver


@pytest.fixture
def frame():
    root = instances.new("ScreenGui")
    frame = instances.new("Frame", root)
    frame.name = "Panel"
    frame.size = Vector2(100, 60)
    frame.background_color = Color3(1, 0, 0)
    return frame
