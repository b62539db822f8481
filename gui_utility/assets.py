import logging
import os

import pygame

from .constants import ASSET_SCHEME, CIRCULAR_IMAGES
from .errors import InvalidArgument, bad_argument

log = logging.getLogger(__name__)

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "assets")


def corner_surface(radius):
    """White circle on transparent background, corner arcs of `radius`"""
    size = radius * 2
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))  # Transparent
    pygame.draw.circle(surface, (255, 255, 255, 255), (radius, radius), radius)
    return surface


def asset_name(asset_id):
    if not isinstance(asset_id, str) or not asset_id.startswith(ASSET_SCHEME):
        raise InvalidArgument(bad_argument(1, "asset_id", "asset_name",
                                           f"must be a string starting with {ASSET_SCHEME}"))
    return asset_id[len(ASSET_SCHEME):]


def generate_corner_assets(directory=ASSETS_DIR):
    """Save one corner image per radius in CIRCULAR_IMAGES, return the paths"""
    os.makedirs(directory, exist_ok=True)
    paths = []
    for radius, asset_id in CIRCULAR_IMAGES.items():
        path = os.path.join(directory, asset_name(asset_id) + ".png")
        pygame.image.save(corner_surface(radius), path)
        paths.append(path)
    log.info("Created %d corner assets in %s", len(paths), directory)
    return paths


def corner_assets_present(directory=ASSETS_DIR):
    return all(
        os.path.exists(os.path.join(directory, asset_name(asset_id) + ".png"))
        for asset_id in CIRCULAR_IMAGES.values()
    )


class AssetResolver:
    """Maps asset ids to loaded surfaces, caching each one."""

    def __init__(self, directory=ASSETS_DIR):
        self.directory = directory
        self._cache = {}

    def path_for(self, asset_id):
        return os.path.join(self.directory, asset_name(asset_id) + ".png")

    def register(self, asset_id, surface):
        asset_name(asset_id)
        self._cache[asset_id] = surface

    def resolve(self, asset_id):
        surface = self._cache.get(asset_id)
        if surface is not None:
            return surface

        path = self.path_for(asset_id)
        if not os.path.exists(path):
            raise FileNotFoundError(f"No image for {asset_id} at {path}")
        surface = pygame.image.load(path)
        # convert_alpha needs a display mode
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        log.debug("Loaded %s from %s", asset_id, path)
        self._cache[asset_id] = surface
        return surface

    def clear(self):
        self._cache.clear()
