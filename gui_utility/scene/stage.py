import logging

import pygame
from pygame.math import Vector2

from .signals import Signal

log = logging.getLogger(__name__)


class Viewport:
    def __init__(self, width, height):
        self._size = Vector2(width, height)
        self.size_changed = Signal()

    @classmethod
    def from_surface(cls, surface):
        return cls(*surface.get_size())

    @property
    def size(self):
        return Vector2(self._size)

    @property
    def width(self):
        return self._size.x

    @property
    def height(self):
        return self._size.y

    def resize(self, width, height):
        if (width, height) == (self._size.x, self._size.y):
            return
        self._size = Vector2(width, height)
        log.debug("Viewport resized to %sx%s", width, height)
        self.size_changed.fire(self.size)


class Stage:
    """
    Owns the active viewport and turns window events into viewport resizes.
    `heartbeat` fires once per `step`.
    """

    def __init__(self, viewport=None):
        self._current_viewport = viewport
        self.current_viewport_changed = Signal()
        self.heartbeat = Signal()

    @property
    def current_viewport(self):
        return self._current_viewport

    @current_viewport.setter
    def current_viewport(self, viewport):
        if viewport is self._current_viewport:
            return
        self._current_viewport = viewport
        self.current_viewport_changed.fire(viewport)

    def handle_event(self, event):
        viewport = self._current_viewport
        if viewport is None:
            return False
        if event.type == pygame.VIDEORESIZE:
            viewport.resize(event.w, event.h)
            return True
        if event.type == pygame.WINDOWSIZECHANGED:
            viewport.resize(event.x, event.y)
            return True
        return False

    def step(self, dt):
        self.heartbeat.fire(dt)
