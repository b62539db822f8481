"""
Automatic, resolution-independent scaling of GUI hierarchies.

Design every interface at one base resolution (1280x720 by default) using
pixel offsets only. Add the root of each interface with
`AutoScaler.add_element`; a UIScale is parented to it, so the element and
all of its children take up the same portion of the screen at any
resolution.

The multiplier follows the viewport height and snaps down to multiples of
`snap_step`. Keep base_height * snap_step an integer, otherwise images lose
their clarity.
"""

import logging
import math
from numbers import Real

from .constants import BASE_SCREEN_SIZE_Y, SNAP_EPSILON, SNAP_RESOLUTION_STEP
from .errors import InvalidArgument, bad_argument
from .scene import instances

log = logging.getLogger(__name__)

SCALE_OBJECT_NAME = "AutoScreenScale"


def _check_positive(value, position, name):
    if isinstance(value, bool) or not isinstance(value, Real) or not value > 0:
        raise InvalidArgument(bad_argument(position, name, "AutoScaler", "must be a positive number"))


class AutoScaler:
    def __init__(self, stage, base_height=BASE_SCREEN_SIZE_Y, snap_step=SNAP_RESOLUTION_STEP):
        _check_positive(base_height, 2, "base_height")
        _check_positive(snap_step, 3, "snap_step")
        self.stage = stage
        self.base_height = base_height
        self.snap_step = snap_step
        self.scale_objects = []
        self.viewport = None
        self._size_connection = None
        self._last_scale = None

        stage.current_viewport_changed.connect(self._on_viewport_changed)
        stage.heartbeat.connect(self._on_heartbeat)
        self._bind(stage.current_viewport)
        self.update()

    @classmethod
    def from_settings(cls, stage, settings):
        scaling = settings.get("scaling")
        return cls(stage, scaling["base_resolution"][1], scaling["snap_step"])

    def add_element(self, gui_object):
        """
        Scale `gui_object` and all of its children with the viewport.
        A single root ScreenGui is usually all that needs adding.
        """
        if not isinstance(gui_object, instances.Instance) or gui_object.destroyed:
            raise InvalidArgument(bad_argument(1, "gui_object", "AutoScaler.add_element", "must be an Instance"))
        scale_object = instances.new("UIScale")
        scale_object.name = SCALE_OBJECT_NAME
        scale_object.scale = 1
        scale_object.parent = gui_object
        self.scale_objects.append(scale_object)
        return scale_object

    def compute_scale(self, viewport_height):
        portion_y = viewport_height / self.base_height
        steps = math.floor(portion_y / self.snap_step + SNAP_EPSILON)
        return round(steps * self.snap_step, 9)

    def update(self):
        """Apply the current viewport's multiplier to every scale object"""
        if self.viewport is None:
            return None
        scale_y = self.compute_scale(self.viewport.height)
        for scale_object in self.scale_objects:
            scale_object.scale = scale_y
        if scale_y != self._last_scale:
            log.debug("Scaled %d elements to %s", len(self.scale_objects), scale_y)
            self._last_scale = scale_y
        return scale_y

    def _bind(self, viewport):
        if self._size_connection is not None:
            self._size_connection.disconnect()
            self._size_connection = None
        self.viewport = viewport
        if viewport is not None:
            self._size_connection = viewport.size_changed.connect(self._on_viewport_resized)

    def _on_heartbeat(self, dt):
        self.update()

    def _on_viewport_resized(self, size):
        self.update()

    def _on_viewport_changed(self, viewport):
        if viewport is None:
            return
        self._bind(viewport)
        self.update()
