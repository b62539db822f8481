"""
Rounded backgrounds for Frame, ImageLabel and ImageButton instances.

`round_one(gui_object, corner_radius)` gives a GUI object a rounded background
of `corner_radius` by 9-slicing a small white circle image.

A Frame is replaced by an ImageLabel carrying the same inheritable
properties. Its background_color and background_transparency become the
image_color and image_transparency of the generated ImageLabel.
"""

import logging
from numbers import Real

from .constants import CIRCULAR_IMAGES, INHERITABLE_PROPERTIES
from .errors import IncompatibleTarget, InvalidArgument, bad_argument
from .scene import instances
from .scene.types import ScaleType

log = logging.getLogger(__name__)

ROUNDABLE_CLASSES = ("Frame", "ImageLabel", "ImageButton")
INCOMPATIBLE_GUI_ERROR = "must be a Frame, ImageLabel, or ImageButton"


class CornerRounder:
    """
    Applies rounded corners to GUI objects.
    `create_instance(class_name)` builds replacement instances and defaults to
    the pygame scene graph factory.
    """

    def __init__(self, create_instance=None, images=None):
        self.create_instance = create_instance or instances.new
        self.images = images if images is not None else CIRCULAR_IMAGES

    def _check_radius(self, corner_radius, func):
        if isinstance(corner_radius, bool) or not isinstance(corner_radius, Real):
            raise InvalidArgument(bad_argument(2, "corner_radius", func, "must be a number"))
        if corner_radius == 0:
            return None
        if corner_radius < 0:
            raise InvalidArgument(bad_argument(2, "corner_radius", func, "corner radius must not be negative"))
        image_asset_id = self.images.get(corner_radius)
        if image_asset_id is None:
            raise InvalidArgument(bad_argument(
                2, "corner_radius", func,
                f"no image asset for a corner radius of {corner_radius}, "
                f"expected one of {sorted(self.images)}"
            ))
        return image_asset_id

    def _replace_frame(self, frame):
        image_label = self.create_instance("ImageLabel")
        for property_name in INHERITABLE_PROPERTIES:
            setattr(image_label, property_name, getattr(frame, property_name))
        image_label.image_color = frame.background_color
        image_label.image_transparency = frame.background_transparency

        # Replacement is fully built, now swap it in
        for child in frame.get_children():
            child.parent = image_label
        image_label.parent = frame.parent
        frame.destroy()
        log.debug("Replaced Frame %r with an ImageLabel", image_label.name)
        return image_label

    def _prepare(self, gui_object, image_asset_id, corner_radius):
        class_name = getattr(gui_object, "class_name", None)
        if class_name not in ROUNDABLE_CLASSES:
            raise IncompatibleTarget(bad_argument(1, "gui_object", "round_one", INCOMPATIBLE_GUI_ERROR))
        if getattr(gui_object, "destroyed", False):
            raise IncompatibleTarget(bad_argument(1, "gui_object", "round_one", "must not be destroyed"))
        if class_name == "Frame":
            gui_object = self._replace_frame(gui_object)

        gui_object.background_transparency = 1
        gui_object.border_size_pixel = 0
        gui_object.image = image_asset_id
        gui_object.scale_type = ScaleType.SLICE
        gui_object.slice_center = (corner_radius, corner_radius, corner_radius, corner_radius)
        gui_object.slice_scale = 1
        return gui_object

    def round_one(self, gui_object, corner_radius):
        """
        Give `gui_object` a rounded background of `corner_radius`.

        Returns the rounded object. For a Frame this is the new ImageLabel
        that replaced it. A radius of 0 returns `gui_object` untouched.
        """
        image_asset_id = self._check_radius(corner_radius, "round_one")
        if gui_object is None:
            raise IncompatibleTarget(bad_argument(1, "gui_object", "round_one", INCOMPATIBLE_GUI_ERROR))
        if image_asset_id is None:
            return gui_object

        rounded = self._prepare(gui_object, image_asset_id, corner_radius)
        log.debug("Rounded %r with corner radius %s", rounded.name, corner_radius)
        return rounded

    def round_many(self, gui_objects, corner_radius):
        """
        Round every object in `gui_objects` with the same radius.
        Meant for ImageLabels and ImageButtons: converted Frames are replaced
        and no reference to the new instance is returned.
        """
        self._check_radius(corner_radius, "round_many")
        for gui_object in gui_objects:
            self.round_one(gui_object, corner_radius)


_default_rounder = CornerRounder()


def round_one(gui_object, corner_radius):
    return _default_rounder.round_one(gui_object, corner_radius)


def round_many(gui_objects, corner_radius):
    _default_rounder.round_many(gui_objects, corner_radius)


def round_element(target, corner_radius):
    """Round a single object or a list/tuple of them"""
    if isinstance(target, (list, tuple)):
        round_many(target, corner_radius)
        return None
    return round_one(target, corner_radius)
