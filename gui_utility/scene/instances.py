from pygame.math import Vector2

from ..errors import InvalidArgument, bad_argument
from .signals import Signal
from .types import Color3, ScaleType


class Instance:
    """
    Node of the UI scene graph.
    Children are kept in the order they were parented.
    """
    class_name = "Instance"

    def __init__(self, name=None):
        self.name = name if name is not None else self.class_name
        self._parent = None
        self._children = []
        self._destroyed = False

    @property
    def parent(self):
        return self._parent

    @parent.setter
    def parent(self, value):
        if self._destroyed:
            raise RuntimeError(f"The parent property of {self.name} is locked, it has been destroyed")
        if value is self._parent:
            return
        if value is not None:
            if value is self or value.is_descendant_of(self):
                raise RuntimeError(f"Setting parent of {self.name} to {value.name} would create a cycle")
            if value.destroyed:
                raise RuntimeError(f"Cannot parent {self.name} to destroyed instance {value.name}")

        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = value
        if value is not None:
            value._children.append(self)

    @property
    def destroyed(self):
        return self._destroyed

    def get_children(self):
        return list(self._children)

    def get_descendants(self):
        result = []
        for child in self._children:
            result.append(child)
            result.extend(child.get_descendants())
        return result

    def find_first_child(self, name):
        for child in self._children:
            if child.name == name:
                return child
        return None

    def find_first_child_of_class(self, class_name):
        for child in self._children:
            if child.class_name == class_name:
                return child
        return None

    def is_a(self, class_name):
        return any(getattr(cls, "class_name", None) == class_name for cls in type(self).__mro__)

    def is_descendant_of(self, ancestor):
        node = self._parent
        while node is not None:
            if node is ancestor:
                return True
            node = node._parent
        return False

    def destroy(self):
        for child in list(self._children):
            child.destroy()
        self.parent = None
        self._destroyed = True

    def __repr__(self):
        return f"<{self.class_name} {self.name!r}>"


class ScreenGui(Instance):
    """Root container. Draws its children, has no rect of its own."""
    class_name = "ScreenGui"

    def __init__(self, name=None):
        super().__init__(name)
        self.enabled = True


class UIScale(Instance):
    class_name = "UIScale"

    def __init__(self, name=None):
        super().__init__(name)
        self.scale = 1.0


class GuiObject(Instance):
    class_name = "GuiObject"

    def __init__(self, name=None):
        super().__init__(name)
        self.z_index = 1
        self.clips_descendants = False
        self.visible = True
        self.auto_localize = True
        self.root_localization_table = None
        self.layout_order = 0
        self.size = Vector2(100, 100)
        self.position = Vector2(0, 0)
        self.anchor_point = Vector2(0, 0)
        self.rotation = 0.0
        self.active = False
        self.selectable = False
        self.background_color = Color3.from_rgb(163, 162, 165)
        self.background_transparency = 0.0
        self.border_size_pixel = 1
        self.border_color = Color3.from_rgb(27, 42, 53)


class Frame(GuiObject):
    class_name = "Frame"


class _ImageProperties:
    def _init_image(self):
        self.image = ""
        self.image_color = Color3(1, 1, 1)
        self.image_transparency = 0.0
        self.scale_type = ScaleType.STRETCH
        self.slice_center = (0, 0, 0, 0)
        self.slice_scale = 1.0


class ImageLabel(GuiObject, _ImageProperties):
    class_name = "ImageLabel"

    def __init__(self, name=None):
        super().__init__(name)
        self._init_image()


class ImageButton(GuiObject, _ImageProperties):
    class_name = "ImageButton"

    def __init__(self, name=None):
        super().__init__(name)
        self._init_image()
        self.active = True
        self.selectable = True
        self.activated = Signal()

    def click(self):
        if self.active and self.visible:
            self.activated.fire(self)
            return True
        return False


INSTANCE_CLASSES = {
    cls.class_name: cls
    for cls in (ScreenGui, UIScale, Frame, ImageLabel, ImageButton)
}


def new(class_name, parent=None):
    """Create an instance by class name, optionally parenting it."""
    cls = INSTANCE_CLASSES.get(class_name)
    if cls is None:
        raise InvalidArgument(bad_argument(1, "class_name", "instances.new",
                                           f"unknown class {class_name!r}"))
    instance = cls()
    if parent is not None:
        instance.parent = parent
    return instance
