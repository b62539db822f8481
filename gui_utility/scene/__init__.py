from .signals import Signal, Connection
from .types import Color3, ScaleType
from .instances import (
    Instance, ScreenGui, UIScale, GuiObject, Frame, ImageLabel, ImageButton,
    INSTANCE_CLASSES, new
)
from .stage import Viewport, Stage
from .render import absolute_scale, absolute_rect, nine_slice, draw
