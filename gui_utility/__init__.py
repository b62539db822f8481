from .errors import GuiUtilityError, InvalidArgument, IncompatibleTarget, TypeMismatch
from .round_corners import CornerRounder, round_one, round_many, round_element
from .auto_scale import AutoScaler
from .utility import interpolate, scale_color, round_to_decimal_places, format_number
from .easing import EasingStyle, EasingDirection
from .scene.types import Color3, ScaleType

__version__ = "0.1.0"
