"""
Numeric helpers for UI code: interpolation, color scaling, rounding and
number formatting.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real

import pygame
from pygame.math import Vector2, Vector3

from . import easing
from .errors import InvalidArgument, TypeMismatch, bad_argument
from .scene.types import Color3

THOUSANDS_PATTERN = re.compile(r"^(\d+)(\d{3})")


def _is_number(value):
    return isinstance(value, Real) and not isinstance(value, bool)


def _same_type(p0, p1):
    if _is_number(p0) and _is_number(p1):
        return True
    return type(p0) is type(p1)


def interpolate(p0, p1, alpha, easing_style=None, easing_direction=None):
    """
    Linear interpolate any number, any value with a `lerp` method
    (Vector2, Color3, pygame.Color), or any type supporting addition and
    multiplication by a number.

    Returns `p0` moved towards `p1` by `alpha`, clamped to 0-1. When both
    `easing_style` and `easing_direction` are given, alpha is remapped by
    that easing curve first.
    """
    if not _same_type(p0, p1):
        raise TypeMismatch(bad_argument(2, "p1", "interpolate", "must be the same data type as p0"))
    alpha = max(0.0, min(1.0, alpha or 0))
    if easing_style is not None and easing_direction is not None:
        alpha = easing.get_value(alpha, easing_style, easing_direction)
    if 0 <= alpha <= 1 and hasattr(p0, "lerp"):
        return p0.lerp(p1, alpha)
    # Eased alpha can overshoot, pygame's lerp only accepts 0-1
    if isinstance(p0, pygame.Color):
        return pygame.Color(*(_clamp_channel(a + (b - a) * alpha) for a, b in zip(p0, p1)))
    if hasattr(p0, "lerp") and not isinstance(p0, (Vector2, Vector3)):
        return p0.lerp(p1, alpha)
    return p0 + ((p1 - p0) * alpha)


def _clamp_channel(value):
    return max(0, min(255, round(value)))


def scale_color(color, factor):
    """Returns a Color3 with each channel of `color` multiplied by `factor`"""
    if not isinstance(color, Color3):
        raise InvalidArgument(bad_argument(1, "color", "scale_color", "must be a Color3"))
    if not _is_number(factor):
        raise InvalidArgument(bad_argument(2, "factor", "scale_color", "must be a number"))
    return Color3(color.r * factor, color.g * factor, color.b * factor)


def _check_places(places, func):
    if isinstance(places, bool) or not isinstance(places, int) or places < 0:
        raise InvalidArgument(bad_argument(2, "places", func, "must be a non-negative integer"))


def _round_decimal(n, places):
    # str() keeps the shortest repr, so 1.005 rounds like it reads
    value = Decimal(str(n))
    with localcontext() as context:
        # Room for every integer digit plus the requested places
        context.prec = max(context.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_to_decimal_places(n, places=0):
    """
    Returns `n` rounded to `places` decimal places, halves away from zero.
    With places 0, `n` is rounded to the nearest integer.
    """
    if not _is_number(n):
        raise InvalidArgument(bad_argument(1, "n", "round_to_decimal_places", "must be a number"))
    _check_places(places, "round_to_decimal_places")
    if n == 0:
        return 0
    return float(_round_decimal(n, places))


def format_number(n, places=0):
    """
    Returns `n` rounded to `places` decimal places, with the thousands of
    the integer part separated by commas.
    e.g. format_number(1000.846, 2) -> "1,000.85"
    """
    if not _is_number(n):
        raise InvalidArgument(bad_argument(1, "n", "format_number", "must be a number"))
    _check_places(places, "format_number")

    rounded = _round_decimal(n, places)
    sign = "-" if rounded < 0 else ""
    integer_part, _, decimal_part = f"{abs(rounded):f}".partition(".")

    count = 1
    while count:
        integer_part, count = THOUSANDS_PATTERN.subn(r"\1,\2", integer_part)

    if places > 0:
        decimal_part = decimal_part.ljust(places, "0")
        return f"{sign}{integer_part}.{decimal_part}"
    return f"{sign}{integer_part}"
