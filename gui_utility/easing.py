# Easing curves
# get_value(alpha, style, direction) remaps a 0-1 alpha like a tween would

import math
from enum import Enum

BACK_OVERSHOOT = 1.70158
ELASTIC_PERIOD = 0.3


class EasingStyle(Enum):
    LINEAR = "linear"
    SINE = "sine"
    QUAD = "quad"
    CUBIC = "cubic"
    QUART = "quart"
    QUINT = "quint"
    EXPONENTIAL = "exponential"
    CIRCULAR = "circular"
    BACK = "back"
    BOUNCE = "bounce"
    ELASTIC = "elastic"


class EasingDirection(Enum):
    IN = "in"
    OUT = "out"
    IN_OUT = "in_out"


def _bounce_out(t):
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def _exponential_in(t):
    if t == 0:
        return 0.0
    return 2 ** (10 * (t - 1))


def _elastic_in(t):
    if t in (0, 1):
        return float(t)
    s = ELASTIC_PERIOD / 4
    t -= 1
    return -(2 ** (10 * t)) * math.sin((t - s) * (2 * math.pi) / ELASTIC_PERIOD)


# Ease-in form of every curve, other directions are derived from these
EASE_IN = {
    EasingStyle.LINEAR: lambda t: t,
    EasingStyle.SINE: lambda t: 1 - math.cos(t * math.pi / 2),
    EasingStyle.QUAD: lambda t: t ** 2,
    EasingStyle.CUBIC: lambda t: t ** 3,
    EasingStyle.QUART: lambda t: t ** 4,
    EasingStyle.QUINT: lambda t: t ** 5,
    EasingStyle.EXPONENTIAL: _exponential_in,
    EasingStyle.CIRCULAR: lambda t: 1 - math.sqrt(max(0.0, 1 - t * t)),
    EasingStyle.BACK: lambda t: t * t * ((BACK_OVERSHOOT + 1) * t - BACK_OVERSHOOT),
    EasingStyle.BOUNCE: lambda t: 1 - _bounce_out(1 - t),
    EasingStyle.ELASTIC: _elastic_in,
}


def get_value(alpha, style, direction):
    """Remap `alpha` (clamped to 0-1) through the curve for style/direction"""
    style = EasingStyle(style)
    direction = EasingDirection(direction)
    ease_in = EASE_IN[style]
    t = max(0.0, min(1.0, alpha))

    if direction == EasingDirection.IN:
        return ease_in(t)
    if direction == EasingDirection.OUT:
        return 1 - ease_in(1 - t)
    if t < 0.5:
        return ease_in(t * 2) / 2
    return 1 - ease_in(2 - t * 2) / 2
