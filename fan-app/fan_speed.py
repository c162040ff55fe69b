from __future__ import annotations

"""
Fan Controller - Fan Speed Positions

The four dial settings in their cyclic order.  Each member carries the label
drawn on the dial face; colors come from the dial style, except OFF which is
always a neutral gray.

Exports:
    FanSpeed       – OFF / LOW / MEDIUM / HIGH
    NEUTRAL_COLOR  – background color used for OFF
    color_for      – position + style → RGB(A) color
"""

from enum import Enum

# Color used for the OFF position regardless of the configured style.
NEUTRAL_COLOR = (136, 136, 136)


class FanSpeed(Enum):
    """Dial positions, declared in dial order (ordinal 0..3)."""

    OFF = "off"
    LOW = "1"
    MEDIUM = "2"
    HIGH = "3"

    @property
    def ordinal(self) -> int:
        return _ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_last(self) -> bool:
        return self is _ORDER[-1]

    def next(self) -> FanSpeed:
        """Return the following position, wrapping HIGH back to OFF."""
        return _ORDER[(self.ordinal + 1) % len(_ORDER)]


_ORDER: list[FanSpeed] = list(FanSpeed)


def color_for(speed: FanSpeed, style) -> tuple:
    """Return the dial background color for *speed*.

    Args:
        speed: Current fan speed.
        style: Object exposing ``low_color``, ``medium_color`` and
               ``high_color`` (normally a ``DialStyle``).
    """
    if speed is FanSpeed.OFF:
        return NEUTRAL_COLOR
    if speed is FanSpeed.LOW:
        return style.low_color
    if speed is FanSpeed.MEDIUM:
        return style.medium_color
    return style.high_color
