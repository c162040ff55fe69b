from __future__ import annotations

"""
Fan Controller - Dial Style Attributes

Resolves the styled attributes a DialView is built with (the three fan speed
colors) into an immutable DialStyle.

Attribute values may be:
  - ``"#RRGGBB"`` or a pygame color name (``"teal"``)
  - ``"#AARRGGBB"`` (alpha first, as in Android color resources)
  - an ``0xAARRGGBB`` integer
  - an RGB / RGBA tuple or a ``pygame.Color``

A missing attribute falls back to color ``0``: fully transparent black.
"""

from dataclasses import dataclass

import pygame

ATTR_LOW    = "fanColor1"
ATTR_MEDIUM = "fanColor2"
ATTR_HIGH   = "fanColor3"

DEFAULT_COLOR = 0


def parse_color(value) -> tuple[int, int, int, int]:
    """Convert one attribute value to an ``(r, g, b, a)`` tuple.

    Raises:
        ValueError: If *value* cannot be interpreted as a color.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid color value: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"color out of range: {value:#x}")
        a = (value >> 24) & 0xFF
        r = (value >> 16) & 0xFF
        g = (value >> 8) & 0xFF
        b = value & 0xFF
        return (r, g, b, a)
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("#") and len(text) == 9:
            # Alpha-first hex; pygame expects alpha last.
            text = "#" + text[3:] + text[1:3]
        value = text
    try:
        color = pygame.Color(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid color value: {value!r}") from exc
    return (color.r, color.g, color.b, color.a)


@dataclass(frozen=True)
class DialStyle:
    """The three configurable fan speed colors; immutable once built."""

    low_color: tuple[int, int, int, int] = (0, 0, 0, 0)
    medium_color: tuple[int, int, int, int] = (0, 0, 0, 0)
    high_color: tuple[int, int, int, int] = (0, 0, 0, 0)

    @classmethod
    def from_attrs(cls, attrs: dict | None = None) -> DialStyle:
        """Build a style from a styled-attribute mapping.

        Args:
            attrs: Mapping with optional ``fanColor1`` / ``fanColor2`` /
                   ``fanColor3`` entries.  ``None`` means no attributes.

        Raises:
            ValueError: If a present attribute is not a valid color.
        """
        attrs = attrs or {}
        colors = []
        for name in (ATTR_LOW, ATTR_MEDIUM, ATTR_HIGH):
            raw = attrs.get(name, DEFAULT_COLOR)
            try:
                colors.append(parse_color(raw))
            except ValueError as exc:
                raise ValueError(f"{name}: {exc}") from exc
        return cls(*colors)
