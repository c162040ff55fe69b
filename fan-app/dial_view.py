from __future__ import annotations

"""
Fan Controller - Dial View

A custom-drawn circular dial that resembles a physical fan control with
settings off, 1, 2 and 3.  Each tap (or activation key while focused)
advances one setting; after 3 the dial wraps back to off.

Drawing, back to front:
  1. dial disc, filled with the color of the current setting
  2. black indicator disc on the current setting, just inside the rim
  3. the label of every setting, just outside the rim

Geometry
--------
Setting ``i`` sits at angle ``9π/8 + i·π/4`` measured from the positive x
axis with y growing downwards, so "off" sits just above centre-left and
the settings run clockwise over the top to "3" just above centre-right.
The dial radius is 80 % of half the shorter side and is recomputed
whenever the widget is resized.  Drawing is clipped to the view bounds.

All coordinates kept on the view (``point_position``, ``center``) are local
to the view's bounds; ``to_screen()`` converts them for drawing.
"""

import logging
import math

import pygame
import pygame.gfxdraw

from accessibility import (
    ACTION_CLICK,
    AccessibilityAction,
    AccessibilityDelegate,
    AccessibilityNodeInfo,
)
from dial_style import DialStyle
from fan_speed import FanSpeed, color_for
from ui_manager import load_font

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

RADIUS_OFFSET_LABEL     = 30    # labels sit outside the rim
RADIUS_OFFSET_INDICATOR = -35   # indicator sits inside the rim

START_ANGLE = math.pi * (9 / 8.0)
STEP_ANGLE  = math.pi / 4

LABEL_SIZE  = 55
INK_COLOR   = (0, 0, 0)

ACTION_LABEL_CHANGE = "change"
ACTION_LABEL_RESET  = "reset"

_ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


class _ClickActionDelegate(AccessibilityDelegate):
    """Announces what the next click does instead of a generic "activate"."""

    def on_initialize_accessibility_node_info(self, host, info: AccessibilityNodeInfo) -> None:
        super().on_initialize_accessibility_node_info(host, info)
        info.add_action(AccessibilityAction(ACTION_CLICK, host.action_label))


# ---------------------------------------------------------------------------
# DialView
# ---------------------------------------------------------------------------

class DialView:
    """Four-position fan speed dial.

    Args:
        bounds: Optional ``pygame.Rect`` (or rect-style tuple) the view
                occupies on its surface.  May be set later via set_bounds().
        attrs:  Styled attributes; ``fanColor1``..``fanColor3`` give the
                colors for settings 1..3.  See ``dial_style``.
    """

    def __init__(self, bounds=None, attrs: dict | None = None) -> None:
        self.style = DialStyle.from_attrs(attrs)

        self.fan_speed = FanSpeed.OFF
        self.radius = 0.0
        self.point_position = (0.0, 0.0)
        self.bounds = pygame.Rect(0, 0, 0, 0)

        self.clickable = True
        self.focused = False
        self.click_listener = None
        self.content_description = ""
        self.needs_redraw = True

        self._accessibility_delegate: AccessibilityDelegate = _ClickActionDelegate()
        self._font = None

        if bounds is not None:
            self.set_bounds(bounds)
        self.update_content_description()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    @property
    def center(self) -> tuple[int, int]:
        return (self.width // 2, self.height // 2)

    def set_bounds(self, rect) -> None:
        """Move / resize the view.  on_size_changed() fires only on a resize."""
        new = pygame.Rect(rect)
        old_w, old_h = self.bounds.size
        self.bounds = new
        if new.size != (old_w, old_h):
            self.on_size_changed(new.width, new.height, old_w, old_h)
        self.invalidate()

    def on_size_changed(self, width: int, height: int, old_width: int, old_height: int) -> None:
        self.radius = min(width, height) / 2.0 * 0.8

    def compute_xy_for_speed(self, speed: FanSpeed, radius: float) -> tuple[float, float]:
        """Return (and cache) the view-local point for *speed* on a circle of *radius*."""
        angle = START_ANGLE + speed.ordinal * STEP_ANGLE
        cx, cy = self.center
        x = radius * math.cos(angle) + cx
        y = radius * math.sin(angle) + cy
        self.point_position = (x, y)
        return self.point_position

    def to_screen(self, point) -> tuple[int, int]:
        """Convert a view-local point to integer surface coordinates."""
        return (int(round(point[0])) + self.bounds.x,
                int(round(point[1])) + self.bounds.y)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def current(self) -> FanSpeed:
        return self.fan_speed

    @property
    def action_label(self) -> str:
        """What the next click does: "reset" on the last setting, otherwise "change"."""
        return ACTION_LABEL_RESET if self.fan_speed.is_last else ACTION_LABEL_CHANGE

    def update_content_description(self) -> None:
        self.content_description = self.fan_speed.label

    def invalidate(self) -> None:
        self.needs_redraw = True

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def perform_click(self) -> bool:
        """Advance to the next fan speed and schedule a redraw.

        A click listener returning True consumes the click and leaves the
        dial where it is.
        """
        if self.click_listener is not None and self.click_listener(self):
            return True
        previous = self.fan_speed
        self.fan_speed = self.fan_speed.next()
        self.update_content_description()
        self.invalidate()
        log.debug("Fan speed %s -> %s", previous.name, self.fan_speed.name)
        return True

    def handle_touch(self, x: int, y: int) -> bool:
        """Click the dial if it is clickable and (x, y) falls inside it."""
        if not self.clickable or not self.bounds.collidepoint(x, y):
            return False
        return self.perform_click()

    def handle_event(self, event) -> bool:
        """Dispatch a pygame event.  Returns True if the dial consumed it."""
        if not self.clickable:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self.handle_touch(*event.pos)
        if event.type == pygame.KEYDOWN and self.focused and event.key in _ACTIVATE_KEYS:
            return self.perform_click()
        return False

    # ------------------------------------------------------------------
    # Accessibility
    # ------------------------------------------------------------------

    def set_accessibility_delegate(self, delegate: AccessibilityDelegate) -> None:
        self._accessibility_delegate = delegate

    def create_accessibility_node_info(self) -> AccessibilityNodeInfo:
        info = AccessibilityNodeInfo(
            content_description=self.content_description,
            clickable=self.clickable,
        )
        if self._accessibility_delegate is not None:
            self._accessibility_delegate.on_initialize_accessibility_node_info(self, info)
        return info

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: pygame.Surface) -> None:
        """Render the dial onto *surface*, clipped to the view bounds."""
        if self.width > 0 and self.height > 0:
            previous_clip = surface.get_clip()
            surface.set_clip(self.bounds.clip(previous_clip))
            try:
                paint_color = color_for(self.fan_speed, self.style)
                self._draw_dial(surface, paint_color)
                self._draw_indicator_circle(surface)
                self._draw_labels(surface)
            finally:
                surface.set_clip(previous_clip)
        self.needs_redraw = False

    def _draw_dial(self, surface: pygame.Surface, color) -> None:
        cx, cy = self.to_screen(self.center)
        r = int(round(self.radius))
        if r <= 0:
            return
        pygame.gfxdraw.filled_circle(surface, cx, cy, r, color)
        pygame.gfxdraw.aacircle(surface, cx, cy, r, color)

    def _draw_indicator_circle(self, surface: pygame.Surface) -> None:
        marker_radius = self.radius + RADIUS_OFFSET_INDICATOR
        x, y = self.to_screen(self.compute_xy_for_speed(self.fan_speed, marker_radius))
        r = int(round(self.radius / 12))
        if r <= 0:
            return
        pygame.gfxdraw.filled_circle(surface, x, y, r, INK_COLOR)
        pygame.gfxdraw.aacircle(surface, x, y, r, INK_COLOR)

    def label_rects(self) -> dict[FanSpeed, pygame.Rect]:
        """Surface rects of every label: centered on x, baseline on y."""
        label_radius = self.radius + RADIUS_OFFSET_LABEL
        font = self._label_font()
        rects = {}
        for speed in FanSpeed:
            x, y = self.to_screen(self.compute_xy_for_speed(speed, label_radius))
            w, h = font.size(speed.label)
            rect = pygame.Rect(0, 0, w, h)
            rect.centerx = x
            rect.top = y - font.get_ascent()
            rects[speed] = rect
        return rects

    def _draw_labels(self, surface: pygame.Surface) -> None:
        font = self._label_font()
        for speed, rect in self.label_rects().items():
            text = font.render(speed.label, True, INK_COLOR)
            surface.blit(text, rect)

    def _label_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = load_font("dejavusans", LABEL_SIZE, bold=True)
        return self._font


# ---------------------------------------------------------------------------
# Standalone preview
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    import config

    logging.basicConfig(level=logging.DEBUG)
    pygame.init()
    win = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("Dial View - preview")
    clock = pygame.time.Clock()

    dial = DialView(win.get_rect(), attrs=config.DIAL_ATTRS)
    dial.focused = True

    running = True
    while running:
        clock.tick(config.FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                dial.handle_event(event)
        if dial.needs_redraw:
            win.fill((255, 255, 255))
            dial.draw(win)
            pygame.display.flip()

    pygame.quit()
    sys.exit()
