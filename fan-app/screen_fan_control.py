from __future__ import annotations

"""
Fan Controller - Fan Control Screen

Hosts the DialView.  A title bar sits on top, the dial fills the middle, and
a status line at the bottom reads out the dial's accessibility info so the
current setting and the effect of the next tap are always visible.

Layout (600 x 720, see config):
  Title   (y 0–40)
  Dial    (y 40–688)
  Status  (y 688–720)

The dial's labels sit outside its rim, so the 55 px labels only fit inside
a dial area of about 540 x 520 px or more.  Whatever does not fit is
clipped to the dial area.
"""

import pygame

from accessibility import ACTION_CLICK
from dial_view import DialView
from ui_manager import load_font

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

TITLE_H  = 40
STATUS_H = 32

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------

BG_COLOR     = (255, 255, 255)
TITLE_BG     = (0,   150, 136)
TITLE_COLOR  = (255, 255, 255)
STATUS_COLOR = (80,  80,  80)


class ScreenFanControl:
    """Single-dial fan control screen.

    Args:
        surface: pygame.Surface, or a UIManager whose surface and fonts are
                 reused.  Detected via ``hasattr(surface, '_surface')``.
        attrs:   Styled attributes handed to the DialView.
    """

    def __init__(self, surface, attrs: dict | None = None) -> None:
        if hasattr(surface, "_surface"):
            self._surface = surface._surface
            self._ui      = surface
        else:
            self._surface = surface
            self._ui      = None

        if self._ui is not None and hasattr(self._ui, "heading_font"):
            self._heading = self._ui.heading_font
            self._body    = self._ui.body_font
        else:
            self._heading = load_font("dejavusans", 22, bold=True)
            self._body    = load_font("dejavusans", 16)

        w, h = self._surface.get_size()
        self.dial = DialView(
            pygame.Rect(0, TITLE_H, w, h - TITLE_H - STATUS_H),
            attrs=attrs,
        )
        self.dial.focused = True
        self._dirty = True

    # ------------------------------------------------------------------
    # Screen interface
    # ------------------------------------------------------------------

    @property
    def needs_redraw(self) -> bool:
        return self._dirty or self.dial.needs_redraw

    def on_enter(self) -> None:
        self._dirty = True

    def update(self, dt: float) -> None:
        pass

    def handle_event(self, event) -> None:
        if event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
            return
        self.dial.handle_event(event)

    def handle_touch(self, x: int, y: int) -> None:
        self.dial.handle_touch(x, y)

    def resize(self, width: int, height: int) -> None:
        self.dial.set_bounds(
            pygame.Rect(0, TITLE_H, width, max(0, height - TITLE_H - STATUS_H)))
        self._dirty = True

    def status_text(self) -> str:
        """Spoken-style summary of the dial's accessibility info."""
        info = self.dial.create_accessibility_node_info()
        action = info.get_action(ACTION_CLICK)
        hint = action.label if action is not None and action.label else "activate"
        return f"Fan speed: {info.content_description} · tap to {hint}"

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: pygame.Surface | None = None) -> None:
        target = surface if surface is not None else self._surface
        w, h = target.get_size()
        target.fill(BG_COLOR)

        title_rect = pygame.Rect(0, 0, w, TITLE_H)
        pygame.draw.rect(target, TITLE_BG, title_rect)
        t_surf = self._heading.render("Fan Control", True, TITLE_COLOR)
        target.blit(t_surf, t_surf.get_rect(midleft=(12, title_rect.centery)))

        self.dial.draw(target)

        s_surf = self._body.render(self.status_text(), True, STATUS_COLOR)
        target.blit(s_surf, s_surf.get_rect(center=(w // 2, h - STATUS_H // 2)))
        self._dirty = False
