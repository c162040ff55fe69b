from __future__ import annotations

"""
Fan Controller - Pygame Display Manager

Manages pygame initialisation, screen transitions and the main render loop.

The UIManager can be constructed in two modes:

  1. Hardware mode (no surface argument):
       mgr = UIManager()
     pygame.init() is called, the display is created from config (windowed
     or fullscreen), and the clock and fonts are set up.

  2. Headless / test mode (surface provided):
       mgr = UIManager(surface)
     pygame is NOT re-initialised.  The supplied surface is used directly.
     Clock and display-flip calls are skipped.
"""

import logging

import pygame

import config

log = logging.getLogger(__name__)


def load_font(family: str, size: int, bold: bool = False) -> pygame.font.Font:
    """Load a named system font, falling back to the default pygame font."""
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        font = pygame.font.SysFont(family, size, bold=bold)
        # SysFont can return None in dummy SDL environments
        if font is None:
            raise RuntimeError("SysFont returned None")
        return font
    except Exception:
        return pygame.font.SysFont(None, size, bold=bold)


class UIManager:
    """Manages registered screens and dispatches events, updates, and draws.

    Screens are registered by name and activated via switch_to().  Only the
    active screen receives update(), draw() and event calls.  A screen that
    exposes ``needs_redraw`` is only redrawn when it reports True.

    Args:
        surface: Optional pygame.Surface for headless / test mode.
    """

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def __init__(self, surface=None) -> None:
        self._test_mode = surface is not None

        if self._test_mode:
            pygame.font.init()
            self._surface = surface
            self.screen   = surface
            self.clock    = None
        else:
            pygame.init()
            flags = pygame.FULLSCREEN if config.FULLSCREEN else pygame.RESIZABLE
            self.screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H), flags)
            pygame.display.set_caption("Fan Controller")
            self._surface = self.screen
            self.clock = pygame.time.Clock()
            log.info("Display %dx%d (%s)", config.SCREEN_W, config.SCREEN_H,
                     "fullscreen" if config.FULLSCREEN else "windowed")
        self._init_fonts_safe()

        self._screens: dict[str, object] = {}
        self._active: str | None = None
        self.current_screen: str | None = None

    # ------------------------------------------------------------------
    # Font loading
    # ------------------------------------------------------------------

    def _init_fonts_safe(self) -> None:
        """Load DejaVu Sans at each needed size, falling back to the default font."""
        self.heading_font = load_font("dejavusans", 22, bold=True)
        self.body_font    = load_font("dejavusans", 16)

    # ------------------------------------------------------------------
    # Screen registry
    # ------------------------------------------------------------------

    def register_screen(self, name: str, screen_obj) -> None:
        """Add a screen to the registry under the given name."""
        self._screens[name] = screen_obj

    def switch_to(self, name: str) -> None:
        """Activate the named screen.

        Raises:
            KeyError: If *name* has not been registered.
        """
        if name not in self._screens:
            raise KeyError(f"Unknown screen: {name!r}")
        if self._active is not None and self._active != name:
            old = self._screens[self._active]
            if hasattr(old, "on_exit"):
                old.on_exit()
        self._active = name
        self.current_screen = name
        new = self._screens[name]
        if hasattr(new, "on_enter"):
            new.on_enter()

    # ------------------------------------------------------------------
    # Main-loop hooks
    # ------------------------------------------------------------------

    def handle_event(self, event) -> None:
        """Route a single pygame event to the active screen (if any).

        Left-button presses go to ``handle_touch(x, y)`` when the screen has
        one; everything else goes to ``handle_event(event)``.
        """
        if self._active is None:
            return
        screen = self._screens[self._active]
        if (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                and hasattr(screen, "handle_touch")):
            screen.handle_touch(event.pos[0], event.pos[1])
        elif hasattr(screen, "handle_event"):
            screen.handle_event(event)

    def handle_events(self) -> bool:
        """Drain the pygame event queue and dispatch to the active screen.

        Returns:
            ``False`` if the application should quit (QUIT or Escape pressed),
            ``True`` otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.handle_event(event)
        return True

    def update(self, dt: float) -> None:
        if self._active is not None:
            self._screens[self._active].update(dt)

    def draw(self) -> bool:
        """Render the active screen if it needs it.

        Returns:
            ``True`` if a frame was drawn.
        """
        drawn = False
        if self._active is not None:
            active_screen = self._screens[self._active]
            if getattr(active_screen, "needs_redraw", True):
                active_screen.draw(self._surface)
                drawn = True

        if not self._test_mode:
            if drawn:
                pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(config.FPS)
        return drawn
