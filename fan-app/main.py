"""
Fan Controller - Main Entry Point

Builds the Pygame UI with the fan control screen and runs the main event
loop until the window is closed or Escape is pressed.

Frame flow
----------
  1. mgr.handle_events()  → taps / keys reach the dial, which advances and
                            invalidates itself
  2. mgr.update(dt)
  3. mgr.draw()           → the screen is redrawn only when invalidated
"""

import logging
import sys
import time

import config
from screen_fan_control import ScreenFanControl
from ui_manager import UIManager

log = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    mgr = UIManager()

    fan_control = ScreenFanControl(mgr, attrs=config.DIAL_ATTRS)
    mgr.register_screen("fan_control", fan_control)
    mgr.switch_to("fan_control")

    log.info("Fan Controller started")

    last_t = time.monotonic()
    try:
        running = True
        while running:
            now = time.monotonic()
            dt  = now - last_t
            last_t = now

            running = mgr.handle_events()
            mgr.update(dt)
            mgr.draw()
    except Exception:
        log.exception("Fan Controller crashed")
        raise
    finally:
        import pygame
        pygame.quit()
        log.info("Pygame quit")


if __name__ == "__main__":
    main()
