"""
pytest configuration for fan-app tests.
- Runs pygame in headless/dummy mode (no physical display required).
- Adds fan-app/ to sys.path.
"""
import os
import sys

# Headless SDL — must be set before pygame is imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Path setup
_tests_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.join(_tests_dir, ".."))   # fan-app/
