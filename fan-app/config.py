"""
Fan Controller - App Configuration
"""

import logging

# Touchscreen display
SCREEN_W   = 600
SCREEN_H   = 720
FULLSCREEN = False
FPS        = 30

# Styled attributes for the dial: colors for fan speeds 1, 2 and 3
DIAL_ATTRS = {
    "fanColor1": "#FFEB3B",   # yellow
    "fanColor2": "#CDDC39",   # lime
    "fanColor3": "#009688",   # teal
}

# Logging
LOG_LEVEL = logging.INFO
