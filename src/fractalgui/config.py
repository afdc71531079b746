"""
Configuration & Global Constants
================================
This module serves as the central registry for application-wide constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps window geometry, colors and labels out of the
   widget code.
2. Identity: It defines the organization/application ids used by Qt
   (QSettings, window manager class names).

Exports:
    WINDOW_WIDTH, WINDOW_HEIGHT (int): Initial main window size.
    BACKGROUND_COLOR (str): Canvas background.
    FOREGROUND_COLOR (str): Pen color for all fractals.
"""
import logging
from typing import Optional

ORG_ID = "fractalgui"
APP_ID = "fraktale"

VISIBLE_APP_NAME = "Fraktale"

WINDOW_WIDTH: int = 1024
WINDOW_HEIGHT: int = 768

BACKGROUND_COLOR: str = "white"
FOREGROUND_COLOR: str = "black"

# Button labels in display order (key -> label)
FRACTAL_LABELS: dict[str, str] = {
    "cantor": "Cantor Set",
    "sierpinski": "Sierpinski Dreieck",
    "koch": "Kochkurve",
    "tree": "Rekursiver Baum",
}

# Logging (see fractalgui.logging_config)
LOG_LEVEL: int = logging.INFO
LOG_FILE: Optional[str] = None  # e.g. "fraktale.log" to also write a log file
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT: str = '%H:%M:%S'
