# Module: config and shared runtime flags.
# Main: geometry constants, colours/fonts, APP_NAME/BUILD_STRING, DEBUG_LAYOUT.
# Example: from ahkmap.core import config; config.LABEL_WIDTH

from typing import Tuple

# ---- App ----
APP_NAME = "Visual AutoHotKeyMap by Madgrim"
ABOUT_TITLE = "AutoHotKeyMap"
ABOUT_TEXT = "AutoHotKeyMap by Madgrim Laeknir."
BUILD_STRING = "Version 1.0 - August 10, 2021."
HELP_URL = "https://sites.google.com/view/daoc-proposals/"
HELP_LINK_TEXT = "Madgrim's DAoC Website"
HELP_MESSAGE = "Esc - exit | F11 - toggle window"
SCRIPT_FILTER = "AHK files (*.ahk);;All files (*)"

# ---- Geometry ----
VIEWPORT_MARGIN = 8   # inset of the viewport inside the clip rect
KEY_PADDING = 2       # gap between a key cell and its drawn box
KEY_RADIUS = 5        # rounded corner radius of key boxes
LABEL_WIDTH = 200     # width reserved for each label margin
SLOT_SIZE = 12        # vertical size of one label bank slot
LINE_OFFSET = 8       # connector y offset from the label top
HELP_BAR_HEIGHT = 14

# ---- Colours ----
BACKGROUND = "#000000"
KEY_ACTIVE_FILL = "#ffff00"
KEY_ACTIVE_TEXT = "#000000"
KEY_IDLE_FILL = "#202020"
KEY_IDLE_TEXT = "#ffffff"
KEY_OUTLINE = "#ffffff"
LABEL_TEXT = "#d3d3d3"
CONNECTOR = "#32cd32"
CONNECTOR_WIDTH = 2
HELP_FILL = "#ffff00"
HELP_TEXT = "#000000"

# ---- Fonts ----
FontSpec = Tuple[str, int]

HEADER_FONT: FontSpec = ("Consolas", 14)
LABEL_FONT: FontSpec = ("Consolas", 9)

# ---- Debug / runtime tuning ----
DEBUG_LAYOUT = False  # True = log key geometry and bank slots on every repaint
