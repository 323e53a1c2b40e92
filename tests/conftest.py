import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QPointF

from ahkmap.core import config


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_debug_flag():
    saved = config.DEBUG_LAYOUT
    yield
    config.DEBUG_LAYOUT = saved


class RecordingSurface:
    """DrawingSurface stand-in that records calls; text is 7 units per char."""

    CHAR_WIDTH = 7

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def measure_text(self, text, font):
        return len(text) * self.CHAR_WIDTH

    def draw_text(self, x, y, text, font, color):
        self.calls.append(("text", x, y, text, font, color))

    def fill_rect(self, rect, color, radius=0):
        self.calls.append(("fill", rect, color, radius))

    def stroke_rect(self, rect, color, radius=0, width=1):
        self.calls.append(("stroke", rect, color, radius))

    def draw_line(self, p1, p2, color, width=1, arrow=False):
        self.calls.append(("line", [QPointF(p1), QPointF(p2)], color, width))

    def draw_polyline(self, points, color, width=1, arrow=False):
        self.calls.append(("polyline", [QPointF(p) for p in points], color, width))

    def of(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def surface():
    return RecordingSurface()
