# Module: drawing surface used by the keymap renderer.
# Main: DrawingSurface (protocol), PainterSurface (QPainter backend).
# Example: PainterSurface(QPainter(widget)).draw_text(10, 10, "Esc", config.HEADER_FONT, "#fff")

import math
from typing import Dict, Protocol, Sequence, Union

from PySide6.QtCore import QLineF, QPointF, QRect, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen, QPolygonF

from ahkmap.core.config import FontSpec

RectLike = Union[QRect, QRectF]

ARROW_SIZE = 5.0


class DrawingSurface(Protocol):
    def clear(self, color: str) -> None: ...

    def measure_text(self, text: str, font: FontSpec) -> float: ...

    def draw_text(self, x: float, y: float, text: str, font: FontSpec, color: str) -> None: ...

    def fill_rect(self, rect: RectLike, color: str, radius: float = 0) -> None: ...

    def stroke_rect(self, rect: RectLike, color: str, radius: float = 0, width: float = 1) -> None: ...

    def draw_line(self, p1: QPointF, p2: QPointF, color: str, width: float = 1, arrow: bool = False) -> None: ...

    def draw_polyline(self, points: Sequence[QPointF], color: str, width: float = 1, arrow: bool = False) -> None: ...


class PainterSurface:
    """DrawingSurface over a live QPainter. Text is placed by its top-left corner."""

    def __init__(self, painter: QPainter):
        self._p = painter
        self._p.setRenderHint(QPainter.Antialiasing, True)
        self._p.setRenderHint(QPainter.TextAntialiasing, True)
        self._fonts: Dict[FontSpec, QFont] = {}

    def _font(self, spec: FontSpec) -> QFont:
        font = self._fonts.get(spec)
        if font is None:
            family, size = spec
            font = QFont(family, size)
            font.setStyleHint(QFont.Monospace)
            self._fonts[spec] = font
        return font

    def clear(self, color: str) -> None:
        device = self._p.device()
        self._p.fillRect(QRect(0, 0, device.width(), device.height()), QColor(color))

    def measure_text(self, text: str, font: FontSpec) -> float:
        return QFontMetricsF(self._font(font)).horizontalAdvance(text)

    def draw_text(self, x: float, y: float, text: str, font: FontSpec, color: str) -> None:
        qfont = self._font(font)
        self._p.setFont(qfont)
        self._p.setPen(QColor(color))
        self._p.drawText(QPointF(x, y + QFontMetricsF(qfont).ascent()), text)

    def fill_rect(self, rect: RectLike, color: str, radius: float = 0) -> None:
        self._p.setPen(Qt.NoPen)
        self._p.setBrush(QBrush(QColor(color)))
        if radius > 0:
            self._p.drawRoundedRect(QRectF(rect), radius, radius)
        else:
            self._p.drawRect(QRectF(rect))

    def stroke_rect(self, rect: RectLike, color: str, radius: float = 0, width: float = 1) -> None:
        self._p.setPen(QPen(QColor(color), width))
        self._p.setBrush(Qt.NoBrush)
        if radius > 0:
            self._p.drawRoundedRect(QRectF(rect), radius, radius)
        else:
            self._p.drawRect(QRectF(rect))

    def draw_line(self, p1: QPointF, p2: QPointF, color: str, width: float = 1, arrow: bool = False) -> None:
        self.draw_polyline([p1, p2], color, width, arrow)

    def draw_polyline(self, points: Sequence[QPointF], color: str, width: float = 1, arrow: bool = False) -> None:
        if len(points) < 2:
            return
        pen = QPen(QColor(color), width)
        pen.setCapStyle(Qt.SquareCap)
        pen.setJoinStyle(Qt.MiterJoin)
        self._p.setPen(pen)
        self._p.setBrush(Qt.NoBrush)
        self._p.drawPolyline(QPolygonF([QPointF(pt) for pt in points]))
        if arrow:
            self._draw_arrow_head(QPointF(points[-2]), QPointF(points[-1]), color, width)

    def _draw_arrow_head(self, tail: QPointF, tip: QPointF, color: str, width: float) -> None:
        line = QLineF(tail, tip)
        if line.length() == 0:
            return
        angle = math.atan2(tip.y() - tail.y(), tip.x() - tail.x())
        size = ARROW_SIZE * width
        spread = math.pi / 6
        left = QPointF(tip.x() - size * math.cos(angle - spread), tip.y() - size * math.sin(angle - spread))
        right = QPointF(tip.x() - size * math.cos(angle + spread), tip.y() - size * math.sin(angle + spread))

        self._p.setPen(Qt.NoPen)
        self._p.setBrush(QBrush(QColor(color)))
        self._p.drawPolygon(QPolygonF([tip, left, right]))
