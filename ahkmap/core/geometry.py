# Module: geometry helpers for viewport/rect derivation.
# Main: viewport_rect, keyboard_view, horizontal_mid, centered_rect.
# Example: from ahkmap.core.geometry import viewport_rect

from PySide6.QtCore import QRect, QRectF

from ahkmap.core import config


def viewport_rect(clip: QRect, margin: int = config.VIEWPORT_MARGIN) -> QRect:
    clip = QRect(clip).normalized()
    return QRect(
        clip.x() + margin,
        clip.y() + margin,
        clip.width() - 2 * margin,
        clip.height() - 2 * margin,
    )


def keyboard_view(viewport: QRect, label_width: int = config.LABEL_WIDTH) -> QRect:
    """Area between the two label margins."""
    return QRect(
        viewport.x() + label_width,
        viewport.y(),
        viewport.width() - 2 * label_width,
        viewport.height(),
    )


def horizontal_mid(viewport: QRect) -> int:
    return viewport.x() + viewport.width() // 2


def centered_rect(viewport: QRect, width: float, height: float, bottom_inset: float) -> QRectF:
    cx = viewport.x() + viewport.width() / 2
    top = viewport.y() + viewport.height() - bottom_inset
    return QRectF(cx - width / 2, top, width, height)
