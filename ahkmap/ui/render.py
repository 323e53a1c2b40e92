# Module: keymap renderer (layout -> keys -> labels -> help bar).
# Main: draw_keymap, draw_key, draw_label.
# Example: draw_keymap(PainterSurface(painter), bindings, widget.rect(), "full")

from typing import Optional

from PySide6.QtCore import QRect

from ahkmap.core import config
from ahkmap.core.geometry import centered_rect, keyboard_view, viewport_rect
from ahkmap.core.keyboard import KeyboardLayout, KeyRect, LayoutMode, layout_keyboard, template_for
from ahkmap.core.label_bank import LabelBank
from ahkmap.core.labels import LabelPlacement, place_labels
from ahkmap.core.models import Bindings
from ahkmap.ui.surface import DrawingSurface


def draw_key(surface: DrawingSurface, key: KeyRect, active: bool) -> None:
    pad = config.KEY_PADDING
    box = key.rect.adjusted(pad, pad, -pad, -pad)
    if active:
        fill, text = config.KEY_ACTIVE_FILL, config.KEY_ACTIVE_TEXT
    else:
        fill, text = config.KEY_IDLE_FILL, config.KEY_IDLE_TEXT

    surface.fill_rect(box, fill, config.KEY_RADIUS)
    surface.draw_text(box.x(), box.y(), key.name, config.HEADER_FONT, text)
    surface.stroke_rect(box, config.KEY_OUTLINE, config.KEY_RADIUS)


def draw_label(surface: DrawingSurface, label: LabelPlacement) -> None:
    surface.draw_text(label.x, label.y, label.text, config.LABEL_FONT, config.LABEL_TEXT)
    if label.elbow:
        surface.draw_polyline(label.points, config.CONNECTOR, config.CONNECTOR_WIDTH, arrow=True)
    else:
        surface.draw_line(label.points[0], label.points[1], config.CONNECTOR, config.CONNECTOR_WIDTH, arrow=True)


def draw_help_bar(surface: DrawingSurface, viewport: QRect, message: str = config.HELP_MESSAGE) -> None:
    width = surface.measure_text(message, config.LABEL_FONT)
    box = centered_rect(viewport, width, config.HELP_BAR_HEIGHT, bottom_inset=12)
    surface.fill_rect(box, config.HELP_FILL)
    surface.draw_text(box.x(), box.y(), message, config.LABEL_FONT, config.HELP_TEXT)


def draw_keymap(
    surface: DrawingSurface,
    bindings: Optional[Bindings],
    clip: QRect,
    mode: LayoutMode = "full",
) -> KeyboardLayout:
    """Render one frame. Everything is recomputed from bindings, clip and mode."""
    bindings = bindings or {}
    viewport = viewport_rect(clip)
    view = keyboard_view(viewport)

    left_bank = LabelBank(view.y(), view.height())
    right_bank = LabelBank(view.y(), view.height())

    layout = layout_keyboard(template_for(mode), view, bound=bindings)

    surface.clear(config.BACKGROUND)

    for key in layout.keys:
        draw_key(surface, key, active=key.key in bindings)

    def measure(text: str) -> float:
        return surface.measure_text(text, config.LABEL_FONT)

    # labels go on top of the keys
    for label in place_labels(bindings, layout, viewport, measure, left_bank, right_bank):
        draw_label(surface, label)

    draw_help_bar(surface, viewport)
    return layout
