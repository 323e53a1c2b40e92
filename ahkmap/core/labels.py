# Module: label placement and connector routing.
# Main: LabelPlacement, place_key_labels, place_labels.
# Example: place_labels(bindings, layout, viewport, measure, left, right)

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Literal

from PySide6.QtCore import QPoint, QPointF, QRect

from ahkmap.core import config
from ahkmap.core.geometry import horizontal_mid
from ahkmap.core.keyboard import KeyboardLayout
from ahkmap.core.label_bank import LabelBank
from ahkmap.core.models import Binding, Bindings, binding_label

logger = logging.getLogger(__name__)

Side = Literal["left", "right"]
MeasureFn = Callable[[str], float]


@dataclass
class LabelPlacement:
    binding: Binding
    text: str
    side: Side
    x: float
    y: float
    points: List[QPointF] = field(default_factory=list)

    @property
    def elbow(self) -> bool:
        return len(self.points) > 2


def _route(start_x: float, label_y: float, anchor: QPoint, key_dim: int) -> List[QPointF]:
    line_y = label_y + config.LINE_OFFSET
    key_y = anchor.y() + 2 * config.KEY_PADDING

    if label_y > anchor.y() + key_dim:
        mid_x = int(config.LABEL_WIDTH + (label_y - anchor.y()))
        return [
            QPointF(int(start_x), int(line_y)),
            QPointF(mid_x, int(line_y)),
            QPointF(mid_x, key_y),
            QPointF(anchor.x(), key_y),
        ]
    return [QPointF(start_x, line_y), QPointF(anchor.x(), line_y)]


def place_key_labels(
    bindings: List[Binding],
    anchor: QPoint,
    key_dim: int,
    viewport: QRect,
    measure: MeasureFn,
    left_bank: LabelBank,
    right_bank: LabelBank,
) -> List[LabelPlacement]:
    """Place one label per binding of a single key, each taking a bank slot."""
    out: List[LabelPlacement] = []
    mid = horizontal_mid(viewport)

    for binding in bindings:
        text = binding_label(binding)
        text_w = measure(text)

        if anchor.x() < mid:
            side: Side = "left"
            bank = left_bank
            x = viewport.x() + config.VIEWPORT_MARGIN
            start_x = x + text_w
        else:
            side = "right"
            bank = right_bank
            x = viewport.x() + viewport.width() - text_w - config.VIEWPORT_MARGIN
            start_x = x

        y = bank.allocate(anchor.y() + 2 * config.KEY_PADDING)
        points = _route(start_x, y, anchor, key_dim)

        if config.DEBUG_LAYOUT:
            logger.debug("Label %r: %s bank y=%.1f elbow=%s", text, side, y, len(points) > 2)

        out.append(LabelPlacement(binding=binding, text=text, side=side, x=x, y=y, points=points))
    return out


def place_labels(
    bindings: Bindings,
    layout: KeyboardLayout,
    viewport: QRect,
    measure: MeasureFn,
    left_bank: LabelBank,
    right_bank: LabelBank,
) -> List[LabelPlacement]:
    out: List[LabelPlacement] = []
    for key, anchor in layout.anchors.items():
        key_bindings = bindings.get(key)
        if not key_bindings:
            continue
        out.extend(place_key_labels(key_bindings, anchor, layout.key_dim, viewport, measure, left_bank, right_bank))
    return out
