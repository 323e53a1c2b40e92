# Module: keyboard templates and key layout.
# Main: FULL_KEYBOARD, COMPACT_KEYBOARD, LayoutMode, parse_template, layout_keyboard.
# Example: layout_keyboard(template_for("full"), QRect(0, 0, 1000, 500))

import logging
from dataclasses import dataclass, field
from typing import Container, Dict, List, Literal, Optional

from PySide6.QtCore import QPoint, QRect

from ahkmap.core import config

logger = logging.getLogger(__name__)

ROW_DELIM = "\\"
TOKEN_END = "}"
TOKEN_OPEN = "{"

FULL_KEYBOARD = (
    "1{Esc}1{}1{F1}1{F2}1{F3}1{F4}1{}1{F5}1{F6}1{F7}1{F8}1{}1{F9}1{F10}1{F11}1{F12}\\"
    "1.5{~}1{1}1{2}1{3}1{4}1{5}1{6}1{7}1{8}1{9}1{0}1{-}1{=}2.5{Bkspc}\\"
    "2{Tab}1{Q}1{W}1{E}1{R}1{T}1{Y}1{U}1{I}1{O}1{P}1{[}1{]}2{Bkslsh}\\"
    "2.5{CapsLock}1{A}1{S}1{D}1{F}1{G}1{H}1{J}1{K}1{L}1{;}1{'}2.5{Enter}\\"
    "3{Shift}1{Z}1{X}1{C}1{V}1{B}1{N}1{M}1{,}1{.}1{/}3{Shift}\\"
    "1.5{Ctrl}1.5{Win}1.5{Alt}6{Space}1.5{Alt}1.5{Fn}1{Ctx}1.5{Ctrl}"
)

COMPACT_KEYBOARD = (
    "1{Esc}1{}1{F1}1{F2}1{F3}1{F4}\\"
    "1.5{~}1{1}1{2}1{3}1{4}1{5}\\"
    "2{Tab}1{Q}1{W}1{E}1{R}1{T}\\"
    "2.5{CapsLock}1{A}1{S}1{D}1{F}1{G}\\"
    "3{Shift}1{Z}1{X}1{C}1{V}1{B}\\"
    "1.5{Ctrl}1.5{Win}1.5{Alt}3.5{Space}"
)

LayoutMode = Literal["full", "compact"]

TEMPLATES: Dict[str, str] = {
    "full": FULL_KEYBOARD,
    "compact": COMPACT_KEYBOARD,
}


@dataclass(frozen=True)
class KeySpec:
    width: float
    name: str = ""

    @property
    def is_spacer(self) -> bool:
        return self.name == ""


@dataclass
class KeyRect:
    rect: QRect
    name: str

    @property
    def key(self) -> str:
        return self.name.lower()


@dataclass
class KeyboardLayout:
    keys: List[KeyRect] = field(default_factory=list)
    anchors: Dict[str, QPoint] = field(default_factory=dict)
    key_dim: int = 0
    columns: float = 0.0
    rows: int = 0
    view: QRect = field(default_factory=QRect)


def template_for(mode: LayoutMode) -> str:
    return TEMPLATES[mode]


def parse_row(row: str) -> List[KeySpec]:
    """Parse one row like "1.5{~}1{1}" into KeySpecs. Bad widths raise ValueError."""
    specs: List[KeySpec] = []
    for token in row.split(TOKEN_END):
        delim = token.find(TOKEN_OPEN)
        if delim == -1:
            continue
        specs.append(KeySpec(width=float(token[:delim]), name=token[delim + 1:]))
    return specs


def parse_template(template: str) -> List[List[KeySpec]]:
    return [parse_row(row) for row in template.split(ROW_DELIM)]


def row_width(row: List[KeySpec]) -> float:
    return sum(k.width for k in row)


def column_count(rows: List[List[KeySpec]]) -> float:
    return max((row_width(r) for r in rows), default=0.0)


def layout_keyboard(template: str, view: QRect, bound: Optional[Container[str]] = None) -> KeyboardLayout:
    """Place every key of the template inside view.

    Keys are square cells of one uniform size, the largest that fits both
    axes, and the block is centred horizontally. Anchors (top edge, half a
    unit in from the key's left side) are recorded for keys whose lowercase
    name is in bound, or for every key when bound is None. A name that
    occurs twice keeps its first anchor.
    """
    rows = parse_template(template)
    columns = column_count(rows)

    if columns <= 0 or not rows:
        return KeyboardLayout(view=QRect(view), rows=len(rows))

    key_w = int(view.width() / columns)
    key_h = int(view.height() / len(rows))
    key_dim = max(0, min(key_w, key_h))

    diff = view.width() - key_dim * columns
    block = QRect(view)
    block.setX(view.x() + int(diff / 2))
    block.setWidth(int(key_dim * columns))

    layout = KeyboardLayout(key_dim=key_dim, columns=columns, rows=len(rows), view=block)

    for row_idx, row in enumerate(rows):
        pos_x = 0.0
        top = row_idx * key_dim + block.y()
        for spec in row:
            if not spec.is_spacer:
                rect = QRect(int(pos_x * key_dim + block.x()), top, int(key_dim * spec.width), key_dim)
                layout.keys.append(KeyRect(rect=rect, name=spec.name))

                key = spec.name.lower()
                if (bound is None or key in bound) and key not in layout.anchors:
                    layout.anchors[key] = QPoint(int((pos_x + 0.5) * key_dim + block.x()), top)
            pos_x += spec.width

    if config.DEBUG_LAYOUT:
        logger.debug(
            "Layout: %d keys, %.1f cols x %d rows, key_dim=%d, block=%s",
            len(layout.keys), columns, len(rows), key_dim, block,
        )
    return layout
