from PySide6.QtGui import QColor, QPalette

from ahkmap.core import config
from ahkmap.runtime.app import apply_overlay_palette, parse_args, setup_logging


def test_parse_args_optional_script():
    assert parse_args([]).script is None
    args = parse_args(["macros.ahk", "--debug"])
    assert args.script == "macros.ahk"
    assert args.debug


def test_debug_logging_turns_on_layout_tracing():
    setup_logging(debug=True)
    assert config.DEBUG_LAYOUT


def test_palette_uses_keymap_colours(qapp):
    apply_overlay_palette(qapp)
    palette = qapp.palette()
    assert palette.color(QPalette.Window) == QColor(config.BACKGROUND)
    assert palette.color(QPalette.Highlight) == QColor(config.KEY_ACTIVE_FILL)
    assert palette.color(QPalette.HighlightedText) == QColor(config.KEY_ACTIVE_TEXT)
