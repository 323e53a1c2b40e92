# Module: application entrypoint.
# Main: main(), parse_args().
# Example: ahkmap path/to/script.ahk

import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from ahkmap.core import config
from ahkmap.ui.main_window import MainWindow

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ahkmap", description=config.APP_NAME)
    parser.add_argument("script", nargs="?", help="AutoHotkey script to show on startup")
    parser.add_argument("--debug", action="store_true", help="log layout and label decisions")
    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)
    config.DEBUG_LAYOUT = debug


def apply_overlay_palette(app: QApplication) -> None:
    """Match dialogs and menus to the keymap: black ground, yellow selection."""
    app.setStyle("Fusion")
    palette = app.palette()
    palette.setColor(QPalette.Window, QColor(config.BACKGROUND))
    palette.setColor(QPalette.WindowText, QColor(config.KEY_IDLE_TEXT))
    palette.setColor(QPalette.Base, QColor(config.KEY_IDLE_FILL))
    palette.setColor(QPalette.Text, QColor(config.LABEL_TEXT))
    palette.setColor(QPalette.Button, QColor(config.KEY_IDLE_FILL))
    palette.setColor(QPalette.ButtonText, QColor(config.KEY_IDLE_TEXT))
    palette.setColor(QPalette.Highlight, QColor(config.KEY_ACTIVE_FILL))
    palette.setColor(QPalette.HighlightedText, QColor(config.KEY_ACTIVE_TEXT))
    palette.setColor(QPalette.Link, QColor(config.CONNECTOR))
    app.setPalette(palette)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)

    app = QApplication(sys.argv[:1])
    apply_overlay_palette(app)

    w = MainWindow()
    w.show()
    w.load_initial_script(args.script)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
