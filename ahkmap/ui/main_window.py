# Module: main Qt UI window and keymap view widget.
# Main: MainWindow, KeymapView.
# Example: from ahkmap.ui.main_window import MainWindow

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QDesktopServices, QKeySequence, QPainter, QShortcut
from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox, QWidget

from ahkmap.core import config
from ahkmap.core.keyboard import LayoutMode
from ahkmap.core.models import Bindings, binding_count
from ahkmap.core.script import read_script
from ahkmap.ui.render import draw_keymap
from ahkmap.ui.surface import PainterSurface

logger = logging.getLogger(__name__)


def about_text() -> str:
    return f"{config.ABOUT_TEXT}\n{config.BUILD_STRING}"


class KeymapView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.bindings: Bindings = {}
        self.mode: LayoutMode = "full"
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)
        self.setMinimumSize(400, 150)

    def set_bindings(self, bindings: Bindings):
        self.bindings = bindings
        self.update()

    def set_mode(self, mode: LayoutMode):
        self.mode = mode
        self.update()

    def paintEvent(self, _):
        p = QPainter(self)
        try:
            draw_keymap(PainterSurface(p), self.bindings, self.rect(), self.mode)
        finally:
            p.end()


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(config.APP_NAME)
        self.resize(1008, 256)

        self.view = KeymapView(self)
        self.setCentralWidget(self.view)

        self._last_dir = str(Path.home())
        self._build_menu()
        self._apply_dark_style()

        self._esc_shortcut = QShortcut(QKeySequence("Esc"), self)
        self._esc_shortcut.activated.connect(self.close)
        self._f11_shortcut = QShortcut(QKeySequence("F11"), self)
        self._f11_shortcut.activated.connect(self.toggle_window_decorations)

    # ---- properties ----
    @property
    def bindings(self) -> Bindings:
        return self.view.bindings

    @property
    def layout_mode(self) -> LayoutMode:
        return "full" if self.act_full_keyboard.isChecked() else "compact"

    # ---- menu ----
    def _build_menu(self):
        bar = self.menuBar()

        menu_file = bar.addMenu("File")
        act_open = menu_file.addAction("Open AHK script...")
        act_open.setShortcut(QKeySequence.Open)
        act_open.triggered.connect(self.open_script_dialog)
        menu_file.addSeparator()
        act_exit = menu_file.addAction("Exit")
        act_exit.triggered.connect(self.close)

        menu_view = bar.addMenu("View")
        self.act_full_keyboard = menu_view.addAction("Full keyboard")
        self.act_full_keyboard.setCheckable(True)
        self.act_full_keyboard.setChecked(True)
        self.act_full_keyboard.toggled.connect(self._on_full_keyboard_toggled)

        menu_help = bar.addMenu("Help")
        act_about = menu_help.addAction("About...")
        act_about.triggered.connect(self._show_about)
        self.act_site = menu_help.addAction(config.HELP_LINK_TEXT)
        self.act_site.triggered.connect(self._open_help_url)

    def _apply_dark_style(self):
        self.setStyleSheet(
            """
            QMainWindow { background: #000000; }
            QMenuBar { background: #0f1115; color: #e9eef7; }
            QMenuBar::item:selected { background: #1b2332; }
            QMenu { background: #141821; color: #e9eef7; border: 1px solid #242a36; }
            QMenu::item:selected { background: #25324a; }
            """
        )

    def _on_full_keyboard_toggled(self, checked: bool):
        self.view.set_mode("full" if checked else "compact")

    def _show_about(self):
        QMessageBox.information(self, config.ABOUT_TITLE, about_text())

    def _open_help_url(self):
        QDesktopServices.openUrl(QUrl(config.HELP_URL))

    # ---- script loading ----
    def load_script(self, path: Union[str, Path]) -> Bindings:
        """Parse path and swap in its bindings. Errors propagate; nothing changes on failure."""
        p = Path(path)
        hotkeys = read_script(p)
        self.view.set_bindings(hotkeys)
        self.setWindowTitle(p.name)
        self._last_dir = str(p.parent)
        logger.debug("Bindings replaced: %d keys, %d bindings", len(hotkeys), binding_count(hotkeys))
        return hotkeys

    def open_script_dialog(self):
        filename, _ = QFileDialog.getOpenFileName(self, "Open AHK script", self._last_dir, config.SCRIPT_FILTER)
        if not filename:
            return
        try:
            self.load_script(filename)
        except OSError as ex:
            logger.warning("Failed to load %s: %s", filename, ex)
            QMessageBox.warning(self, "Load error", f"Could not read the script:\n{ex}")

    def load_initial_script(self, path: Optional[str]) -> bool:
        """Command-line load: on success the window goes frameless."""
        if not path:
            return False
        try:
            self.load_script(path)
        except OSError as ex:
            logger.warning("Failed to load %s: %s", path, ex)
            return False
        self.toggle_window_decorations()
        return True

    # ---- window chrome ----
    def decorations_visible(self) -> bool:
        return not bool(self.windowFlags() & Qt.FramelessWindowHint)

    def toggle_window_decorations(self):
        geometry = self.geometry()
        was_visible = self.isVisible()
        frameless = self.decorations_visible()

        self.menuBar().setVisible(not frameless)
        self.setWindowFlag(Qt.FramelessWindowHint, frameless)
        # changing window flags hides the window
        if was_visible:
            self.setGeometry(geometry)
            self.show()
        self.view.update()

    def moveEvent(self, e):
        super().moveEvent(e)
        self.view.update()
