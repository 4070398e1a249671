# -*- coding: utf-8 -*-
"""
Password Generator & Strength Meter (PyQt5)

Window features
- Length slider (synced with a spin box) and four character-class toggles.
- Every change regenerates the password and refreshes entropy, crack time and strength.
- Refresh / Copy actions, with optional clipboard auto-clear.

All computation lives in password_engine; this module only reads widgets into a
PasswordRequest and renders the resulting PasswordReport.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from password_engine import PasswordEngine, PasswordReport, PasswordRequest

# -------------------------
# Application Constants
# -------------------------

APP_ORG = "PasswordTools"
APP_NAME = "PasswordGenerator"
APP_TITLE = "Password Generator & Strength Meter"

DEFAULT_LENGTH = 16
MIN_LENGTH = 1
MAX_LENGTH = 128

CLIPBOARD_CLEAR_SECONDS = 30

COPIED_MESSAGE = "Password copied to clipboard!"


logger = logging.getLogger(__name__)


# =========================
#        MAIN WINDOW
# =========================

class MainWindow(QtWidgets.QMainWindow):
    """
    Settings panel on the left, password and metrics on the right.

    The window owns no password state of its own: the displayed password is whatever the
    last recomputation produced.
    """

    def __init__(self, engine: Optional[PasswordEngine] = None) -> None:
        super().__init__()

        self.engine = engine if engine is not None else PasswordEngine()
        self.report: Optional[PasswordReport] = None

        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(720, 360)

        self._clipboard_clear_timer: Optional[QtCore.QTimer] = None
        self._last_copied_value: str = ""

        self._apply_global_styles()
        self._build_ui()
        self.update_password()

    # ---------- UI CONSTRUCTION ----------

    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        self.setCentralWidget(central)

        layout = QtWidgets.QHBoxLayout(central)

        self._build_toolbar()
        self._build_menu_bar()

        layout.addWidget(self._build_settings_panel(), stretch=2)
        layout.addWidget(self._build_output_panel(), stretch=3)

        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready.")

    def _build_settings_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Settings")
        layout = QtWidgets.QVBoxLayout(group)

        length_row = QtWidgets.QHBoxLayout()
        length_label = QtWidgets.QLabel("Length:")
        self.length_spin = QtWidgets.QSpinBox()
        self.length_spin.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_spin.setValue(DEFAULT_LENGTH)

        self.length_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.length_slider.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_slider.setValue(DEFAULT_LENGTH)

        # sync
        self.length_spin.valueChanged.connect(self.length_slider.setValue)
        self.length_slider.valueChanged.connect(self.length_spin.setValue)

        length_row.addWidget(length_label)
        length_row.addWidget(self.length_spin)
        length_row.addWidget(self.length_slider)
        layout.addLayout(length_row)

        self.lower_cb = QtWidgets.QCheckBox("Lowercase (a–z)")
        self.upper_cb = QtWidgets.QCheckBox("Uppercase (A–Z)")
        self.digits_cb = QtWidgets.QCheckBox("Numbers (0–9)")
        self.symbols_cb = QtWidgets.QCheckBox("Symbols (!@#$...)")

        for cb in self._class_checkboxes():
            cb.setChecked(True)
            layout.addWidget(cb)

        layout.addStretch(1)

        # The slider drives recomputation; the spin box only mirrors it.
        self.length_slider.valueChanged.connect(self.update_password)
        for cb in self._class_checkboxes():
            cb.stateChanged.connect(self.update_password)

        return group

    def _build_output_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Password & Strength")
        layout = QtWidgets.QVBoxLayout(group)

        mono_font = QtGui.QFont("Consolas")
        mono_font.setStyleHint(QtGui.QFont.TypeWriter)

        self.password_edit = QtWidgets.QLineEdit()
        self.password_edit.setReadOnly(True)
        self.password_edit.setFont(mono_font)
        self.password_edit.setPlaceholderText("Select at least one character set.")
        layout.addWidget(self.password_edit)

        btn_row = QtWidgets.QHBoxLayout()
        self.refresh_btn = QtWidgets.QPushButton("Refresh")
        self.copy_btn = QtWidgets.QPushButton("Copy")
        btn_row.addWidget(self.refresh_btn)
        btn_row.addWidget(self.copy_btn)
        layout.addLayout(btn_row)

        strength_row = QtWidgets.QHBoxLayout()
        self.strength_light = QtWidgets.QLabel()
        self.strength_light.setFixedSize(18, 18)
        self.strength_label = QtWidgets.QLabel("")
        strength_row.addWidget(self.strength_light)
        strength_row.addWidget(self.strength_label, stretch=1)
        layout.addLayout(strength_row)

        metrics_form = QtWidgets.QFormLayout()
        self.entropy_label = QtWidgets.QLabel("")
        self.crack_time_label = QtWidgets.QLabel("")
        metrics_form.addRow("Entropy:", self.entropy_label)
        metrics_form.addRow("Time to crack:", self.crack_time_label)
        layout.addLayout(metrics_form)

        self.clipboard_clear_cb = QtWidgets.QCheckBox(
            f"Auto-clear clipboard after {CLIPBOARD_CLEAR_SECONDS} seconds"
        )
        self.clipboard_clear_cb.setChecked(False)
        layout.addWidget(self.clipboard_clear_cb)

        layout.addStretch(1)

        self.refresh_btn.clicked.connect(self.update_password)
        self.copy_btn.clicked.connect(self.on_copy_clicked)

        return group

    def _build_toolbar(self) -> None:
        toolbar = QtWidgets.QToolBar("Main Toolbar")
        toolbar.setIconSize(QtCore.QSize(20, 20))
        self.addToolBar(toolbar)

        style = self.style()

        def add_action(text: str, icon, shortcut: str, handler, status_tip: str) -> QtWidgets.QAction:
            action = QtWidgets.QAction(icon, text, self)
            action.setShortcut(shortcut)
            action.setStatusTip(status_tip)
            action.triggered.connect(handler)
            toolbar.addAction(action)
            return action

        add_action(
            "Refresh password",
            style.standardIcon(QtWidgets.QStyle.SP_BrowserReload),
            "Ctrl+R",
            self.update_password,
            "Generate a new password with the current settings",
        )
        add_action(
            "Copy to clipboard",
            style.standardIcon(QtWidgets.QStyle.SP_DialogSaveButton),
            "Ctrl+C",
            self.on_copy_clicked,
            "Copy the current password to clipboard",
        )

    def _build_menu_bar(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        exit_action = QtWidgets.QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    # ---------- STYLES ----------

    def _apply_global_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow { background-color: #202124; }

            QGroupBox {
                color: #ffffff;
                font-weight: 600;
                border: 1px solid #444;
                border-radius: 8px;
                margin-top: 10px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 8px;
                padding: 0 4px;
            }

            QLabel { color: #e8eaed; }

            QLineEdit {
                background-color: #303134;
                color: #e8eaed;
                border-radius: 4px;
                padding: 4px;
                border: 1px solid #555;
            }

            QSpinBox, QSlider, QCheckBox, QMenuBar, QMenu, QStatusBar {
                color: #e8eaed;
                background-color: #202124;
            }

            QPushButton {
                background-color: #1a73e8;
                color: #ffffff;
                border-radius: 4px;
                padding: 6px 12px;
                border: 1px solid #1a73e8;
            }
            QPushButton:hover { background-color: #4285f4; }
            QPushButton:pressed { background-color: #3367d6; }
            """
        )

    def _set_strength_light(self, color: str) -> None:
        self.strength_light.setStyleSheet(
            f"background-color: {color}; border-radius: 9px; border: 1px solid #555;"
        )

    # ---------- RECOMPUTATION ----------

    def _class_checkboxes(self):
        return (self.lower_cb, self.upper_cb, self.digits_cb, self.symbols_cb)

    def read_request(self) -> PasswordRequest:
        return PasswordRequest.from_flags(
            self.length_slider.value(),
            lowercase=self.lower_cb.isChecked(),
            uppercase=self.upper_cb.isChecked(),
            digits=self.digits_cb.isChecked(),
            symbols=self.symbols_cb.isChecked(),
        )

    def update_password(self) -> None:
        report = self.engine.compute(self.read_request())
        self.report = report

        self.password_edit.setText(report.password)
        self.entropy_label.setText(report.entropy_display)
        self.crack_time_label.setText(report.crack_time_display)
        self.strength_label.setText(report.strength_label)
        self._set_strength_light(report.strength_color)

    # ---------- ACTIONS ----------

    def on_copy_clicked(self) -> None:
        pwd = self.password_edit.text()
        if not pwd:
            self.status_bar.showMessage("No password to copy.", 5000)
            return

        clipboard = QtWidgets.QApplication.clipboard()
        clipboard.setText(pwd)

        self._last_copied_value = pwd
        self.status_bar.showMessage(COPIED_MESSAGE, 5000)

        if self.clipboard_clear_cb.isChecked():
            self._schedule_clipboard_clear(seconds=CLIPBOARD_CLEAR_SECONDS)

    def _schedule_clipboard_clear(self, seconds: int) -> None:
        if self._clipboard_clear_timer is not None:
            self._clipboard_clear_timer.stop()
            self._clipboard_clear_timer.deleteLater()
            self._clipboard_clear_timer = None

        timer = QtCore.QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(self.clear_clipboard_if_unchanged)
        timer.start(max(1, seconds) * 1000)

        self._clipboard_clear_timer = timer

    def clear_clipboard_if_unchanged(self) -> None:
        clipboard = QtWidgets.QApplication.clipboard()
        if self._last_copied_value and clipboard.text() == self._last_copied_value:
            clipboard.clear()
            logger.debug("Clipboard auto-cleared.")
            self.status_bar.showMessage("Clipboard cleared (auto-clear).", 5000)


# =========================
#          ENTRY
# =========================

def main() -> None:
    # High-DPI attributes must be set before the application is created.
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    app = QtWidgets.QApplication(sys.argv)
    app.setOrganizationName(APP_ORG)
    app.setApplicationName(APP_NAME)

    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
