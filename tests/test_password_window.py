"""Smoke tests for the desktop window (offscreen Qt platform)."""

from __future__ import annotations

import random
import string

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from PyQt5 import QtWidgets  # noqa: E402

from password_engine import PasswordEngine, PasswordGenerator  # noqa: E402
from password_window import COPIED_MESSAGE, DEFAULT_LENGTH, MainWindow  # noqa: E402


@pytest.fixture
def window(qapp):
    win = MainWindow(PasswordEngine(generator=PasswordGenerator(random.Random(7))))
    yield win
    win.close()
    win.deleteLater()


class TestMainWindow:
    def test_initial_password(self, window):
        assert len(window.password_edit.text()) == DEFAULT_LENGTH
        assert window.entropy_label.text().startswith("~ ")
        assert window.entropy_label.text().endswith(" Bits")
        assert window.crack_time_label.text()
        assert window.strength_label.text() == window.report.strength_label

    def test_slider_regenerates(self, window):
        window.length_slider.setValue(40)
        assert len(window.password_edit.text()) == 40
        assert window.length_spin.value() == 40

    def test_checkbox_regenerates(self, window):
        window.upper_cb.setChecked(False)
        window.symbols_cb.setChecked(False)
        window.lower_cb.setChecked(False)
        assert set(window.password_edit.text()) <= set(string.digits)

    def test_all_unchecked_gives_empty_password(self, window):
        for cb in (window.lower_cb, window.upper_cb, window.digits_cb, window.symbols_cb):
            cb.setChecked(False)
        assert window.password_edit.text() == ""
        assert window.entropy_label.text() == "~ 0 Bits"
        assert window.crack_time_label.text() == "0.00 Seconds"
        assert window.strength_label.text() == "Very Weak"

    def test_refresh_recomputes(self, window):
        first = window.report
        window.refresh_btn.click()
        assert window.report is not first
        assert len(window.report.password) == DEFAULT_LENGTH

    def test_copy(self, window, qapp):
        window.copy_btn.click()
        assert QtWidgets.QApplication.clipboard().text() == window.password_edit.text()
        assert window.status_bar.currentMessage() == COPIED_MESSAGE

    def test_copy_empty(self, window):
        for cb in (window.lower_cb, window.upper_cb, window.digits_cb, window.symbols_cb):
            cb.setChecked(False)
        window.on_copy_clicked()
        assert window.status_bar.currentMessage() == "No password to copy."

    def test_auto_clear_leaves_changed_clipboard(self, window):
        window.on_copy_clicked()
        clipboard = QtWidgets.QApplication.clipboard()
        clipboard.setText("something else")
        window.clear_clipboard_if_unchanged()
        assert clipboard.text() == "something else"

    def test_auto_clear_clears_unchanged_clipboard(self, window):
        window.clipboard_clear_cb.setChecked(True)
        window.on_copy_clicked()
        assert window._clipboard_clear_timer is not None
        assert window._clipboard_clear_timer.isActive()
        window.clear_clipboard_if_unchanged()
        assert QtWidgets.QApplication.clipboard().text() == ""
