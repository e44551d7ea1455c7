"""Tests for the PySide6 main window (offscreen)."""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from locidle.gui import create_application  # noqa: E402
from locidle.gui.theme import NIGHT_VISION, stylesheet  # noqa: E402
from locidle.gui.window import MainWindow  # noqa: E402
from locidle.events import Tick  # noqa: E402
from locidle.runtime import GameRuntime, ManualClock  # noqa: E402


@pytest.fixture(scope="module")
def app():
    return create_application(["test"])


@pytest.fixture
def window(app):
    runtime = GameRuntime(clock=ManualClock())
    w = MainWindow(runtime, start_timer=False)
    yield w
    w.close()
    w.deleteLater()


def test_initial_labels(window):
    assert window.windowTitle() == "LOC Idle"
    assert window.locs_label.text() == "Lines of Code: 0"
    assert window.funds_label.text() == "Available Funds:    $ 0.00"
    assert window.ai_hype_cost_label.text() == "Cost: $ 100.00"
    assert not window.hire_coder_button.isEnabled()
    assert not window.ai_hype_button.isEnabled()


def test_timer_interval(window):
    assert window.timer.interval() == 50
    assert not window.timer.isActive()


def test_write_code_and_upgrade(window):
    for _ in range(10):
        window.write_code_button.click()
    assert window.locs_label.text() == "Lines of Code: 10"
    assert window.hire_coder_button.isEnabled()

    button = window.upgrade_button(0)
    assert button is not None
    assert button.isEnabled()
    assert not window.upgrade_button(1).isEnabled()

    button.click()
    assert window.upgrade_button(0) is None
    assert window.coder_level_label.text() == "Coder Level: 1"


def test_hire_coder_and_tick(window):
    for _ in range(10):
        window.write_code_button.click()
    window.upgrade_button(0).click()
    window.hire_coder_button.click()
    assert window.coders_label.text() == "1"
    assert window.coder_cost_label.text() == "Cost: $ 8.50"

    window.runtime.clock.advance(0.05)
    window.send(Tick())
    assert window.loc_per_sec_label.text() == "LOC/s: 1.00"
    assert window.fps_label.text() == "20 FPS"


def test_stylesheet_uses_palette():
    css = stylesheet()
    assert NIGHT_VISION.background in css
    assert NIGHT_VISION.primary in css
