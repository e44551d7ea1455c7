from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from locidle.events import AiHype, Event, HireCoder, Tick, Upgrade, WriteCode
from locidle.gui.theme import FONT_HEADER, FONT_MAIN, FONT_SMALL, FONT_TINY
from locidle.runtime import GameRuntime
from locidle.view import GameView, UpgradeView, build_view

logger = logging.getLogger(__name__)


def _label(text: str = "", size: int | None = None, bold: bool = False) -> QLabel:
    label = QLabel(text)
    # The application style sheet takes precedence over setFont()
    rules: list[str] = []
    if size is not None:
        rules.append(f"font-size: {size}px;")
    if bold:
        rules.append("font-weight: bold;")
    if rules:
        label.setStyleSheet(" ".join(rules))
    return label


def _header(title: str) -> QWidget:
    box = QWidget()
    layout = QVBoxLayout(box)
    layout.setContentsMargins(0, 0, 0, 10)
    layout.addWidget(_label(title, FONT_HEADER))
    rule = QFrame()
    rule.setObjectName("rule")
    rule.setFixedHeight(2)
    layout.addWidget(rule)
    return box


class UpgradeButton(QPushButton):
    """A button showing an upgrade's name, description and requirement."""

    def __init__(self, upgrade: UpgradeView, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.index = upgrade.index
        self.setMinimumHeight(90)

        layout = QVBoxLayout(self)
        title = _label(upgrade.name, bold=True)
        description = _label(upgrade.description, FONT_SMALL)
        required = _label(upgrade.required, FONT_SMALL)
        required.setAlignment(Qt.AlignmentFlag.AlignRight)
        for widget in (title, description, required):
            widget.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
            widget.setStyleSheet(widget.styleSheet() + " background: transparent;")
            layout.addWidget(widget)

        self.setEnabled(upgrade.enabled)


class MainWindow(QMainWindow):
    """Main game window. Owns the tick timer and forwards input to the runtime."""

    def __init__(
        self,
        runtime: GameRuntime,
        parent: QWidget | None = None,
        start_timer: bool = True,
    ) -> None:
        super().__init__(parent)
        self.runtime = runtime
        self.setWindowTitle(runtime.config.name)
        self.resize(1000, 640)
        self._upgrade_buttons: dict[int, UpgradeButton] = {}

        self._build_ui()

        self.timer = QTimer(self)
        self.timer.setInterval(runtime.config.tick_interval_ms)
        self.timer.timeout.connect(lambda: self.send(Tick()))
        if start_timer:
            self.timer.start()
            logger.info("Tick timer started (%d ms)", self.timer.interval())

        self.refresh()

    # ── Input ────────────────────────────────────────────────────────

    def send(self, event: Event) -> None:
        self.runtime.update(event)
        self.refresh()

    # ── Layout ───────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget()
        root = QHBoxLayout(central)
        root.setContentsMargins(20, 0, 20, 0)
        root.setSpacing(100)
        root.addLayout(self._build_left(), 1)
        root.addLayout(self._build_right(), 1)
        self.setCentralWidget(central)

    def _build_left(self) -> QVBoxLayout:
        left = QVBoxLayout()

        # Header
        self.locs_label = _label(size=FONT_MAIN)
        self.write_code_button = QPushButton("Write Code")
        self.write_code_button.clicked.connect(lambda: self.send(WriteCode()))
        left.addSpacing(20)
        left.addWidget(self.locs_label)
        left.addSpacing(10)
        left.addWidget(self.write_code_button, alignment=Qt.AlignmentFlag.AlignLeft)
        left.addSpacing(20)

        # Business
        left.addWidget(_header("Business"))
        self.funds_label = _label()
        self.price_label = _label()
        self.revenue_label = _label()
        for widget in (self.funds_label, self.price_label, self.revenue_label):
            left.addWidget(widget)
        left.addSpacing(20)
        self.ai_hype_button = QPushButton("AI Hype")
        self.ai_hype_button.clicked.connect(lambda: self.send(AiHype()))
        self.ai_hype_level_label = _label()
        left.addLayout(self._button_row(self.ai_hype_button, self.ai_hype_level_label))
        self.ai_hype_cost_label = _label(size=FONT_SMALL)
        left.addSpacing(5)
        left.addWidget(self.ai_hype_cost_label)
        left.addSpacing(20)

        # Development
        left.addWidget(_header("Development"))
        self.loc_per_sec_label = _label()
        left.addWidget(self.loc_per_sec_label)
        left.addSpacing(20)
        self.hire_coder_button = QPushButton("Hire Coder")
        self.hire_coder_button.clicked.connect(lambda: self.send(HireCoder()))
        self.coders_label = _label()
        left.addLayout(self._button_row(self.hire_coder_button, self.coders_label))
        self.coder_cost_label = _label(size=FONT_SMALL)
        left.addSpacing(5)
        left.addWidget(self.coder_cost_label)

        left.addStretch(1)
        return left

    def _build_right(self) -> QVBoxLayout:
        right = QVBoxLayout()

        self.fps_label = _label(size=FONT_TINY)
        self.fps_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        right.addSpacing(10)
        right.addWidget(self.fps_label)
        right.addSpacing(10)

        right.addWidget(_header("Upgrades"))
        self.coder_level_label = _label()
        right.addWidget(self.coder_level_label)
        right.addSpacing(20)

        container = QWidget()
        self.upgrades_layout = QVBoxLayout(container)
        self.upgrades_layout.setContentsMargins(0, 0, 20, 0)
        self.upgrades_layout.setSpacing(18)
        self.upgrades_layout.addStretch(1)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(container)
        right.addWidget(scroll, 1)
        return right

    @staticmethod
    def _button_row(button: QPushButton, label: QLabel) -> QHBoxLayout:
        row = QHBoxLayout()
        label.setContentsMargins(10, 2, 10, 2)
        row.addWidget(button)
        row.addWidget(label)
        row.addStretch(1)
        return row

    # ── Rendering ────────────────────────────────────────────────────

    def refresh(self) -> None:
        view = build_view(self.runtime)

        self.locs_label.setText(f"Lines of Code: {view.locs}")
        self.funds_label.setText(f"Available Funds:    $ {view.available_funds}")
        self.price_label.setText(f"Price per LOC:      $ {view.loc_price}")
        self.revenue_label.setText(f"Revenue per second: $ {view.revenue_per_sec}")
        self.ai_hype_button.setEnabled(view.can_buy_ai_hype)
        self.ai_hype_level_label.setText(f"Level: {view.ai_hype}")
        self.ai_hype_cost_label.setText(f"Cost: $ {view.ai_hype_cost}")

        self.loc_per_sec_label.setText(f"LOC/s: {view.loc_per_sec}")
        self.hire_coder_button.setEnabled(view.can_hire_coder)
        self.coders_label.setText(view.coders)
        self.coder_cost_label.setText(f"Cost: $ {view.coder_cost}")

        self.fps_label.setText(f"{view.fps:.0f} FPS")
        self.coder_level_label.setText(f"Coder Level: {view.coder_level}")
        self._sync_upgrades(view)

    def _sync_upgrades(self, view: GameView) -> None:
        visible = {u.index: u for u in view.upgrades}

        for index in list(self._upgrade_buttons):
            if index not in visible:
                button = self._upgrade_buttons.pop(index)
                self.upgrades_layout.removeWidget(button)
                button.deleteLater()

        for position, upgrade in enumerate(view.upgrades):
            button = self._upgrade_buttons.get(upgrade.index)
            if button is None:
                button = UpgradeButton(upgrade)
                button.clicked.connect(
                    lambda _checked=False, i=upgrade.index: self.send(Upgrade(i))
                )
                self.upgrades_layout.insertWidget(position, button)
                self._upgrade_buttons[upgrade.index] = button
            else:
                button.setEnabled(upgrade.enabled)

    def upgrade_button(self, index: int) -> UpgradeButton | None:
        return self._upgrade_buttons.get(index)
