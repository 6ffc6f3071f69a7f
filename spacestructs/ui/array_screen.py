"""Arrays topic: build the solar system one planet at a time."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from spacestructs.core.engine import ActionResult, LevelProgressionEngine
from spacestructs.core.feedback import Feedback, FeedbackKind
from spacestructs.ui.colors import SpaceColors
from spacestructs.ui.level_message import LevelMessageOverlay
from spacestructs.ui.models import available_card_states, placed_card_states
from spacestructs.ui.space_widgets import GlassCard, PlanetCard, clear_layout, space_button_style

logger = logging.getLogger(__name__)


def _card_row() -> tuple[QScrollArea, QHBoxLayout]:
    row = QWidget()
    row.setStyleSheet("background: transparent;")
    row_layout = QHBoxLayout(row)
    row_layout.setContentsMargins(12, 12, 12, 12)
    row_layout.setSpacing(20)
    row_layout.setAlignment(Qt.AlignLeft)

    scroll = QScrollArea()
    scroll.setWidget(row)
    scroll.setWidgetResizable(True)
    scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
    scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
    scroll.setFixedHeight(200)
    scroll.setStyleSheet("QScrollArea { background: transparent; border: none; }")
    return scroll, row_layout


class ArrayPlanetScreen(QWidget):
    """Renders :class:`LevelProgressionEngine` state and forwards taps to it."""

    topic_completed = Signal()

    def __init__(self, engine: LevelProgressionEngine, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._show_hint = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 16, 24, 24)
        layout.setSpacing(16)

        nav = QHBoxLayout()
        self._prev_button = QPushButton("◀")
        self._prev_button.clicked.connect(lambda: self._handle(self._engine.tap_prev_level()))
        self._level_label = QLabel("")
        self._level_label.setAlignment(Qt.AlignCenter)
        self._level_label.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 32px; font-weight: 800;")
        self._next_button = QPushButton("▶")
        self._next_button.clicked.connect(lambda: self._handle(self._engine.tap_next_level()))
        nav.addWidget(self._prev_button, 0)
        nav.addWidget(self._level_label, 1)
        nav.addWidget(self._next_button, 0)
        layout.addLayout(nav)

        instructions_card = GlassCard(accent=SpaceColors.PRIMARY)
        instructions_layout = QVBoxLayout(instructions_card)
        instructions_layout.setContentsMargins(16, 12, 16, 12)
        self._instructions = QLabel("")
        self._instructions.setWordWrap(True)
        self._instructions.setAlignment(Qt.AlignCenter)
        self._instructions.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 15px; border: none;")
        instructions_layout.addWidget(self._instructions)
        layout.addWidget(instructions_card)

        layout.addWidget(self._section_label("Available Planets:"))
        available_scroll, self._available_row = _card_row()
        layout.addWidget(available_scroll)

        layout.addWidget(self._section_label("Your Solar System:"))
        placed_scroll, self._placed_row = _card_row()
        layout.addWidget(placed_scroll)

        actions = QHBoxLayout()
        actions.setSpacing(20)
        actions.addStretch(1)
        self._remove_selected_button = QPushButton("Remove Selected")
        self._remove_selected_button.clicked.connect(lambda: self._handle(self._engine.tap_remove_selected()))
        self._remove_last_button = QPushButton("Remove Last")
        self._remove_last_button.clicked.connect(lambda: self._handle(self._engine.tap_remove_last()))
        self._check_button = QPushButton("Check Level")
        self._check_button.setStyleSheet(space_button_style(SpaceColors.GREEN))
        self._check_button.clicked.connect(lambda: self._handle(self._engine.tap_check_level()))
        self._reset_button = QPushButton("Reset Level")
        self._reset_button.setStyleSheet(space_button_style(SpaceColors.PURPLE))
        self._reset_button.clicked.connect(lambda: self._handle(self._engine.tap_reset_level()))
        for button in (self._remove_selected_button, self._remove_last_button, self._check_button, self._reset_button):
            button.setCursor(Qt.PointingHandCursor)
            actions.addWidget(button)
        actions.addStretch(1)
        layout.addLayout(actions)

        self._hint_label = QLabel("")
        self._hint_label.setWordWrap(True)
        self._hint_label.setAlignment(Qt.AlignCenter)
        self._hint_label.setStyleSheet(f"color: {SpaceColors.YELLOW}; font-size: 14px; padding: 8px;")
        layout.addWidget(self._hint_label)

        self._help_button = QPushButton("Need Help?")
        self._help_button.setCursor(Qt.PointingHandCursor)
        self._help_button.setStyleSheet(space_button_style(SpaceColors.PRIMARY))
        self._help_button.clicked.connect(self._toggle_hint)
        layout.addWidget(self._help_button, 0, Qt.AlignCenter)
        layout.addStretch(1)

        self._overlay = LevelMessageOverlay(self)
        self._overlay.acknowledged.connect(self._on_message_acknowledged)

        self._render()

    @staticmethod
    def _section_label(text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 600;")
        return label

    def _toggle_hint(self) -> None:
        self._show_hint = not self._show_hint
        self._render()

    def _handle(self, result: ActionResult) -> None:
        self._render()
        if result.feedback is not None:
            logger.debug("Showing feedback: %s", result.feedback.kind.value)
            self._overlay.show_feedback(result.feedback)

    def _on_message_acknowledged(self, feedback: Feedback) -> None:
        if feedback.kind is FeedbackKind.SUCCESS:
            self._show_hint = False
            self._handle(self._engine.tap_next_level())
        elif feedback.kind is FeedbackKind.ALL_COMPLETE:
            self.topic_completed.emit()

    def _render(self) -> None:
        state = self._engine.state
        spec = self._engine.spec

        self._level_label.setText(f"Level {state.current_level}")
        self._instructions.setText(spec.instructions)
        self._prev_button.setEnabled(self._engine.can_go_back())
        self._next_button.setEnabled(state.solved or self._engine.can_go_forward())
        for button in (self._prev_button, self._next_button):
            button.setStyleSheet(space_button_style(SpaceColors.PRIMARY, disabled=not button.isEnabled()))

        clear_layout(self._available_row)
        for card_state in available_card_states(state):
            planet_id = card_state.planet.id
            card = PlanetCard(card_state, lambda pid=planet_id: self._handle(self._engine.tap_available_item(pid)))
            self._available_row.addWidget(card)

        clear_layout(self._placed_row)
        for index, card_state in enumerate(placed_card_states(state)):
            card = PlanetCard(card_state, lambda i=index: self._handle(self._engine.tap_placed_item(i)))
            self._placed_row.addWidget(card)

        # Removal is introduced after the first level
        show_removal = spec.selection
        self._remove_selected_button.setVisible(show_removal)
        self._remove_last_button.setVisible(show_removal)
        self._remove_selected_button.setStyleSheet(
            space_button_style(SpaceColors.RED, disabled=state.selected_index is None)
        )
        self._remove_last_button.setStyleSheet(space_button_style(SpaceColors.ORANGE, disabled=not state.placed))

        self._hint_label.setVisible(self._show_hint)
        if self._show_hint:
            self._hint_label.setText(f"Hint: {self._engine.hint().message}")

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        if self._overlay.isVisible():
            self._overlay.setGeometry(self.rect())
