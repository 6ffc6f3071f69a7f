"""In-window overlay that shows puzzle feedback (success, oops, hints)."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from spacestructs.core.feedback import Feedback, FeedbackKind
from spacestructs.ui.colors import SpaceColors
from spacestructs.ui.space_widgets import space_button_style


def accent_for(kind: FeedbackKind) -> str:
    if kind.is_positive:
        return SpaceColors.GREEN
    if kind in (FeedbackKind.HINT, FeedbackKind.PRACTICE_STEP_NOT_MET):
        return SpaceColors.YELLOW
    if kind in (FeedbackKind.NOTHING_SELECTED, FeedbackKind.NOTHING_TO_REMOVE, FeedbackKind.LEVEL_LOCKED):
        return SpaceColors.PRIMARY
    return SpaceColors.RED


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.55);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setCursor(Qt.CursorShape.ArrowCursor)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


class LevelMessageOverlay(QWidget):
    """Title, message and one button on a dark card centred over the screen.

    ``acknowledged`` carries the feedback that was on screen when the
    player pressed the button, so the screen can decide what happens next
    (a success advances, everything else just closes).
    """

    acknowledged = Signal(object)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._feedback: Optional[Feedback] = None

        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        # Clicking outside only dismisses; it never advances a level
        overlay_bg = _overlay_background(self, self._dismiss)
        main_layout.addWidget(overlay_bg, 0, 0)

        self._container = QFrame(self)
        self._container.setObjectName("levelMessageContainer")
        self._container.setMinimumWidth(380)
        self._container.setMaximumWidth(520)
        shadow = QGraphicsDropShadowEffect(self._container)
        shadow.setBlurRadius(24)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 160))
        self._container.setGraphicsEffect(shadow)

        content = QVBoxLayout(self._container)
        content.setContentsMargins(40, 36, 40, 36)
        content.setSpacing(20)

        self._title = QLabel("")
        self._title.setAlignment(Qt.AlignCenter)
        self._title.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 26px; font-weight: 800; border: none;")
        content.addWidget(self._title)

        self._message = QLabel("")
        self._message.setAlignment(Qt.AlignCenter)
        self._message.setWordWrap(True)
        self._message.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 15px; border: none;")
        content.addWidget(self._message)

        self._button = QPushButton("")
        self._button.setCursor(Qt.PointingHandCursor)
        self._button.clicked.connect(self._on_button)
        content.addWidget(self._button, 0, Qt.AlignCenter)

        main_layout.addWidget(self._container, 0, 0, Qt.AlignCenter)
        self.hide()

    @property
    def feedback(self) -> Optional[Feedback]:
        return self._feedback

    def show_feedback(self, feedback: Feedback) -> None:
        self._feedback = feedback
        accent = accent_for(feedback.kind)
        self._title.setText(feedback.title)
        self._message.setText(feedback.message)
        self._button.setText(feedback.button_text)
        self._button.setStyleSheet(space_button_style(accent))
        self._container.setStyleSheet(
            f"""
            QFrame#levelMessageContainer {{
                background: rgba(0, 0, 0, 0.90);
                border: 1px solid {accent};
                border-radius: 20px;
            }}
            """
        )
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())
        self.raise_()
        self.show()

    def _dismiss(self) -> None:
        self.hide()
        self._feedback = None

    def _on_button(self) -> None:
        feedback = self._feedback
        self._dismiss()
        if feedback is not None:
            self.acknowledged.emit(feedback)
