"""Playground screens for linked lists, stacks and queues."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from spacestructs.core.containers import AstronautStack, SpaceshipQueue
from spacestructs.core.star_chain import StarChain
from spacestructs.core.topics import Topic
from spacestructs.ui.colors import SpaceColors, rgba
from spacestructs.ui.space_widgets import (
    ArrowConnector,
    ExplanationPanel,
    clear_layout,
    space_button_style,
    space_line_edit_style,
)

logger = logging.getLogger(__name__)


def _name_card(text: str, accent: str, *, selected: bool = False, width: Optional[int] = None) -> QFrame:
    card = QFrame()
    card.setObjectName("nameCard")
    ring = SpaceColors.SELECTED if selected else accent
    card.setStyleSheet(
        f"""
        QFrame#nameCard {{
            background: {rgba(accent, 0.3)};
            border: 2px solid {ring};
            border-radius: 15px;
        }}
        """
    )
    layout = QVBoxLayout(card)
    layout.setContentsMargins(16, 14, 16, 14)
    label = QLabel(text)
    label.setAlignment(Qt.AlignCenter)
    label.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 500; border: none;")
    layout.addWidget(label)
    if width is not None:
        card.setFixedWidth(width)
    return card


class _TopicScreen(QWidget):
    """Common frame: explanation panel (toggleable), title, body, controls."""

    def __init__(self, topic: Topic, heading: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._topic = topic

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(24, 16, 24, 24)
        self._layout.setSpacing(16)

        self._explanation = ExplanationPanel(
            title=topic.title.rstrip("s"),
            summary=topic.summary,
            features=topic.features,
            applications=topic.applications,
            accent=topic.color,
        )
        self._layout.addWidget(self._explanation)

        self._heading = QLabel(heading)
        self._heading.setAlignment(Qt.AlignCenter)
        self._heading.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 32px; font-weight: 800;")
        self._heading.hide()
        self._layout.addWidget(self._heading)

        self._status = QLabel("")
        self._status.setAlignment(Qt.AlignCenter)
        self._status.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 18px;")
        self._layout.addWidget(self._status)

    def _add_explanation_toggle(self) -> None:
        self._toggle = QPushButton("Hide Explanation")
        self._toggle.setCursor(Qt.PointingHandCursor)
        self._toggle.setStyleSheet(space_button_style(self._topic.color))
        self._toggle.clicked.connect(self._toggle_explanation)
        self._layout.addWidget(self._toggle, 0, Qt.AlignCenter)
        self._layout.addStretch(1)

    def _toggle_explanation(self) -> None:
        showing = not self._explanation.isVisible()
        self._explanation.setVisible(showing)
        self._heading.setVisible(not showing)
        self._toggle.setText("Hide Explanation" if showing else "Show Explanation")

    def _input_row(self, placeholder: str, button_text: str) -> tuple[QLineEdit, QPushButton, QHBoxLayout]:
        row = QHBoxLayout()
        row.setSpacing(12)
        edit = QLineEdit()
        edit.setPlaceholderText(placeholder)
        edit.setStyleSheet(space_line_edit_style())
        button = QPushButton(button_text)
        button.setCursor(Qt.PointingHandCursor)
        row.addWidget(edit, 1)
        row.addWidget(button, 0)
        return edit, button, row

    @staticmethod
    def _style_button(button: QPushButton, color: str, enabled: bool) -> None:
        button.setEnabled(enabled)
        button.setStyleSheet(space_button_style(color, disabled=not enabled))


class LinkedListScreen(_TopicScreen):
    def __init__(self, topic: Topic, parent: Optional[QWidget] = None) -> None:
        super().__init__(topic, "Linked Stars", parent)
        self._chain = StarChain()

        row = QWidget()
        row.setStyleSheet("background: transparent;")
        self._chain_row = QHBoxLayout(row)
        self._chain_row.setSpacing(5)
        self._chain_row.setAlignment(Qt.AlignLeft)
        scroll = QScrollArea()
        scroll.setWidget(row)
        scroll.setWidgetResizable(True)
        scroll.setFixedHeight(110)
        scroll.setStyleSheet("QScrollArea { background: transparent; border: none; }")
        self._layout.addWidget(scroll)

        self._name_edit, self._add_button, input_row = self._input_row("New star name", "Add Star")
        self._name_edit.textChanged.connect(lambda _text: self._render())
        self._name_edit.returnPressed.connect(self._add_star)
        self._add_button.clicked.connect(self._add_star)
        self._layout.addLayout(input_row)

        self._remove_button = QPushButton("Remove Current Star")
        self._remove_button.setCursor(Qt.PointingHandCursor)
        self._remove_button.clicked.connect(self._remove_current)
        self._layout.addWidget(self._remove_button, 0, Qt.AlignCenter)

        self._add_explanation_toggle()
        self._render()

    def _add_star(self) -> None:
        if not self._name_edit.text().strip():
            return
        self._chain.add_star(self._name_edit.text())
        self._name_edit.clear()
        self._render()

    def _remove_current(self) -> None:
        self._chain.remove_current()
        self._render()

    def _select(self, node_id: int) -> None:
        self._chain.select(node_id)
        self._render()

    def _render(self) -> None:
        current = self._chain.current()
        self._status.setText(f"Current Node: {current.name if current else 'None'}")

        clear_layout(self._chain_row)
        for node in self._chain.stars():
            card = _name_card(f"★ {node.name}", self._topic.color, selected=current is not None and node.id == current.id)
            card.setCursor(Qt.PointingHandCursor)
            card.mousePressEvent = lambda _e, nid=node.id: self._select(nid)
            self._chain_row.addWidget(card)
            if node.next_id is not None:
                self._chain_row.addWidget(ArrowConnector(self._topic.color))

        self._style_button(self._add_button, self._topic.color, bool(self._name_edit.text().strip()))
        self._style_button(self._remove_button, SpaceColors.RED, current is not None)


class StackScreen(_TopicScreen):
    def __init__(self, topic: Topic, parent: Optional[QWidget] = None) -> None:
        super().__init__(topic, "Space Stack", parent)
        self._stack = AstronautStack()

        tower = QWidget()
        tower.setStyleSheet("background: transparent;")
        self._tower = QVBoxLayout(tower)
        self._tower.setSpacing(10)
        self._layout.addWidget(tower)

        self._name_edit, self._push_button, input_row = self._input_row("New astronaut name", "Push")
        self._name_edit.textChanged.connect(lambda _text: self._render())
        self._name_edit.returnPressed.connect(self._push)
        self._push_button.clicked.connect(self._push)
        self._layout.addLayout(input_row)

        self._pop_button = QPushButton("Pop")
        self._pop_button.setCursor(Qt.PointingHandCursor)
        self._pop_button.clicked.connect(self._pop)
        self._layout.addWidget(self._pop_button, 0, Qt.AlignCenter)

        self._add_explanation_toggle()
        self._render()

    def _push(self) -> None:
        if not self._name_edit.text().strip():
            return
        self._stack.push(self._name_edit.text())
        self._name_edit.clear()
        self._render()

    def _pop(self) -> None:
        popped = self._stack.pop()
        logger.debug("Popped astronaut %s", popped)
        self._render()

    def _render(self) -> None:
        self._status.setText(f"Stack Size: {self._stack.size}")
        clear_layout(self._tower)
        for name in self._stack.top_down():
            self._tower.addWidget(_name_card(f"👩‍🚀 {name}", self._topic.color))
        self._style_button(self._push_button, self._topic.color, bool(self._name_edit.text().strip()))
        self._style_button(self._pop_button, SpaceColors.RED, not self._stack.is_empty())


class QueueScreen(_TopicScreen):
    def __init__(self, topic: Topic, parent: Optional[QWidget] = None) -> None:
        super().__init__(topic, "Space Queue", parent)
        self._queue = SpaceshipQueue()

        row = QWidget()
        row.setStyleSheet("background: transparent;")
        self._lane = QHBoxLayout(row)
        self._lane.setSpacing(15)
        self._lane.setAlignment(Qt.AlignLeft)
        scroll = QScrollArea()
        scroll.setWidget(row)
        scroll.setWidgetResizable(True)
        scroll.setFixedHeight(130)
        scroll.setStyleSheet("QScrollArea { background: transparent; border: none; }")
        self._layout.addWidget(scroll)

        self._name_edit, self._enqueue_button, input_row = self._input_row("New spaceship name", "Enqueue")
        self._name_edit.textChanged.connect(lambda _text: self._render())
        self._name_edit.returnPressed.connect(self._enqueue)
        self._enqueue_button.clicked.connect(self._enqueue)
        self._layout.addLayout(input_row)

        self._dequeue_button = QPushButton("Dequeue")
        self._dequeue_button.setCursor(Qt.PointingHandCursor)
        self._dequeue_button.clicked.connect(self._dequeue)
        self._layout.addWidget(self._dequeue_button, 0, Qt.AlignCenter)

        self._add_explanation_toggle()
        self._render()

    def _enqueue(self) -> None:
        if not self._name_edit.text().strip():
            return
        self._queue.enqueue(self._name_edit.text())
        self._name_edit.clear()
        self._render()

    def _dequeue(self) -> None:
        launched = self._queue.dequeue()
        logger.debug("Launched spaceship %s", launched)
        self._render()

    def _render(self) -> None:
        front = self._queue.front()
        self._status.setText(f"Queue Size: {self._queue.size} · Front: {front or 'None'}")
        clear_layout(self._lane)
        for name in self._queue.items():
            self._lane.addWidget(_name_card(f"🚀 {name}", self._topic.color, width=150))
        self._style_button(self._enqueue_button, self._topic.color, bool(self._name_edit.text().strip()))
        self._style_button(self._dequeue_button, SpaceColors.RED, not self._queue.is_empty())
