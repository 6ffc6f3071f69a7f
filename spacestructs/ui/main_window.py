from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from spacestructs.core.engine import LevelProgressionEngine
from spacestructs.core.progress import ProgressStore
from spacestructs.core.topics import DataStructure, TopicRepository
from spacestructs.ui.array_screen import ArrayPlanetScreen
from spacestructs.ui.colors import SpaceColors
from spacestructs.ui.models import TopicState
from spacestructs.ui.space_widgets import SpaceBackground, TopicCard, clear_layout
from spacestructs.ui.structure_screens import LinkedListScreen, QueueScreen, StackScreen

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Home grid of the four data structures plus one screen per structure.

    Screens are built once and kept alive, so a stack or star chain keeps
    its contents when the player goes back home and returns.
    """

    def __init__(
        self,
        topics: TopicRepository,
        engine: LevelProgressionEngine,
        progress_store: ProgressStore,
    ) -> None:
        super().__init__()
        self._topics = topics
        self._engine = engine
        self._progress_store = progress_store
        self._selected: Optional[DataStructure] = None

        self._stack: Optional[QStackedWidget] = None
        self._home_screen: Optional[QWidget] = None
        self._topic_screen: Optional[QWidget] = None
        self._home_grid: Optional[QGridLayout] = None
        self._screens: Optional[QStackedWidget] = None
        self._screen_index: Dict[DataStructure, int] = {}

        self.setWindowTitle("Space Data Structures")
        self._build_ui()
        self._refresh_home()
        QShortcut(QKeySequence(Qt.Key_Escape), self, activated=self._go_home)
        QTimer.singleShot(0, self.showMaximized)

    def _build_ui(self) -> None:
        background = SpaceBackground()
        root = QVBoxLayout(background)
        root.setContentsMargins(0, 0, 0, 0)

        self._stack = QStackedWidget()
        self._stack.setStyleSheet("background: transparent;")
        self._home_screen = self._build_home()
        self._topic_screen = self._build_topic_screen()
        self._stack.addWidget(self._home_screen)
        self._stack.addWidget(self._topic_screen)
        root.addWidget(self._stack)

        self.setCentralWidget(background)

    def _build_home(self) -> QWidget:
        home = QWidget()
        layout = QVBoxLayout(home)
        layout.setContentsMargins(25, 40, 25, 40)
        layout.setSpacing(30)

        title = QLabel("Data Structures")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 40px; font-weight: 800;")
        layout.addWidget(title)

        grid_host = QWidget()
        self._home_grid = QGridLayout(grid_host)
        self._home_grid.setSpacing(25)
        layout.addWidget(grid_host, 1, Qt.AlignCenter)
        return home

    def _build_topic_screen(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QHBoxLayout()
        header.setContentsMargins(12, 8, 12, 8)
        back = QPushButton("‹  Back")
        back.setCursor(Qt.PointingHandCursor)
        back.setStyleSheet(
            f"""
            QPushButton {{
                background: transparent;
                color: {SpaceColors.TEXT_PRIMARY};
                border: none;
                font-size: 20px;
                padding: 10px;
            }}
            QPushButton:hover {{ color: {SpaceColors.PRIMARY_LIGHT}; }}
            """
        )
        back.clicked.connect(self._go_home)
        header.addWidget(back, 0)
        header.addStretch(1)
        layout.addLayout(header)

        self._screens = QStackedWidget()
        self._screens.setStyleSheet("background: transparent;")

        arrays = ArrayPlanetScreen(self._engine)
        arrays.topic_completed.connect(self._go_home)
        builders = {
            DataStructure.ARRAYS: arrays,
            DataStructure.LINKED_LISTS: LinkedListScreen(self._topics.get(DataStructure.LINKED_LISTS)),
            DataStructure.STACKS: StackScreen(self._topics.get(DataStructure.STACKS)),
            DataStructure.QUEUES: QueueScreen(self._topics.get(DataStructure.QUEUES)),
        }
        for structure, screen in builders.items():
            scroll = QScrollArea()
            scroll.setWidget(screen)
            scroll.setWidgetResizable(True)
            scroll.setStyleSheet("QScrollArea { background: transparent; border: none; }")
            self._screen_index[structure] = self._screens.addWidget(scroll)

        layout.addWidget(self._screens, 1)
        return page

    def _refresh_home(self) -> None:
        if self._home_grid is None:
            return
        clear_layout(self._home_grid)
        completed = self._progress_store.completed_topics()
        for i, topic in enumerate(self._topics.all()):
            state = TopicState(
                topic=topic,
                completed=topic.structure in completed,
                is_selected=topic.structure == self._selected,
            )
            card = TopicCard(state, lambda s=topic.structure: self._open(s))
            self._home_grid.addWidget(card, i // 2, i % 2)

    def _open(self, structure: DataStructure) -> None:
        logger.info("Opening %s", structure.value)
        self._selected = structure
        self._progress_store.record_level(structure, 1)
        if self._screens is not None:
            self._screens.setCurrentIndex(self._screen_index[structure])
        if self._stack is not None and self._topic_screen is not None:
            self._stack.setCurrentWidget(self._topic_screen)

    def _go_home(self) -> None:
        if self._stack is None or self._home_screen is None:
            return
        # Playgrounds count as explored once visited
        if self._selected is not None and self._selected is not DataStructure.ARRAYS:
            self._progress_store.mark_completed(self._selected)
        self._refresh_home()
        self._stack.setCurrentWidget(self._home_screen)
