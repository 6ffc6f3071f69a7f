from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Set

from spacestructs.core.topics import DataStructure

logger = logging.getLogger(__name__)


@dataclass
class TopicProgress:
    completed: bool = False
    best_level: int = 0


class ProgressStore:
    """Tracks which topics were completed and how far each level track got.

    Lives for one run of the app; nothing is written to disk.
    """

    def __init__(self) -> None:
        self._progress: Dict[DataStructure, TopicProgress] = {}

    def get_topic_progress(self, topic: DataStructure) -> TopicProgress:
        return self._progress.get(topic, TopicProgress())

    def is_completed(self, topic: DataStructure) -> bool:
        return self.get_topic_progress(topic).completed

    def completed_topics(self) -> Set[DataStructure]:
        return {topic for topic, value in self._progress.items() if value.completed}

    def mark_completed(self, topic: DataStructure) -> None:
        current = self._progress.setdefault(topic, TopicProgress())
        if not current.completed:
            logger.info("Topic completed: %s", topic.value)
        current.completed = True

    def record_level(self, topic: DataStructure, level: int) -> None:
        current = self._progress.setdefault(topic, TopicProgress())
        current.best_level = max(current.best_level, level)
