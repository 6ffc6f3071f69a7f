from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

import yaml


class DataStructure(Enum):
    ARRAYS = "arrays"
    LINKED_LISTS = "linked_lists"
    STACKS = "stacks"
    QUEUES = "queues"


@dataclass(frozen=True)
class Topic:
    structure: DataStructure
    title: str
    subtitle: str
    icon: str
    color: str
    summary: str
    features: tuple[str, ...]
    applications: tuple[str, ...] = ()


def default_topics_file() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "topics.yaml"


class TopicRepository:
    """Home-screen cards and explanation panels, read from ``data/topics.yaml``."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or default_topics_file()
        self._topics = self._load_topics()

    def all(self) -> List[Topic]:
        return list(self._topics.values())

    def get(self, structure: DataStructure) -> Topic:
        return self._topics[structure]

    def _load_topics(self) -> Dict[DataStructure, Topic]:
        if not self._path.exists():
            raise FileNotFoundError(f"Topics file not found: {self._path}")
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict) or not isinstance(raw.get("topics"), list):
            raise ValueError(f"{self._path.name}: expected a 'topics' list")

        topics: Dict[DataStructure, Topic] = {}
        for entry in raw["topics"]:
            if not isinstance(entry, dict):
                raise ValueError(f"{self._path.name}: each topic must be a mapping")
            key = entry.get("key")
            try:
                structure = DataStructure(key)
            except ValueError:
                raise ValueError(f"{self._path.name}: unknown topic key {key!r}") from None
            for required in ("title", "summary"):
                if not isinstance(entry.get(required), str) or not entry[required].strip():
                    raise ValueError(f"{self._path.name}: topic {key!r} missing {required!r}")
            topics[structure] = Topic(
                structure=structure,
                title=entry["title"].strip(),
                subtitle=str(entry.get("subtitle", "")).strip(),
                icon=str(entry.get("icon", "")).strip(),
                color=str(entry.get("color", "#FFFFFF")).strip(),
                summary=" ".join(entry["summary"].split()),
                features=tuple(str(f).strip() for f in entry.get("features") or []),
                applications=tuple(str(a).strip() for a in entry.get("applications") or []),
            )

        missing = [s.value for s in DataStructure if s not in topics]
        if missing:
            raise ValueError(f"{self._path.name}: missing topics {missing}")
        # keep enum order regardless of file order
        return {s: topics[s] for s in DataStructure}
