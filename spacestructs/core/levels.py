from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from spacestructs.core.planets import Planet, planet_by_id


@dataclass(frozen=True)
class LevelSpec:
    number: int
    title: str
    instructions: str
    hint: str
    available_items: tuple[Planet, ...]
    expected_order: tuple[int, ...]
    selection: bool = True
    guided: bool = False
    practice_removal: bool = False
    shuffle: bool = False


def default_levels_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "levels"


class LevelRepository:
    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir or default_levels_dir()
        self._levels = self._load_levels()

    def all(self) -> List[LevelSpec]:
        return list(self._levels.values())

    def get(self, number: int) -> LevelSpec:
        return self._levels[number]

    @property
    def first(self) -> int:
        return min(self._levels)

    @property
    def last(self) -> int:
        return max(self._levels)

    def __contains__(self, number: object) -> bool:
        return number in self._levels

    def __len__(self) -> int:
        return len(self._levels)

    def _load_levels(self) -> Dict[int, LevelSpec]:
        base_dir = self._base_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        levels: Dict[int, LevelSpec] = {}
        for level_path in base_dir.glob("level*.yaml"):
            m = re.match(r"^level(\d+)$", level_path.stem)
            if not m:
                continue
            number = int(m.group(1))
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict):
                raise ValueError(f"{level_path.name}: expected a YAML mapping")
            levels[number] = _parse_level(level_path.name, number, raw)

        if not levels:
            raise ValueError(f"No level files (level*.yaml) found in {base_dir}")
        expected_numbers = list(range(1, len(levels) + 1))
        if sorted(levels) != expected_numbers:
            raise ValueError(f"Levels must be numbered 1..{len(levels)}, found {sorted(levels)}")
        return {n: levels[n] for n in expected_numbers}


def _parse_level(file_name: str, number: int, raw: Dict[str, Any]) -> LevelSpec:
    title = raw.get("title")
    if not title or not isinstance(title, str):
        raise ValueError(f"{file_name}: missing or invalid 'title'")

    planet_ids = raw.get("planets")
    if not planet_ids or not isinstance(planet_ids, list):
        raise ValueError(f"{file_name}: 'planets' must be a non-empty list")
    try:
        available = tuple(planet_by_id(str(pid).strip().lower()) for pid in planet_ids)
    except KeyError as e:
        raise ValueError(f"{file_name}: unknown planet {e.args[0]!r}") from None
    if len({p.id for p in available}) != len(available):
        raise ValueError(f"{file_name}: 'planets' lists a planet twice")

    expected = raw.get("expected_order")
    if not expected or not isinstance(expected, list):
        raise ValueError(f"{file_name}: 'expected_order' must be a non-empty list")
    try:
        expected_order = tuple(int(o) for o in expected)
    except (TypeError, ValueError):
        raise ValueError(f"{file_name}: 'expected_order' must be a list of integers") from None
    offered_orders = {p.order for p in available}
    missing = [o for o in expected_order if o not in offered_orders]
    if missing:
        raise ValueError(f"{file_name}: expected_order uses orders {missing} that no offered planet has")
    if len(set(expected_order)) != len(expected_order):
        raise ValueError(f"{file_name}: 'expected_order' repeats a value")

    return LevelSpec(
        number=number,
        title=title.strip(),
        instructions=str(raw.get("instructions", "")).strip(),
        hint=str(raw.get("hint", "")).strip(),
        available_items=available,
        expected_order=expected_order,
        selection=bool(raw.get("selection", True)),
        guided=bool(raw.get("guided", False)),
        practice_removal=bool(raw.get("practice_removal", False)),
        shuffle=bool(raw.get("shuffle", False)),
    )
