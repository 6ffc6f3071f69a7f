"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from spacestructs.core.planets import Planet
from spacestructs.core.session import SessionState
from spacestructs.core.topics import Topic


@dataclass
class TopicState:
    """UI state for a home card: the topic and whether it has been completed."""

    topic: Topic
    completed: bool
    is_selected: bool = False


@dataclass
class PlanetCardState:
    planet: Planet
    selected: bool = False
    correct: Optional[bool] = None


def placed_card_states(state: SessionState) -> List[PlanetCardState]:
    """Cards for the player's solar system, tagged with the last check's verdicts."""
    cards = []
    for i, planet in enumerate(state.placed):
        correct = state.verdicts[i] if i < len(state.verdicts) else None
        cards.append(PlanetCardState(planet=planet, selected=state.selected_index == i, correct=correct))
    return cards


def available_card_states(state: SessionState) -> List[PlanetCardState]:
    return [PlanetCardState(planet=p) for p in state.remaining_items()]
