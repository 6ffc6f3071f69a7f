"""Arrays puzzle session state and the pure functions that update it.

Every update takes a :class:`SessionState` and returns a new one together
with an optional :class:`~spacestructs.core.feedback.Feedback` for the
player. Nothing here touches the UI, so the rules can be tested directly.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

from spacestructs.core import feedback
from spacestructs.core.feedback import Feedback
from spacestructs.core.levels import LevelSpec
from spacestructs.core.planets import Planet, seeded_shuffle

REMOVE_SELECTED = "remove_selected"
REMOVE_LAST = "remove_last"
BOTH_REMOVALS = frozenset({REMOVE_SELECTED, REMOVE_LAST})

Update = Tuple["SessionState", Optional[Feedback]]


@dataclass(frozen=True)
class SessionState:
    current_level: int
    max_level_reached: int
    offered: tuple[Planet, ...]
    placed: tuple[Planet, ...] = ()
    available_remaining: frozenset[str] = field(default_factory=frozenset)
    selected_index: Optional[int] = None
    removals_used: frozenset[str] = field(default_factory=frozenset)
    verdicts: tuple[bool, ...] = ()
    solved: bool = False

    def __post_init__(self) -> None:
        if self.max_level_reached < self.current_level:
            raise ValueError(
                f"max_level_reached ({self.max_level_reached}) is below current_level ({self.current_level})"
            )
        if self.selected_index is not None and not 0 <= self.selected_index < len(self.placed):
            raise ValueError(f"selected_index {self.selected_index} is outside the placed planets")

    def remaining_items(self) -> list[Planet]:
        """Offered planets not yet placed, in display order."""
        return [p for p in self.offered if p.id in self.available_remaining]

    def placed_ids(self) -> list[str]:
        return [p.id for p in self.placed]


def start_level(
    spec: LevelSpec,
    max_level_reached: int,
    rng: Optional[random.Random] = None,
) -> SessionState:
    """Fresh state for *spec*; the offered pool is shuffled when the level asks for it."""
    offered: Sequence[Planet] = spec.available_items
    if spec.shuffle:
        offered = seeded_shuffle(offered, rng or random.Random())
    return SessionState(
        current_level=spec.number,
        max_level_reached=max(max_level_reached, spec.number),
        offered=tuple(offered),
        available_remaining=frozenset(p.id for p in offered),
    )


def _touched(state: SessionState, **changes) -> SessionState:
    # any change to the arrangement invalidates the last check
    return replace(state, verdicts=(), solved=False, **changes)


def add_item(state: SessionState, spec: LevelSpec, item: Planet) -> Update:
    if item.id in state.placed_ids():
        return state, feedback.duplicate_item(item.name)
    if item.id not in state.available_remaining:
        raise ValueError(f"{item.name} is not offered on level {state.current_level}")
    if spec.guided:
        slot = len(state.placed)
        if slot >= len(spec.expected_order) or item.order != spec.expected_order[slot]:
            return state, feedback.wrong_item_for_slot()
    return (
        _touched(
            state,
            placed=state.placed + (item,),
            available_remaining=state.available_remaining - {item.id},
        ),
        None,
    )


def remove_at(state: SessionState, index: int, via: str = REMOVE_SELECTED) -> Update:
    """Remove the planet at *index*; raises IndexError for an index outside ``placed``."""
    if not state.placed:
        return state, feedback.nothing_to_remove()
    if not 0 <= index < len(state.placed):
        raise IndexError(f"no placed planet at index {index}")

    removed = state.placed[index]
    placed = state.placed[:index] + state.placed[index + 1:]

    selected = state.selected_index
    if selected == index:
        selected = None
    elif selected is not None and selected > index:
        selected -= 1

    return (
        _touched(
            state,
            placed=placed,
            available_remaining=state.available_remaining | {removed.id},
            selected_index=selected,
            removals_used=state.removals_used | {via},
        ),
        None,
    )


def remove_selected(state: SessionState) -> Update:
    if state.selected_index is None:
        if not state.placed:
            return state, feedback.nothing_to_remove()
        return state, feedback.nothing_selected()
    return remove_at(state, state.selected_index, via=REMOVE_SELECTED)


def remove_last(state: SessionState) -> Update:
    if not state.placed:
        return state, feedback.nothing_to_remove()
    return remove_at(state, len(state.placed) - 1, via=REMOVE_LAST)


def select(state: SessionState, spec: LevelSpec, index: int) -> Update:
    """Toggle selection of the placed planet at *index*."""
    if not spec.selection:
        return state, None
    if not 0 <= index < len(state.placed):
        raise IndexError(f"no placed planet at index {index}")
    selected = None if state.selected_index == index else index
    return replace(state, selected_index=selected), None


def tag_placements(placed: Sequence[Planet], expected_order: Sequence[int]) -> tuple[bool, ...]:
    """Positional correctness of each placed planet; extras are always wrong."""
    return tuple(
        i < len(expected_order) and planet.order == expected_order[i]
        for i, planet in enumerate(placed)
    )


def check_completion(state: SessionState, spec: LevelSpec) -> Tuple[SessionState, Feedback]:
    verdicts = tag_placements(state.placed, spec.expected_order)
    checked = replace(state, verdicts=verdicts, solved=False)

    orders = [p.order for p in state.placed]
    if orders != list(spec.expected_order):
        if len(orders) < len(spec.expected_order) and all(verdicts):
            return checked, feedback.incomplete(len(orders), len(spec.expected_order))
        return checked, feedback.wrong_arrangement()
    if spec.practice_removal and not BOTH_REMOVALS <= state.removals_used:
        return checked, feedback.practice_step_not_met()
    return replace(checked, solved=True), feedback.success(spec.number)
