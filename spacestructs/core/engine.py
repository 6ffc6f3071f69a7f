from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from spacestructs.core import feedback, session
from spacestructs.core.feedback import Feedback
from spacestructs.core.levels import LevelRepository, LevelSpec
from spacestructs.core.progress import ProgressStore
from spacestructs.core.session import SessionState, Update
from spacestructs.core.topics import DataStructure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """What the screen needs after a tap: the new state and an optional message."""

    state: SessionState
    feedback: Optional[Feedback] = None


class LevelProgressionEngine:
    """Owns the Arrays puzzle: current level, placed planets, selection and verdicts.

    The ``tap_*`` methods are the surface used by the UI; the plain-named
    methods underneath apply one rule each and are what the tests exercise.
    """

    def __init__(
        self,
        levels: LevelRepository,
        progress_store: Optional[ProgressStore] = None,
        *,
        seed: Optional[int] = None,
        unlock_all: bool = False,
    ) -> None:
        self._levels = levels
        self._progress_store = progress_store
        self._rng = random.Random(seed)
        max_level = levels.last if unlock_all else levels.first
        self._state = session.start_level(levels.get(levels.first), max_level, self._rng)
        self._record_level()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def spec(self) -> LevelSpec:
        return self._levels.get(self._state.current_level)

    @property
    def current_level(self) -> int:
        return self._state.current_level

    @property
    def max_level_reached(self) -> int:
        return self._state.max_level_reached

    @property
    def total_levels(self) -> int:
        return len(self._levels)

    def is_final_level(self) -> bool:
        return self._state.current_level >= self._levels.last

    def can_go_back(self) -> bool:
        return self._state.current_level > self._levels.first

    def can_go_forward(self) -> bool:
        return self._state.current_level < min(self._state.max_level_reached, self._levels.last)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def add_item(self, planet_id: str) -> Optional[Feedback]:
        planet = next((p for p in self._state.offered if p.id == planet_id), None)
        if planet is None:
            raise ValueError(f"{planet_id!r} is not offered on level {self.current_level}")
        return self._apply(session.add_item(self._state, self.spec, planet))

    def remove_at(self, index: int) -> Optional[Feedback]:
        return self._apply(session.remove_at(self._state, index))

    def remove_selected(self) -> Optional[Feedback]:
        return self._apply(session.remove_selected(self._state))

    def remove_last(self) -> Optional[Feedback]:
        return self._apply(session.remove_last(self._state))

    def select(self, index: int) -> Optional[Feedback]:
        return self._apply(session.select(self._state, self.spec, index))

    def check_completion(self) -> Feedback:
        self._state, result = session.check_completion(self._state, self.spec)
        if self._state.solved:
            logger.info("Level %d solved", self.current_level)
        else:
            logger.debug("Level %d check: %s", self.current_level, result.kind.value)
        return result

    def advance_level(self) -> Optional[Feedback]:
        """Move past the current level, or finish the topic on the final one."""
        if self.is_final_level():
            if self._progress_store is not None:
                self._progress_store.mark_completed(DataStructure.ARRAYS)
            logger.info("All %d array levels complete", self.total_levels)
            return feedback.all_complete()
        target = self.current_level + 1
        self._start(target, max(self.max_level_reached, target))
        logger.info("Advanced to level %d", target)
        return None

    def change_level(self, direction: int) -> Optional[Feedback]:
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")
        target = self.current_level + direction
        if target not in self._levels:
            return None
        if target > self.max_level_reached:
            return feedback.level_locked(target)
        self._start(target, self.max_level_reached)
        logger.info("Changed to level %d", target)
        return None

    def reset_current_level(self) -> None:
        self._start(self.current_level, self.max_level_reached)
        logger.debug("Reset level %d", self.current_level)

    def hint(self) -> Feedback:
        return feedback.hint(self.spec.hint or self.spec.instructions)

    # ------------------------------------------------------------------
    # Tap surface
    # ------------------------------------------------------------------

    def tap_available_item(self, planet_id: str) -> ActionResult:
        return self._result(self.add_item(planet_id))

    def tap_placed_item(self, index: int) -> ActionResult:
        return self._result(self.select(index))

    def tap_remove_selected(self) -> ActionResult:
        return self._result(self.remove_selected())

    def tap_remove_last(self) -> ActionResult:
        return self._result(self.remove_last())

    def tap_check_level(self) -> ActionResult:
        return self._result(self.check_completion())

    def tap_reset_level(self) -> ActionResult:
        self.reset_current_level()
        return self._result(None)

    def tap_next_level(self) -> ActionResult:
        if self._state.solved:
            return self._result(self.advance_level())
        return self._result(self.change_level(1))

    def tap_prev_level(self) -> ActionResult:
        return self._result(self.change_level(-1))

    def tap_hint(self) -> ActionResult:
        return self._result(self.hint())

    # ------------------------------------------------------------------

    def _apply(self, update: Update) -> Optional[Feedback]:
        self._state, message = update
        return message

    def _start(self, level: int, max_level_reached: int) -> None:
        self._state = session.start_level(self._levels.get(level), max_level_reached, self._rng)
        self._record_level()

    def _record_level(self) -> None:
        if self._progress_store is not None:
            self._progress_store.record_level(DataStructure.ARRAYS, self.max_level_reached)

    def _result(self, message: Optional[Feedback]) -> ActionResult:
        return ActionResult(state=self._state, feedback=message)
