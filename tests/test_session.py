"""Tests for spacestructs.core.session – pure Arrays puzzle rules."""

from __future__ import annotations

import random
from dataclasses import replace

import pytest

from spacestructs.core import session
from spacestructs.core.feedback import FeedbackKind
from spacestructs.core.levels import LevelSpec
from spacestructs.core.planets import planet_by_id, planets_by_ids
from spacestructs.core.session import (
    REMOVE_LAST,
    REMOVE_SELECTED,
    SessionState,
    add_item,
    check_completion,
    remove_at,
    remove_last,
    remove_selected,
    select,
    start_level,
    tag_placements,
)

SUN = planet_by_id("sun")
MERCURY = planet_by_id("mercury")
VENUS = planet_by_id("venus")
EARTH = planet_by_id("earth")


def _spec(number: int = 2, ids=("sun", "mercury", "venus"), expected=(0, 1, 2), **kwargs) -> LevelSpec:
    return LevelSpec(
        number=number,
        title="Test",
        instructions="",
        hint="",
        available_items=tuple(planets_by_ids(ids)),
        expected_order=tuple(expected),
        **kwargs,
    )


def _place(state: SessionState, spec: LevelSpec, *planets) -> SessionState:
    for planet in planets:
        state, message = add_item(state, spec, planet)
        assert message is None
    return state


# ---------------------------------------------------------------------------
# start_level
# ---------------------------------------------------------------------------

class TestStartLevel:
    def test_fresh_state(self):
        spec = _spec()
        state = start_level(spec, max_level_reached=2)
        assert state.current_level == 2
        assert state.placed == ()
        assert state.selected_index is None
        assert state.available_remaining == {"sun", "mercury", "venus"}
        assert state.offered == spec.available_items

    def test_max_level_raised_to_current(self):
        state = start_level(_spec(number=3), max_level_reached=1)
        assert state.max_level_reached == 3

    def test_max_level_kept_when_higher(self):
        state = start_level(_spec(number=2), max_level_reached=4)
        assert state.max_level_reached == 4

    def test_shuffle_is_seeded(self):
        ids = ("sun", "mercury", "venus", "earth", "mars", "jupiter", "saturn", "uranus", "neptune")
        spec = _spec(number=4, ids=ids, expected=range(9), shuffle=True)
        a = start_level(spec, 4, random.Random(11))
        b = start_level(spec, 4, random.Random(11))
        assert a.offered == b.offered
        assert {p.id for p in a.offered} == set(ids)

    def test_no_shuffle_keeps_order(self):
        spec = _spec()
        state = start_level(spec, 2, random.Random(5))
        assert state.offered == spec.available_items


# ---------------------------------------------------------------------------
# SessionState invariants
# ---------------------------------------------------------------------------

class TestInvariants:
    def test_max_below_current_rejected(self):
        with pytest.raises(ValueError):
            SessionState(current_level=3, max_level_reached=2, offered=())

    def test_selected_index_must_be_valid(self):
        with pytest.raises(ValueError):
            SessionState(current_level=1, max_level_reached=1, offered=(SUN,), placed=(SUN,), selected_index=1)

    def test_remaining_items_keeps_offer_order(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, MERCURY)
        assert state.remaining_items() == [SUN, VENUS]


# ---------------------------------------------------------------------------
# add_item
# ---------------------------------------------------------------------------

class TestAddItem:
    def test_appends_and_consumes(self):
        spec = _spec()
        state, message = add_item(start_level(spec, 2), spec, SUN)
        assert message is None
        assert state.placed == (SUN,)
        assert "sun" not in state.available_remaining

    def test_duplicate_is_refused(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN)
        after, message = add_item(state, spec, SUN)
        assert message is not None
        assert message.kind is FeedbackKind.DUPLICATE_ITEM
        assert after is state

    def test_not_offered_raises(self):
        spec = _spec()
        with pytest.raises(ValueError):
            add_item(start_level(spec, 2), spec, EARTH)

    def test_guided_refuses_wrong_slot(self):
        spec = _spec(guided=True)
        state, message = add_item(start_level(spec, 2), spec, VENUS)
        assert message is not None
        assert message.kind is FeedbackKind.WRONG_ITEM_FOR_SLOT
        assert state.placed == ()

    def test_guided_accepts_right_slot(self):
        spec = _spec(guided=True)
        state = _place(start_level(spec, 2), spec, SUN, MERCURY)
        assert [p.id for p in state.placed] == ["sun", "mercury"]

    def test_unguided_allows_any_order(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, VENUS, SUN)
        assert [p.id for p in state.placed] == ["venus", "sun"]

    def test_adding_clears_verdicts(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN)
        state, _ = check_completion(state, spec)
        assert state.verdicts == (True,)
        state = _place(state, spec, MERCURY)
        assert state.verdicts == ()


# ---------------------------------------------------------------------------
# Removal
# ---------------------------------------------------------------------------

class TestRemoval:
    def test_remove_at_returns_item_once(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY, VENUS)
        state, _ = remove_at(state, 1)
        assert [p.id for p in state.placed] == ["sun", "venus"]
        assert state.available_remaining == {"mercury"}

    def test_remove_at_out_of_range(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN)
        with pytest.raises(IndexError):
            remove_at(state, 3)

    def test_remove_at_on_empty(self):
        state = start_level(_spec(), 2)
        _, message = remove_at(state, 0)
        assert message is not None
        assert message.kind is FeedbackKind.NOTHING_TO_REMOVE

    def test_removing_selected_slot_clears_selection(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY)
        state, _ = select(state, spec, 1)
        state, _ = remove_at(state, 1)
        assert state.selected_index is None

    def test_selection_after_removed_slot_shifts(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY, VENUS)
        state, _ = select(state, spec, 2)
        state, _ = remove_at(state, 0)
        assert state.selected_index == 1
        assert state.placed[state.selected_index] == VENUS

    def test_selection_before_removed_slot_kept(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY, VENUS)
        state, _ = select(state, spec, 0)
        state, _ = remove_last(state)
        assert state.selected_index == 0

    def test_remove_last(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY)
        state, message = remove_last(state)
        assert message is None
        assert state.placed == (SUN,)
        assert REMOVE_LAST in state.removals_used

    def test_remove_last_clears_selection_on_last(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY)
        state, _ = select(state, spec, 1)
        state, _ = remove_last(state)
        assert state.selected_index is None

    def test_remove_last_empty(self):
        _, message = remove_last(start_level(_spec(), 2))
        assert message is not None
        assert message.kind is FeedbackKind.NOTHING_TO_REMOVE

    def test_remove_selected(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY)
        state, _ = select(state, spec, 0)
        state, message = remove_selected(state)
        assert message is None
        assert state.placed == (MERCURY,)
        assert REMOVE_SELECTED in state.removals_used

    def test_remove_selected_without_selection(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN)
        after, message = remove_selected(state)
        assert message is not None
        assert message.kind is FeedbackKind.NOTHING_SELECTED
        assert after is state

    def test_remove_selected_on_empty(self):
        _, message = remove_selected(start_level(_spec(), 2))
        assert message is not None
        assert message.kind is FeedbackKind.NOTHING_TO_REMOVE


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestSelect:
    def test_select_sets_index(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY)
        state, _ = select(state, spec, 1)
        assert state.selected_index == 1

    def test_select_again_toggles_off(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN)
        state, _ = select(state, spec, 0)
        state, _ = select(state, spec, 0)
        assert state.selected_index is None

    def test_select_other_moves_selection(self):
        spec = _spec()
        state = _place(start_level(spec, 2), spec, SUN, MERCURY)
        state, _ = select(state, spec, 0)
        state, _ = select(state, spec, 1)
        assert state.selected_index == 1

    def test_disabled_selection_is_noop(self):
        spec = _spec(number=1, ids=("sun",), expected=(0,), selection=False)
        state = _place(start_level(spec, 1), spec, SUN)
        after, message = select(state, spec, 0)
        assert message is None
        assert after.selected_index is None

    def test_out_of_range(self):
        spec = _spec()
        with pytest.raises(IndexError):
            select(start_level(spec, 2), spec, 0)


# ---------------------------------------------------------------------------
# tag_placements
# ---------------------------------------------------------------------------

class TestTagPlacements:
    def test_all_correct(self):
        assert tag_placements([SUN, MERCURY], (0, 1)) == (True, True)

    def test_positional(self):
        assert tag_placements([SUN, VENUS, MERCURY], (0, 1, 2)) == (True, False, False)

    def test_extras_always_wrong(self):
        assert tag_placements([SUN, MERCURY], (0,)) == (True, False)

    def test_empty(self):
        assert tag_placements([], (0, 1)) == ()


# ---------------------------------------------------------------------------
# check_completion
# ---------------------------------------------------------------------------

class TestCheckCompletion:
    def test_exact_match_succeeds(self):
        spec = _spec(number=3)
        state = _place(start_level(spec, 3), spec, SUN, MERCURY, VENUS)
        state, message = check_completion(state, spec)
        assert message.kind is FeedbackKind.SUCCESS
        assert state.solved is True
        assert state.verdicts == (True, True, True)

    def test_wrong_order(self):
        spec = _spec(number=3)
        state = _place(start_level(spec, 3), spec, SUN, VENUS, MERCURY)
        state, message = check_completion(state, spec)
        assert message.kind is FeedbackKind.INCOMPLETE_OR_INCORRECT
        assert state.solved is False
        assert state.verdicts == (True, False, False)

    def test_too_short(self):
        spec = _spec(number=3)
        state = _place(start_level(spec, 3), spec, SUN, MERCURY)
        _, message = check_completion(state, spec)
        assert message.kind is FeedbackKind.INCOMPLETE_OR_INCORRECT
        assert "2 of 3" in message.message

    def test_too_long(self):
        spec = _spec(number=3, expected=(0, 1))
        state = _place(start_level(spec, 3), spec, SUN, MERCURY, VENUS)
        state, message = check_completion(state, spec)
        assert message.kind is FeedbackKind.INCOMPLETE_OR_INCORRECT
        assert state.verdicts == (True, True, False)

    def test_empty_fails(self):
        spec = _spec(number=3)
        _, message = check_completion(start_level(spec, 3), spec)
        assert message.kind is FeedbackKind.INCOMPLETE_OR_INCORRECT

    def test_practice_gate_without_removals(self):
        spec = _spec(practice_removal=True)
        state = _place(start_level(spec, 2), spec, SUN, MERCURY, VENUS)
        state, message = check_completion(state, spec)
        assert message.kind is FeedbackKind.PRACTICE_STEP_NOT_MET
        assert state.solved is False

    def test_practice_gate_with_one_removal(self):
        spec = _spec(practice_removal=True)
        state = start_level(spec, 2)
        state = replace(state, removals_used=frozenset({REMOVE_LAST}))
        state = _place(state, spec, SUN, MERCURY, VENUS)
        _, message = check_completion(state, spec)
        assert message.kind is FeedbackKind.PRACTICE_STEP_NOT_MET

    def test_practice_gate_passed(self):
        spec = _spec(practice_removal=True)
        state = _place(start_level(spec, 2), spec, SUN, MERCURY, VENUS)
        state, _ = select(state, spec, 1)
        state, _ = remove_selected(state)
        state, _ = remove_last(state)
        state = _place(state, spec, MERCURY, VENUS)
        state, message = check_completion(state, spec)
        assert message.kind is FeedbackKind.SUCCESS
        assert state.solved is True

    def test_practice_gate_ignores_wrong_order_first(self):
        spec = _spec(practice_removal=True)
        state = _place(start_level(spec, 2), spec, SUN, VENUS, MERCURY)
        _, message = check_completion(state, spec)
        assert message.kind is FeedbackKind.INCOMPLETE_OR_INCORRECT

    def test_success_message_names_level(self):
        spec = _spec(number=3)
        state = _place(start_level(spec, 3), spec, SUN, MERCURY, VENUS)
        _, message = check_completion(state, spec)
        assert message.message == "You completed level 3"
        assert message.button_text == "Next Level"

    def test_removal_after_success_unsolves(self):
        spec = _spec(number=3)
        state = _place(start_level(spec, 3), spec, SUN, MERCURY, VENUS)
        state, _ = check_completion(state, spec)
        state, _ = remove_last(state)
        assert state.solved is False
        assert state.verdicts == ()


class TestProperties:
    """Randomised sequences of taps keep the state invariants."""

    @pytest.mark.parametrize("seed", range(20))
    def test_random_walk(self, seed: int):
        rng = random.Random(seed)
        spec = _spec(number=3, ids=("sun", "mercury", "venus", "earth", "mars"), expected=range(5))
        state = start_level(spec, 3)
        for _ in range(60):
            action = rng.choice(["add", "remove_at", "remove_last", "select", "check"])
            if action == "add" and state.remaining_items():
                state, _ = session.add_item(state, spec, rng.choice(state.remaining_items()))
            elif action == "remove_at" and state.placed:
                before = state
                state, _ = session.remove_at(state, rng.randrange(len(state.placed)))
                assert len(state.available_remaining) == len(before.available_remaining) + 1
            elif action == "remove_last":
                state, _ = session.remove_last(state)
            elif action == "select" and state.placed:
                state, _ = session.select(state, spec, rng.randrange(len(state.placed)))
            elif action == "check":
                state, message = session.check_completion(state, spec)
                assert state.solved == ([p.order for p in state.placed] == list(range(5)))

            ids = state.placed_ids()
            assert len(ids) == len(set(ids))
            assert set(ids).isdisjoint(state.available_remaining)
            assert set(ids) | state.available_remaining == {p.id for p in spec.available_items}
            if state.selected_index is not None:
                assert 0 <= state.selected_index < len(state.placed)
