"""Player-facing feedback produced by puzzle actions.

None of these are errors in the systems sense: each one is shown in the
level message overlay and the player carries on with the same level.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FeedbackKind(Enum):
    SUCCESS = "success"
    ALL_COMPLETE = "all_complete"
    HINT = "hint"
    WRONG_ITEM_FOR_SLOT = "wrong_item_for_slot"
    INCOMPLETE_OR_INCORRECT = "incomplete_or_incorrect"
    PRACTICE_STEP_NOT_MET = "practice_step_not_met"
    DUPLICATE_ITEM = "duplicate_item"
    NOTHING_SELECTED = "nothing_selected"
    NOTHING_TO_REMOVE = "nothing_to_remove"
    LEVEL_LOCKED = "level_locked"

    @property
    def is_positive(self) -> bool:
        return self in (FeedbackKind.SUCCESS, FeedbackKind.ALL_COMPLETE)


@dataclass(frozen=True)
class Feedback:
    kind: FeedbackKind
    title: str
    message: str
    button_text: str = "Try Again"


def success(level: int) -> Feedback:
    return Feedback(FeedbackKind.SUCCESS, "Great Job! 🎉", f"You completed level {level}", "Next Level")


def all_complete() -> Feedback:
    return Feedback(
        FeedbackKind.ALL_COMPLETE,
        "Solar System Complete! 🚀",
        "You placed every planet in order. Arrays mastered!",
        "Back to Levels",
    )


def hint(text: str) -> Feedback:
    return Feedback(FeedbackKind.HINT, "Hint", text, "Got It")


def wrong_item_for_slot() -> Feedback:
    return Feedback(FeedbackKind.WRONG_ITEM_FOR_SLOT, "Oops!", "That's not the right planet for this step!")


def incomplete(placed: int, expected: int) -> Feedback:
    return Feedback(
        FeedbackKind.INCOMPLETE_OR_INCORRECT,
        "Oops!",
        f"Your solar system isn't finished yet: {placed} of {expected} planets placed.",
    )


def wrong_arrangement() -> Feedback:
    return Feedback(
        FeedbackKind.INCOMPLETE_OR_INCORRECT,
        "Oops!",
        "The planets are not in the right order. Check the highlighted ones!",
    )


def practice_step_not_met() -> Feedback:
    return Feedback(
        FeedbackKind.PRACTICE_STEP_NOT_MET,
        "Almost there!",
        "Your planets are in order. Now practise removing planets with both "
        "'Remove Selected' and 'Remove Last', then rebuild the system.",
        "Keep Going",
    )


def duplicate_item(name: str) -> Feedback:
    return Feedback(FeedbackKind.DUPLICATE_ITEM, "Oops!", f"{name} is already in your solar system!")


def nothing_selected() -> Feedback:
    return Feedback(FeedbackKind.NOTHING_SELECTED, "Select a planet", "Tap a planet in your solar system first.", "OK")


def nothing_to_remove() -> Feedback:
    return Feedback(FeedbackKind.NOTHING_TO_REMOVE, "Nothing to remove", "Your solar system is empty.", "OK")


def level_locked(level: int) -> Feedback:
    return Feedback(
        FeedbackKind.LEVEL_LOCKED,
        "Level locked",
        f"Complete the current level to unlock level {level}.",
        "OK",
    )
