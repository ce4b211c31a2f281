"""Helper functions for LeetCode Tracker skill handlers."""

from ask_sdk_core.dispatch_components import AbstractRequestHandler

from tracker import data
from tracker.models import Difficulty, PatternStats, Problem, StatusFilter
from tracker.repository import ProblemRepository

# Spoken words mapped to difficulties
DIFFICULTY_WORDS: dict[str, Difficulty] = {
    "easy": Difficulty.EASY,
    "simple": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "moderate": Difficulty.MEDIUM,
    "hard": Difficulty.HARD,
    "difficult": Difficulty.HARD,
}

# Spoken words mapped to status filters
STATUS_WORDS: dict[str, StatusFilter] = {
    "all": StatusFilter.ALL,
    "solved": StatusFilter.SOLVED,
    "done": StatusFilter.SOLVED,
    "unsolved": StatusFilter.UNSOLVED,
    "open": StatusFilter.UNSOLVED,
    "not solved": StatusFilter.UNSOLVED,
}


class RepositoryRequestHandler(AbstractRequestHandler):
    """Base for handlers that read or change the problem collection."""

    def __init__(self, repository: ProblemRepository):
        self._repository = repository


def get_slot_text(handler_input, name: str) -> str | None:
    """
    Read a slot value from the current intent.

    Returns:
        The stripped slot text, or None if the slot is missing or blank.
    """
    slots = handler_input.request_envelope.request.intent.slots
    slot = slots.get(name) if slots else None
    value = slot.value if slot else None
    if not value or not value.strip():
        return None
    return value.strip()


def parse_difficulty(value: str | None) -> Difficulty | None:
    if not value:
        return None
    return DIFFICULTY_WORDS.get(value.strip().lower())


def parse_status(value: str | None) -> StatusFilter:
    if not value:
        return StatusFilter.ALL
    return STATUS_WORDS.get(value.strip().lower(), StatusFilter.ALL)


def join_spoken(items: list[str]) -> str:
    """Join items for speech: "a", "a and b", "a, b and c"."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " and " + items[-1]


def get_streak_text(streak: int) -> str:
    """Streak sentence for the welcome message."""
    if streak > 0:
        return data.STREAK_ACTIVE.format(days=streak)
    return data.STREAK_NONE


def get_review_speech(problems: list[Problem]) -> str:
    """Speech for today's review list, reading only the top few."""
    if not problems:
        return data.REVIEW_EMPTY

    items = [
        data.REVIEW_ITEM.format(title=problem.title, difficulty=problem.difficulty.label)
        for problem in problems[: data.SPOKEN_RECOMMENDATIONS]
    ]
    return data.REVIEW_INTRO + join_spoken(items) + "."


def get_patterns_text(stats: list[PatternStats]) -> str:
    """Names of the first few patterns with their solved/total counts."""
    return join_spoken(
        [
            f"{s.pattern.value}, {s.solved} of {s.total}"
            for s in stats[: data.SPOKEN_PATTERN_LIMIT]
        ]
    )


def get_list_speech(problems: list[Problem]) -> str:
    """Speech listing the first few matching titles."""
    if not problems:
        return data.LIST_EMPTY

    count = len(problems)
    shown = problems[: data.SPOKEN_LIST_LIMIT]
    speech = data.LIST_INTRO.format(count=count, unit=data.plural(count, "problem"))
    speech += join_spoken([problem.title for problem in shown])

    remaining = count - len(shown)
    if remaining > 0:
        speech += data.LIST_MORE.format(count=remaining)
    else:
        speech += "."
    return speech
