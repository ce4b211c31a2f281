"""
Filtering and sorting of the problem list.

Filters run in a fixed order (status, search text, difficulty, pattern);
each one is skipped when unset. The result is sorted with unsolved problems
first, then solved problems newest first, then solved problems without a
solve date. Titles break ties within each group.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta

from tracker.models import Difficulty, FilterConfig, Pattern, Problem, StatusFilter

# Sort groups
UNSOLVED_GROUP = 0
DATED_SOLVED_GROUP = 1
UNDATED_SOLVED_GROUP = 2


def _sort_key(problem: Problem) -> tuple[int, timedelta, str]:
    if not problem.is_solved:
        return (UNSOLVED_GROUP, timedelta(0), problem.title)
    if problem.date_solved is None:
        return (UNDATED_SOLVED_GROUP, timedelta(0), problem.title)
    # Smaller distance to datetime.max means more recent
    return (DATED_SOLVED_GROUP, datetime.max - problem.date_solved, problem.title)


def sort_problems(problems: Iterable[Problem]) -> list[Problem]:
    """Return a new list in display order."""
    return sorted(problems, key=_sort_key)


def filter_and_sort(
    problems: Iterable[Problem],
    status: StatusFilter = StatusFilter.ALL,
    search_text: str = "",
    difficulty: Difficulty | None = None,
    pattern: Pattern | None = None,
) -> list[Problem]:
    """
    Apply the list filters and sort the result.

    Args:
        problems: The full collection (not modified).
        status: Keep all, only solved or only unsolved problems.
        search_text: Case-insensitive substring to look for in titles.
        difficulty: Keep only this difficulty, if given.
        pattern: Keep only problems tagged with this pattern, if given.

    Returns:
        The matching problems in display order.
    """
    result = list(problems)

    if status == StatusFilter.SOLVED:
        result = [p for p in result if p.is_solved]
    elif status == StatusFilter.UNSOLVED:
        result = [p for p in result if not p.is_solved]

    if search_text:
        needle = search_text.casefold()
        result = [p for p in result if needle in p.title.casefold()]

    if difficulty is not None:
        result = [p for p in result if p.difficulty == difficulty]

    if pattern is not None:
        result = [p for p in result if pattern in p.patterns]

    return sort_problems(result)


def apply_filter(problems: Iterable[Problem], config: FilterConfig) -> list[Problem]:
    """Run filter_and_sort with the settings held in a FilterConfig."""
    return filter_and_sort(
        problems,
        status=config.status,
        search_text=config.search_text,
        difficulty=config.difficulty,
        pattern=config.pattern,
    )
