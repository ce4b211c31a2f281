"""
Analytics over the problem collection.

Every function here is a pure scan of the collection passed in; nothing
is cached between calls.

Pattern classification:
- Weak: at least 3 problems and a solve rate below 60%
- Strong: at least 3 problems and a solve rate above 80%
"""

from collections.abc import Iterable
from datetime import date, timedelta

from tracker.models import Difficulty, Pattern, PatternStats, Problem, ProgressSummary

# Minimum number of tagged problems before a pattern is classified
MIN_PATTERN_TOTAL = 3

WEAK_SOLVE_RATE = 0.6
STRONG_SOLVE_RATE = 0.8


def pattern_stats(problems: Iterable[Problem]) -> list[PatternStats]:
    """
    Aggregate totals for every known pattern.

    Patterns with no tagged problems are included with zero counts.

    Returns:
        One PatternStats per Pattern, in declaration order.
    """
    totals: dict[Pattern, int] = dict.fromkeys(Pattern, 0)
    solved: dict[Pattern, int] = dict.fromkeys(Pattern, 0)

    for problem in problems:
        for pattern in set(problem.patterns):
            totals[pattern] += 1
            if problem.is_solved:
                solved[pattern] += 1

    return [
        PatternStats(pattern=pattern, total=totals[pattern], solved=solved[pattern])
        for pattern in Pattern
    ]


def weak_patterns(problems: Iterable[Problem]) -> list[PatternStats]:
    """
    Patterns the user struggles with.

    Returns:
        PatternStats sorted by solve rate, weakest first.
    """
    return sorted(
        (
            stats
            for stats in pattern_stats(problems)
            if stats.total >= MIN_PATTERN_TOTAL and stats.solve_rate < WEAK_SOLVE_RATE
        ),
        key=lambda stats: stats.solve_rate,
    )


def strong_patterns(problems: Iterable[Problem]) -> list[PatternStats]:
    """
    Patterns the user is doing well with.

    Returns:
        PatternStats sorted by solve rate ascending, so the least strong
        of the strong patterns comes first.
    """
    return sorted(
        (
            stats
            for stats in pattern_stats(problems)
            if stats.total >= MIN_PATTERN_TOTAL and stats.solve_rate > STRONG_SOLVE_RATE
        ),
        key=lambda stats: stats.solve_rate,
    )


def solved_days(problems: Iterable[Problem]) -> set[date]:
    """Calendar days (local time) on which at least one problem was solved."""
    return {problem.date_solved.date() for problem in problems if problem.date_solved is not None}


def current_streak(problems: Iterable[Problem], today: date | None = None) -> int:
    """
    Count consecutive solve days ending today.

    Args:
        problems: The collection to scan.
        today: The day to count back from; defaults to the local date.

    Returns:
        Number of consecutive days with a solve, 0 if nothing was solved today.
    """
    days = solved_days(problems)
    day = today or date.today()

    streak = 0
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def progress_summary(problems: Iterable[Problem]) -> ProgressSummary:
    """Overall and per-difficulty counts."""
    problems = list(problems)
    by_difficulty = dict.fromkeys(Difficulty, 0)
    for problem in problems:
        by_difficulty[problem.difficulty] += 1

    return ProgressSummary(
        total=len(problems),
        solved=sum(1 for p in problems if p.is_solved),
        easy=by_difficulty[Difficulty.EASY],
        medium=by_difficulty[Difficulty.MEDIUM],
        hard=by_difficulty[Difficulty.HARD],
    )
