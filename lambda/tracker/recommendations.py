"""
Daily review recommendations for the LeetCode Tracker.

Each problem gets an additive priority score from three terms:

- Pattern: +3.0 if tagged with a weak pattern, otherwise +0.0 if tagged
  with a strong pattern, otherwise +1.0. Weak membership wins when a
  problem carries both.
- Difficulty: easy +0.5, medium +1.0, hard +1.5
- Recency: unsolved +2.0; solved 14+ days ago +1.5; solved 7+ days ago
  +1.0; solved more recently +0.0

The highest scoring problems make up today's review list.
"""

from collections.abc import Iterable, Set
from datetime import datetime

from tracker.analytics import strong_patterns, weak_patterns
from tracker.models import Difficulty, Pattern, Problem

WEAK_PATTERN_WEIGHT = 3.0
STRONG_PATTERN_WEIGHT = 0.0
NEUTRAL_PATTERN_WEIGHT = 1.0

DIFFICULTY_WEIGHTS: dict[Difficulty, float] = {
    Difficulty.EASY: 0.5,
    Difficulty.MEDIUM: 1.0,
    Difficulty.HARD: 1.5,
}

UNSOLVED_WEIGHT = 2.0

# (minimum days since solved, weight), checked in order
RECENCY_WEIGHTS: list[tuple[int, float]] = [
    (14, 1.5),
    (7, 1.0),
]

# Size of the daily review list
MAX_RECOMMENDATIONS = 5


def _pattern_weight(problem: Problem, weak: Set[Pattern], strong: Set[Pattern]) -> float:
    if any(pattern in weak for pattern in problem.patterns):
        return WEAK_PATTERN_WEIGHT
    if any(pattern in strong for pattern in problem.patterns):
        return STRONG_PATTERN_WEIGHT
    return NEUTRAL_PATTERN_WEIGHT


def _recency_weight(problem: Problem, now: datetime) -> float:
    if not problem.is_solved:
        return UNSOLVED_WEIGHT
    if problem.date_solved is None:
        return 0.0

    days_since = (now - problem.date_solved).days
    for min_days, weight in RECENCY_WEIGHTS:
        if days_since >= min_days:
            return weight
    return 0.0


def review_score(
    problem: Problem,
    weak: Set[Pattern],
    strong: Set[Pattern],
    now: datetime | None = None,
) -> float:
    """
    Compute the review priority of a problem. Higher means review sooner.

    Args:
        problem: The problem to score.
        weak: Patterns currently classified as weak.
        strong: Patterns currently classified as strong.
        now: Reference time for recency; defaults to the current local time.

    Returns:
        The additive score.
    """
    now = now or datetime.now()
    return (
        _pattern_weight(problem, weak, strong)
        + DIFFICULTY_WEIGHTS[problem.difficulty]
        + _recency_weight(problem, now)
    )


def scored_recommendations(
    problems: Iterable[Problem],
    limit: int = MAX_RECOMMENDATIONS,
    now: datetime | None = None,
) -> list[tuple[Problem, float]]:
    """
    Score every problem and keep the best.

    Ties keep the collection order (the sort is stable).

    Returns:
        Up to `limit` (problem, score) pairs, highest score first.
    """
    problems = list(problems)
    weak = {stats.pattern for stats in weak_patterns(problems)}
    strong = {stats.pattern for stats in strong_patterns(problems)}
    now = now or datetime.now()

    scored = [(problem, review_score(problem, weak, strong, now)) for problem in problems]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored[:limit]


def todays_recommendations(
    problems: Iterable[Problem],
    limit: int = MAX_RECOMMENDATIONS,
    now: datetime | None = None,
) -> list[Problem]:
    """
    Select the problems to review today.

    Returns:
        Up to `limit` problems, highest priority first; empty when there
        are no problems.
    """
    return [problem for problem, _ in scored_recommendations(problems, limit=limit, now=now)]
