"""
In-memory problem collection backed by a ProblemStore.

The repository owns the canonical list. Every mutation is followed by a
synchronous save of the whole collection, so the stored snapshot always
matches memory once a call returns. Derived views (filters, analytics,
recommendations) are computed fresh on each call.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime

from tracker import analytics, filtering, recommendations
from tracker.models import FilterConfig, PatternStats, Problem, ProgressSummary
from tracker.persistence import ProblemStore

logger = logging.getLogger(__name__)

Listener = Callable[[list[Problem]], None]


class ProblemRepository:
    """
    Authoritative collection of tracked problems.

    Lookups by id that miss are no-ops and return None/False; they never
    raise and never touch the store.
    """

    def __init__(self, store: ProblemStore):
        """
        Initialize the repository and load the stored collection.

        Args:
            store: Store used to load and persist the collection.
        """
        self._store = store
        self._problems: list[Problem] = store.load()
        self._listeners: list[Listener] = []

    @property
    def problems(self) -> list[Problem]:
        """Current collection (a copy of the list, in insertion order)."""
        return list(self._problems)

    def __len__(self) -> int:
        return len(self._problems)

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked with the collection after every mutation."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def reload(self) -> None:
        """Replace the in-memory collection with the stored one."""
        self._problems = self._store.load()
        self._notify()

    def _changed(self) -> None:
        if not self._store.save(self._problems):
            logger.warning("Problem collection changed but could not be persisted")
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.problems)

    def _index_of(self, problem_id: str) -> int | None:
        for index, problem in enumerate(self._problems):
            if problem.id == problem_id:
                return index
        return None

    # Read access

    def get(self, problem_id: str) -> Problem | None:
        index = self._index_of(problem_id)
        return None if index is None else self._problems[index]

    def find_by_title(self, title: str) -> Problem | None:
        """First problem whose title matches, ignoring case and surrounding spaces."""
        wanted = title.strip().casefold()
        for problem in self._problems:
            if problem.title.strip().casefold() == wanted:
                return problem
        return None

    # Mutations

    def add(self, problem: Problem) -> Problem:
        """Append a new problem and persist."""
        self._problems.append(problem)
        logger.info(f"Added problem {problem.id} ({problem.title!r})")
        self._changed()
        return problem

    def update(self, problem_id: str, mutator: Callable[[Problem], None]) -> Problem | None:
        """
        Edit a problem in place and persist.

        Args:
            problem_id: Id of the problem to edit.
            mutator: Callable applied to the stored problem.

        Returns:
            The edited problem, or None if no problem has that id.
        """
        problem = self.get(problem_id)
        if problem is None:
            logger.info(f"Update skipped, problem {problem_id} not found")
            return None

        # Persist whatever the mutator managed to change, even if it raises
        try:
            mutator(problem)
        finally:
            self._changed()
        return problem

    def set_solved(self, problem_id: str, solved: bool, now: datetime | None = None) -> Problem | None:
        """Set the solved state, stamping or clearing the solve date."""
        return self.update(problem_id, lambda problem: problem.set_solved(solved, now))

    def toggle_solved(self, problem_id: str, now: datetime | None = None) -> Problem | None:
        problem = self.get(problem_id)
        if problem is None:
            return None
        return self.set_solved(problem_id, not problem.is_solved, now)

    def delete(self, problem_id: str) -> bool:
        """
        Remove a problem and persist.

        Returns:
            True if a problem was removed, False if the id was unknown.
        """
        index = self._index_of(problem_id)
        if index is None:
            logger.info(f"Delete skipped, problem {problem_id} not found")
            return False

        self.remove_at(index)
        return True

    def remove_at(self, index: int) -> Problem | None:
        """Remove the problem at a position in the collection; None if out of range."""
        if not 0 <= index < len(self._problems):
            return None

        problem = self._problems.pop(index)
        logger.info(f"Deleted problem {problem.id} ({problem.title!r})")
        self._changed()
        return problem

    # Derived views

    def filter_and_sort(self, config: FilterConfig | None = None) -> list[Problem]:
        return filtering.apply_filter(self._problems, config or FilterConfig())

    def pattern_stats(self) -> list[PatternStats]:
        return analytics.pattern_stats(self._problems)

    def weak_patterns(self) -> list[PatternStats]:
        return analytics.weak_patterns(self._problems)

    def strong_patterns(self) -> list[PatternStats]:
        return analytics.strong_patterns(self._problems)

    def current_streak(self, today: date | None = None) -> int:
        return analytics.current_streak(self._problems, today=today)

    def summary(self) -> ProgressSummary:
        return analytics.progress_summary(self._problems)

    def todays_recommendations(self, now: datetime | None = None) -> list[Problem]:
        return recommendations.todays_recommendations(self._problems, now=now)
