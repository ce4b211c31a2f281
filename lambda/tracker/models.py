"""
Data models for the LeetCode Tracker.

This module defines the problem record, its difficulty and pattern tags,
and the derived statistics used by analytics and recommendations.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Difficulty(Enum):
    """Difficulty levels for practice problems."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        """Display-friendly label."""
        return DIFFICULTY_LABELS[self]

    @property
    def color(self) -> str:
        """Color associated with the difficulty."""
        return DIFFICULTY_COLORS[self]


DIFFICULTY_LABELS: dict[Difficulty, str] = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
}

DIFFICULTY_COLORS: dict[Difficulty, str] = {
    Difficulty.EASY: "green",
    Difficulty.MEDIUM: "yellow",
    Difficulty.HARD: "red",
}


class Pattern(Enum):
    """
    Common problem patterns, used for tagging, filtering and analytics.

    Values are the raw names written to persistence. Declaration order is
    the order pattern statistics are reported in.
    """

    # Algorithmic / technique-based
    TWO_POINTERS = "Two Pointers"
    SLIDING_WINDOW = "Sliding Window"
    BINARY_SEARCH = "Binary Search"
    GREEDY = "Greedy"
    BACKTRACKING = "Backtracking"
    BIT_MANIPULATION = "Bit Manipulation"

    # Data structure-based
    ARRAY = "Array"
    STRING = "String"
    LINKED_LIST = "Linked List"
    STACK = "Stack"
    HEAP = "Heap / Priority Queue"
    TREE = "Tree"
    TRIE = "Trie"
    GRAPH = "Graph"

    # Traversal / search
    DFS = "DFS"
    BFS = "BFS"

    # Dynamic programming
    DP_1D = "DP (1D)"
    DP_2D = "DP (2D)"

    # Other
    INTERVALS = "Intervals"
    MATH = "Math / Geometry"

    @property
    def color(self) -> tuple[str, float]:
        """Color name and opacity used for pills and charts."""
        return PATTERN_COLORS[self]

    @classmethod
    def from_name(cls, name: str | None) -> "Pattern | None":
        """
        Resolve a pattern from its raw name, ignoring case and surrounding spaces.

        Returns:
            The matching Pattern, or None if nothing matches.
        """
        if not name:
            return None
        wanted = name.strip().casefold()
        for pattern in cls:
            if pattern.value.casefold() == wanted:
                return pattern
        return None


PATTERN_COLORS: dict[Pattern, tuple[str, float]] = {
    Pattern.TWO_POINTERS: ("blue", 1.0),
    Pattern.SLIDING_WINDOW: ("teal", 1.0),
    Pattern.BINARY_SEARCH: ("indigo", 1.0),
    Pattern.GREEDY: ("green", 1.0),
    Pattern.BACKTRACKING: ("purple", 1.0),
    Pattern.BIT_MANIPULATION: ("pink", 1.0),
    Pattern.ARRAY: ("cyan", 1.0),
    Pattern.STRING: ("mint", 1.0),
    Pattern.LINKED_LIST: ("brown", 1.0),
    Pattern.STACK: ("gray", 1.0),
    Pattern.HEAP: ("yellow", 1.0),
    Pattern.TREE: ("green", 0.8),
    Pattern.TRIE: ("teal", 0.7),
    Pattern.GRAPH: ("blue", 0.7),
    Pattern.DFS: ("purple", 0.85),
    Pattern.BFS: ("indigo", 0.85),
    Pattern.DP_1D: ("orange", 1.0),
    Pattern.DP_2D: ("red", 1.0),
    Pattern.INTERVALS: ("yellow", 0.85),
    Pattern.MATH: ("pink", 0.8),
}


class StatusFilter(Enum):
    """Filter options for solved state."""

    ALL = "All"
    SOLVED = "Solved"
    UNSOLVED = "Unsolved"


def _to_local_naive(value: datetime) -> datetime:
    """Convert an aware timestamp to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


@dataclass
class Problem:
    """
    A tracked coding exercise.

    `date_solved` is set when the problem is marked solved and cleared when
    it is marked unsolved; use the mark_* helpers to keep both in step.
    """

    title: str
    difficulty: Difficulty
    is_solved: bool = False
    date_solved: datetime | None = None
    notes: str = ""
    patterns: list[Pattern] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        # Keep first occurrence of each tag
        self.patterns = list(dict.fromkeys(self.patterns))

    def mark_solved(self, now: datetime | None = None) -> None:
        """Mark as solved, stamping the solve time."""
        self.is_solved = True
        self.date_solved = now or datetime.now()

    def mark_unsolved(self) -> None:
        """Mark as unsolved and clear the solve time."""
        self.is_solved = False
        self.date_solved = None

    def set_solved(self, solved: bool, now: datetime | None = None) -> None:
        """Change the solved state; the solve time only moves on an actual change."""
        if solved == self.is_solved:
            return
        if solved:
            self.mark_solved(now)
        else:
            self.mark_unsolved()

    def to_dict(self) -> dict:
        """Convert to dictionary for persistence."""
        data = {
            "id": self.id,
            "title": self.title,
            "difficulty": self.difficulty.value,
            "isSolved": self.is_solved,
            "notes": self.notes,
            "patterns": [pattern.value for pattern in self.patterns],
        }
        if self.date_solved is not None:
            data["dateSolved"] = self.date_solved.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Problem":
        """
        Create from dictionary (from persistence).

        Raises:
            KeyError, ValueError, TypeError: If the record is malformed.
        """
        date_solved = None
        if data.get("dateSolved"):
            date_solved = _to_local_naive(datetime.fromisoformat(data["dateSolved"]))

        title = data["title"]
        if not isinstance(title, str):
            raise TypeError(f"title must be a string, got {type(title).__name__}")

        is_solved = data.get("isSolved", False)
        if not isinstance(is_solved, bool):
            raise TypeError(f"isSolved must be a boolean, got {type(is_solved).__name__}")

        notes = data.get("notes") or ""
        if not isinstance(notes, str):
            raise TypeError(f"notes must be a string, got {type(notes).__name__}")

        return cls(
            id=str(data["id"]),
            title=title,
            difficulty=Difficulty(data["difficulty"]),
            is_solved=is_solved,
            date_solved=date_solved,
            notes=notes,
            patterns=[Pattern(name) for name in data.get("patterns") or []],
        )


@dataclass(frozen=True)
class PatternStats:
    """Aggregated statistics for a single pattern."""

    pattern: Pattern
    total: int
    solved: int

    @property
    def solve_rate(self) -> float:
        """Solve rate between 0 and 1; 0 when no problems carry the pattern."""
        if self.total == 0:
            return 0.0
        return self.solved / self.total


@dataclass
class FilterConfig:
    """Active list filters. Unset fields do not filter."""

    status: StatusFilter = StatusFilter.ALL
    search_text: str = ""
    difficulty: Difficulty | None = None
    pattern: Pattern | None = None

    def clear(self) -> None:
        """Reset every filter to its default."""
        self.status = StatusFilter.ALL
        self.search_text = ""
        self.difficulty = None
        self.pattern = None


@dataclass(frozen=True)
class ProgressSummary:
    """Overall counts shown on the stats overview."""

    total: int = 0
    solved: int = 0
    easy: int = 0
    medium: int = 0
    hard: int = 0

    @property
    def unsolved(self) -> int:
        return self.total - self.solved

    @property
    def solve_rate(self) -> float:
        """Overall solve rate between 0 and 1."""
        if self.total == 0:
            return 0.0
        return self.solved / self.total
