"""
Unit tests for the review score and daily recommendations.
"""

from datetime import datetime, timedelta

import pytest

from tracker.models import Difficulty, Pattern, Problem
from tracker.recommendations import (
    MAX_RECOMMENDATIONS,
    review_score,
    scored_recommendations,
    todays_recommendations,
)

NOW = datetime(2025, 12, 1, 12, 0)


def solved(title, difficulty, days_ago, patterns=None):
    return Problem(
        title=title,
        difficulty=difficulty,
        is_solved=True,
        date_solved=NOW - timedelta(days=days_ago),
        patterns=patterns or [],
    )


def unsolved(title, difficulty, patterns=None):
    return Problem(title=title, difficulty=difficulty, patterns=patterns or [])


class TestReviewScore:
    """Tests for the additive review score."""

    def test_unsolved_hard_weak(self):
        problem = unsolved("Coin Change", Difficulty.HARD, [Pattern.DP_1D])

        score = review_score(problem, weak={Pattern.DP_1D}, strong=set(), now=NOW)

        assert score == 6.5

    def test_solved_easy_neutral_twenty_days_ago(self):
        problem = solved("Two Sum", Difficulty.EASY, days_ago=20)

        assert review_score(problem, weak=set(), strong=set(), now=NOW) == 3.0

    def test_strong_pattern_adds_nothing(self):
        problem = solved("Valid Anagram", Difficulty.EASY, days_ago=1, patterns=[Pattern.STRING])

        assert review_score(problem, weak=set(), strong={Pattern.STRING}, now=NOW) == 0.5

    def test_weak_takes_priority_over_strong(self):
        problem = unsolved("Word Search", Difficulty.MEDIUM, [Pattern.STRING, Pattern.BACKTRACKING])

        score = review_score(
            problem, weak={Pattern.BACKTRACKING}, strong={Pattern.STRING}, now=NOW
        )

        assert score == 3.0 + 1.0 + 2.0

    @pytest.mark.parametrize(
        "difficulty, expected",
        [
            (Difficulty.EASY, 0.5),
            (Difficulty.MEDIUM, 1.0),
            (Difficulty.HARD, 1.5),
        ],
    )
    def test_difficulty_weights(self, difficulty, expected):
        # Neutral pattern (+1.0), solved today (+0.0)
        problem = solved("P", difficulty, days_ago=0)

        assert review_score(problem, weak=set(), strong=set(), now=NOW) == 1.0 + expected

    @pytest.mark.parametrize(
        "days_ago, expected",
        [
            (0, 0.0),
            (6, 0.0),
            (7, 1.0),
            (13, 1.0),
            (14, 1.5),
            (60, 1.5),
        ],
    )
    def test_recency_weights(self, days_ago, expected):
        problem = solved("P", Difficulty.EASY, days_ago=days_ago)

        assert review_score(problem, weak=set(), strong=set(), now=NOW) == 1.5 + expected

    def test_partial_days_round_down(self):
        problem = Problem(
            title="P",
            difficulty=Difficulty.EASY,
            is_solved=True,
            date_solved=NOW - timedelta(days=6, hours=23),
        )

        assert review_score(problem, weak=set(), strong=set(), now=NOW) == 1.5

    def test_solved_without_date_gets_no_recency(self):
        problem = Problem(title="P", difficulty=Difficulty.HARD, is_solved=True)

        assert review_score(problem, weak=set(), strong=set(), now=NOW) == 2.5


class TestTodaysRecommendations:
    """Tests for the daily review list."""

    def test_empty_collection(self):
        assert todays_recommendations([], now=NOW) == []

    def test_limited_to_five(self):
        problems = [unsolved(f"Problem {i}", Difficulty.MEDIUM) for i in range(8)]

        result = todays_recommendations(problems, now=NOW)

        assert len(result) == MAX_RECOMMENDATIONS

    def test_ties_keep_collection_order(self):
        problems = [unsolved(f"Problem {i}", Difficulty.MEDIUM) for i in range(8)]

        result = todays_recommendations(problems, now=NOW)

        assert result == problems[:5]

    def test_highest_score_first(self):
        recent_easy = solved("Recent Easy", Difficulty.EASY, days_ago=1)
        open_hard = unsolved("Open Hard", Difficulty.HARD)
        stale_medium = solved("Stale Medium", Difficulty.MEDIUM, days_ago=30)

        result = todays_recommendations([recent_easy, open_hard, stale_medium], now=NOW)

        assert [p.title for p in result] == ["Open Hard", "Stale Medium", "Recent Easy"]

    def test_weak_pattern_problem_ranked_above_neutral(self):
        """Coin Change (weak dp) outranks Two Sum solved 10 days ago."""
        two_sum = solved("Two Sum", Difficulty.EASY, days_ago=10, patterns=[Pattern.SLIDING_WINDOW])
        coin_change = unsolved("Coin Change", Difficulty.HARD, [Pattern.DP_1D])
        # Make DP (1D) weak: 5 tagged, 1 solved
        others = [solved("Climbing Stairs", Difficulty.EASY, days_ago=3, patterns=[Pattern.DP_1D])]
        others += [unsolved(f"DP {i}", Difficulty.MEDIUM, [Pattern.DP_1D]) for i in range(3)]
        problems = [two_sum, coin_change] + others

        result = todays_recommendations(problems, limit=len(problems), now=NOW)
        titles = [p.title for p in result]

        assert titles.index("Coin Change") < titles.index("Two Sum")
        assert titles[0] == "Coin Change"
        assert titles[-1] == "Two Sum"

    def test_scored_recommendations_returns_scores(self):
        problem = unsolved("Open Hard", Difficulty.HARD)

        [(returned, score)] = scored_recommendations([problem], now=NOW)

        assert returned is problem
        assert score == 1.0 + 1.5 + 2.0

    def test_custom_limit(self, sample_problems):
        assert len(todays_recommendations(sample_problems, limit=1, now=NOW)) == 1
