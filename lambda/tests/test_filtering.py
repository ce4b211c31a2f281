"""
Unit tests for the filter and sort pipeline.
"""

from datetime import datetime, timedelta
from itertools import permutations

from tracker.filtering import apply_filter, filter_and_sort, sort_problems
from tracker.models import Difficulty, FilterConfig, Pattern, Problem, StatusFilter

NOW = datetime(2025, 12, 1, 12, 0)


def make_problem(title, difficulty=Difficulty.EASY, solved_days_ago=None, patterns=None):
    problem = Problem(title=title, difficulty=difficulty, patterns=patterns or [])
    if solved_days_ago is not None:
        problem.mark_solved(NOW - timedelta(days=solved_days_ago))
    return problem


class TestStatusFilter:
    """Tests for filtering by solved state."""

    def test_all_keeps_everything(self, sample_problems):
        result = filter_and_sort(sample_problems)

        assert {p.id for p in result} == {p.id for p in sample_problems}

    def test_solved_and_unsolved_partition_the_collection(self, sample_problems):
        solved = filter_and_sort(sample_problems, status=StatusFilter.SOLVED)
        unsolved = filter_and_sort(sample_problems, status=StatusFilter.UNSOLVED)

        solved_ids = {p.id for p in solved}
        unsolved_ids = {p.id for p in unsolved}
        assert solved_ids.isdisjoint(unsolved_ids)
        assert solved_ids | unsolved_ids == {p.id for p in sample_problems}
        assert all(p.is_solved for p in solved)
        assert not any(p.is_solved for p in unsolved)


class TestSearchFilter:
    """Tests for title search."""

    def test_search_is_case_insensitive(self, sample_problems):
        result = filter_and_sort(sample_problems, search_text="COIN")

        assert [p.title for p in result] == ["Coin Change"]

    def test_search_matches_substring(self, sample_problems):
        result = filter_and_sort(sample_problems, search_text="sub")

        assert [p.id for p in result] == ["p-longest-substring"]

    def test_empty_search_skips_filter(self, sample_problems):
        assert len(filter_and_sort(sample_problems, search_text="")) == len(sample_problems)

    def test_search_without_match(self, sample_problems):
        assert filter_and_sort(sample_problems, search_text="zzz") == []


class TestDifficultyAndPatternFilters:
    """Tests for difficulty and pattern filters."""

    def test_difficulty_exact_match(self, sample_problems):
        result = filter_and_sort(sample_problems, difficulty=Difficulty.MEDIUM)

        assert [p.id for p in result] == ["p-longest-substring"]

    def test_pattern_membership(self, sample_problems):
        result = filter_and_sort(sample_problems, pattern=Pattern.TWO_POINTERS)

        assert [p.id for p in result] == ["p-two-sum"]

    def test_filters_combine(self, sample_problems):
        result = filter_and_sort(
            sample_problems,
            status=StatusFilter.SOLVED,
            search_text="two",
            difficulty=Difficulty.EASY,
            pattern=Pattern.ARRAY,
        )

        assert [p.id for p in result] == ["p-two-sum"]

    def test_apply_filter_uses_config(self, sample_problems):
        config = FilterConfig(status=StatusFilter.UNSOLVED, difficulty=Difficulty.HARD)

        result = apply_filter(sample_problems, config)

        assert [p.id for p in result] == ["p-coin-change"]


class TestSorting:
    """Tests for display order."""

    def test_unsolved_titles_sorted_alphabetically(self):
        result = sort_problems([make_problem("B"), make_problem("A")])

        assert [p.title for p in result] == ["A", "B"]

    def test_more_recently_solved_first(self):
        older = make_problem("Alpha", solved_days_ago=5)
        newer = make_problem("Zulu", solved_days_ago=1)

        result = sort_problems([older, newer])

        assert [p.title for p in result] == ["Zulu", "Alpha"]

    def test_unsolved_before_solved_regardless_of_dates(self):
        solved_today = make_problem("Aardvark", solved_days_ago=0)
        unsolved = make_problem("Zebra")

        result = sort_problems([solved_today, unsolved])

        assert [p.title for p in result] == ["Zebra", "Aardvark"]

    def test_solved_without_date_sorted_by_title(self):
        a = Problem(title="B", difficulty=Difficulty.EASY, is_solved=True)
        b = Problem(title="A", difficulty=Difficulty.EASY, is_solved=True)

        result = sort_problems([a, b])

        assert [p.title for p in result] == ["A", "B"]

    def test_same_solve_time_sorted_by_title(self):
        a = make_problem("Beta", solved_days_ago=2)
        b = make_problem("Alpha", solved_days_ago=2)

        result = sort_problems([a, b])

        assert [p.title for p in result] == ["Alpha", "Beta"]

    def test_title_comparison_is_case_sensitive(self):
        result = sort_problems([make_problem("apple"), make_problem("Banana")])

        assert [p.title for p in result] == ["Banana", "apple"]

    def test_dated_solved_before_undated_solved(self):
        undated = Problem(title="Alpha", difficulty=Difficulty.EASY, is_solved=True)
        dated = make_problem("Zulu", solved_days_ago=30)

        result = sort_problems([undated, dated])

        assert [p.title for p in result] == ["Zulu", "Alpha"]

    def test_mixed_dates_sort_the_same_in_any_input_order(self):
        problems = [
            make_problem("z", solved_days_ago=0),
            Problem(title="m", difficulty=Difficulty.EASY, is_solved=True),
            make_problem("a", solved_days_ago=3),
            make_problem("open"),
        ]

        orders = {tuple(p.title for p in sort_problems(perm)) for perm in permutations(problems)}

        assert orders == {("open", "z", "a", "m")}

    def test_full_ordering(self, sample_problems):
        result = filter_and_sort(sample_problems)

        assert [p.id for p in result] == ["p-coin-change", "p-longest-substring", "p-two-sum"]

    def test_sort_is_deterministic(self, sample_problems):
        first = filter_and_sort(sample_problems)
        second = filter_and_sort(list(reversed(sample_problems)))

        assert [p.id for p in first] == [p.id for p in second]

    def test_input_not_modified(self, sample_problems):
        original_ids = [p.id for p in sample_problems]

        filter_and_sort(sample_problems, status=StatusFilter.SOLVED)

        assert [p.id for p in sample_problems] == original_ids
