"""Tests for the monotonic scoreboard."""

import itertools

import pytest

from demoreel.analysis.scoreboard import Scoreboard

PUSHED_TOTALS = [3, 9, 0, 7, 9]


class TestScoreboard:
    """Tests for Scoreboard.observe."""

    def test_starts_at_zero(self):
        """Every counter starts at zero."""
        board = Scoreboard()
        assert all(value == 0 for value in board.to_dict().values())

    def test_counter_names(self):
        """All eighteen counters are exposed, in declaration order."""
        names = Scoreboard.counter_names()
        assert len(names) == 18
        assert names[0] == "captures"
        assert names[-1] == "points"
        assert "damage_blocked" in names

    def test_higher_value_is_taken(self):
        """A larger total replaces the stored one."""
        board = Scoreboard()
        assert board.observe("kills", 3) is True
        assert board.kills == 3

    def test_lower_value_is_ignored(self):
        """A stale, smaller total never decreases a counter."""
        board = Scoreboard()
        board.observe("kills", 5)
        assert board.observe("kills", 3) is False
        assert board.kills == 5

    def test_equal_value_is_not_an_increase(self):
        """Resending the same total changes nothing."""
        board = Scoreboard(deaths=2)
        assert board.observe("deaths", 2) is False
        assert board.deaths == 2

    def test_counters_are_independent(self):
        """Observing one counter leaves the others alone."""
        board = Scoreboard()
        board.observe("healing", 400)
        assert board.to_dict()["healing"] == 400
        assert board.to_dict()["kills"] == 0

    @pytest.mark.parametrize("order", sorted(set(itertools.permutations(PUSHED_TOTALS))))
    def test_any_arrival_order_ends_at_max(self, order):
        """Whatever order totals arrive in, the counter never drops and ends at the largest."""
        board = Scoreboard()
        seen = []
        for value in order:
            board.observe("points", value)
            seen.append(board.points)
        assert seen == sorted(seen)
        assert board.points == max(PUSHED_TOTALS)
