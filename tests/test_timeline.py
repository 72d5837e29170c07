"""Tests for highlight timeline filtering."""

import re

import pytest

from demoreel.analysis.timeline import HighlightFilters, filter_highlights, involved_players
from demoreel.core.constants import Team
from demoreel.core.schemas import (
    Airshot,
    ChatMessage,
    CrossbowAirshot,
    GameSummary,
    HighlightEvent,
    Kill,
    Pause,
    PlayerConnected,
    PlayerSummary,
    PointCaptured,
    RoundStart,
)


def kill(killer, victim, assister=None):
    return Kill(
        killer_id=killer,
        assister_id=assister,
        victim_id=victim,
        weapon="scattergun",
        kill_icon="scattergun",
        streak=0,
        drop=False,
        airshot=False,
    )


@pytest.fixture
def summary():
    events = [
        kill(10, 20),
        kill(30, 10, assister=20),
        ChatMessage(sender=10, text="nice shot"),
        ChatMessage(sender=20, text="gg"),
        Airshot(attacker_id=30, victim_id=20),
        CrossbowAirshot(healer_id=20, target_id=30),
        PointCaptured(point_name="mid", capturing_team=2, cappers=(10,)),
        RoundStart(),
        PlayerConnected(user_id=40),
        Pause(),
    ]
    return GameSummary(
        highlights=tuple(HighlightEvent(tick=i, event=e) for i, e in enumerate(events)),
        players=(
            PlayerSummary(name="Alice", steam_id=1, user_id=10, team=Team.RED, classes=()),
            PlayerSummary(name="Bob", steam_id=2, user_id=20, team=Team.BLUE, classes=()),
        ),
    )


def ticks(highlights):
    return [h.tick for h in highlights]


class TestInvolvedPlayers:
    """Tests for involved_players."""

    def test_kill_includes_assister(self):
        assert involved_players(kill(1, 2, assister=3)) == {1, 2, 3}
        assert involved_players(kill(1, 2)) == {1, 2}

    def test_global_highlights(self):
        assert involved_players(RoundStart()) is None
        assert involved_players(Pause()) is None


class TestFilterHighlights:
    """Tests for filter_highlights."""

    def test_no_filters_keeps_everything(self, summary):
        assert ticks(filter_highlights(summary, HighlightFilters())) == list(range(10))

    def test_player_filter(self, summary):
        """Player highlights are kept when they involve a selected player; global ones always."""
        result = filter_highlights(summary, HighlightFilters(player_ids=[10]))
        assert ticks(result) == [0, 1, 2, 6, 7, 9]

    def test_category_toggles(self, summary):
        filters = HighlightFilters(killfeed=False, chat=False, rounds=False, airshots=False)
        assert ticks(filter_highlights(summary, filters)) == [6, 8, 9]

    def test_chat_search_matches_name_or_text(self, summary):
        """The search is a case-insensitive regex over sender name and text."""
        by_text = filter_highlights(summary, HighlightFilters(chat_search="NICE"))
        assert [h.tick for h in by_text if isinstance(h.event, ChatMessage)] == [2]

        by_name = filter_highlights(summary, HighlightFilters(chat_search="^bob$"))
        assert [h.tick for h in by_name if isinstance(h.event, ChatMessage)] == [3]

    def test_chat_search_leaves_other_highlights(self, summary):
        result = filter_highlights(summary, HighlightFilters(chat_search="nothing matches"))
        assert len(result) == 8

    def test_invalid_regex(self, summary):
        with pytest.raises(re.error):
            filter_highlights(summary, HighlightFilters(chat_search="("))
