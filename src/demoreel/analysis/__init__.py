"""
DemoReel Analysis - Turning the message stream into a GameSummary.

This module contains:
- analyser: GameDetailsAnalyser, the stream-facing entry point
- identity: userinfo decoding and the entity handle -> user id mapping
- properties: entity property interpretation
- events: game event interpretation
- highlights: kill icon and airshot rules
- timeline: filtering a finished highlight log
"""

from demoreel.analysis.analyser import GameDetailsAnalyser, analyse_messages
from demoreel.analysis.timeline import HighlightFilters, filter_highlights

__all__: list[str] = [
    "GameDetailsAnalyser",
    "analyse_messages",
    "HighlightFilters",
    "filter_highlights",
]
