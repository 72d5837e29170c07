"""
Timeline filtering for a finished GameSummary.

Narrows the highlight log down to what a viewer asked for: highlights
involving certain players, chat matching a search, and per-category
visibility toggles.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from demoreel.core.schemas import (
    Airshot,
    ChatMessage,
    CrossbowAirshot,
    GameSummary,
    Highlight,
    HighlightEvent,
    Kill,
    PlayerConnected,
    PlayerDisconnected,
    PointCaptured,
    RoundStalemate,
    RoundStart,
    RoundWin,
)

ROUND_HIGHLIGHTS = (RoundStart, RoundWin, RoundStalemate)
CONNECTION_HIGHLIGHTS = (PlayerConnected, PlayerDisconnected)
AIRSHOT_HIGHLIGHTS = (Airshot, CrossbowAirshot)


@dataclass
class HighlightFilters:
    """What to keep. Empty ``player_ids`` means every player."""

    player_ids: list[int] = field(default_factory=list)
    chat_search: str = ""
    killfeed: bool = True
    captures: bool = True
    chat: bool = True
    connections: bool = True
    rounds: bool = True
    airshots: bool = True


def involved_players(event: Highlight) -> set[int] | None:
    """
    Players a highlight is about.

    Returns:
        The user ids involved, or None for highlights that concern everyone
    """
    if isinstance(event, Kill):
        ids = {event.killer_id, event.victim_id}
        if event.assister_id is not None:
            ids.add(event.assister_id)
        return ids
    if isinstance(event, Airshot):
        return {event.attacker_id, event.victim_id}
    if isinstance(event, CrossbowAirshot):
        return {event.healer_id, event.target_id}
    if isinstance(event, ChatMessage):
        return {event.sender}
    if isinstance(event, (PlayerConnected, PlayerDisconnected)):
        return {event.user_id}
    if isinstance(event, PointCaptured):
        return set(event.cappers)
    return None


def _category_visible(event: Highlight, filters: HighlightFilters) -> bool:
    if isinstance(event, Kill):
        return filters.killfeed
    if isinstance(event, PointCaptured):
        return filters.captures
    if isinstance(event, ChatMessage):
        return filters.chat
    if isinstance(event, CONNECTION_HIGHLIGHTS):
        return filters.connections
    if isinstance(event, ROUND_HIGHLIGHTS):
        return filters.rounds
    if isinstance(event, AIRSHOT_HIGHLIGHTS):
        return filters.airshots
    return True


def filter_highlights(summary: GameSummary, filters: HighlightFilters) -> list[HighlightEvent]:
    """
    Apply filters to a summary's highlight log, preserving order.

    Args:
        summary: The game summary
        filters: What to keep

    Returns:
        Matching highlight events

    Raises:
        re.error: If ``chat_search`` is not a valid regular expression
    """
    names = {player.user_id: player.name for player in summary.players}
    chat_regex = re.compile(filters.chat_search, re.IGNORECASE) if filters.chat_search else None
    wanted = set(filters.player_ids)

    result = []
    for highlight in summary.highlights:
        event = highlight.event
        if not _category_visible(event, filters):
            continue

        if wanted:
            involved = involved_players(event)
            if involved is not None and not (involved & wanted):
                continue

        if chat_regex is not None and isinstance(event, ChatMessage):
            sender_name = names.get(event.sender, "")
            if not (chat_regex.search(sender_name) or chat_regex.search(event.text)):
                continue

        result.append(highlight)
    return result
