"""
DemoReel Data Contracts

The GameSummary and everything it contains. This is the persisted and
transmitted shape: highlights serialize as ``{"t": <tag>, "c": <payload>}``
(payload omitted for variants without fields), steam ids as decimal
strings, teams as lowercase names and classes as zero-based slot numbers
(scout is 0).

Producers: analysis/analyser.py
Consumers: export.py, analysis/timeline.py, cli.py
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from demoreel.core.constants import PlayerClass, Team

# ============================================================
# HIGHLIGHTS
# ============================================================


@dataclass(frozen=True)
class Kill:
    killer_id: int
    assister_id: int | None
    victim_id: int
    weapon: str
    kill_icon: str
    streak: int
    drop: bool
    airshot: bool

    tag: ClassVar[str] = "Kill"


@dataclass(frozen=True)
class ChatMessage:
    sender: int
    text: str

    tag: ClassVar[str] = "ChatMessage"


@dataclass(frozen=True)
class Airshot:
    attacker_id: int
    victim_id: int

    tag: ClassVar[str] = "Airshot"


@dataclass(frozen=True)
class CrossbowAirshot:
    healer_id: int
    target_id: int

    tag: ClassVar[str] = "CrossbowAirshot"


@dataclass(frozen=True)
class PointCaptured:
    point_name: str
    capturing_team: int
    cappers: tuple[int, ...] = ()

    tag: ClassVar[str] = "PointCaptured"


@dataclass(frozen=True)
class RoundStalemate:
    tag: ClassVar[str] = "RoundStalemate"


@dataclass(frozen=True)
class RoundStart:
    tag: ClassVar[str] = "RoundStart"


@dataclass(frozen=True)
class RoundWin:
    winner: int
    win_reason: int = 0

    tag: ClassVar[str] = "RoundWin"


@dataclass(frozen=True)
class PlayerConnected:
    user_id: int

    tag: ClassVar[str] = "PlayerConnected"


@dataclass(frozen=True)
class PlayerDisconnected:
    user_id: int
    reason: str

    tag: ClassVar[str] = "PlayerDisconnected"


@dataclass(frozen=True)
class Pause:
    tag: ClassVar[str] = "Pause"


@dataclass(frozen=True)
class Unpause:
    tag: ClassVar[str] = "Unpause"


Highlight = (
    Kill
    | ChatMessage
    | Airshot
    | CrossbowAirshot
    | PointCaptured
    | RoundStalemate
    | RoundStart
    | RoundWin
    | PlayerConnected
    | PlayerDisconnected
    | Pause
    | Unpause
)

HIGHLIGHT_TYPES: dict[str, type] = {
    cls.tag: cls
    for cls in (
        Kill,
        ChatMessage,
        Airshot,
        CrossbowAirshot,
        PointCaptured,
        RoundStalemate,
        RoundStart,
        RoundWin,
        PlayerConnected,
        PlayerDisconnected,
        Pause,
        Unpause,
    )
}


def highlight_to_dict(event: Highlight) -> dict[str, Any]:
    """Serialize a highlight as a tagged dict."""
    payload = {}
    for f in fields(event):
        value = getattr(event, f.name)
        payload[f.name] = list(value) if isinstance(value, tuple) else value
    if not payload:
        return {"t": event.tag}
    return {"t": event.tag, "c": payload}


def highlight_from_dict(data: dict[str, Any]) -> Highlight:
    """Deserialize a tagged highlight dict."""
    tag = data.get("t")
    cls = HIGHLIGHT_TYPES.get(tag)
    if cls is None:
        raise ValueError(f"Unknown highlight tag: {tag!r}")
    payload = dict(data.get("c") or {})
    if cls is PointCaptured:
        payload["cappers"] = tuple(payload.get("cappers", ()))
    return cls(**payload)


@dataclass(frozen=True)
class HighlightEvent:
    """A highlight and the tick it happened on."""

    tick: int
    event: Highlight

    def to_dict(self) -> dict[str, Any]:
        return {"tick": self.tick, "event": highlight_to_dict(self.event)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HighlightEvent:
        return cls(tick=int(data["tick"]), event=highlight_from_dict(data["event"]))


# ============================================================
# PLAYERS
# ============================================================


def _class_from_json(value: Any) -> PlayerClass:
    # Slot numbers, or class names
    if isinstance(value, str) and not value.isdecimal():
        return PlayerClass[value.upper()]
    return PlayerClass.from_slot(int(value))


@dataclass(frozen=True)
class PlayerSummary:
    """Final per-player snapshot."""

    name: str
    steam_id: int
    user_id: int
    team: Team
    # Classes played, most-played first
    classes: tuple[PlayerClass, ...]
    scoreboard: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "steam_id": str(self.steam_id),
            "user_id": self.user_id,
            "team": self.team.label,
            "classes": [c.slot for c in self.classes],
            "scoreboard": dict(self.scoreboard),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerSummary:
        return cls(
            name=data.get("name", ""),
            steam_id=int(data.get("steam_id") or 0),
            user_id=int(data.get("user_id", 0)),
            team=Team[str(data.get("team", "other")).upper()],
            classes=tuple(_class_from_json(c) for c in data.get("classes", [])),
            scoreboard={k: int(v) for k, v in (data.get("scoreboard") or {}).items()},
        )


# ============================================================
# GAME SUMMARY
# ============================================================


@dataclass(frozen=True)
class GameSummary:
    """Everything the analyser reports for one demo."""

    local_user_id: int = 0
    highlights: tuple[HighlightEvent, ...] = ()
    red_team_score: int = 0
    blue_team_score: int = 0
    interval_per_tick: float = 0.0
    players: tuple[PlayerSummary, ...] = ()

    def player(self, user_id: int) -> PlayerSummary | None:
        """Look up a player by user id."""
        for player in self.players:
            if player.user_id == user_id:
                return player
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "local_user_id": self.local_user_id,
            "highlights": [h.to_dict() for h in self.highlights],
            "red_team_score": self.red_team_score,
            "blue_team_score": self.blue_team_score,
            "interval_per_tick": self.interval_per_tick,
            "players": [p.to_dict() for p in self.players],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSummary:
        return cls(
            local_user_id=int(data.get("local_user_id", 0)),
            highlights=tuple(HighlightEvent.from_dict(h) for h in data.get("highlights", [])),
            red_team_score=int(data.get("red_team_score", 0)),
            blue_team_score=int(data.get("blue_team_score", 0)),
            interval_per_tick=float(data.get("interval_per_tick", 0.0)),
            players=tuple(PlayerSummary.from_dict(p) for p in data.get("players", [])),
        )

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> GameSummary:
        return cls.from_dict(json.loads(text))
