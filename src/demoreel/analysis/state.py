"""
Mutable analyser state: one PlayerState per connection plus the
match-wide AnalyserState every interpreter reads and writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from demoreel.analysis.conditions import ConditionSet
from demoreel.analysis.identity import IdentityTable
from demoreel.analysis.scoreboard import Scoreboard
from demoreel.core.constants import (
    CLASS_COUNT,
    EntityKind,
    LifeState,
    PlayerClass,
    PlayerCondition,
    Team,
    is_airborne,
)
from demoreel.core.schemas import Highlight, HighlightEvent, PlayerSummary


@dataclass
class PlayerState:
    """Everything tracked for one connection while the demo plays."""

    user_id: int
    name: str = ""
    steam_id: int = 0

    team: Team = Team.OTHER
    scoreboard: Scoreboard = field(default_factory=Scoreboard)

    # Temporary state data
    player_class: PlayerClass = PlayerClass.OTHER
    life_state: LifeState = LifeState.ALIVE
    charge: int = 0
    conditions: ConditionSet = field(default_factory=ConditionSet)
    movement_flags: int = 0
    airborne_since: int | None = None

    # Spawns per class, slot = class code - 1
    time_on_class: list[int] = field(default_factory=lambda: [0] * CLASS_COUNT)

    def has_cond(self, cond: PlayerCondition) -> bool:
        return self.conditions.has(cond)

    def update_movement_flags(self, flags: int, tick: int) -> None:
        """Track the tick the player left the ground."""
        self.movement_flags = flags
        if is_airborne(flags):
            if self.airborne_since is None:
                self.airborne_since = tick
        else:
            self.airborne_since = None

    def airtime(self, tick: int, interval_per_tick: float) -> float:
        """Seconds spent continuously airborne as of ``tick``."""
        if self.airborne_since is None:
            return 0.0
        return max(0, tick - self.airborne_since) * interval_per_tick

    def record_spawn(self, class_code: int) -> bool:
        """Count a spawn as the given class. Returns False for invalid codes."""
        if 0 < class_code <= CLASS_COUNT:
            self.time_on_class[class_code - 1] += 1
            return True
        return False

    def to_summary(self) -> PlayerSummary:
        played = [(slot, count) for slot, count in enumerate(self.time_on_class) if count != 0]
        # Most-played first; sort is stable so ties keep class order
        played.sort(key=lambda item: item[1], reverse=True)

        return PlayerSummary(
            name=self.name,
            steam_id=self.steam_id,
            user_id=self.user_id,
            team=self.team,
            classes=tuple(PlayerClass.from_slot(slot) for slot, _count in played),
            scoreboard=self.scoreboard.to_dict(),
        )


@dataclass
class AnalyserState:
    """The evolving record of the match. Owned by one analyser."""

    highlights: list[HighlightEvent] = field(default_factory=list)
    interval_per_tick: float = 0.0
    is_stv: bool = False
    players: dict[int, PlayerState] = field(default_factory=dict)
    identity: IdentityTable = field(default_factory=IdentityTable)

    # Indexed by server class id
    class_kinds: list[EntityKind] = field(default_factory=list)

    # Medigun entity -> owning player entity
    mediguns: dict[int, int] = field(default_factory=dict)
    red_team_entity_id: int | None = None
    blue_team_entity_id: int | None = None
    red_team_score: int = 0
    blue_team_score: int = 0
    local_entity_id: int = 0

    # Player entity updates dropped because the entity had no known owner
    unresolved_updates: int = 0

    def add_highlight(self, event: Highlight, tick: int) -> None:
        self.highlights.append(HighlightEvent(tick=tick, event=event))

    def entity_kind(self, server_class: int) -> EntityKind:
        if 0 <= server_class < len(self.class_kinds):
            return self.class_kinds[server_class]
        return EntityKind.OTHER

    def player_of_entity(self, entity_id: int) -> PlayerState | None:
        user_id = self.identity.resolve(entity_id)
        if user_id is None:
            return None
        return self.players.get(user_id)

    def local_user_id(self) -> int | None:
        return self.identity.resolve(self.local_entity_id)
