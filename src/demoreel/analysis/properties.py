"""
Entity property interpretation.

Each entity update is routed by its EntityKind. Within a kind, property
identifiers are looked up in static (table, field) dispatch tables built
once at import time; identifiers missing from the tables are ignored.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from functools import partial
from typing import Any

from demoreel.analysis.state import AnalyserState, PlayerState
from demoreel.core.constants import (
    ENTITY_INDEX_MASK,
    EntityKind,
    LifeState,
    PlayerClass,
    Team,
)
from demoreel.core.messages import PacketEntity
from demoreel.core.utils import safe_float, safe_int, safe_u32

logger = logging.getLogger(__name__)

PlayerPropHandler = Callable[[PlayerState, Any, int], None]


# ============================================================================
# Player handlers
# ============================================================================


def _set_life_state(player: PlayerState, value: Any, tick: int) -> None:
    player.life_state = LifeState.from_code(safe_int(value))


def _set_movement_flags(player: PlayerState, value: Any, tick: int) -> None:
    player.update_movement_flags(safe_u32(value), tick)


def _set_condition_word(word: str, player: PlayerState, value: Any, tick: int) -> None:
    player.conditions.set_word(word, safe_u32(value))


def _observe_score(counter: str, player: PlayerState, value: Any, tick: int) -> None:
    player.scoreboard.observe(counter, max(0, safe_int(value)))


def _set_team(player: PlayerState, value: Any, tick: int) -> None:
    player.team = Team.from_code(safe_int(value))


def _set_class(player: PlayerState, value: Any, tick: int) -> None:
    player.player_class = PlayerClass.from_code(safe_int(value))


def _ignore(player: PlayerState, value: Any, tick: int) -> None:
    pass


SCORING_TABLE = "DT_TFPlayerScoringDataExclusive"

SCORING_FIELDS = {
    "m_iCaptures": "captures",
    "m_iDefenses": "defenses",
    "m_iKills": "kills",
    "m_iDeaths": "deaths",
    "m_iDominations": "dominations",
    "m_iRevenge": "revenges",
    "m_iBuildingsDestroyed": "buildings_destroyed",
    "m_iHeadshots": "headshots",
    "m_iBackstabs": "backstabs",
    "m_iHealPoints": "healing",
    "m_iInvulns": "ubercharges",
    "m_iTeleports": "teleports",
    "m_iDamageDone": "damage_dealt",
    "m_iKillAssists": "assists",
    "m_iBonusPoints": "bonus_points",
    "m_iPoints": "points",
}

CONDITION_FIELDS = {
    ("DT_TFPlayerShared", "m_nPlayerCond"): "player_cond",
    ("DT_TFPlayerShared", "m_nPlayerCondEx"): "player_cond_ex",
    ("DT_TFPlayerShared", "m_nPlayerCondEx2"): "player_cond_ex2",
    ("DT_TFPlayerShared", "m_nPlayerCondEx3"): "player_cond_ex3",
    ("DT_TFPlayerConditionListExclusive", "_condition_bits"): "condition_bits",
}

PLAYER_PROPS: dict[tuple[str, str], PlayerPropHandler] = {
    ("DT_BasePlayer", "m_lifeState"): _set_life_state,
    ("DT_BasePlayer", "m_fFlags"): _set_movement_flags,
    **{key: partial(_set_condition_word, word) for key, word in CONDITION_FIELDS.items()},
    **{(SCORING_TABLE, name): partial(_observe_score, counter) for name, counter in SCORING_FIELDS.items()},
}

# CTFPlayerResource arrays are keyed by array name; the field name is the
# zero-padded entity index ("m_iTeam", "005").
PLAYER_RESOURCE_PROPS: dict[str, PlayerPropHandler] = {
    "m_iTeam": _set_team,
    "m_iPlayerClass": _set_class,
    "m_iDamage": partial(_observe_score, "damage_dealt"),
    "m_iDamageAssist": partial(_observe_score, "damage_assist"),
    "m_iDamageBlocked": partial(_observe_score, "damage_blocked"),
    "m_iHealing": partial(_observe_score, "healing"),
    # Only networked in tournament mode; the medigun entity is authoritative
    "m_iChargeLevel": _ignore,
}

TEAM_NUM_PROP = ("DT_Team", "m_iTeamNum")
TEAM_SCORE_PROP = ("DT_Team", "m_iScore")

MEDIGUN_OWNER_PROP = ("DT_BaseCombatWeapon", "m_hOwner")
MEDIGUN_CHARGE_PROPS = frozenset(
    {
        ("DT_TFWeaponMedigunDataNonLocal", "m_flChargeLevel"),
        ("DT_LocalTFWeaponMedigunData", "m_flChargeLevel"),
    }
)


def charge_percent(level: float) -> int:
    """Scale a 0..1 charge level to 0..100, rounding half up."""
    if not math.isfinite(level):
        return 0
    return min(100, max(0, math.floor(level * 100.0 + 0.5)))


# ============================================================================
# Interpreter
# ============================================================================


class PropertyInterpreter:
    """Applies entity property updates to the analyser state."""

    def __init__(self, state: AnalyserState):
        self.state = state
        self._handlers: dict[EntityKind, Callable[[PacketEntity, int], None]] = {
            EntityKind.PLAYER: self.handle_player,
            EntityKind.PLAYER_RESOURCE: self.handle_player_resource,
            EntityKind.TEAM: self.handle_team,
            EntityKind.MEDIGUN: self.handle_medigun,
            EntityKind.OTHER: self._skip,
        }

    def handle_entity(self, entity: PacketEntity, tick: int) -> None:
        kind = self.state.entity_kind(entity.server_class)
        self._handlers[kind](entity, tick)

    def _skip(self, entity: PacketEntity, tick: int) -> None:
        pass

    def handle_player(self, entity: PacketEntity, tick: int) -> None:
        player = self.state.player_of_entity(entity.entity_index)
        if player is None:
            # userinfo hasn't caught up with this entity yet
            self.state.unresolved_updates += 1
            logger.debug(f"Player not known for entity {entity.entity_index} at tick {tick}, update dropped")
            return

        for prop in entity.props:
            handler = PLAYER_PROPS.get(prop.identifier)
            if handler is not None:
                handler(player, prop.value, tick)

    def handle_player_resource(self, entity: PacketEntity, tick: int) -> None:
        for prop in entity.props:
            handler = PLAYER_RESOURCE_PROPS.get(prop.table)
            if handler is None or not (prop.name.isascii() and prop.name.isdigit()):
                continue
            player = self.state.player_of_entity(int(prop.name))
            if player is not None:
                handler(player, prop.value, tick)

    def handle_team(self, entity: PacketEntity, tick: int) -> None:
        state = self.state
        for prop in entity.props:
            if prop.identifier == TEAM_NUM_PROP:
                team = Team.from_code(safe_int(prop.value))
                if team is Team.RED:
                    state.red_team_entity_id = entity.entity_index
                elif team is Team.BLUE:
                    state.blue_team_entity_id = entity.entity_index
            elif prop.identifier == TEAM_SCORE_PROP:
                score = max(0, safe_int(prop.value))
                if entity.entity_index == state.red_team_entity_id:
                    state.red_team_score = score
                elif entity.entity_index == state.blue_team_entity_id:
                    state.blue_team_score = score

    def handle_medigun(self, entity: PacketEntity, tick: int) -> None:
        mediguns = self.state.mediguns

        # The owner can arrive in the same update as the first charge value
        for prop in entity.props:
            if prop.identifier == MEDIGUN_OWNER_PROP and entity.entity_index not in mediguns:
                mediguns[entity.entity_index] = safe_int(prop.value) & ENTITY_INDEX_MASK

        for prop in entity.props:
            if prop.identifier not in MEDIGUN_CHARGE_PROPS:
                continue
            owner_entity = mediguns.get(entity.entity_index)
            if owner_entity is None:
                continue
            owner = self.state.player_of_entity(owner_entity)
            if owner is not None:
                owner.charge = charge_percent(safe_float(prop.value))
