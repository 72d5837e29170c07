"""
Game event interpretation.

One handler per consumed game event. Handlers only touch the analyser
state and append to the highlight log; highlights are appended in the
order events arrive, never re-sorted by tick.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from demoreel.analysis.highlights import (
    is_airborne_for_airshot,
    is_airshot_weapon,
    kill_icon_for,
)
from demoreel.analysis.state import AnalyserState
from demoreel.core.config import AnalyserConfig
from demoreel.core.constants import NO_ASSISTER
from demoreel.core.messages import (
    CrossbowHealEvent,
    PlayerConnectClientEvent,
    PlayerDeathEvent,
    PlayerDisconnectEvent,
    PlayerHurtEvent,
    PlayerSpawnEvent,
    PointCapturedEvent,
    RoundStalemateEvent,
    RoundStartEvent,
    RoundWinEvent,
    SayText2Message,
)
from demoreel.core.schemas import (
    Airshot,
    ChatMessage,
    CrossbowAirshot,
    Kill,
    PlayerConnected,
    PlayerDisconnected,
    PointCaptured,
    RoundStalemate,
    RoundStart,
    RoundWin,
)
from demoreel.core.utils import strip_color_codes

logger = logging.getLogger(__name__)


class EventInterpreter:
    """Turns discrete game events into state changes and highlights."""

    def __init__(self, state: AnalyserState, config: AnalyserConfig):
        self.state = state
        self.config = config
        self._handlers: dict[type, Callable[[Any, int], None]] = {
            PlayerDeathEvent: self.handle_player_death,
            PlayerHurtEvent: self.handle_player_hurt,
            PlayerSpawnEvent: self.handle_player_spawn,
            CrossbowHealEvent: self.handle_crossbow_heal,
            RoundStalemateEvent: self.handle_round_stalemate,
            RoundStartEvent: self.handle_round_start,
            RoundWinEvent: self.handle_round_win,
            PointCapturedEvent: self.handle_point_captured,
            PlayerConnectClientEvent: self.handle_player_connect,
            PlayerDisconnectEvent: self.handle_player_disconnect,
        }

    def handle_event(self, event: Any, tick: int) -> None:
        handler = self._handlers.get(type(event))
        if handler is not None:
            handler(event, tick)

    def _is_airborne(self, user_id: int, tick: int) -> bool:
        player = self.state.players.get(user_id)
        if player is None:
            return False
        return is_airborne_for_airshot(player, tick, self.state.interval_per_tick, self.config)

    # ------------------------------------------------------------------
    # Combat
    # ------------------------------------------------------------------

    def handle_player_death(self, event: PlayerDeathEvent, tick: int) -> None:
        killer_id = event.attacker
        victim_id = event.user_id
        assister_id = None if event.assister in NO_ASSISTER else event.assister

        victim = self.state.players.get(victim_id)
        if victim is not None:
            drop = victim.charge == 100
            airshot = self._is_airborne(victim_id, tick)
        else:
            drop = False
            airshot = False

        kill_icon = kill_icon_for(
            weapon=event.weapon,
            custom_kill=event.custom_kill,
            damage_bits=event.damage_bits,
            killer_id=killer_id,
            victim_id=victim_id,
            penetrate_count=event.player_penetrate_count,
        )

        self.state.add_highlight(
            Kill(
                killer_id=killer_id,
                assister_id=assister_id,
                victim_id=victim_id,
                weapon=event.weapon,
                kill_icon=kill_icon,
                streak=event.kill_streak_total,
                drop=drop,
                airshot=airshot,
            ),
            tick,
        )

    def handle_player_hurt(self, event: PlayerHurtEvent, tick: int) -> None:
        victim_id = event.user_id
        attacker_id = event.attacker

        if victim_id not in self.state.players:
            logger.debug(f"player_hurt for unknown victim {victim_id} at tick {tick}")
            return

        # In POV demos, only record airshots performed by the local player
        if not self.state.is_stv and self.config.pov_local_airshots_only:
            if self.state.local_user_id() != attacker_id:
                return

        if (
            victim_id != attacker_id
            and is_airshot_weapon(event.weapon_id)
            and self._is_airborne(victim_id, tick)
        ):
            self.state.add_highlight(Airshot(attacker_id=attacker_id, victim_id=victim_id), tick)

    def handle_crossbow_heal(self, event: CrossbowHealEvent, tick: int) -> None:
        if self._is_airborne(event.target, tick):
            self.state.add_highlight(CrossbowAirshot(healer_id=event.healer, target_id=event.target), tick)

    def handle_player_spawn(self, event: PlayerSpawnEvent, tick: int) -> None:
        player = self.state.players.get(event.user_id)
        if player is None:
            return
        if not player.record_spawn(event.class_id):
            logger.debug(f"Ignoring spawn with class {event.class_id} for user {event.user_id}")

    # ------------------------------------------------------------------
    # Rounds and objectives
    # ------------------------------------------------------------------

    def handle_round_stalemate(self, event: RoundStalemateEvent, tick: int) -> None:
        self.state.add_highlight(RoundStalemate(), tick)

    def handle_round_start(self, event: RoundStartEvent, tick: int) -> None:
        self.state.add_highlight(RoundStart(), tick)

    def handle_round_win(self, event: RoundWinEvent, tick: int) -> None:
        self.state.add_highlight(RoundWin(winner=event.team, win_reason=event.win_reason), tick)

    def handle_point_captured(self, event: PointCapturedEvent, tick: int) -> None:
        cappers = []
        for char in event.cappers:
            user_id = self.state.identity.resolve(ord(char))
            if user_id is not None:
                cappers.append(user_id)
        self.state.add_highlight(
            PointCaptured(point_name=event.cp_name, capturing_team=event.team, cappers=tuple(cappers)),
            tick,
        )

    # ------------------------------------------------------------------
    # Connections and chat
    # ------------------------------------------------------------------

    def handle_player_connect(self, event: PlayerConnectClientEvent, tick: int) -> None:
        self.state.add_highlight(PlayerConnected(user_id=event.user_id), tick)

    def handle_player_disconnect(self, event: PlayerDisconnectEvent, tick: int) -> None:
        self.state.add_highlight(PlayerDisconnected(user_id=event.user_id, reason=event.reason), tick)

    def handle_chat(self, message: SayText2Message, tick: int) -> None:
        sender = self.state.identity.resolve(message.client)
        self.state.add_highlight(
            ChatMessage(sender=sender if sender is not None else 0, text=strip_color_codes(message.text)),
            tick,
        )
