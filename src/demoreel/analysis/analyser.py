"""
Game Details Analyser for TF2 Demos

Consumes the decoded message stream of one demo and produces a GameSummary:
  - Player identities, teams, classes and scoreboards
  - Team scores
  - A highlight timeline (kills, airshots, captures, rounds, chat, ...)

The analyser is driven by an external demo parser, one call per logical
unit, strictly in stream order:

    analyser = GameDetailsAnalyser()
    analyser.on_header(header.server)
    analyser.on_data_tables(server_class_names)
    analyser.on_string_table_entry("userinfo", index, text, extra_data)
    analyser.on_message(message, tick)
    summary = analyser.finalize()

It performs no I/O and never raises for malformed or unexpected stream
content; anomalies are logged and the offending update is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from demoreel.analysis.events import EventInterpreter
from demoreel.analysis.identity import UserInfo
from demoreel.analysis.properties import PropertyInterpreter
from demoreel.analysis.state import AnalyserState, PlayerState
from demoreel.core.config import AnalyserConfig
from demoreel.core.constants import USERINFO_TABLE, entity_kind_for
from demoreel.core.messages import (
    GameEventMessage,
    Message,
    MessageType,
    PacketEntitiesMessage,
    SayText2Message,
    ServerInfoMessage,
    SetPauseMessage,
)
from demoreel.core.schemas import GameSummary, Pause, Unpause

logger = logging.getLogger(__name__)

HANDLED_MESSAGE_TYPES = frozenset(
    {
        MessageType.PACKET_ENTITIES,
        MessageType.GAME_EVENT,
        MessageType.SET_PAUSE,
        MessageType.SERVER_INFO,
        MessageType.USER_MESSAGE,
    }
)


class GameDetailsAnalyser:
    """Stateful analyser for one demo's message stream."""

    def __init__(self, config: AnalyserConfig | None = None):
        self.config = config or AnalyserConfig()
        self.state = AnalyserState()
        self.properties = PropertyInterpreter(self.state)
        self.events = EventInterpreter(self.state, self.config)
        self._finalized = False

    @staticmethod
    def handles(message_type: MessageType) -> bool:
        """Whether the driver needs to decode messages of this type for us."""
        return message_type in HANDLED_MESSAGE_TYPES

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("GameDetailsAnalyser has already been finalized")

    # ------------------------------------------------------------------
    # Inbound interface
    # ------------------------------------------------------------------

    def on_header(self, server_name: str) -> None:
        self._check_open()
        # STV demos have an empty server field in their header
        self.state.is_stv = not server_name
        logger.debug(f"Demo is {'STV' if self.state.is_stv else 'POV'} (server={server_name!r})")

    def on_data_tables(self, server_classes: Sequence[str]) -> None:
        self._check_open()
        self.state.class_kinds = [entity_kind_for(name) for name in server_classes]

    def on_string_table_entry(
        self,
        table: str,
        index: int,
        text: str | None,
        extra_data: bytes | None,
    ) -> None:
        self._check_open()
        if table != USERINFO_TABLE:
            return

        try:
            info = UserInfo.from_entry(index, extra_data)
        except ValueError as e:
            logger.warning(f"Ignoring malformed userinfo entry {index}: {e}")
            return

        if info is None:
            released = self.state.identity.release(index + 1)
            if released is not None:
                logger.debug(f"Entity {index + 1} released by user {released}")
            return

        self._register_user(info)

    def _register_user(self, info: UserInfo) -> None:
        # A player leaving frees their entity id for the next player to join
        self.state.identity.assign(info.entity_id, info.user_id)

        player = self.state.players.get(info.user_id)
        if player is None:
            player = PlayerState(user_id=info.user_id)
            self.state.players[info.user_id] = player
        player.name = info.name
        player.steam_id = info.steam_id

    def on_message(self, message: Message, tick: int) -> None:
        self._check_open()
        if isinstance(message, PacketEntitiesMessage):
            for entity in message.entities:
                self.properties.handle_entity(entity, tick)
        elif isinstance(message, GameEventMessage):
            self.events.handle_event(message.event, tick)
        elif isinstance(message, SayText2Message):
            self.events.handle_chat(message, tick)
        elif isinstance(message, SetPauseMessage):
            self.state.add_highlight(Pause() if message.pause else Unpause(), tick)
        elif isinstance(message, ServerInfoMessage):
            self.state.local_entity_id = message.player_slot + 1
            self.state.interval_per_tick = message.interval_per_tick

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def finalize(self) -> GameSummary:
        """Build the GameSummary. The analyser cannot be used afterwards."""
        self._check_open()
        self._finalized = True
        state = self.state

        local_user_id = state.local_user_id()
        if local_user_id is None:
            logger.debug(f"Local entity {state.local_entity_id} has no known user")
            local_user_id = 0

        if state.unresolved_updates:
            logger.info(f"Dropped {state.unresolved_updates} player updates for unknown entities")

        return GameSummary(
            local_user_id=local_user_id,
            highlights=tuple(state.highlights),
            red_team_score=state.red_team_score,
            blue_team_score=state.blue_team_score,
            interval_per_tick=state.interval_per_tick,
            players=tuple(player.to_summary() for player in state.players.values()),
        )


def analyse_messages(
    server_name: str,
    server_classes: Sequence[str],
    user_infos: Sequence[tuple[int, bytes | None]],
    messages: Sequence[tuple[Message, int]],
    config: AnalyserConfig | None = None,
) -> GameSummary:
    """
    Convenience wrapper: run a complete, already-decoded stream.

    Args:
        server_name: Demo header server field
        server_classes: Server class names indexed by class id
        user_infos: (index, extra_data) userinfo entries, applied before messages
        messages: (message, tick) pairs in stream order
        config: Analyser configuration

    Returns:
        The GameSummary
    """
    analyser = GameDetailsAnalyser(config)
    analyser.on_header(server_name)
    analyser.on_data_tables(server_classes)
    for index, data in user_infos:
        analyser.on_string_table_entry(USERINFO_TABLE, index, None, data)
    for message, tick in messages:
        analyser.on_message(message, tick)
    return analyser.finalize()
