"""Builders for analyser input used across the test suite."""

import struct

from demoreel.core.constants import PlayerCondition
from demoreel.core.messages import (
    GameEventMessage,
    PacketEntitiesMessage,
    PacketEntity,
    SendProp,
)

# Server class ids follow list order
SERVER_CLASSES = ["CWorld", "CTFPlayer", "CTFPlayerResource", "CTFTeam", "CWeaponMedigun"]
PLAYER_CLASS_ID = 1
RESOURCE_CLASS_ID = 2
TEAM_CLASS_ID = 3
MEDIGUN_CLASS_ID = 4

# (string table index, name, user id, steam3)
ALICE = (0, "Alice", 10, "[U:1:1001]")
BOB = (1, "Bob", 20, "[U:1:2002]")

STEAM_ID64_BASE = 76561197960265728

BLAST_JUMPING = PlayerCondition.TF_COND_BLASTJUMPING


# Full player_info_t as written by the server
PLAYER_INFO = struct.Struct("<32si33s3xI32s??2x16sB3x")


def user_info(name: str, user_id: int, steam3: str, fake_player: bool = False) -> bytes:
    """Build a userinfo string table payload."""
    return PLAYER_INFO.pack(
        name.encode("utf-8")[:31],
        user_id,
        steam3.encode("ascii")[:32],
        0,
        b"",
        fake_player,
        False,
        b"",
        0,
    )


def prop(table: str, name: str, value) -> SendProp:
    return SendProp(table=table, name=name, value=value)


def entity_update(entity_index: int, server_class: int, *props: SendProp) -> PacketEntitiesMessage:
    return PacketEntitiesMessage(
        entities=[PacketEntity(entity_index=entity_index, server_class=server_class, props=list(props))]
    )


def player_update(entity_index: int, *props: SendProp) -> PacketEntitiesMessage:
    return entity_update(entity_index, PLAYER_CLASS_ID, *props)


def blast_jumping(entity_index: int) -> PacketEntitiesMessage:
    """Set TF_COND_BLASTJUMPING (bit 17 of m_nPlayerCondEx2)."""
    return player_update(
        entity_index,
        prop("DT_TFPlayerShared", "m_nPlayerCondEx2", 1 << (int(BLAST_JUMPING) - 64)),
    )


def landed(entity_index: int) -> PacketEntitiesMessage:
    """Clear every condition word."""
    return player_update(entity_index, prop("DT_TFPlayerShared", "m_nPlayerCondEx2", 0))


def movement_flags(entity_index: int, flags: int) -> PacketEntitiesMessage:
    return player_update(entity_index, prop("DT_BasePlayer", "m_fFlags", flags))


def event(game_event) -> GameEventMessage:
    return GameEventMessage(event=game_event)
