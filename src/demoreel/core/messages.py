"""
Inbound Message Model

Decoded demo units as delivered by the replay-parsing collaborator.
The analyser only reads these; it never constructs them from raw bytes.

Messages recorded to JSON (one dict per message) are decoded with
``message_from_dict``; the same shapes are used by the replay driver.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from demoreel.core.utils import safe_float, safe_int, safe_str


class MessageType(Enum):
    """Message categories a demo stream can carry."""

    PACKET_ENTITIES = "packet_entities"
    GAME_EVENT = "game_event"
    USER_MESSAGE = "user_message"
    SET_PAUSE = "set_pause"
    SERVER_INFO = "server_info"
    NET_TICK = "net_tick"
    PRINT = "print"
    SOUNDS = "sounds"
    TEMP_ENTITIES = "temp_entities"
    STRING_TABLE = "string_table"
    OTHER = "other"


# ============================================================================
# Entities
# ============================================================================


@dataclass
class SendProp:
    """One decoded property update: (table, name) -> value."""

    table: str
    name: str
    value: Any

    @property
    def identifier(self) -> tuple[str, str]:
        return (self.table, self.name)


@dataclass
class PacketEntity:
    """An entity and the properties updated for it this tick."""

    entity_index: int
    server_class: int
    props: list[SendProp] = field(default_factory=list)


# ============================================================================
# Game events
# ============================================================================


@dataclass
class PlayerDeathEvent:
    user_id: int
    attacker: int
    assister: int = -1
    weapon: str = ""
    custom_kill: int = 0
    damage_bits: int = 0
    player_penetrate_count: int = 0
    kill_streak_total: int = 0


@dataclass
class PlayerHurtEvent:
    user_id: int
    attacker: int
    weapon_id: int = 0
    damage_amount: int = 0
    health: int = 0


@dataclass
class PlayerSpawnEvent:
    user_id: int
    team: int = 0
    class_id: int = 0


@dataclass
class CrossbowHealEvent:
    healer: int
    target: int
    amount: int = 0


@dataclass
class RoundStalemateEvent:
    reason: int = 0


@dataclass
class RoundStartEvent:
    full_reset: bool = False


@dataclass
class RoundWinEvent:
    team: int
    win_reason: int = 0


@dataclass
class PointCapturedEvent:
    cp: int = 0
    cp_name: str = ""
    team: int = 0
    # One character per capping player, each the player's entity index
    cappers: str = ""


@dataclass
class PlayerConnectClientEvent:
    user_id: int
    name: str = ""
    network_id: str = ""


@dataclass
class PlayerDisconnectEvent:
    user_id: int
    reason: str = ""
    name: str = ""


@dataclass
class GenericGameEvent:
    """An event the analyser has no handler for."""

    name: str
    values: dict[str, Any] = field(default_factory=dict)


GameEvent = (
    PlayerDeathEvent
    | PlayerHurtEvent
    | PlayerSpawnEvent
    | CrossbowHealEvent
    | RoundStalemateEvent
    | RoundStartEvent
    | RoundWinEvent
    | PointCapturedEvent
    | PlayerConnectClientEvent
    | PlayerDisconnectEvent
    | GenericGameEvent
)


# ============================================================================
# Messages
# ============================================================================


@dataclass
class PacketEntitiesMessage:
    entities: list[PacketEntity] = field(default_factory=list)

    message_type = MessageType.PACKET_ENTITIES


@dataclass
class GameEventMessage:
    event: GameEvent

    message_type = MessageType.GAME_EVENT


@dataclass
class SayText2Message:
    """Chat user message. ``client`` is the sender's entity index."""

    client: int
    text: str
    kind: str = "TF_Chat_All"

    message_type = MessageType.USER_MESSAGE


@dataclass
class SetPauseMessage:
    pause: bool

    message_type = MessageType.SET_PAUSE


@dataclass
class ServerInfoMessage:
    player_slot: int
    interval_per_tick: float
    map_name: str = ""

    message_type = MessageType.SERVER_INFO


Message = PacketEntitiesMessage | GameEventMessage | SayText2Message | SetPauseMessage | ServerInfoMessage


# ============================================================================
# JSON decoding
# ============================================================================


def _as_dict(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be an object, not {type(value).__name__}")
    return value


def _as_list(value: Any, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list, not {type(value).__name__}")
    return value


def _event_from_dict(data: dict[str, Any]) -> GameEvent:
    name = safe_str(data.get("name"))
    if name == "player_death":
        return PlayerDeathEvent(
            user_id=safe_int(data.get("userid")),
            attacker=safe_int(data.get("attacker")),
            assister=safe_int(data.get("assister"), -1),
            weapon=safe_str(data.get("weapon")),
            custom_kill=safe_int(data.get("customkill")),
            damage_bits=safe_int(data.get("damagebits")),
            player_penetrate_count=safe_int(data.get("playerpenetratecount")),
            kill_streak_total=safe_int(data.get("kill_streak_total")),
        )
    if name == "player_hurt":
        return PlayerHurtEvent(
            user_id=safe_int(data.get("userid")),
            attacker=safe_int(data.get("attacker")),
            weapon_id=safe_int(data.get("weaponid")),
            damage_amount=safe_int(data.get("damageamount")),
            health=safe_int(data.get("health")),
        )
    if name == "player_spawn":
        return PlayerSpawnEvent(
            user_id=safe_int(data.get("userid")),
            team=safe_int(data.get("team")),
            class_id=safe_int(data.get("class")),
        )
    if name == "crossbow_heal":
        return CrossbowHealEvent(
            healer=safe_int(data.get("healer")),
            target=safe_int(data.get("target")),
            amount=safe_int(data.get("amount")),
        )
    if name == "teamplay_round_stalemate":
        return RoundStalemateEvent(reason=safe_int(data.get("reason")))
    if name == "teamplay_round_start":
        return RoundStartEvent(full_reset=bool(data.get("full_reset", False)))
    if name == "teamplay_round_win":
        return RoundWinEvent(team=safe_int(data.get("team")), win_reason=safe_int(data.get("winreason")))
    if name == "teamplay_point_captured":
        return PointCapturedEvent(
            cp=safe_int(data.get("cp")),
            cp_name=safe_str(data.get("cpname")),
            team=safe_int(data.get("team")),
            cappers=safe_str(data.get("cappers")),
        )
    if name == "player_connect_client":
        return PlayerConnectClientEvent(
            user_id=safe_int(data.get("userid")),
            name=safe_str(data.get("name")),
            network_id=safe_str(data.get("networkid")),
        )
    if name == "player_disconnect":
        return PlayerDisconnectEvent(
            user_id=safe_int(data.get("userid")),
            reason=safe_str(data.get("reason")),
            name=safe_str(data.get("name")),
        )
    return GenericGameEvent(name=name, values={k: v for k, v in data.items() if k != "name"})


def _entity_from_dict(data: dict[str, Any]) -> PacketEntity:
    props = []
    for p in _as_list(data.get("props", []), "entity props"):
        p = _as_dict(p, "entity prop")
        props.append(SendProp(table=safe_str(p.get("table")), name=safe_str(p.get("name")), value=p.get("value")))
    return PacketEntity(
        entity_index=safe_int(data.get("entity_index")),
        server_class=safe_int(data.get("server_class")),
        props=props,
    )


def message_from_dict(data: dict[str, Any]) -> Message | None:
    """
    Decode one recorded message.

    Args:
        data: Dict with a "type" key matching a MessageType value

    Returns:
        The decoded message, or None for message kinds the model doesn't carry

    Raises:
        ValueError: If a nested entity, prop or event has the wrong shape
    """
    kind = data.get("type")
    if kind == MessageType.PACKET_ENTITIES.value:
        entities = _as_list(data.get("entities", []), "packet entities")
        return PacketEntitiesMessage(entities=[_entity_from_dict(_as_dict(e, "packet entity")) for e in entities])
    if kind == MessageType.GAME_EVENT.value:
        return GameEventMessage(event=_event_from_dict(_as_dict(data.get("event", {}), "game event")))
    if kind == MessageType.USER_MESSAGE.value:
        if data.get("kind", "SayText2") != "SayText2":
            return None
        return SayText2Message(
            client=safe_int(data.get("client")),
            text=safe_str(data.get("text")),
            kind=safe_str(data.get("chat_kind"), "TF_Chat_All"),
        )
    if kind == MessageType.SET_PAUSE.value:
        return SetPauseMessage(pause=bool(data.get("pause", False)))
    if kind == MessageType.SERVER_INFO.value:
        return ServerInfoMessage(
            player_slot=safe_int(data.get("player_slot")),
            interval_per_tick=safe_float(data.get("interval_per_tick")),
            map_name=safe_str(data.get("map")),
        )
    return None
