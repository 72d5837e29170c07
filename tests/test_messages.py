"""Tests for decoding recorded messages."""

import pytest

from demoreel.core.messages import (
    GameEventMessage,
    GenericGameEvent,
    PacketEntitiesMessage,
    PlayerDeathEvent,
    PointCapturedEvent,
    SayText2Message,
    ServerInfoMessage,
    SetPauseMessage,
    message_from_dict,
)


class TestMessageFromDict:
    """Tests for message_from_dict."""

    def test_packet_entities(self):
        message = message_from_dict(
            {
                "type": "packet_entities",
                "entities": [
                    {
                        "entity_index": 3,
                        "server_class": 1,
                        "props": [{"table": "DT_BasePlayer", "name": "m_lifeState", "value": 2}],
                    }
                ],
            }
        )
        assert isinstance(message, PacketEntitiesMessage)
        entity = message.entities[0]
        assert entity.entity_index == 3
        assert entity.props[0].identifier == ("DT_BasePlayer", "m_lifeState")
        assert entity.props[0].value == 2

    def test_player_death_uses_event_field_names(self):
        message = message_from_dict(
            {
                "type": "game_event",
                "event": {
                    "name": "player_death",
                    "userid": 20,
                    "attacker": 10,
                    "assister": 65535,
                    "weapon": "knife",
                    "customkill": 2,
                    "damagebits": 4,
                    "kill_streak_total": 5,
                },
            }
        )
        assert isinstance(message, GameEventMessage)
        assert message.event == PlayerDeathEvent(
            user_id=20,
            attacker=10,
            assister=65535,
            weapon="knife",
            custom_kill=2,
            damage_bits=4,
            kill_streak_total=5,
        )

    def test_missing_assister_defaults_to_none_sentinel(self):
        message = message_from_dict({"type": "game_event", "event": {"name": "player_death", "userid": 1}})
        assert message.event.assister == -1

    def test_point_captured(self):
        message = message_from_dict(
            {
                "type": "game_event",
                "event": {"name": "teamplay_point_captured", "cp": 2, "cpname": "Last", "team": 3, "cappers": "\x01"},
            }
        )
        assert message.event == PointCapturedEvent(cp=2, cp_name="Last", team=3, cappers="\x01")

    def test_unknown_event_is_generic(self):
        message = message_from_dict({"type": "game_event", "event": {"name": "player_healed", "amount": 10}})
        assert message.event == GenericGameEvent(name="player_healed", values={"amount": 10})

    def test_chat_and_other_user_messages(self):
        chat = message_from_dict({"type": "user_message", "kind": "SayText2", "client": 2, "text": "gg"})
        assert chat == SayText2Message(client=2, text="gg")
        assert message_from_dict({"type": "user_message", "kind": "TextMsg", "text": "x"}) is None

    def test_pause_and_server_info(self):
        assert message_from_dict({"type": "set_pause", "pause": True}) == SetPauseMessage(pause=True)
        info = message_from_dict(
            {"type": "server_info", "player_slot": 4, "interval_per_tick": 0.015, "map": "cp_process_final"}
        )
        assert info == ServerInfoMessage(player_slot=4, interval_per_tick=0.015, map_name="cp_process_final")

    def test_uninteresting_kinds_decode_to_none(self):
        assert message_from_dict({"type": "net_tick", "tick": 5}) is None
        assert message_from_dict({}) is None

    def test_bad_numbers_use_defaults(self):
        message = message_from_dict(
            {"type": "game_event", "event": {"name": "player_hurt", "userid": "abc", "attacker": None}}
        )
        assert message.event.user_id == 0
        assert message.event.attacker == 0

    @pytest.mark.parametrize(
        "data, error",
        [
            ({"type": "packet_entities", "entities": {"entity_index": 1}}, "packet entities must be a list"),
            ({"type": "packet_entities", "entities": [7]}, "packet entity must be an object"),
            ({"type": "packet_entities", "entities": [{"props": ["m_iKills"]}]}, "entity prop must be an object"),
            ({"type": "game_event", "event": "player_death"}, "game event must be an object"),
        ],
    )
    def test_wrong_shapes_raise_value_error(self, data, error):
        with pytest.raises(ValueError, match=error):
            message_from_dict(data)
