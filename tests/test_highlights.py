"""Tests for kill icon substitution and airborne rules."""

import pytest

from demoreel.analysis.highlights import is_airborne_for_airshot, is_airshot_weapon, kill_icon_for
from demoreel.analysis.state import PlayerState
from demoreel.core.config import AnalyserConfig
from demoreel.core.constants import AirshotRule, CustomDamage, DamageFlag, WeaponClass

KILLER = 10
VICTIM = 20


def icon(weapon="tf_projectile_rocket", custom=0, damage_bits=0, killer=KILLER, victim=VICTIM, penetrate=0):
    return kill_icon_for(weapon, int(custom), damage_bits, killer, victim, penetrate)


class TestKillIcons:
    """Tests for kill_icon_for."""

    def test_plain_kill_uses_weapon(self):
        """Without overrides the icon is the weapon name."""
        assert icon() == "tf_projectile_rocket"

    def test_unknown_custom_kill_uses_weapon(self):
        """Unrecognized custom kill codes are ignored."""
        assert icon(custom=9999) == "tf_projectile_rocket"

    def test_backstab(self):
        assert icon("knife", CustomDamage.TF_DMG_CUSTOM_BACKSTAB) == "backstab"

    def test_sharp_dresser_backstab(self):
        assert icon("sharp_dresser", CustomDamage.TF_DMG_CUSTOM_BACKSTAB) == "sharp_dresser_backstab"

    @pytest.mark.parametrize(
        ("weapon", "penetrate", "expected"),
        [
            ("sniperrifle", 0, "headshot"),
            ("sniperrifle", 1, "headshot_player_penetration"),
            ("ambassador", 0, "ambassador_headshot"),
            ("huntsman", 2, "huntsman_headshot"),
        ],
    )
    def test_headshots(self, weapon, penetrate, expected):
        """Headshot icons depend on the weapon and penetration."""
        assert icon(weapon, CustomDamage.TF_DMG_CUSTOM_HEADSHOT, penetrate=penetrate) == expected

    def test_decapitation_counts_as_headshot(self):
        assert icon("sniperrifle", CustomDamage.TF_DMG_CUSTOM_HEADSHOT_DECAPITATION) == "headshot"

    def test_burning_self_kill(self):
        """Burning to death by your own fire shows firedeath."""
        assert icon("flamethrower", CustomDamage.TF_DMG_CUSTOM_BURNING, killer=VICTIM) == "firedeath"
        assert icon("flamethrower", CustomDamage.TF_DMG_CUSTOM_BURNING) == "flamethrower"

    def test_suicide_and_assisted_suicide(self):
        assert icon("world", CustomDamage.TF_DMG_CUSTOM_SUICIDE, killer=VICTIM) == "#suicide"
        assert icon("world", CustomDamage.TF_DMG_CUSTOM_SUICIDE) == "#assisted_suicide"

    @pytest.mark.parametrize(
        ("custom", "expected"),
        [
            (CustomDamage.TF_DMG_CUSTOM_BURNING_ARROW, "huntsman_burning"),
            (CustomDamage.TF_DMG_CUSTOM_FLYINGBURN, "huntsman_flyingburn"),
            (CustomDamage.TF_DMG_CUSTOM_PUMPKIN_BOMB, "pumpkindeath"),
            (CustomDamage.TF_DMG_CUSTOM_KART, "bumper_kart"),
            (CustomDamage.TF_DMG_CUSTOM_GIANT_HAMMER, "necro_smasher"),
        ],
    )
    def test_fixed_icons(self, custom, expected):
        assert icon("anything", custom) == expected

    def test_world_fall_damage(self):
        """World kills with fall damage show #fall."""
        assert icon("world", damage_bits=DamageFlag.DMG_FALL.bitmask, killer=0) == "#fall"

    def test_self_inflicted_fall_damage(self):
        """A self kill with the fall bit shows #fall whatever the weapon."""
        assert icon("tf_projectile_rocket", damage_bits=DamageFlag.DMG_FALL.bitmask, killer=VICTIM) == "#fall"

    def test_fall_damage_from_a_player_keeps_weapon(self):
        """Damage flags only matter for world and self kills."""
        assert icon("world", damage_bits=DamageFlag.DMG_FALL.bitmask) == "world"

    def test_later_damage_flag_wins(self):
        """Fall, nerve gas and vehicle are applied in order."""
        bits = DamageFlag.DMG_FALL.bitmask | DamageFlag.DMG_VEHICLE.bitmask
        assert icon("world", damage_bits=bits, killer=VICTIM) == "vehicle"
        bits = DamageFlag.DMG_FALL.bitmask | DamageFlag.DMG_NERVEGAS.bitmask
        assert icon("world", damage_bits=bits, killer=0) == "saw_kill"

    def test_damage_flags_override_custom_icon(self):
        """A self kill by fall damage shows #fall even with a custom kill."""
        bits = DamageFlag.DMG_FALL.bitmask
        assert icon("world", CustomDamage.TF_DMG_CUSTOM_SUICIDE, bits, killer=VICTIM) == "#fall"


class TestAirborneRules:
    """Tests for is_airborne_for_airshot."""

    @pytest.fixture
    def player(self):
        return PlayerState(user_id=VICTIM)

    def test_condition_rule(self, player):
        """The condition rule checks TF_COND_BLASTJUMPING."""
        config = AnalyserConfig(airshot_rule=AirshotRule.CONDITION)
        assert not is_airborne_for_airshot(player, 100, 0.015, config)
        player.conditions.set_word("player_cond_ex2", 1 << 17)
        assert is_airborne_for_airshot(player, 100, 0.015, config)

    def test_airtime_rule(self, player):
        """The airtime rule needs continuous airtime at the threshold."""
        config = AnalyserConfig(airshot_rule=AirshotRule.AIRTIME, airtime_threshold_seconds=1.0)
        player.update_movement_flags(0, 100)
        assert not is_airborne_for_airshot(player, 150, 0.015, config)
        assert is_airborne_for_airshot(player, 200, 0.015, config)

    def test_airtime_rule_ignores_conditions(self, player):
        """Blast jumping alone doesn't satisfy the airtime rule."""
        config = AnalyserConfig(airshot_rule=AirshotRule.AIRTIME)
        player.conditions.set_word("player_cond_ex2", 1 << 17)
        assert not is_airborne_for_airshot(player, 100, 0.015, config)

    def test_airtime_is_zero_on_ground(self, player):
        player.update_movement_flags(1, 100)
        assert player.airtime(500, 0.015) == 0.0

    def test_airshot_weapons(self):
        assert is_airshot_weapon(WeaponClass.TF_WEAPON_ROCKETLAUNCHER)
        assert is_airshot_weapon(WeaponClass.TF_WEAPON_CROSSBOW)
        assert not is_airshot_weapon(WeaponClass.TF_WEAPON_SCATTERGUN)
        assert not is_airshot_weapon(-5)
