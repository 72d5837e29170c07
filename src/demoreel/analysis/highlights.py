"""
Highlight detection rules.

Pure functions evaluated by the event interpreter at death, damage and
crossbow-heal time:
  - Kill icon substitution from the custom kill type and damage bits
  - Airborne checks (condition-based or airtime-based, see AirshotRule)
  - Airshot eligibility for damage events
"""

from __future__ import annotations

from demoreel.analysis.state import PlayerState
from demoreel.core.config import AnalyserConfig
from demoreel.core.constants import (
    AIRSHOT_WEAPONS,
    AirshotRule,
    CustomDamage,
    DamageFlag,
    PlayerCondition,
    WeaponClass,
    has_flag,
)

# Custom kill types whose icon replaces the weapon unconditionally
FIXED_KILL_ICONS = {
    CustomDamage.TF_DMG_CUSTOM_BURNING_ARROW: "huntsman_burning",
    CustomDamage.TF_DMG_CUSTOM_FLYINGBURN: "huntsman_flyingburn",
    CustomDamage.TF_DMG_CUSTOM_PUMPKIN_BOMB: "pumpkindeath",
    CustomDamage.TF_DMG_CUSTOM_KART: "bumper_kart",
    CustomDamage.TF_DMG_CUSTOM_GIANT_HAMMER: "necro_smasher",
}

# Checked in order for world and self kills; a later match wins
SUICIDE_DAMAGE_ICONS = (
    (DamageFlag.DMG_FALL, "#fall"),
    (DamageFlag.DMG_NERVEGAS, "saw_kill"),
    (DamageFlag.DMG_VEHICLE, "vehicle"),
)

HEADSHOT_WEAPON_ICONS = {
    "ambassador": "ambassador_headshot",
    "huntsman": "huntsman_headshot",
}

WORLD_USER_ID = 0


def kill_icon_for(
    weapon: str,
    custom_kill: int,
    damage_bits: int,
    killer_id: int,
    victim_id: int,
    penetrate_count: int = 0,
) -> str:
    """
    Work out the kill feed icon for a death.

    Args:
        weapon: Weapon name reported by the death event
        custom_kill: ETFDmgCustom code
        damage_bits: DMG_* bits of the killing blow
        killer_id: Attacker user id (0 for the world)
        victim_id: Victim user id
        penetrate_count: Players the shot passed through first

    Returns:
        The icon name; the weapon name when nothing overrides it
    """
    icon = weapon
    self_kill = killer_id == victim_id
    custom = CustomDamage.from_code(custom_kill)

    if custom is CustomDamage.TF_DMG_CUSTOM_BACKSTAB:
        icon = "sharp_dresser_backstab" if weapon == "sharp_dresser" else "backstab"
    elif custom in (CustomDamage.TF_DMG_CUSTOM_HEADSHOT, CustomDamage.TF_DMG_CUSTOM_HEADSHOT_DECAPITATION):
        if weapon in HEADSHOT_WEAPON_ICONS:
            icon = HEADSHOT_WEAPON_ICONS[weapon]
        elif penetrate_count > 0:
            icon = "headshot_player_penetration"
        else:
            icon = "headshot"
    elif custom is CustomDamage.TF_DMG_CUSTOM_BURNING:
        if self_kill:
            icon = "firedeath"
    elif custom is CustomDamage.TF_DMG_CUSTOM_SUICIDE:
        # Killbinds, or a suicide credited to whoever last damaged the victim
        icon = "#suicide" if self_kill else "#assisted_suicide"
    elif custom in FIXED_KILL_ICONS:
        icon = FIXED_KILL_ICONS[custom]

    if killer_id == WORLD_USER_ID or self_kill:
        for flag, flag_icon in SUICIDE_DAMAGE_ICONS:
            if has_flag(damage_bits, flag):
                icon = flag_icon

    return icon


def is_airborne_for_airshot(
    player: PlayerState,
    tick: int,
    interval_per_tick: float,
    config: AnalyserConfig,
) -> bool:
    """Apply the configured airborne rule to a player at ``tick``."""
    if config.airshot_rule is AirshotRule.AIRTIME:
        return player.airtime(tick, interval_per_tick) >= config.airtime_threshold_seconds
    return player.has_cond(PlayerCondition.TF_COND_BLASTJUMPING)


def is_airshot_weapon(weapon_id: int) -> bool:
    return WeaponClass.from_code(weapon_id) in AIRSHOT_WEAPONS
