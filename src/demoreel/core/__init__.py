"""
DemoReel Core - Foundation modules for demo analysis.

This module contains the fundamental components:
- constants: Teams, classes, conditions and protocol bit layouts
- config: Application configuration management
- utils: Coercion helpers, logging setup
- messages: Inbound decoded message model
- schemas: GameSummary and highlight data contracts
"""

from demoreel.core.constants import (
    AIRSHOT_WEAPONS,
    DEFAULT_AIRTIME_THRESHOLD,
    USERINFO_TABLE,
    AirshotRule,
    CustomDamage,
    DamageFlag,
    EntityKind,
    LifeState,
    PlayerClass,
    PlayerCondition,
    PlayerFlag,
    Team,
    WeaponClass,
)
from demoreel.core.schemas import (
    GameSummary,
    HighlightEvent,
    PlayerSummary,
)

__all__ = [
    # Enums
    "AirshotRule",
    "CustomDamage",
    "DamageFlag",
    "EntityKind",
    "LifeState",
    "PlayerClass",
    "PlayerCondition",
    "PlayerFlag",
    "Team",
    "WeaponClass",
    # Constants
    "AIRSHOT_WEAPONS",
    "DEFAULT_AIRTIME_THRESHOLD",
    "USERINFO_TABLE",
    # Schemas (data contracts)
    "GameSummary",
    "HighlightEvent",
    "PlayerSummary",
]
