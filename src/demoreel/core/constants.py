"""
DemoReel TF2 Demo Analyzer - Constants

Defines teams, classes, entity kinds and the protocol bit layouts used when
interpreting decoded TF2 demo messages.
Values mirror the Source SDK enumerations (ETFCond, ETFDmgCustom, ETFWeaponID).
"""

from enum import Enum, IntEnum


class Team(IntEnum):
    """TF2 team numbers."""

    OTHER = 0
    SPECTATOR = 1
    RED = 2
    BLUE = 3

    @classmethod
    def from_code(cls, code: int) -> "Team":
        try:
            return cls(code)
        except ValueError:
            return cls.OTHER

    @property
    def label(self) -> str:
        return self.name.lower()


class PlayerClass(IntEnum):
    """
    TF2 player classes as networked by the server.

    OTHER is sent before a class has been picked. The nine playable
    classes map onto per-class counter slots ``code - 1``.
    """

    OTHER = 0
    SCOUT = 1
    SNIPER = 2
    SOLDIER = 3
    DEMOMAN = 4
    MEDIC = 5
    HEAVY = 6
    PYRO = 7
    SPY = 8
    ENGINEER = 9

    @classmethod
    def from_code(cls, code: int) -> "PlayerClass":
        try:
            return cls(code)
        except ValueError:
            return cls.OTHER

    @classmethod
    def from_slot(cls, slot: int) -> "PlayerClass":
        return cls.from_code(slot + 1)

    @property
    def slot(self) -> int:
        """Zero-based counter slot, as stored in summaries."""
        return int(self) - 1

    @property
    def label(self) -> str:
        return self.name.lower()


PLAYABLE_CLASSES = [c for c in PlayerClass if c is not PlayerClass.OTHER]
CLASS_COUNT = len(PLAYABLE_CLASSES)  # 9


class LifeState(IntEnum):
    """m_lifeState values."""

    ALIVE = 0
    DYING = 1
    DEAD = 2
    RESPAWNABLE = 3

    @classmethod
    def from_code(cls, code: int) -> "LifeState":
        try:
            return cls(code)
        except ValueError:
            return cls.ALIVE


class EntityKind(Enum):
    """Closed set of entity kinds the analyser interprets."""

    PLAYER = "player"
    PLAYER_RESOURCE = "player_resource"
    TEAM = "team"
    MEDIGUN = "medigun"
    OTHER = "other"


# Server class name -> entity kind
SERVER_CLASS_KINDS = {
    "CTFPlayer": EntityKind.PLAYER,
    "CTFPlayerResource": EntityKind.PLAYER_RESOURCE,
    "CTFTeam": EntityKind.TEAM,
    "CWeaponMedigun": EntityKind.MEDIGUN,
}


def entity_kind_for(class_name: str) -> EntityKind:
    """Resolve a server class name to an EntityKind."""
    return SERVER_CLASS_KINDS.get(class_name, EntityKind.OTHER)


class AirshotRule(str, Enum):
    """
    Rule used to decide whether a player was airborne when hit or killed.

    CONDITION: the victim carries TF_COND_BLASTJUMPING.
    AIRTIME: the victim has been continuously off the ground (and out of
    water) for at least the configured threshold.
    """

    CONDITION = "condition"
    AIRTIME = "airtime"


# String table holding per-connection player info
USERINFO_TABLE = "userinfo"

# Values used by player_death for "no assister"
NO_ASSISTER = (-1, 0xFFFF)

# Minimum continuous airtime for an airshot under AirshotRule.AIRTIME
DEFAULT_AIRTIME_THRESHOLD = 1.0  # seconds

# Entity handles carry the entity index in their low bits
ENTITY_INDEX_MASK = 0x7FF  # MAX_EDICT_BITS = 11

# Steam3 account ids are offset by this base in SteamID64 (individual, public universe)
STEAM_ID64_BASE = 76561197960265728


class PlayerFlag(IntEnum):
    """Bit positions of m_fFlags."""

    FL_ONGROUND = 0
    FL_DUCKING = 1
    FL_ANIMDUCKING = 2
    FL_WATERJUMP = 3
    FL_ONTRAIN = 4
    FL_INRAIN = 5
    FL_FROZEN = 6
    FL_ATCONTROLS = 7
    FL_CLIENT = 8
    FL_FAKECLIENT = 9
    FL_INWATER = 10
    FL_FLY = 11
    FL_SWIM = 12
    FL_CONVEYOR = 13
    FL_NPC = 14
    FL_GODMODE = 15
    FL_NOTARGET = 16
    FL_AIMTARGET = 17
    FL_PARTIALGROUND = 18
    FL_STATICPROP = 19
    FL_GRAPHED = 20
    FL_GRENADE = 21
    FL_STEPMOVEMENT = 22
    FL_DONTTOUCH = 23
    FL_BASEVELOCITY = 24
    FL_WORLDBRUSH = 25
    FL_OBJECT = 26
    FL_KILLME = 27
    FL_ONFIRE = 28
    FL_DISSOLVING = 29
    FL_TRANSRAGDOLL = 30
    FL_UNBLOCKABLE_BY_PLAYER = 31

    @property
    def bitmask(self) -> int:
        return 1 << self.value


class DamageFlag(IntEnum):
    """Bit positions of the player_death / player_hurt damage bits (DMG_*)."""

    DMG_CRUSH = 0
    DMG_BULLET = 1
    DMG_SLASH = 2
    DMG_BURN = 3
    DMG_VEHICLE = 4
    DMG_FALL = 5
    DMG_BLAST = 6
    DMG_CLUB = 7
    DMG_SHOCK = 8
    DMG_SONIC = 9
    DMG_ENERGYBEAM = 10
    DMG_PREVENT_PHYSICS_FORCE = 11
    DMG_NEVERGIB = 12
    DMG_ALWAYSGIB = 13
    DMG_DROWN = 14
    DMG_PARALYZE = 15
    DMG_NERVEGAS = 16
    DMG_POISON = 17
    DMG_RADIATION = 18
    DMG_DROWNRECOVER = 19
    DMG_ACID = 20
    DMG_SLOWBURN = 21
    DMG_REMOVENORAGDOLL = 22
    DMG_PHYSGUN = 23
    DMG_PLASMA = 24
    DMG_AIRBOAT = 25
    DMG_DISSOLVE = 26
    DMG_BLAST_SURFACE = 27
    DMG_DIRECT = 28
    DMG_BUCKSHOT = 29

    @property
    def bitmask(self) -> int:
        return 1 << self.value


def has_flag(bits: int, flag: IntEnum) -> bool:
    """Check a single named bit in a flags word."""
    return (bits & (1 << flag.value)) != 0


def is_airborne(movement_flags: int) -> bool:
    """A player is airborne when neither on the ground nor in water."""
    return not (
        has_flag(movement_flags, PlayerFlag.FL_ONGROUND)
        or has_flag(movement_flags, PlayerFlag.FL_INWATER)
    )


class PlayerCondition(IntEnum):
    """ETFCond. Indices 0..127 map onto the four packed condition words."""

    TF_COND_AIMING = 0
    TF_COND_ZOOMED = 1
    TF_COND_DISGUISING = 2
    TF_COND_DISGUISED = 3
    TF_COND_STEALTHED = 4
    TF_COND_INVULNERABLE = 5
    TF_COND_TELEPORTED = 6
    TF_COND_TAUNTING = 7
    TF_COND_INVULNERABLE_WEARINGOFF = 8
    TF_COND_STEALTHED_BLINK = 9
    TF_COND_SELECTED_TO_TELEPORT = 10
    TF_COND_CRITBOOSTED = 11
    TF_COND_TMPDAMAGEBONUS = 12
    TF_COND_FEIGN_DEATH = 13
    TF_COND_PHASE = 14
    TF_COND_STUNNED = 15
    TF_COND_OFFENSEBUFF = 16
    TF_COND_SHIELD_CHARGE = 17
    TF_COND_DEMO_BUFF = 18
    TF_COND_ENERGY_BUFF = 19
    TF_COND_RADIUSHEAL = 20
    TF_COND_HEALTH_BUFF = 21
    TF_COND_BURNING = 22
    TF_COND_HEALTH_OVERHEALED = 23
    TF_COND_URINE = 24
    TF_COND_BLEEDING = 25
    TF_COND_DEFENSEBUFF = 26
    TF_COND_MAD_MILK = 27
    TF_COND_MEGAHEAL = 28
    TF_COND_REGENONDAMAGEBUFF = 29
    TF_COND_MARKEDFORDEATH = 30
    TF_COND_NOHEALINGDAMAGEBUFF = 31
    TF_COND_SPEED_BOOST = 32
    TF_COND_CRITBOOSTED_PUMPKIN = 33
    TF_COND_CRITBOOSTED_USER_BUFF = 34
    TF_COND_CRITBOOSTED_DEMO_CHARGE = 35
    TF_COND_SODAPOPPER_HYPE = 36
    TF_COND_CRITBOOSTED_FIRST_BLOOD = 37
    TF_COND_CRITBOOSTED_BONUS_TIME = 38
    TF_COND_CRITBOOSTED_CTF_CAPTURE = 39
    TF_COND_CRITBOOSTED_ON_KILL = 40
    TF_COND_CANNOT_SWITCH_FROM_MELEE = 41
    TF_COND_DEFENSEBUFF_NO_CRIT_BLOCK = 42
    TF_COND_REPROGRAMMED = 43
    TF_COND_CRITBOOSTED_RAGE_BUFF = 44
    TF_COND_DEFENSEBUFF_HIGH = 45
    TF_COND_SNIPERCHARGE_RAGE_BUFF = 46
    TF_COND_DISGUISE_WEARINGOFF = 47
    TF_COND_MARKEDFORDEATH_SILENT = 48
    TF_COND_DISGUISED_AS_DISPENSER = 49
    TF_COND_SAPPED = 50
    TF_COND_INVULNERABLE_HIDE_UNLESS_DAMAGED = 51
    TF_COND_INVULNERABLE_USER_BUFF = 52
    TF_COND_HALLOWEEN_BOMB_HEAD = 53
    TF_COND_HALLOWEEN_THRILLER = 54
    TF_COND_RADIUSHEAL_ON_DAMAGE = 55
    TF_COND_CRITBOOSTED_CARD_EFFECT = 56
    TF_COND_INVULNERABLE_CARD_EFFECT = 57
    TF_COND_MEDIGUN_UBER_BULLET_RESIST = 58
    TF_COND_MEDIGUN_UBER_BLAST_RESIST = 59
    TF_COND_MEDIGUN_UBER_FIRE_RESIST = 60
    TF_COND_MEDIGUN_SMALL_BULLET_RESIST = 61
    TF_COND_MEDIGUN_SMALL_BLAST_RESIST = 62
    TF_COND_MEDIGUN_SMALL_FIRE_RESIST = 63
    TF_COND_STEALTHED_USER_BUFF = 64
    TF_COND_MEDIGUN_DEBUFF = 65
    TF_COND_STEALTHED_USER_BUFF_FADING = 66
    TF_COND_BULLET_IMMUNE = 67
    TF_COND_BLAST_IMMUNE = 68
    TF_COND_FIRE_IMMUNE = 69
    TF_COND_PREVENT_DEATH = 70
    TF_COND_MVM_BOT_STUN_RADIOWAVE = 71
    TF_COND_HALLOWEEN_SPEED_BOOST = 72
    TF_COND_HALLOWEEN_QUICK_HEAL = 73
    TF_COND_HALLOWEEN_GIANT = 74
    TF_COND_HALLOWEEN_TINY = 75
    TF_COND_HALLOWEEN_IN_HELL = 76
    TF_COND_HALLOWEEN_GHOST_MODE = 77
    TF_COND_MINICRITBOOSTED_ON_KILL = 78
    TF_COND_OBSCURED_SMOKE = 79
    TF_COND_PARACHUTE_ACTIVE = 80
    TF_COND_BLASTJUMPING = 81
    TF_COND_HALLOWEEN_KART = 82
    TF_COND_HALLOWEEN_KART_DASH = 83
    TF_COND_BALLOON_HEAD = 84
    TF_COND_MELEE_ONLY = 85
    TF_COND_SWIMMING_CURSE = 86
    TF_COND_FREEZE_INPUT = 87
    TF_COND_HALLOWEEN_KART_CAGE = 88
    TF_COND_DONOTUSE_0 = 89
    TF_COND_RUNE_STRENGTH = 90
    TF_COND_RUNE_HASTE = 91
    TF_COND_RUNE_REGEN = 92
    TF_COND_RUNE_RESIST = 93
    TF_COND_RUNE_VAMPIRE = 94
    TF_COND_RUNE_REFLECT = 95
    TF_COND_RUNE_PRECISION = 96
    TF_COND_RUNE_AGILITY = 97
    TF_COND_GRAPPLINGHOOK = 98
    TF_COND_GRAPPLINGHOOK_SAFEFALL = 99
    TF_COND_GRAPPLINGHOOK_LATCHED = 100
    TF_COND_GRAPPLINGHOOK_BLEEDING = 101
    TF_COND_AFTERBURN_IMMUNE = 102
    TF_COND_RUNE_KNOCKOUT = 103
    TF_COND_RUNE_IMBALANCE = 104
    TF_COND_CRITBOOSTED_RUNE_TEMP = 105
    TF_COND_PASSTIME_INTERCEPTION = 106
    TF_COND_SWIMMING_NO_EFFECTS = 107
    TF_COND_PURGATORY = 108
    TF_COND_RUNE_KING = 109
    TF_COND_RUNE_PLAGUE = 110
    TF_COND_RUNE_SUPERNOVA = 111
    TF_COND_PLAGUE = 112
    TF_COND_KING_BUFFED = 113
    TF_COND_TEAM_GLOWS = 114
    TF_COND_KNOCKED_INTO_AIR = 115
    TF_COND_COMPETITIVE_WINNER = 116
    TF_COND_COMPETITIVE_LOSER = 117
    TF_COND_HEALING_DEBUFF = 118
    TF_COND_PASSTIME_PENALTY_DEBUFF = 119
    TF_COND_GRAPPLED_TO_PLAYER = 120
    TF_COND_GRAPPLED_BY_PLAYER = 121
    TF_COND_PARACHUTE_DEPLOYED = 122
    TF_COND_GAS = 123
    TF_COND_BURNING_PYRO = 124
    TF_COND_ROCKETPACK = 125
    TF_COND_LOST_FOOTING = 126
    TF_COND_AIR_CURRENT = 127


class CustomDamage(IntEnum):
    """ETFDmgCustom, sent as player_death.customkill."""

    TF_DMG_CUSTOM_NONE = 0
    TF_DMG_CUSTOM_HEADSHOT = 1
    TF_DMG_CUSTOM_BACKSTAB = 2
    TF_DMG_CUSTOM_BURNING = 3
    TF_DMG_WRENCH_FIX = 4
    TF_DMG_CUSTOM_MINIGUN = 5
    TF_DMG_CUSTOM_SUICIDE = 6
    TF_DMG_CUSTOM_TAUNTATK_HADOUKEN = 7
    TF_DMG_CUSTOM_BURNING_FLARE = 8
    TF_DMG_CUSTOM_TAUNTATK_HIGH_NOON = 9
    TF_DMG_CUSTOM_TAUNTATK_GRAND_SLAM = 10
    TF_DMG_CUSTOM_PENETRATE_MY_TEAM = 11
    TF_DMG_CUSTOM_PENETRATE_ALL_PLAYERS = 12
    TF_DMG_CUSTOM_TAUNTATK_FENCING = 13
    TF_DMG_CUSTOM_PENETRATE_NONBURNING_TEAMMATE = 14
    TF_DMG_CUSTOM_TAUNTATK_ARROW_STAB = 15
    TF_DMG_CUSTOM_TELEFRAG = 16
    TF_DMG_CUSTOM_BURNING_ARROW = 17
    TF_DMG_CUSTOM_FLYINGBURN = 18
    TF_DMG_CUSTOM_PUMPKIN_BOMB = 19
    TF_DMG_CUSTOM_DECAPITATION = 20
    TF_DMG_CUSTOM_TAUNTATK_GRENADE = 21
    TF_DMG_CUSTOM_BASEBALL = 22
    TF_DMG_CUSTOM_CHARGE_IMPACT = 23
    TF_DMG_CUSTOM_TAUNTATK_BARBARIAN_SWING = 24
    TF_DMG_CUSTOM_AIR_STICKY_BURST = 25
    TF_DMG_CUSTOM_DEFENSIVE_STICKY = 26
    TF_DMG_CUSTOM_PICKAXE = 27
    TF_DMG_CUSTOM_ROCKET_DIRECTHIT = 28
    TF_DMG_CUSTOM_TAUNTATK_UBERSLICE = 29
    TF_DMG_CUSTOM_PLAYER_SENTRY = 30
    TF_DMG_CUSTOM_STANDARD_STICKY = 31
    TF_DMG_CUSTOM_SHOTGUN_REVENGE_CRIT = 32
    TF_DMG_CUSTOM_TAUNTATK_ENGINEER_GUITAR_SMASH = 33
    TF_DMG_CUSTOM_BLEEDING = 34
    TF_DMG_CUSTOM_GOLD_WRENCH = 35
    TF_DMG_CUSTOM_CARRIED_BUILDING = 36
    TF_DMG_CUSTOM_COMBO_PUNCH = 37
    TF_DMG_CUSTOM_TAUNTATK_ENGINEER_ARM_KILL = 38
    TF_DMG_CUSTOM_FISH_KILL = 39
    TF_DMG_CUSTOM_TRIGGER_HURT = 40
    TF_DMG_CUSTOM_DECAPITATION_BOSS = 41
    TF_DMG_CUSTOM_STICKBOMB_EXPLOSION = 42
    TF_DMG_CUSTOM_AEGIS_ROUND = 43
    TF_DMG_CUSTOM_FLARE_EXPLOSION = 44
    TF_DMG_CUSTOM_BOOTS_STOMP = 45
    TF_DMG_CUSTOM_PLASMA = 46
    TF_DMG_CUSTOM_PLASMA_CHARGED = 47
    TF_DMG_CUSTOM_PLASMA_GIB = 48
    TF_DMG_CUSTOM_PRACTICE_STICKY = 49
    TF_DMG_CUSTOM_EYEBALL_ROCKET = 50
    TF_DMG_CUSTOM_HEADSHOT_DECAPITATION = 51
    TF_DMG_CUSTOM_TAUNTATK_ARMAGEDDON = 52
    TF_DMG_CUSTOM_FLARE_PELLET = 53
    TF_DMG_CUSTOM_CLEAVER = 54
    TF_DMG_CUSTOM_CLEAVER_CRIT = 55
    TF_DMG_CUSTOM_SAPPER_RECORDER_DEATH = 56
    TF_DMG_CUSTOM_MERASMUS_PLAYER_BOMB = 57
    TF_DMG_CUSTOM_MERASMUS_GRENADE = 58
    TF_DMG_CUSTOM_MERASMUS_ZAP = 59
    TF_DMG_CUSTOM_MERASMUS_DECAPITATION = 60
    TF_DMG_CUSTOM_CANNONBALL_PUSH = 61
    TF_DMG_CUSTOM_TAUNTATK_ALLCLASS_GUITAR_RIFF = 62
    TF_DMG_CUSTOM_THROWABLE = 63
    TF_DMG_CUSTOM_THROWABLE_KILL = 64
    TF_DMG_CUSTOM_SPELL_TELEPORT = 65
    TF_DMG_CUSTOM_SPELL_SKELETON = 66
    TF_DMG_CUSTOM_SPELL_MIRV = 67
    TF_DMG_CUSTOM_SPELL_METEOR = 68
    TF_DMG_CUSTOM_SPELL_LIGHTNING = 69
    TF_DMG_CUSTOM_SPELL_FIREBALL = 70
    TF_DMG_CUSTOM_SPELL_MONOCULUS = 71
    TF_DMG_CUSTOM_SPELL_BLASTJUMP = 72
    TF_DMG_CUSTOM_SPELL_BATS = 73
    TF_DMG_CUSTOM_SPELL_TINY = 74
    TF_DMG_CUSTOM_KART = 75
    TF_DMG_CUSTOM_GIANT_HAMMER = 76
    TF_DMG_CUSTOM_RUNE_REFLECT = 77
    TF_DMG_CUSTOM_DRAGONS_FURY_IGNITE = 78
    TF_DMG_CUSTOM_DRAGONS_FURY_BONUS_BURNING = 79
    TF_DMG_CUSTOM_SLAP_KILL = 80
    TF_DMG_CUSTOM_CROC = 81
    TF_DMG_CUSTOM_TAUNTATK_GASBLAST = 82
    TF_DMG_CUSTOM_AXTINGUISHER_BOOSTED = 83

    @classmethod
    def from_code(cls, code: int) -> "CustomDamage | None":
        try:
            return cls(code)
        except ValueError:
            return None


class WeaponClass(IntEnum):
    """ETFWeaponID, sent as player_hurt.weaponid."""

    TF_WEAPON_NONE = 0
    TF_WEAPON_BAT = 1
    TF_WEAPON_BAT_WOOD = 2
    TF_WEAPON_BOTTLE = 3
    TF_WEAPON_FIREAXE = 4
    TF_WEAPON_CLUB = 5
    TF_WEAPON_CROWBAR = 6
    TF_WEAPON_KNIFE = 7
    TF_WEAPON_FISTS = 8
    TF_WEAPON_SHOVEL = 9
    TF_WEAPON_WRENCH = 10
    TF_WEAPON_BONESAW = 11
    TF_WEAPON_SHOTGUN_PRIMARY = 12
    TF_WEAPON_SHOTGUN_SOLDIER = 13
    TF_WEAPON_SHOTGUN_HWG = 14
    TF_WEAPON_SHOTGUN_PYRO = 15
    TF_WEAPON_SCATTERGUN = 16
    TF_WEAPON_SNIPERRIFLE = 17
    TF_WEAPON_MINIGUN = 18
    TF_WEAPON_SMG = 19
    TF_WEAPON_SYRINGEGUN_MEDIC = 20
    TF_WEAPON_TRANQ = 21
    TF_WEAPON_ROCKETLAUNCHER = 22
    TF_WEAPON_GRENADELAUNCHER = 23
    TF_WEAPON_PIPEBOMBLAUNCHER = 24
    TF_WEAPON_FLAMETHROWER = 25
    TF_WEAPON_GRENADE_NORMAL = 26
    TF_WEAPON_GRENADE_CONCUSSION = 27
    TF_WEAPON_GRENADE_NAIL = 28
    TF_WEAPON_GRENADE_MIRV = 29
    TF_WEAPON_GRENADE_MIRV_DEMOMAN = 30
    TF_WEAPON_GRENADE_NAPALM = 31
    TF_WEAPON_GRENADE_GAS = 32
    TF_WEAPON_GRENADE_EMP = 33
    TF_WEAPON_GRENADE_CALTROP = 34
    TF_WEAPON_GRENADE_PIPEBOMB = 35
    TF_WEAPON_GRENADE_SMOKE_BOMB = 36
    TF_WEAPON_GRENADE_HEAL = 37
    TF_WEAPON_GRENADE_STUNBALL = 38
    TF_WEAPON_GRENADE_JAR = 39
    TF_WEAPON_GRENADE_JAR_MILK = 40
    TF_WEAPON_PISTOL = 41
    TF_WEAPON_PISTOL_SCOUT = 42
    TF_WEAPON_REVOLVER = 43
    TF_WEAPON_NAILGUN = 44
    TF_WEAPON_PDA = 45
    TF_WEAPON_PDA_ENGINEER_BUILD = 46
    TF_WEAPON_PDA_ENGINEER_DESTROY = 47
    TF_WEAPON_PDA_SPY = 48
    TF_WEAPON_BUILDER = 49
    TF_WEAPON_MEDIGUN = 50
    TF_WEAPON_GRENADE_MIRVBOMB = 51
    TF_WEAPON_FLAMETHROWER_ROCKET = 52
    TF_WEAPON_GRENADE_DEMOMAN = 53
    TF_WEAPON_SENTRY_BULLET = 54
    TF_WEAPON_SENTRY_ROCKET = 55
    TF_WEAPON_DISPENSER = 56
    TF_WEAPON_INVIS = 57
    TF_WEAPON_FLAREGUN = 58
    TF_WEAPON_LUNCHBOX = 59
    TF_WEAPON_JAR = 60
    TF_WEAPON_COMPOUND_BOW = 61
    TF_WEAPON_BUFF_ITEM = 62
    TF_WEAPON_PUMPKIN_BOMB = 63
    TF_WEAPON_SWORD = 64
    TF_WEAPON_ROCKETLAUNCHER_DIRECTHIT = 65
    TF_WEAPON_LIFELINE = 66
    TF_WEAPON_LASER_POINTER = 67
    TF_WEAPON_DISPENSER_GUN = 68
    TF_WEAPON_SENTRY_REVENGE = 69
    TF_WEAPON_JAR_MILK = 70
    TF_WEAPON_HANDGUN_SCOUT_PRIMARY = 71
    TF_WEAPON_BAT_FISH = 72
    TF_WEAPON_CROSSBOW = 73
    TF_WEAPON_STICKBOMB = 74
    TF_WEAPON_HANDGUN_SCOUT_SECONDARY = 75
    TF_WEAPON_SODA_POPPER = 76
    TF_WEAPON_SNIPERRIFLE_DECAP = 77
    TF_WEAPON_RAYGUN = 78
    TF_WEAPON_PARTICLE_CANNON = 79
    TF_WEAPON_MECHANICAL_ARM = 80
    TF_WEAPON_DRG_POMSON = 81
    TF_WEAPON_BAT_GIFTWRAP = 82
    TF_WEAPON_GRENADE_ORNAMENT_BALL = 83
    TF_WEAPON_FLAREGUN_REVENGE = 84
    TF_WEAPON_PEP_BRAWLER_BLASTER = 85
    TF_WEAPON_CLEAVER = 86
    TF_WEAPON_GRENADE_CLEAVER = 87
    TF_WEAPON_STICKY_BALL_LAUNCHER = 88
    TF_WEAPON_GRENADE_STICKY_BALL = 89
    TF_WEAPON_SHOTGUN_BUILDING_RESCUE = 90
    TF_WEAPON_CANNON = 91
    TF_WEAPON_THROWABLE = 92
    TF_WEAPON_GRENADE_THROWABLE = 93
    TF_WEAPON_PDA_SPY_BUILD = 94
    TF_WEAPON_GRENADE_WATERBALLOON = 95
    TF_WEAPON_HARVESTER_SAW = 96
    TF_WEAPON_SPELLBOOK = 97
    TF_WEAPON_SPELLBOOK_PROJECTILE = 98
    TF_WEAPON_SNIPERRIFLE_CLASSIC = 99
    TF_WEAPON_PARACHUTE = 100
    TF_WEAPON_GRAPPLINGHOOK = 101
    TF_WEAPON_PASSTIME_GUN = 102
    TF_WEAPON_CHARGED_SMG = 103
    TF_WEAPON_BREAKABLE_SIGN = 104
    TF_WEAPON_ROCKETPACK = 105
    TF_WEAPON_SLAP = 106
    TF_WEAPON_JAR_GAS = 107
    TF_WEAPON_GRENADE_JAR_GAS = 108
    TF_WEAPON_FLAME_BALL = 109

    @classmethod
    def from_code(cls, code: int) -> "WeaponClass":
        try:
            return cls(code)
        except ValueError:
            return cls.TF_WEAPON_NONE


# Weapons whose hits on an airborne target count as airshots
AIRSHOT_WEAPONS = frozenset(
    {
        WeaponClass.TF_WEAPON_ROCKETLAUNCHER,
        WeaponClass.TF_WEAPON_ROCKETLAUNCHER_DIRECTHIT,
        WeaponClass.TF_WEAPON_PARTICLE_CANNON,  # Cow Mangler
        WeaponClass.TF_WEAPON_GRENADELAUNCHER,
        WeaponClass.TF_WEAPON_CANNON,  # Loose Cannon
        WeaponClass.TF_WEAPON_CROSSBOW,
    }
)
