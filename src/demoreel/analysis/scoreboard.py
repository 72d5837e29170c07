"""Per-player scoreboard counters."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields


@dataclass
class Scoreboard:
    """
    Cumulative per-player counters.

    The server periodically resends full totals, and those pushes can
    arrive out of order relative to other fields, so a counter only ever
    moves up: see ``observe``.
    """

    captures: int = 0
    defenses: int = 0
    kills: int = 0
    deaths: int = 0
    dominations: int = 0
    revenges: int = 0
    buildings_destroyed: int = 0
    headshots: int = 0
    backstabs: int = 0
    healing: int = 0
    ubercharges: int = 0
    teleports: int = 0
    damage_dealt: int = 0
    damage_assist: int = 0
    damage_blocked: int = 0
    assists: int = 0
    bonus_points: int = 0
    points: int = 0

    @classmethod
    def counter_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def observe(self, counter: str, value: int) -> bool:
        """
        Record an observed total for one counter.

        Args:
            counter: Counter name (a field of this class)
            value: Total as sent by the server

        Returns:
            True if the stored value increased
        """
        if value > getattr(self, counter):
            setattr(self, counter, value)
            return True
        return False

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
