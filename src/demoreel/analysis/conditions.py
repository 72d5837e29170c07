"""
Player condition bits.

TF2 networks a player's 128 conditions as four 32-bit words. Conditions
below 32 live in ``m_nPlayerCond``, except TF_COND_CRITBOOSTED (bit 11),
which the server mirrors into ``_condition_bits`` instead. Both words are
OR-ed when testing the low range.
"""

from __future__ import annotations

from dataclasses import dataclass

from demoreel.core.constants import PlayerCondition

WORD_MASK = 0xFFFFFFFF
CONDITION_COUNT = 128


@dataclass
class ConditionSet:
    """The four packed condition words plus the legacy override word."""

    player_cond: int = 0
    player_cond_ex: int = 0
    player_cond_ex2: int = 0
    player_cond_ex3: int = 0
    condition_bits: int = 0

    def set_word(self, word: str, value: int) -> None:
        """Store one backing word, truncated to 32 bits."""
        setattr(self, word, value & WORD_MASK)

    def has(self, cond: PlayerCondition | int) -> bool:
        index = int(cond)
        if index < 0:
            return False
        if index < 32:
            return ((self.player_cond | self.condition_bits) & (1 << index)) != 0
        elif index < 64:
            return (self.player_cond_ex & (1 << (index - 32))) != 0
        elif index < 96:
            return (self.player_cond_ex2 & (1 << (index - 64))) != 0
        elif index < 128:
            return (self.player_cond_ex3 & (1 << (index - 96))) != 0
        return False

    def active(self) -> list[PlayerCondition]:
        """All conditions currently set, in index order."""
        return [cond for cond in PlayerCondition if self.has(cond)]
