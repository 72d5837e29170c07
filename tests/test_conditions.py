"""Tests for packed player condition words."""

import pytest

from demoreel.analysis.conditions import CONDITION_COUNT, ConditionSet
from demoreel.core.constants import PlayerCondition

WORDS = ["player_cond", "player_cond_ex", "player_cond_ex2", "player_cond_ex3"]


class TestConditionSet:
    """Tests for ConditionSet.has and set_word."""

    def test_empty_set_has_nothing(self):
        """A fresh set reports no conditions."""
        conditions = ConditionSet()
        assert not any(conditions.has(i) for i in range(CONDITION_COUNT))
        assert conditions.active() == []

    @pytest.mark.parametrize(
        ("word", "index"),
        [
            ("player_cond", 5),
            ("player_cond_ex", 32 + 3),
            ("player_cond_ex2", 81),
            ("player_cond_ex3", 96 + 31),
        ],
    )
    def test_each_word_maps_its_range(self, word, index):
        """Condition i lives in word i // 32 at bit i % 32."""
        conditions = ConditionSet()
        conditions.set_word(word, 1 << (index % 32))
        assert conditions.has(index)
        assert [i for i in range(CONDITION_COUNT) if conditions.has(i)] == [index]

    @pytest.mark.parametrize("index", range(CONDITION_COUNT))
    def test_every_condition_packs_into_one_bit(self, index):
        """Every condition sets exactly its own bit and no other condition."""
        conditions = ConditionSet()
        conditions.set_word(WORDS[index // 32], 1 << (index % 32))
        assert [i for i in range(CONDITION_COUNT) if conditions.has(i)] == [index]

    @pytest.mark.parametrize("index", range(32))
    def test_every_low_condition_reads_legacy_word(self, index):
        conditions = ConditionSet()
        conditions.set_word("condition_bits", 1 << index)
        assert [i for i in range(CONDITION_COUNT) if conditions.has(i)] == [index]

    def test_blast_jumping_is_ex2_bit_17(self):
        """TF_COND_BLASTJUMPING (81) is bit 17 of the third word."""
        conditions = ConditionSet(player_cond_ex2=1 << 17)
        assert conditions.has(PlayerCondition.TF_COND_BLASTJUMPING)

    def test_crit_boost_from_legacy_word(self):
        """Condition 11 set only in _condition_bits is still reported."""
        conditions = ConditionSet()
        conditions.set_word("condition_bits", 1 << 11)
        assert conditions.has(PlayerCondition.TF_COND_CRITBOOSTED)

    def test_legacy_word_ors_with_low_word(self):
        """The low range is the OR of both words."""
        conditions = ConditionSet(player_cond=1 << 0, condition_bits=1 << 11)
        assert conditions.has(0)
        assert conditions.has(11)
        assert not conditions.has(1)

    def test_legacy_word_does_not_leak_into_high_words(self):
        """_condition_bits only affects indices below 32."""
        conditions = ConditionSet(condition_bits=0xFFFFFFFF)
        assert not conditions.has(32)
        assert not conditions.has(81)

    def test_set_word_truncates_to_32_bits(self):
        """Values wider than a word are masked."""
        conditions = ConditionSet()
        conditions.set_word("player_cond", (1 << 32) | 1)
        assert conditions.player_cond == 1

    def test_out_of_range_index(self):
        """Indices outside 0..127 are never set."""
        conditions = ConditionSet(player_cond=0xFFFFFFFF, player_cond_ex3=0xFFFFFFFF)
        assert not conditions.has(128)
        assert not conditions.has(-1)

    def test_active_lists_in_index_order(self):
        """active() returns named conditions in ascending order."""
        conditions = ConditionSet(player_cond=(1 << 7) | (1 << 1), player_cond_ex2=1 << 17)
        assert conditions.active() == [
            PlayerCondition.TF_COND_ZOOMED,
            PlayerCondition.TF_COND_TAUNTING,
            PlayerCondition.TF_COND_BLASTJUMPING,
        ]
