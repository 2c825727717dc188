"""
Tests for bot personalities and adaptive drift.
"""

import pytest
from pokertable.agents.personality import (
    BotPersonality, PersonalityType, PERSONALITY_PARAMETERS,
)
from pokertable.core.rules import ActionType


class TestCreate:
    """Tests for building personalities from profiles."""

    @pytest.mark.parametrize("personality_type", list(PersonalityType))
    def test_parameters_from_table(self, personality_type):
        p = BotPersonality.create(personality_type, "Bot")
        threshold, aggression, bluff, pressure = PERSONALITY_PARAMETERS[personality_type]

        assert p.pre_flop_threshold == threshold
        assert p.aggression_factor == aggression
        assert p.bluff_frequency == bluff
        assert p.fold_to_pressure == pressure
        assert p.player_stats == {}

    def test_create_from_string(self):
        p = BotPersonality.create("loose_aggressive", "Mike")
        assert p.type == PersonalityType.LOOSE_AGGRESSIVE
        assert p.name == "Mike"

    def test_unknown_profile(self):
        with pytest.raises(ValueError):
            BotPersonality.create("reckless", "Bot")


class TestAdaptiveDrift:
    """Tests for the adaptive profile."""

    def test_fixed_profiles_do_not_track(self):
        p = BotPersonality.create(PersonalityType.TIGHT_AGGRESSIVE, "Sarah")
        p.update_player_stats(1, ActionType.RAISE, 40)

        assert p.player_stats == {}
        assert p.pre_flop_threshold == 0.35

    def test_aggressive_opponent_tightens(self):
        p = BotPersonality.create(PersonalityType.ADAPTIVE, "Alex")

        p.update_player_stats(2, ActionType.RAISE, 40)
        assert p.pre_flop_threshold == pytest.approx(0.30)
        assert p.fold_to_pressure == pytest.approx(0.40)

        p.update_player_stats(2, ActionType.BET, 60)
        assert p.pre_flop_threshold == pytest.approx(0.35)
        assert p.player_stats[2].raises == 2
        assert p.player_stats[2].total_raise_amount == 100

    def test_tightening_is_capped(self):
        p = BotPersonality.create(PersonalityType.ADAPTIVE, "Alex")
        for _ in range(20):
            p.update_player_stats(2, ActionType.RAISE, 40)

        assert p.pre_flop_threshold == pytest.approx(0.55)
        assert p.fold_to_pressure == pytest.approx(0.50)

    def test_folding_opponent_loosens(self):
        p = BotPersonality.create(PersonalityType.ADAPTIVE, "Alex")

        p.update_player_stats(3, ActionType.FOLD, 0)
        assert p.aggression_factor == pytest.approx(2.7)
        assert p.bluff_frequency == pytest.approx(0.12)

        for _ in range(20):
            p.update_player_stats(3, ActionType.FOLD, 0)
        assert p.aggression_factor == pytest.approx(4.0)
        assert p.bluff_frequency == pytest.approx(0.25)

    def test_calls_move_nothing(self):
        p = BotPersonality.create(PersonalityType.ADAPTIVE, "Alex")
        p.update_player_stats(4, ActionType.CALL, 10)

        assert p.player_stats[4].calls == 1
        assert p.pre_flop_threshold == 0.25
        assert p.aggression_factor == 2.5
