"""
Tests for Player state.
"""

from pokertable.agents.personality import BotPersonality, PersonalityType
from pokertable.core.card import parse_cards
from pokertable.core.player import Player


class TestPlayerBetting:
    """Tests for moving chips from the stack."""

    def test_bet_moves_chips(self, sample_player):
        paid = sample_player.bet(100)

        assert paid == 100
        assert sample_player.stack == 900
        assert sample_player.current_bet == 100
        assert sample_player.total_bet == 100
        assert not sample_player.all_in

    def test_bet_capped_at_stack(self, sample_player):
        """Betting more than the stack puts the player all-in."""
        paid = sample_player.bet(5000)

        assert paid == 1000
        assert sample_player.stack == 0
        assert sample_player.all_in
        assert not sample_player.can_act

    def test_zero_bet(self, sample_player):
        assert sample_player.bet(0) == 0
        assert sample_player.stack == 1000

    def test_new_round_keeps_hand_total(self, sample_player):
        sample_player.bet(40)
        sample_player.reset_for_new_round()
        sample_player.bet(60)

        assert sample_player.current_bet == 60
        assert sample_player.total_bet == 100

    def test_reset_clears_hand_state(self, sample_player):
        sample_player.deal_cards(parse_cards("As Kd"))
        sample_player.bet(1000)
        sample_player.folded = True
        sample_player.reset()

        assert sample_player.hole_cards == []
        assert sample_player.total_bet == 0
        assert not sample_player.folded
        assert not sample_player.all_in


class TestPlayerSerialization:
    """Tests for to_dict."""

    def test_cards_hidden_by_default(self, sample_player):
        sample_player.deal_cards(parse_cards("As Kd"))
        assert "cards" not in sample_player.to_dict()
        assert len(sample_player.to_dict(hide_cards=False)["cards"]) == 2

    def test_bot_reports_personality(self):
        bot = Player(
            player_id=3,
            name="Emma",
            stack=1000,
            personality=BotPersonality.create(PersonalityType.TIGHT_PASSIVE, "Emma"),
        )
        data = bot.to_dict()

        assert bot.is_bot
        assert data["personality"] == "tight_passive"
        assert data["id"] == 3
