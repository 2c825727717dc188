"""
Tests for main/side pot construction and payout.
"""

import pytest
from pokertable.core.card import parse_cards
from pokertable.core.hand import evaluate_hand
from pokertable.core.player import Player
from pokertable.core.pot import Pot, PotManager, PayoutKind


def make_players(count, folded=()):
    players = [Player(player_id=i, name=f"P{i}", stack=0) for i in range(count)]
    for i in folded:
        players[i].folded = True
    return players


BOARD = parse_cards("2d 7c 9h Jd 4s")


def hand(holes):
    return evaluate_hand(BOARD + parse_cards(holes))


class TestCreatePots:
    """Tests for building the pot ladder."""

    def test_single_level(self):
        pots = PotManager()
        players = make_players(3)
        pots.create_pots(players, {0: 100, 1: 100, 2: 100})

        assert len(pots.pots) == 1
        assert pots.pots[0].amount == 300
        assert pots.pots[0].eligible_players == [0, 1, 2]

    def test_two_way_uncalled_excess(self):
        """The unmatched part of a bet becomes its own pot."""
        pots = PotManager()
        players = make_players(2)
        pots.create_pots(players, {0: 100, 1: 50})

        assert [(p.amount, p.eligible_players) for p in pots.pots] == [
            (100, [0, 1]),
            (50, [0]),
        ]
        assert pots.total == 150

    def test_three_way_side_pots(self):
        pots = PotManager()
        players = make_players(3)
        pots.create_pots(players, {0: 200, 1: 50, 2: 100})

        assert [(p.amount, p.eligible_players) for p in pots.pots] == [
            (150, [0, 1, 2]),
            (100, [0, 2]),
            (100, [0]),
        ]

    def test_folded_chips_stay_in_pot(self):
        """Folded players fund pots they cannot win."""
        pots = PotManager()
        players = make_players(3, folded=[2])
        pots.create_pots(players, {0: 100, 1: 100, 2: 40})

        assert pots.total == 240
        assert all(2 not in pot.eligible_players for pot in pots.pots)

    def test_folded_top_level_merges_down(self):
        """A level only a folded player reached is added to the pot below."""
        pots = PotManager()
        players = make_players(3, folded=[0])
        pots.create_pots(players, {0: 300, 1: 100, 2: 100})

        assert len(pots.pots) == 1
        assert pots.pots[0].amount == 500
        assert pots.pots[0].eligible_players == [1, 2]

    def test_zero_contributions(self):
        pots = PotManager()
        pots.create_pots(make_players(2), {0: 0, 1: 0})
        assert pots.pots == []

    def test_reset(self):
        pots = PotManager()
        pots.create_pots(make_players(2), {0: 10, 1: 10})
        pots.reset()
        assert pots.total == 0
        assert pots.to_list() == []


class TestDistributePots:
    """Tests for paying pots out."""

    def test_win_and_return(self):
        """The better hand wins the contested pot and gets its excess back."""
        pots = PotManager()
        players = make_players(2)
        pots.create_pots(players, {0: 100, 1: 50})

        payouts = pots.distribute_pots(players, {0: hand("Ah Ac"), 1: hand("Kh Kc")})

        assert [(p.player_id, p.amount, p.kind) for p in payouts] == [
            (0, 100, PayoutKind.WIN),
            (0, 50, PayoutKind.RETURN),
        ]

    def test_short_stack_wins_main_pot_only(self):
        pots = PotManager()
        players = make_players(3)
        pots.create_pots(players, {0: 200, 1: 50, 2: 100})

        payouts = pots.distribute_pots(players, {
            0: hand("3h 5c"),
            1: hand("Ah Ac"),
            2: hand("Kh Kc"),
        })

        won = {}
        for payout in payouts:
            won[payout.player_id] = won.get(payout.player_id, 0) + payout.amount

        assert won == {1: 150, 2: 100, 0: 100}
        assert sum(won.values()) == 350

    def test_split_remainder_to_button_order(self):
        """Odd chips go to the first tied winner in button order."""
        pots = PotManager()
        players = make_players(3, folded=[2])
        pots.pots = [Pot(101, [0, 1])]

        tied = {0: hand("Ah 3c"), 1: hand("As 3d")}
        button_order = [players[1], players[2], players[0]]
        payouts = pots.distribute_pots(button_order, tied)

        assert [(p.player_id, p.amount) for p in payouts] == [(1, 51), (0, 50)]
        assert sum(p.amount for p in payouts) == 101
        assert all(p.kind == PayoutKind.WIN for p in payouts)

    def test_payout_to_dict(self):
        pots = PotManager()
        players = make_players(2)
        pots.create_pots(players, {0: 20, 1: 20})

        payout = pots.distribute_pots(players, {0: hand("Ah Ac"), 1: hand("3h 5c")})[0]

        data = payout.to_dict()
        assert data["type"] == "win"
        assert data["amount"] == 40
        assert data["hand"]["name"] == "Pair"


@pytest.mark.parametrize("contributions", [
    {0: 500, 1: 120, 2: 120, 3: 35},
    {0: 10, 1: 20, 2: 30, 3: 40},
    {0: 1000, 1: 1, 2: 999, 3: 1000},
])
def test_every_chip_is_paid(contributions):
    """Whatever the ladder, payouts add up to the contributions."""
    pots = PotManager()
    players = make_players(4)
    pots.create_pots(players, contributions)

    hands = {0: hand("3h 5c"), 1: hand("Kh Kc"), 2: hand("Ah Ac"), 3: hand("Qh Qc")}
    payouts = pots.distribute_pots(players, hands)

    assert pots.total == sum(contributions.values())
    assert sum(p.amount for p in payouts) == sum(contributions.values())
