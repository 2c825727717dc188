"""
Tests for hand evaluation.
"""

import random
from itertools import combinations

import pytest
from pokertable.core.card import Card, Deck, Rank, Suit, parse_cards
from pokertable.core.hand import (
    evaluate_hand, compare_hands, HandRank,
    get_hand_description
)


class TestHandRanking:
    """Tests for hand ranking."""

    def test_royal_flush(self, royal_flush):
        """Test royal flush recognition."""
        result = evaluate_hand(royal_flush)
        assert result.ranking == HandRank.ROYAL_FLUSH
        assert result.name == "Royal Flush"

    @pytest.mark.parametrize("cards, expected", [
        ("9h 8h 7h 6h 5h", HandRank.STRAIGHT_FLUSH),
        ("As Ah Ad Ac Ks", HandRank.FOUR_OF_A_KIND),
        ("Ks Kh Kd Qc Qs", HandRank.FULL_HOUSE),
        ("As Ks Js 9s 2s", HandRank.FLUSH),
        ("As Kh Qd Jc 10s", HandRank.STRAIGHT),
        ("As Ah Ad Kc Qs", HandRank.THREE_OF_A_KIND),
        ("As Ah Kd Kc Qs", HandRank.TWO_PAIR),
        ("As Ah Kd Qc Js", HandRank.ONE_PAIR),
        ("As Kh Jd 9c 7s", HandRank.HIGH_CARD),
    ])
    def test_categories(self, cards, expected):
        assert evaluate_hand(parse_cards(cards)).ranking == expected

    def test_wheel_straight(self, wheel_straight):
        """The wheel is a five-high straight."""
        result = evaluate_hand(wheel_straight)
        assert result.ranking == HandRank.STRAIGHT
        assert result.values == (5,)

    def test_wheel_straight_flush(self):
        """A-5-4-3-2 suited is a straight flush, not just a flush."""
        result = evaluate_hand(parse_cards("Ah 5h 4h 3h 2h"))
        assert result.ranking == HandRank.STRAIGHT_FLUSH
        assert result.values == (5,)

    def test_full_house_values(self):
        result = evaluate_hand(parse_cards("Ks Kh Kd Qc Qs"))
        assert result.values == (Rank.KING, Rank.QUEEN)

    def test_best_of_seven(self):
        """The flush beats the straight available in the same seven cards."""
        result = evaluate_hand(parse_cards("As 2s 3h 4s 5d 9s Ks"))
        assert result.ranking == HandRank.FLUSH
        assert len(result.cards) == 5
        assert all(card.suit == Suit.SPADES for card in result.cards)

    @pytest.mark.parametrize("count", [4, 8])
    def test_card_count_validated(self, count):
        deck = Deck(shuffle=False)
        with pytest.raises(ValueError):
            evaluate_hand(deck.deal(count))


class TestHandComparison:
    """Tests for comparing hands."""

    def test_higher_category_wins(self):
        flush = evaluate_hand(parse_cards("As Ks Js 9s 2s"))
        straight = evaluate_hand(parse_cards("As Kh Qd Jc 10s"))
        assert compare_hands(flush, straight) > 0
        assert compare_hands(straight, flush) < 0

    def test_kicker_decides(self):
        ace_king = evaluate_hand(parse_cards("Ah As Kd 7c 4s"))
        ace_queen = evaluate_hand(parse_cards("Ac Ad Qh 7s 4d"))
        assert compare_hands(ace_king, ace_queen) > 0

    def test_wheel_loses_to_six_high(self):
        wheel = evaluate_hand(parse_cards("As 2h 3d 4c 5s"))
        six_high = evaluate_hand(parse_cards("2s 3h 4d 5c 6s"))
        assert compare_hands(six_high, wheel) > 0

    def test_board_plays_tie(self):
        """Both players play the board and split."""
        board = parse_cards("As Ks Qs Js 9d")
        hand1 = evaluate_hand(board + parse_cards("2c 3c"))
        hand2 = evaluate_hand(board + parse_cards("4c 5c"))

        assert hand1.ranking == HandRank.HIGH_CARD
        assert hand1.values == (14, 13, 12, 11, 9)
        assert compare_hands(hand1, hand2) == 0

    def test_comparator_is_a_total_order(self):
        """Comparisons agree with the padded sort key and are transitive."""
        rng = random.Random(99)
        results = []
        for _ in range(40):
            deck = Deck(rng=rng)
            results.append(evaluate_hand(deck.deal(7)))

        for a, b in combinations(results, 2):
            cmp = compare_hands(a, b)
            assert (cmp > 0) == (a.key > b.key)
            assert (cmp == 0) == (a.key == b.key)
            assert (cmp > 0) == (compare_hands(b, a) < 0)

        for a, b, c in combinations(results[:15], 3):
            if compare_hands(a, b) >= 0 and compare_hands(b, c) >= 0:
                assert compare_hands(a, c) >= 0


class TestHandDescription:
    """Tests for hand descriptions."""

    @pytest.mark.parametrize("cards, description", [
        ("Ks Kh Kd Qc Qs", "Full House, Kings over Queens"),
        ("6s 6h 6d 6c Qs", "Four of a Kind, Sixes"),
        ("As Ah Kd Kc Qs", "Two Pair, Aces and Kings"),
        ("Js Jh 4d 3c 2s", "Pair of Jacks"),
        ("As Kh Jd 9c 7s", "Ace high"),
        ("As 2h 3d 4c 5s", "Straight, Five high"),
    ])
    def test_descriptions(self, cards, description):
        result = evaluate_hand(parse_cards(cards))
        assert get_hand_description(result) == description
        assert result.to_dict()["description"] == description
