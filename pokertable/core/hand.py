"""
Hand Evaluation for Texas Hold'em.

This module evaluates 5-7 cards and returns the best 5-card hand as a
HandResult. Results compare by hand category first and then by a vector
of tie-break values (most significant first), so two results can be
ranked, sorted or checked for an exact tie.

Hand Rankings (best to worst):
10. Royal Flush: A♠ K♠ Q♠ J♠ 10♠
9. Straight Flush: 5 consecutive cards of same suit
8. Four of a Kind: 4 cards of same rank
7. Full House: 3 of a kind + pair
6. Flush: 5 cards of same suit
5. Straight: 5 consecutive cards
4. Three of a Kind: 3 cards of same rank
3. Two Pair: 2 different pairs
2. One Pair: 2 cards of same rank
1. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel), which is 5-high.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
from itertools import combinations, zip_longest
from dataclasses import dataclass
from enum import IntEnum

from pokertable.core.card import Card, Rank


class HandRank(IntEnum):
    """Hand rankings from best (highest value) to worst (lowest value)."""
    ROYAL_FLUSH = 10
    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1


HAND_RANK_NAMES = {
    HandRank.ROYAL_FLUSH: "Royal Flush",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FLUSH: "Flush",
    HandRank.STRAIGHT: "Straight",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.ONE_PAIR: "Pair",
    HandRank.HIGH_CARD: "High Card",
}

RANK_NAMES = {
    Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
    Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
    Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
    Rank.ACE: "Ace",
}

MIN_CARDS = 5
MAX_CARDS = 7


@dataclass(frozen=True)
class HandResult:
    """
    The evaluated strength of a best 5-card hand.

    Attributes:
        ranking: Hand category
        name: Display name of the category
        values: Tie-break values, most significant first
        cards: The five cards making the hand, sorted by value descending
    """
    ranking: HandRank
    name: str
    values: Tuple[int, ...]
    cards: Tuple[Card, ...]

    @property
    def key(self) -> Tuple[int, ...]:
        """Sort key; padded so shorter value vectors compare as trailing zeros."""
        padded = self.values + (0,) * (MAX_CARDS - len(self.values))
        return (int(self.ranking),) + padded

    def to_dict(self) -> dict:
        return {
            "ranking": int(self.ranking),
            "name": self.name,
            "values": list(self.values),
            "cards": [c.to_dict() for c in self.cards],
            "description": get_hand_description(self),
        }


def evaluate_hand(cards: Sequence[Card]) -> HandResult:
    """
    Evaluate a poker hand (5-7 cards).

    Every 5-card subset is scored for 6 or 7 cards and the strongest is
    returned.

    Raises:
        ValueError: If not 5-7 cards provided
    """
    if len(cards) < MIN_CARDS or len(cards) > MAX_CARDS:
        raise ValueError(f"Need 5-7 cards, got {len(cards)}")

    if len(cards) == MIN_CARDS:
        return _evaluate_5_cards(cards)

    best: Optional[HandResult] = None
    for combo in combinations(cards, MIN_CARDS):
        hand = _evaluate_5_cards(combo)
        if best is None or compare_hands(hand, best) > 0:
            best = hand
    return best


def _evaluate_5_cards(cards: Sequence[Card]) -> HandResult:
    """Evaluate exactly 5 cards."""
    sorted_cards = tuple(sorted(cards, key=lambda c: c.value, reverse=True))
    values = [c.value for c in sorted_cards]

    is_flush = len({c.suit for c in sorted_cards}) == 1
    straight_high = _check_straight(values)
    groups = _group_by_value(values)
    sizes = [size for _, size in groups]
    group_values = [value for value, _ in groups]

    if is_flush and straight_high == Rank.ACE:
        return _result(HandRank.ROYAL_FLUSH, [Rank.ACE], sorted_cards)

    if is_flush and straight_high:
        return _result(HandRank.STRAIGHT_FLUSH, [straight_high], sorted_cards)

    if sizes == [4, 1]:
        return _result(HandRank.FOUR_OF_A_KIND, group_values, sorted_cards)

    if sizes == [3, 2]:
        return _result(HandRank.FULL_HOUSE, group_values, sorted_cards)

    if is_flush:
        return _result(HandRank.FLUSH, values, sorted_cards)

    if straight_high:
        return _result(HandRank.STRAIGHT, [straight_high], sorted_cards)

    if sizes == [3, 1, 1]:
        return _result(HandRank.THREE_OF_A_KIND, group_values, sorted_cards)

    if sizes == [2, 2, 1]:
        return _result(HandRank.TWO_PAIR, group_values, sorted_cards)

    if sizes == [2, 1, 1, 1]:
        return _result(HandRank.ONE_PAIR, group_values, sorted_cards)

    return _result(HandRank.HIGH_CARD, values, sorted_cards)


def _result(ranking: HandRank, values: Sequence[int], cards: Tuple[Card, ...]) -> HandResult:
    return HandResult(
        ranking=ranking,
        name=HAND_RANK_NAMES[ranking],
        values=tuple(int(v) for v in values),
        cards=cards,
    )


def _check_straight(values: List[int]) -> Optional[int]:
    """
    Check if five values sorted descending form a straight.

    Returns:
        The straight's high card value, or None
    """
    if all(values[i] - values[i + 1] == 1 for i in range(len(values) - 1)):
        return values[0]

    # Wheel (A-5-4-3-2)
    if values == [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]:
        return int(Rank.FIVE)

    return None


def _group_by_value(values: List[int]) -> List[Tuple[int, int]]:
    """Group values as (value, count), ordered by count then value, descending."""
    counts = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)


def compare_hands(hand1: HandResult, hand2: HandResult) -> int:
    """
    Compare two evaluated hands.

    Returns:
        Positive if hand1 wins, negative if hand2 wins, 0 if tie
    """
    if hand1.ranking != hand2.ranking:
        return int(hand1.ranking) - int(hand2.ranking)

    for v1, v2 in zip_longest(hand1.values, hand2.values, fillvalue=0):
        if v1 != v2:
            return v1 - v2

    return 0


def get_hand_description(hand: HandResult) -> str:
    """Get a human-readable description of an evaluated hand."""
    high = _rank_name(hand.values[0])

    if hand.ranking == HandRank.ROYAL_FLUSH:
        return "Royal Flush"
    elif hand.ranking == HandRank.STRAIGHT_FLUSH:
        return f"Straight Flush, {high} high"
    elif hand.ranking == HandRank.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_plural(hand.values[0])}"
    elif hand.ranking == HandRank.FULL_HOUSE:
        return f"Full House, {_plural(hand.values[0])} over {_plural(hand.values[1])}"
    elif hand.ranking == HandRank.FLUSH:
        return f"Flush, {high} high"
    elif hand.ranking == HandRank.STRAIGHT:
        return f"Straight, {high} high"
    elif hand.ranking == HandRank.THREE_OF_A_KIND:
        return f"Three of a Kind, {_plural(hand.values[0])}"
    elif hand.ranking == HandRank.TWO_PAIR:
        return f"Two Pair, {_plural(hand.values[0])} and {_plural(hand.values[1])}"
    elif hand.ranking == HandRank.ONE_PAIR:
        return f"Pair of {_plural(hand.values[0])}"
    else:
        return f"{high} high"


def _rank_name(value: int) -> str:
    return RANK_NAMES[Rank(value)]


def _plural(value: int) -> str:
    name = _rank_name(value)
    return f"{name}es" if name == "Six" else f"{name}s"
