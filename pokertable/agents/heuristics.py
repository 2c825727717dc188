"""
Hand strength and pot odds heuristics for bots.

These are cheap, stateless estimates rather than equity simulations:
- Pre-flop: a simplified Chen formula on the two hole cards
- Post-flop: made-hand category plus a bonus for flush/straight draws
- Pot odds: the price of a call and the equity needed to justify it
"""

from __future__ import annotations
import math
import random
from typing import Optional, Sequence

from pokertable.core.card import Card, Rank
from pokertable.core.hand import evaluate_hand


HIGH_CARD_POINTS = {
    Rank.ACE: 10,
    Rank.KING: 8,
    Rank.QUEEN: 7,
    Rank.JACK: 6,
}

# Draw bonuses
FLUSH_DRAW_BONUS = 0.35
OPEN_ENDED_BONUS = 0.32
GUTSHOT_BONUS = 0.15
DRAW_WEIGHT = 0.15

OPPONENT_DISCOUNT = 0.95
CALL_JITTER = 0.1


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def evaluate_pre_flop(card1: Card, card2: Card) -> float:
    """
    Score two hole cards in [0, 1].

    Base points come from the higher card, doubled for a pair (at least
    5), +2 when suited, then adjusted by the gap between the ranks.
    """
    high = max(card1.value, card2.value)
    low = min(card1.value, card2.value)
    gap = high - low - 1

    score = HIGH_CARD_POINTS.get(high, high / 2)

    if card1.value == card2.value:
        score *= 2
        if score < 5:
            score = 5

    if card1.suit == card2.suit:
        score += 2

    if gap == 1:
        score += 1
    elif gap == 2:
        score -= 1
    elif gap == 3:
        score -= 2
    elif gap >= 4:
        score -= 4

    return _clamp(score / 20)


def evaluate_draw_potential(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> float:
    """Bonus for four to a flush and for three/four consecutive values."""
    all_cards = list(hole_cards) + list(community_cards)

    suit_counts = {}
    for card in all_cards:
        suit_counts[card.suit] = suit_counts.get(card.suit, 0) + 1
    max_suit_count = max(suit_counts.values(), default=0)

    unique_values = sorted({card.value for card in all_cards})
    longest = 1 if unique_values else 0
    run = 1
    for prev, value in zip(unique_values, unique_values[1:]):
        if value - prev == 1:
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    draw = 0.0
    if max_suit_count == 4:
        draw += FLUSH_DRAW_BONUS
    if longest == 4:
        draw += OPEN_ENDED_BONUS
    elif longest == 3:
        draw += GUTSHOT_BONUS

    return min(draw, 1.0)


def evaluate_post_flop(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    num_opponents: int = 5,
) -> float:
    """
    Score the current made hand plus draws in [0, 1].

    Falls back to the pre-flop score when there are not yet five cards
    to evaluate.
    """
    try:
        hand = evaluate_hand(list(hole_cards) + list(community_cards))
    except ValueError:
        return evaluate_pre_flop(hole_cards[0], hole_cards[1])

    strength = int(hand.ranking) / 10
    if hand.values:
        strength += (hand.values[0] / 14) * 0.1

    strength *= OPPONENT_DISCOUNT ** (num_opponents - 1)
    strength += evaluate_draw_potential(hole_cards, community_cards) * DRAW_WEIGHT

    return _clamp(strength)


def pot_odds(pot_size: int, call_amount: int) -> float:
    """Ratio of pot to call; infinite when the call is free."""
    if call_amount == 0:
        return math.inf
    return pot_size / call_amount


def required_equity(odds: float) -> float:
    """Share of the final pot a call must win to break even."""
    return 1 / (odds + 1)


def should_call(
    hand_strength: float,
    pot_size: int,
    call_amount: int,
    rng: Optional[random.Random] = None,
) -> bool:
    """Compare jittered hand strength against the equity the price demands."""
    rng = rng or random
    needed = required_equity(pot_odds(pot_size, call_amount))
    adjusted = hand_strength + (rng.random() - 0.5) * CALL_JITTER
    return adjusted >= needed
