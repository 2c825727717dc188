"""
Card and Deck classes for Texas Hold'em.

A card carries its rank value directly (2 through 14, Ace high) so the
hand evaluator and the bot heuristics can do arithmetic on it without a
lookup table. The deck is rebuilt and reshuffled for every hand.
"""

from __future__ import annotations
import random
from typing import List, Optional
from enum import IntEnum


class Suit(IntEnum):
    """Card suits with integer values for fast comparison."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks; the integer value is the card's numeric value."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

RANK_LABELS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Reverse mappings
LABEL_TO_RANK = {v: k for k, v in RANK_LABELS.items()}
LABEL_TO_RANK["T"] = Rank.TEN
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


class Card:
    """
    An immutable playing card.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), "A♠", "10h" or "Th"
    - Integer (0-51): Card.from_int(51) = Ace of Spades

    The integer encoding is (value - 2) * 4 + suit.
    """

    __slots__ = ("_rank", "_suit", "_int")

    def __init__(self, rank: Rank, suit: Suit):
        object.__setattr__(self, "_rank", Rank(rank))
        object.__setattr__(self, "_suit", Suit(suit))
        object.__setattr__(self, "_int", (int(self._rank) - 2) * 4 + int(self._suit))

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def value(self) -> int:
        """Numeric value 2-14 (Ace high)."""
        return int(self._rank)

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts "As", "Kh", "Td", "10d", "2c" or the same with suit
        symbols ("A♠", "10♦").
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in LABEL_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")
        rank = LABEL_TO_RANK[rank_part]

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(rank, suit)

    @classmethod
    def from_int(cls, card_int: int) -> Card:
        """Create a card from integer (0-51)."""
        if not 0 <= card_int <= 51:
            raise ValueError(f"Card int must be 0-51, got {card_int}")
        return cls(Rank(card_int // 4 + 2), Suit(card_int % 4))

    def to_int(self) -> int:
        """Return the integer representation (0-51)."""
        return self._int

    def __int__(self) -> int:
        return self._int

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._int == other._int
        return False

    def __hash__(self) -> int:
        return self._int

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_LABELS[self._rank]}{SUIT_SYMBOLS[self._suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', '10h'."""
        return f"{RANK_LABELS[self._rank]}{SUIT_CHARS[self._suit]}"

    @property
    def is_red(self) -> bool:
        return self._suit in (Suit.HEARTS, Suit.DIAMONDS)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_LABELS[self._rank],
            "suit": SUIT_SYMBOLS[self._suit],
            "value": self.value,
            "text": str(self),
            "color": "red" if self.is_red else "black",
        }


class Deck:
    """
    A standard 52-card deck.

    Usage:
        deck = Deck()
        hole_cards = deck.deal(2)
        deck.burn()
        flop = deck.deal(3)
    """

    def __init__(self, shuffle: bool = True, rng: Optional[random.Random] = None):
        """Build a full deck, shuffled unless ``shuffle`` is False."""
        self._rng = rng or random.Random()
        self._build()
        if shuffle:
            self.shuffle()

    def _build(self) -> None:
        self._cards: List[Card] = [
            Card(rank, suit)
            for suit in SUIT_SYMBOLS
            for rank in Rank
        ]
        self._dealt: List[Card] = []

    def reset(self) -> None:
        """Rebuild all 52 cards and shuffle them."""
        self._build()
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the remaining cards (Fisher-Yates)."""
        self._rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> List[Card]:
        """
        Deal n cards from the top of the deck.

        Raises:
            ValueError: If not enough cards remain.
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self._cards):
            raise ValueError(f"Cannot deal {n} cards, only {len(self._cards)} remain")

        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        self._dealt.extend(dealt)
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    def burn(self) -> Card:
        """Burn (discard) the top card."""
        return self.deal_one()

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    @property
    def cards(self) -> List[Card]:
        """Copy of the undealt cards, top first."""
        return self._cards.copy()

    @property
    def dealt_cards(self) -> List[Card]:
        """List of cards that have been dealt (burns included)."""
        return self._dealt.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse space-separated cards, e.g. "As Kh 10d" or "A♠ K♥ T♦".
    """
    return [Card.from_string(s) for s in cards_str.split()]
