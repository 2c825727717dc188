"""
Player class for Texas Hold'em.

Manages player state including:
- Stack (chip count)
- Hole cards
- Chips committed this betting round and this hand
- Folded / all-in flags
"""

from __future__ import annotations
from typing import List, Optional, Dict, Any, TYPE_CHECKING
from dataclasses import dataclass, field

from pokertable.core.card import Card

if TYPE_CHECKING:
    from pokertable.agents.base import BaseAgent
    from pokertable.agents.personality import BotPersonality


@dataclass
class Player:
    """
    A seat at the table.

    Attributes:
        player_id: Stable seat identifier
        name: Display name
        stack: Current chip count
        is_human: True for the seat driven by the external collaborator
        personality: Bot policy parameters (bots only)
        hole_cards: The player's private cards (0 or 2)
        current_bet: Chips wagered in the current betting round
        total_bet: Chips wagered in the current hand
        folded: Has folded this hand
        all_in: Has no chips left behind this hand
        last_action: Display string for the last action
        decision_engine: Agent choosing this bot's actions
    """
    player_id: int
    name: str
    stack: int
    is_human: bool = False
    personality: Optional[BotPersonality] = None
    hole_cards: List[Card] = field(default_factory=list)
    current_bet: int = 0
    total_bet: int = 0
    folded: bool = False
    all_in: bool = False
    last_action: Optional[str] = None
    decision_engine: Optional[BaseAgent] = field(default=None, repr=False)

    def reset(self) -> None:
        """Reset per-hand state."""
        self.hole_cards = []
        self.current_bet = 0
        self.total_bet = 0
        self.folded = False
        self.all_in = False
        self.last_action = None

    def reset_for_new_round(self) -> None:
        """Reset state for a new betting round (flop, turn, river)."""
        self.current_bet = 0

    def deal_cards(self, cards: List[Card]) -> None:
        """Deal hole cards to the player."""
        self.hole_cards = list(cards)

    def bet(self, amount: int) -> int:
        """
        Move chips from the stack into the pot.

        Args:
            amount: Chips to wager

        Returns:
            Actual amount bet (less than requested if the stack runs out)
        """
        if amount <= 0:
            return 0

        actual_amount = min(amount, self.stack)

        self.stack -= actual_amount
        self.current_bet += actual_amount
        self.total_bet += actual_amount

        if self.stack == 0:
            self.all_in = True

        return actual_amount

    def win(self, amount: int) -> None:
        self.stack += amount

    @property
    def can_act(self) -> bool:
        """Check if player can take an action."""
        return not self.folded and not self.all_in and self.stack > 0

    @property
    def is_in_hand(self) -> bool:
        """Check if player is still contesting the pot."""
        return not self.folded

    @property
    def is_bot(self) -> bool:
        return not self.is_human

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "id": self.player_id,
            "name": self.name,
            "stack": self.stack,
            "is_human": self.is_human,
            "bet": self.current_bet,
            "total_bet": self.total_bet,
            "folded": self.folded,
            "all_in": self.all_in,
            "last_action": self.last_action,
        }

        if self.personality is not None:
            result["personality"] = self.personality.type.value

        if not hide_cards and self.hole_cards:
            result["cards"] = [card.to_dict() for card in self.hole_cards]

        return result

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.hole_cards) if self.hole_cards else "??"
        return f"{self.name} [{cards_str}] ${self.stack}"
