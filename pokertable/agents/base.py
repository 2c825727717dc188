"""
Base Agent Interface for pokertable.

The table never hands an agent its own state. Instead it builds a
read-only GameView for the seat that is about to act and asks the agent
for a Decision.

Usage:
    class MyAgent(BaseAgent):
        def decide(self, view, player):
            if view.current_bet > player.current_bet:
                return Decision(ActionType.CALL)
            return Decision(ActionType.CHECK)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

from pokertable.core.card import Card
from pokertable.core.rules import ActionType, Decision, Position

if TYPE_CHECKING:
    from pokertable.core.player import Player


@dataclass(frozen=True)
class GameView:
    """
    What a bot may see when it is asked to act.

    Attributes:
        hole_cards: The bot's own cards
        community_cards: Board cards dealt so far
        pot_size: Settled pots plus chips wagered this round
        current_bet: Highest wager this round
        min_raise: Size of the last bet or raise
        active_players: Players who have not folded (the bot included)
        position: Seat position relative to the button
        big_blind: Big blind amount
    """
    hole_cards: Tuple[Card, ...]
    community_cards: Tuple[Card, ...]
    pot_size: int
    current_bet: int
    min_raise: int
    active_players: int
    position: Position
    big_blind: int

    @property
    def is_pre_flop(self) -> bool:
        return not self.community_cards


class BaseAgent(ABC):
    """Abstract base class for bot policies."""

    @abstractmethod
    def decide(self, view: GameView, player: Player) -> Decision:
        """
        Choose an action for ``player``.

        Args:
            view: Snapshot of the table from the player's seat
            player: The acting player (stack and current bet are read)

        Returns:
            The chosen Decision; for BET and RAISE ``amount`` is the
            number of chips to put in
        """

    def observe_action(self, player_id: int, action: ActionType, amount: int) -> None:
        """Called for every action taken by another player."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
