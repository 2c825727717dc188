"""
Pot and side-pot accounting.

Pots are a derived view: every time contributions are finalized the pot
list is rebuilt from each player's committed chips. Contribution levels
are walked in ascending order; each level forms a pot that only players
who reached that level may win. A level reached by a single live player
becomes a refund pot holding the part of their bet nobody matched.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Optional, Sequence
from dataclasses import dataclass, field
from enum import Enum
import logging

from pokertable.core.hand import HandResult, compare_hands
from pokertable.core.player import Player


logger = logging.getLogger(__name__)


@dataclass
class Pot:
    """Represents a pot (main pot or side pot)."""
    amount: int = 0
    eligible_players: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"amount": self.amount, "eligible_players": list(self.eligible_players)}


class PayoutKind(str, Enum):
    WIN = "win"
    RETURN = "return"


@dataclass
class Payout:
    """A single transfer from one pot to one player."""
    player_id: int
    amount: int
    kind: PayoutKind
    hand: Optional[HandResult] = None

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "amount": self.amount,
            "type": self.kind.value,
            "hand": self.hand.to_dict() if self.hand else None,
        }


class PotManager:
    """
    Builds the main/side pot ladder and pays it out.

    Usage:
        pots = PotManager()
        pots.create_pots(players, {p.player_id: p.total_bet for p in players})
        payouts = pots.distribute_pots(players, hand_results)
    """

    def __init__(self):
        self.pots: List[Pot] = []

    def reset(self) -> None:
        self.pots = []

    @property
    def total(self) -> int:
        """Total amount in all pots."""
        return sum(pot.amount for pot in self.pots)

    def get_total_pot(self) -> int:
        return self.total

    def create_pots(self, players: Sequence[Player], contributions: Mapping[int, int]) -> None:
        """
        Replace the pot list with the ladder for the given contributions.

        Args:
            players: Seated players (folded flags decide eligibility)
            contributions: Chips committed, keyed by player id
        """
        self.pots = []

        levels = sorted({amount for amount in contributions.values() if amount > 0})
        previous_level = 0

        for level in levels:
            pot = Pot()

            for player in players:
                contributed = contributions.get(player.player_id, 0)
                if contributed < level:
                    continue
                pot.amount += min(level, contributed) - previous_level
                if not player.folded:
                    pot.eligible_players.append(player.player_id)

            if pot.amount > 0:
                if not pot.eligible_players and self.pots:
                    # Only folded players reached this level
                    self.pots[-1].amount += pot.amount
                else:
                    self.pots.append(pot)

            previous_level = level

        logger.debug(f"Pots created: {[pot.to_dict() for pot in self.pots]}")

    def distribute_pots(
        self,
        players: Sequence[Player],
        hand_results: Mapping[int, HandResult],
    ) -> List[Payout]:
        """
        Work out who receives each pot.

        Args:
            players: Players in button order (first entry is closest to the
                left of the dealer); ties give the odd chips to the earliest
            hand_results: Evaluated hands keyed by player id

        Returns:
            One Payout per pot share, in pot order
        """
        payouts: List[Payout] = []

        for pot in self.pots:
            eligible = [
                p for p in players
                if p.player_id in pot.eligible_players and not p.folded
            ]

            if not eligible:
                logger.error(f"Pot of {pot.amount} has no eligible players")
                continue

            if len(eligible) == 1:
                # Uncalled chips go back to the bettor
                payouts.append(Payout(eligible[0].player_id, pot.amount, PayoutKind.RETURN))
                continue

            best: Optional[HandResult] = None
            winners: List[Player] = []
            for player in eligible:
                hand = hand_results[player.player_id]
                if best is None:
                    best, winners = hand, [player]
                    continue
                comparison = compare_hands(hand, best)
                if comparison > 0:
                    best, winners = hand, [player]
                elif comparison == 0:
                    winners.append(player)

            share, remainder = divmod(pot.amount, len(winners))
            for i, winner in enumerate(winners):
                amount = share + remainder if i == 0 else share
                payouts.append(Payout(
                    winner.player_id, amount, PayoutKind.WIN,
                    hand_results[winner.player_id],
                ))

        return payouts

    def to_list(self) -> List[Dict]:
        return [pot.to_dict() for pot in self.pots]
