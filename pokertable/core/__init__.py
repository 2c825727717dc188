"""
pokertable Core - Pure Python Texas Hold'em Game Logic

This module contains all table logic without any network dependencies.
"""

from pokertable.core.card import Card, Deck
from pokertable.core.player import Player
from pokertable.core.hand import HandRank, HandResult, evaluate_hand, compare_hands
from pokertable.core.pot import Pot, Payout, PayoutKind, PotManager
from pokertable.core.rules import GamePhase, ActionType, Decision, TableConfig, SeatConfig
from pokertable.core.events import InlineScheduler, AsyncioScheduler
from pokertable.core.game import TexasHoldemGame, ActionResult

__all__ = [
    "Card",
    "Deck",
    "Player",
    "HandRank",
    "HandResult",
    "evaluate_hand",
    "compare_hands",
    "Pot",
    "Payout",
    "PayoutKind",
    "PotManager",
    "GamePhase",
    "ActionType",
    "Decision",
    "TableConfig",
    "SeatConfig",
    "InlineScheduler",
    "AsyncioScheduler",
    "TexasHoldemGame",
    "ActionResult",
]
