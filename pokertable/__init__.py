"""
pokertable - Single-table No-Limit Texas Hold'em

A self-contained poker table with:
- Pure Python rules engine (hand evaluation, side pots, turn order)
- Personality-driven bot opponents
- FastAPI + WebSocket server for one human player

Usage:
    from pokertable.core import TexasHoldemGame, TableConfig
    from pokertable.agents import BotDecisionEngine, BotPersonality
"""

__version__ = "0.1.0"

from pokertable.core.card import Card, Deck
from pokertable.core.player import Player
from pokertable.core.game import TexasHoldemGame
from pokertable.core.hand import HandRank, evaluate_hand
from pokertable.core.rules import TableConfig

__all__ = [
    "Card",
    "Deck",
    "Player",
    "TexasHoldemGame",
    "TableConfig",
    "HandRank",
    "evaluate_hand",
    "__version__",
]
