"""
pokertable Agents - Bot Opponents

Heuristic hand-strength estimates, personality profiles and the
decision engine that turns them into actions.
"""

from pokertable.agents.base import BaseAgent, GameView
from pokertable.agents.personality import BotPersonality, PersonalityType
from pokertable.agents.decision import BotDecisionEngine

__all__ = [
    "BaseAgent",
    "GameView",
    "BotPersonality",
    "PersonalityType",
    "BotDecisionEngine",
]
