"""
Bot personalities.

Each personality is a fixed set of policy parameters. The adaptive
profile additionally keeps per-opponent action tallies for the life of
the bot and drifts its own parameters in response.
"""

from __future__ import annotations
from typing import Dict
from dataclasses import dataclass, field
from enum import Enum
import logging

from pokertable.core.rules import ActionType


logger = logging.getLogger(__name__)


class PersonalityType(str, Enum):
    TIGHT_AGGRESSIVE = "tight_aggressive"
    LOOSE_AGGRESSIVE = "loose_aggressive"
    TIGHT_PASSIVE = "tight_passive"
    LOOSE_PASSIVE = "loose_passive"
    ADAPTIVE = "adaptive"


# (pre-flop threshold, aggression factor, bluff frequency, fold to pressure)
PERSONALITY_PARAMETERS = {
    PersonalityType.TIGHT_AGGRESSIVE: (0.35, 3.5, 0.12, 0.30),
    PersonalityType.LOOSE_AGGRESSIVE: (0.15, 4.0, 0.20, 0.25),
    PersonalityType.TIGHT_PASSIVE: (0.40, 1.2, 0.03, 0.55),
    PersonalityType.LOOSE_PASSIVE: (0.12, 1.0, 0.05, 0.40),
    PersonalityType.ADAPTIVE: (0.25, 2.5, 0.10, 0.35),
}

# Adaptive drift
AGGRESSIVE_OPPONENT_RATE = 0.4
PASSIVE_OPPONENT_FOLD_RATE = 0.6
MAX_THRESHOLD = 0.55
MAX_FOLD_TO_PRESSURE = 0.50
MAX_AGGRESSION = 4.0
MAX_BLUFF = 0.25


@dataclass
class OpponentStats:
    """Action tallies for one opponent."""
    total_actions: int = 0
    folds: int = 0
    calls: int = 0
    raises: int = 0
    total_raise_amount: int = 0

    @property
    def aggression(self) -> float:
        return self.raises / max(self.total_actions, 1)

    @property
    def fold_rate(self) -> float:
        return self.folds / max(self.total_actions, 1)


@dataclass
class BotPersonality:
    """
    Policy parameters for one bot.

    Attributes:
        type: Personality profile
        name: Bot name
        pre_flop_threshold: Minimum pre-flop strength to continue
        aggression_factor: Scales the probability of betting/raising
        bluff_frequency: Chance of playing a hand as stronger than it is
        fold_to_pressure: Call/stack ratio above which the bot may fold
        cheap_call_ratio: Share of the threshold that still calls one big blind
        bluff_boost: Strength added when bluffing
        player_stats: Opponent tallies (adaptive profile only)
    """
    type: PersonalityType
    name: str
    pre_flop_threshold: float
    aggression_factor: float
    bluff_frequency: float
    fold_to_pressure: float
    cheap_call_ratio: float = 0.7
    bluff_boost: float = 0.3
    player_stats: Dict[int, OpponentStats] = field(default_factory=dict)

    @classmethod
    def create(cls, personality_type: PersonalityType, name: str) -> BotPersonality:
        personality_type = PersonalityType(personality_type)
        threshold, aggression, bluff, pressure = PERSONALITY_PARAMETERS[personality_type]
        return cls(
            type=personality_type,
            name=name,
            pre_flop_threshold=threshold,
            aggression_factor=aggression,
            bluff_frequency=bluff,
            fold_to_pressure=pressure,
        )

    @property
    def is_adaptive(self) -> bool:
        return self.type == PersonalityType.ADAPTIVE

    def update_player_stats(self, player_id: int, action: ActionType, amount: int) -> None:
        """Record an opponent action and adjust parameters (adaptive only)."""
        if not self.is_adaptive:
            return

        stats = self.player_stats.setdefault(player_id, OpponentStats())
        stats.total_actions += 1

        if action == ActionType.FOLD:
            stats.folds += 1
        elif action == ActionType.CALL:
            stats.calls += 1
        elif action in (ActionType.BET, ActionType.RAISE):
            stats.raises += 1
            stats.total_raise_amount += amount

        if stats.aggression > AGGRESSIVE_OPPONENT_RATE:
            self.pre_flop_threshold = min(MAX_THRESHOLD, self.pre_flop_threshold + 0.05)
            self.fold_to_pressure = min(MAX_FOLD_TO_PRESSURE, self.fold_to_pressure + 0.05)

        if stats.fold_rate > PASSIVE_OPPONENT_FOLD_RATE:
            self.aggression_factor = min(MAX_AGGRESSION, self.aggression_factor + 0.2)
            self.bluff_frequency = min(MAX_BLUFF, self.bluff_frequency + 0.02)

        logger.debug(
            f"{self.name} adjusted vs player {player_id}: "
            f"threshold={self.pre_flop_threshold:.2f} aggression={self.aggression_factor:.2f}"
        )
