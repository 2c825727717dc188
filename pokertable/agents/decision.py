"""
Bot Decision Engine.

Maps a GameView to an action using the bot's personality:

- Pre-flop: fold hands below a position-scaled threshold (calling one
  big blind with near-misses), otherwise bet/raise with a probability
  that grows with strength and aggression, else call.
- Post-flop: optionally bluff, fold to large bets the pot odds do not
  justify, otherwise raise, call, bet or check.
"""

from __future__ import annotations
import random
from typing import Optional, TYPE_CHECKING

from pokertable.agents.base import BaseAgent, GameView
from pokertable.agents import heuristics
from pokertable.agents.personality import BotPersonality
from pokertable.core.rules import ActionType, Decision, Position

if TYPE_CHECKING:
    from pokertable.core.player import Player


POSITION_MULTIPLIERS = {
    Position.EARLY: 1.1,
    Position.MIDDLE: 1.0,
    Position.LATE: 0.9,
}

MIN_BET = 10


class BotDecisionEngine(BaseAgent):
    """
    Personality-driven heuristic policy.

    Args:
        personality: Parameters for this bot (shared with its Player)
        rng: Random source; every decision draws fresh values from it
    """

    def __init__(self, personality: BotPersonality, rng: Optional[random.Random] = None):
        self.personality = personality
        self.rng = rng or random.Random()

    def decide(self, view: GameView, player: Player) -> Decision:
        call_amount = max(0, view.current_bet - player.current_bet)
        stack = player.stack

        if view.is_pre_flop:
            decision = self._pre_flop(view, call_amount, stack)
        else:
            decision = self._post_flop(view, call_amount, stack)

        # Nothing owed: folding or calling is a check
        if call_amount == 0 and decision.action in (ActionType.FOLD, ActionType.CALL):
            return Decision(ActionType.CHECK)
        return decision

    def observe_action(self, player_id: int, action: ActionType, amount: int) -> None:
        self.personality.update_player_stats(player_id, action, amount)

    def _pre_flop(self, view: GameView, call_amount: int, stack: int) -> Decision:
        p = self.personality
        strength = heuristics.evaluate_pre_flop(view.hole_cards[0], view.hole_cards[1])
        threshold = p.pre_flop_threshold * POSITION_MULTIPLIERS[view.position]

        if strength < threshold:
            if call_amount <= view.big_blind and strength > threshold * p.cheap_call_ratio:
                return Decision(ActionType.CALL, call_amount)
            return Decision(ActionType.FOLD)

        if call_amount == 0:
            if self.rng.random() < strength * p.aggression_factor * 0.15:
                return Decision(ActionType.BET, self.bet_size(view.pot_size, stack, strength))
            return Decision(ActionType.CHECK)

        raise_chance = (strength - threshold + 0.2) * p.aggression_factor * 0.2
        if self.rng.random() < raise_chance and stack > call_amount * 2:
            size = self.raise_size(view.current_bet, stack, strength)
            return Decision(ActionType.RAISE, size)

        return self._call(call_amount, stack)

    def _post_flop(self, view: GameView, call_amount: int, stack: int) -> Decision:
        p = self.personality
        strength = heuristics.evaluate_post_flop(
            view.hole_cards, view.community_cards, view.active_players
        )

        if self.rng.random() < p.bluff_frequency:
            strength = min(strength + p.bluff_boost, 1.0)

        if call_amount > 0:
            odds_ok = heuristics.should_call(strength, view.pot_size, call_amount, self.rng)

            pressure = call_amount / max(stack, 1)
            if pressure > p.fold_to_pressure and not odds_ok:
                return Decision(ActionType.FOLD)

            if strength > 0.55 and self.rng.random() < p.aggression_factor * 0.25:
                size = self.raise_size(view.current_bet, stack, strength)
                if size > call_amount:
                    return Decision(ActionType.RAISE, size)

            if odds_ok or strength > 0.4:
                return self._call(call_amount, stack)

            return Decision(ActionType.FOLD)

        if strength > 0.4 and self.rng.random() < p.aggression_factor * 0.2:
            return Decision(ActionType.BET, self.bet_size(view.pot_size, stack, strength))

        return Decision(ActionType.CHECK)

    @staticmethod
    def _call(call_amount: int, stack: int) -> Decision:
        if call_amount >= stack:
            return Decision(ActionType.ALL_IN, stack)
        return Decision(ActionType.CALL, call_amount)

    @staticmethod
    def bet_size(pot_size: int, stack: int, strength: float) -> int:
        """40-75% of the pot by strength, at least 30% of pot and 10 chips."""
        target = int(pot_size * (0.4 + strength * 0.35))
        floor = max(MIN_BET, int(pot_size * 0.3))
        return min(max(target, floor), stack)

    @staticmethod
    def raise_size(current_bet: int, stack: int, strength: float) -> int:
        """2.5-4x the current bet by strength, at least 2x."""
        target = int(current_bet * (2.5 + strength * 1.5))
        floor = current_bet * 2
        return min(max(target, floor), stack)
