"""
Texas Hold'em Table Engine - State Machine Implementation.

This module implements the core game logic for a single table:
- Hand lifecycle (blinds, hole cards, four streets, showdown)
- Player actions (fold, check, call, bet, raise, all-in)
- Turn order, betting-round completion and action re-opening
- Main/side pot settlement and uncalled-bet refunds
- Bot turns through each seat's decision engine
- Chip-conservation checks after every action and payout

State transitions are synchronous. Pauses between steps (bot "thinking",
dealing a street, showing a result) go through the injected scheduler,
and everything observers need arrives through the event sink.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Any
from dataclasses import dataclass
import logging
import random
import time

from pokertable.core.card import Card, Deck
from pokertable.core.events import EventSink, InlineScheduler, Scheduler, null_sink
from pokertable.core.hand import HandResult, evaluate_hand
from pokertable.core.player import Player
from pokertable.core.pot import PayoutKind, PotManager
from pokertable.core.rules import (
    GamePhase, ActionType, TableConfig,
    get_blind_positions, get_first_to_act_preflop, get_first_to_act_postflop,
    get_position,
    HOLE_CARDS, FLOP_CARDS, TURN_CARDS, RIVER_CARDS, TOTAL_COMMUNITY_CARDS,
)
from pokertable.agents.base import GameView
from pokertable.agents.decision import BotDecisionEngine
from pokertable.agents.personality import BotPersonality


logger = logging.getLogger(__name__)

BETTING_PHASES = (GamePhase.PRE_FLOP, GamePhase.FLOP, GamePhase.TURN, GamePhase.RIVER)


@dataclass
class ActionResult:
    """Result of a human action request."""
    success: bool
    message: str
    action_type: Optional[ActionType] = None
    amount: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "action_type": self.action_type.value if self.action_type else None,
            "amount": self.amount,
        }


class TexasHoldemGame:
    """
    Texas Hold'em table engine implementing a state machine.

    Usage:
        events = []
        game = TexasHoldemGame(event_sink=lambda name, data: events.append(name))
        game.initialize_players()
        game.start_new_hand()       # bots act until the human is up

        if game.waiting_for_human_action:
            game.human_call()
    """

    def __init__(
        self,
        config: Optional[TableConfig] = None,
        event_sink: Optional[EventSink] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a new table.

        Args:
            config: Blinds, stacks, seat roster and pacing
            event_sink: Receives (event name, payload) for every event
            scheduler: Runs delayed continuations (inline by default)
            rng: Random source for the deck and the bots
        """
        self.config = config or TableConfig.default()
        self.small_blind = self.config.small_blind
        self.big_blind = self.config.big_blind

        self.event_sink = event_sink or null_sink
        self.scheduler = scheduler or InlineScheduler()
        self._rng = rng or random.Random()

        self.players: List[Player] = []
        self.deck = Deck(shuffle=False, rng=self._rng)
        self.community_cards: List[Card] = []
        self.pot_manager = PotManager()
        self.phase = GamePhase.WAITING
        self.hand_number = 0

        # Position tracking
        self.dealer_index = 0
        self.current_player_index = 0

        # Betting state
        self.current_bet = 0
        self.min_raise = self.big_blind
        self.acted_this_round: Dict[int, bool] = {}

        self.action_history: List[Dict[str, Any]] = []
        self.waiting_for_human_action = False
        self.starting_total = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def num_players(self) -> int:
        """Number of players at the table."""
        return len(self.players)

    @property
    def current_player(self) -> Optional[Player]:
        """The player whose turn it is to act."""
        if self.phase not in BETTING_PHASES or not self.players:
            return None
        return self.players[self.current_player_index]

    @property
    def current_bets(self) -> Dict[int, int]:
        """Chips each player has wagered in the current betting round."""
        return {p.player_id: p.current_bet for p in self.players}

    @property
    def human_player(self) -> Optional[Player]:
        return next((p for p in self.players if p.is_human), None)

    def get_current_pot_size(self) -> int:
        """Settled pots plus everything wagered this round."""
        return self.pot_manager.total + sum(p.current_bet for p in self.players)

    def total_chips(self) -> int:
        """Chips on the table: stacks, current-round wagers and settled pots."""
        return sum(p.stack for p in self.players) + self.get_current_pot_size()

    def is_hand_running(self) -> bool:
        """Check if a hand is currently in progress."""
        return self.phase in BETTING_PHASES or self.phase == GamePhase.SHOWDOWN

    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def get_player(self, player_id: int) -> Optional[Player]:
        """Get player by ID."""
        return next((p for p in self.players if p.player_id == player_id), None)

    def call_amount_for(self, player: Player) -> int:
        return max(0, self.current_bet - player.current_bet)

    # ------------------------------------------------------------------
    # Table setup and hand lifecycle
    # ------------------------------------------------------------------

    def initialize_players(self) -> None:
        """Seat the configured roster. Bots get a personality and a policy."""
        if self.players:
            raise ValueError("Players are already seated")

        for seat_id, seat in enumerate(self.config.seats):
            personality = None
            engine = None
            if not seat.is_human:
                personality = BotPersonality.create(seat.personality, seat.name)
                engine = BotDecisionEngine(personality, rng=random.Random(self._rng.random()))

            self.players.append(Player(
                player_id=seat_id,
                name=seat.name,
                stack=self.config.starting_stack,
                is_human=seat.is_human,
                personality=personality,
                decision_engine=engine,
            ))

        self.starting_total = sum(p.stack for p in self.players)
        logger.info(f"Seated {self.num_players} players, {self.starting_total} chips in play")

        self._emit("playersInitialized", {
            "players": [p.to_dict() for p in self.players],
        })

    def start_new_hand(self) -> bool:
        """
        Start a new hand.

        Returns:
            True if a hand was dealt, False if the game is over or a
            hand is still in progress
        """
        if not self.players:
            raise ValueError("initialize_players() must be called before dealing")
        if self.is_hand_running():
            logger.warning("Cannot start a hand while one is in progress")
            return False
        if self.is_game_over():
            return False

        self.hand_number += 1

        self.deck.reset()
        self.community_cards = []
        self.pot_manager.reset()
        self.current_bet = 0
        self.min_raise = self.big_blind
        self.action_history = []
        self.waiting_for_human_action = False

        for player in self.players:
            player.reset()

        busted = [p for p in self.players if p.stack == 0]
        if busted:
            logger.info(f"Removing busted players: {[p.name for p in busted]}")
            self.players = [p for p in self.players if p.stack > 0]

        if len(self.players) < 2:
            self.phase = GamePhase.GAME_OVER
            winner = self.players[0] if self.players else None
            logger.info(f"Game over, winner: {winner.name if winner else None}")
            self._emit("gameOver", {"winner": winner.to_dict() if winner else None})
            return False

        self.dealer_index = (self.dealer_index + 1) % self.num_players
        logger.info(f"Starting hand #{self.hand_number}, dealer seat {self.dealer_index}")

        self._emit("newHand", {
            "hand_number": self.hand_number,
            "dealer_index": self.dealer_index,
        })

        self._post_blinds()
        self._deal_hole_cards()

        self.phase = GamePhase.PRE_FLOP
        self._start_betting_round()
        return True

    def _post_blinds(self) -> None:
        """Post small and big blinds; a short stack posts what it has."""
        sb_index, bb_index = get_blind_positions(self.num_players, self.dealer_index)
        sb_player = self.players[sb_index]
        bb_player = self.players[bb_index]

        sb_amount = sb_player.bet(self.small_blind)
        sb_player.last_action = f"SB {sb_amount}"
        bb_amount = bb_player.bet(self.big_blind)
        bb_player.last_action = f"BB {bb_amount}"

        self.current_bet = self.big_blind

        self._add_action(sb_player, "posts small blind", sb_amount)
        self._add_action(bb_player, "posts big blind", bb_amount)
        logger.debug(f"Blinds posted: SB={sb_amount} BB={bb_amount}")

        self._emit("blindsPosted", {
            "small_blind": {"player": sb_player.to_dict(), "amount": sb_amount},
            "big_blind": {"player": bb_player.to_dict(), "amount": bb_amount},
        })

    def _deal_hole_cards(self) -> None:
        """Deal 2 hole cards to each seated player."""
        for player in self.players:
            player.deal_cards(self.deck.deal(HOLE_CARDS))

        self._emit("holeCardsDealt", {
            "players": [p.to_dict(hide_cards=not p.is_human) for p in self.players],
        })

    def _complete_hand(self) -> None:
        self.phase = GamePhase.HAND_COMPLETE
        self.waiting_for_human_action = False
        stacks = {p.name: p.stack for p in self.players}
        logger.info(f"Hand #{self.hand_number} complete: {stacks}")
        self._emit("handComplete", {"hand_number": self.hand_number})

        if self.config.auto_next_hand:
            self.scheduler.schedule(self.config.next_hand_delay, self.start_new_hand)

    # ------------------------------------------------------------------
    # Betting rounds
    # ------------------------------------------------------------------

    def _start_betting_round(self) -> None:
        """Reset round tracking and hand the action to the first seat."""
        self.acted_this_round = {p.player_id: False for p in self.players}

        if self.phase == GamePhase.PRE_FLOP:
            self.current_player_index = get_first_to_act_preflop(
                self.num_players, self.dealer_index
            )
        else:
            self.current_player_index = get_first_to_act_postflop(
                self.num_players, self.dealer_index
            )
            self.current_bet = 0
            self.min_raise = self.big_blind

        self._process_next_action()

    def _process_next_action(self) -> None:
        """Close the round if it is over, otherwise ask the next seat to act."""
        if self.phase not in BETTING_PHASES:
            return

        if sum(1 for p in self.players if p.is_in_hand) == 1:
            self._handle_single_player_win()
            return

        if not any(p.can_act for p in self.players) or self._is_betting_round_complete():
            self._complete_betting_round()
            return

        player = self.players[self.current_player_index]
        while not player.can_act:
            self.current_player_index = (self.current_player_index + 1) % self.num_players
            player = self.players[self.current_player_index]

        self._emit("playerTurn", {"player": player.to_dict(hide_cards=not player.is_human)})

        if player.is_human:
            self.waiting_for_human_action = True
        else:
            self.scheduler.schedule(
                self.config.bot_think_delay,
                lambda: self._process_bot_action(player),
            )

    def _process_bot_action(self, bot: Player) -> None:
        if self.current_player is not bot or not bot.can_act:
            logger.warning(f"Skipping stale turn for {bot.name}")
            return

        decision = bot.decision_engine.decide(self.get_bot_view(bot), bot)
        logger.debug(f"{bot.name} decides {decision.action.value} {decision.amount}")
        self.process_player_action(bot, decision.action, decision.amount)

    def get_bot_view(self, bot: Player) -> GameView:
        """Read-only snapshot of the table from ``bot``'s seat."""
        seat = self.players.index(bot)
        return GameView(
            hole_cards=tuple(bot.hole_cards),
            community_cards=tuple(self.community_cards),
            pot_size=self.get_current_pot_size(),
            current_bet=self.current_bet,
            min_raise=self.min_raise,
            active_players=sum(1 for p in self.players if p.is_in_hand),
            position=get_position(seat, self.dealer_index, self.num_players),
            big_blind=self.big_blind,
        )

    def process_player_action(self, player: Player, action: ActionType, amount: int = 0) -> None:
        """
        Apply one action for the seat whose turn it is and move on.

        Args:
            player: The acting player
            action: Action to take
            amount: Chips to put in for BET and RAISE

        Raises:
            ValueError: If it is not the player's turn or the action is illegal
        """
        action = ActionType(action)
        if self.current_player is not player or not player.can_act:
            raise ValueError(f"{player.name} cannot act now")

        call_amount = self.call_amount_for(player)
        paid = self._apply_action(player, action, amount, call_amount)
        self.acted_this_round[player.player_id] = True

        for other in self.players:
            if other is not player and other.decision_engine is not None:
                other.decision_engine.observe_action(player.player_id, action, amount)

        self._emit("actionProcessed", {
            "player": player.to_dict(),
            "action": action.value,
            "amount": paid,
        })

        self.validate_game_state()
        self._move_to_next_player()

    def _apply_action(self, player: Player, action: ActionType, amount: int, call_amount: int) -> int:
        """Validate and apply an action. Returns the chips the player put in."""
        if action == ActionType.FOLD:
            player.folded = True
            player.last_action = "fold"
            self._add_action(player, "folds")
            return 0

        elif action == ActionType.CHECK:
            if call_amount > 0:
                raise ValueError(f"Cannot check, must call {call_amount}")
            player.last_action = "check"
            self._add_action(player, "checks")
            return 0

        elif action == ActionType.CALL:
            paid = player.bet(call_amount)
            player.last_action = f"call {paid}"
            self._add_action(player, "calls", paid)
            return paid

        elif action == ActionType.BET:
            if call_amount > 0:
                raise ValueError(f"Cannot bet facing {call_amount} to call, raise instead")
            if amount <= 0:
                raise ValueError("Bet amount must be positive")
            paid = player.bet(amount)
            self._raise_table_bet(player, paid)
            player.last_action = f"bet {paid}"
            self._add_action(player, "bets", paid)
            return paid

        elif action == ActionType.RAISE:
            if amount <= call_amount and amount < player.stack:
                raise ValueError(f"Raise must put in more than the {call_amount} to call")
            paid = player.bet(amount)
            self._raise_table_bet(player, paid - call_amount)
            player.last_action = f"raise to {player.current_bet}"
            self._add_action(player, "raises to", player.current_bet)
            return paid

        elif action == ActionType.ALL_IN:
            paid = player.bet(player.stack)
            if player.current_bet > self.current_bet:
                self.current_bet = player.current_bet
                self._reopen_action(player)
            player.last_action = "all-in"
            self._add_action(player, "goes all-in", paid)
            return paid

        raise ValueError(f"Unknown action: {action}")

    def _raise_table_bet(self, player: Player, raise_size: int) -> None:
        """Make the player's wager the table-high bet if it tops it."""
        if player.current_bet > self.current_bet:
            self.current_bet = player.current_bet
            self.min_raise = raise_size
            self._reopen_action(player)

    def _reopen_action(self, aggressor: Player) -> None:
        """Everyone else must act again after a bet or raise."""
        for player in self.players:
            if player is not aggressor:
                self.acted_this_round[player.player_id] = False

    def _move_to_next_player(self) -> None:
        self.current_player_index = (self.current_player_index + 1) % self.num_players
        self.scheduler.schedule(self.config.action_delay, self._process_next_action)

    def _is_betting_round_complete(self) -> bool:
        """Every seat that can act has acted and matched the table-high bet."""
        actors = [p for p in self.players if p.can_act]

        for player in actors:
            if not self.acted_this_round.get(player.player_id, False):
                return False
            if player.current_bet < self.current_bet:
                return False

        return True

    def _complete_betting_round(self) -> None:
        """Settle the round's wagers into pots and advance the street."""
        self._settle_contributions()
        self.current_bet = 0

        self._emit("bettingRoundComplete", {"pot": self.pot_manager.total})

        in_hand = [p for p in self.players if p.is_in_hand]
        if len(in_hand) <= 1:
            self._handle_single_player_win()
            return

        if self.phase == GamePhase.RIVER:
            self._showdown()
            return

        if sum(1 for p in in_hand if p.can_act) <= 1:
            # Nobody left to bet against: run the board out
            self._deal_remaining_cards()
            self._showdown()
            return

        self._deal_next_street()
        self.scheduler.schedule(self.config.street_delay, self._start_betting_round)

    def _settle_contributions(self) -> None:
        """Rebuild the pot ladder from hand totals and clear round wagers."""
        self.pot_manager.create_pots(
            self.players,
            {p.player_id: p.total_bet for p in self.players},
        )
        for player in self.players:
            player.reset_for_new_round()

    # ------------------------------------------------------------------
    # Streets
    # ------------------------------------------------------------------

    def _deal_next_street(self) -> None:
        dealt = len(self.community_cards)
        if dealt == 0:
            self._deal_flop()
        elif dealt == FLOP_CARDS:
            self._deal_turn()
        elif dealt == FLOP_CARDS + TURN_CARDS:
            self._deal_river()

    def _deal_flop(self) -> None:
        """Deal the flop (3 community cards)."""
        self.deck.burn()
        self.community_cards.extend(self.deck.deal(FLOP_CARDS))
        self.phase = GamePhase.FLOP
        logger.debug(f"Flop: {[str(c) for c in self.community_cards]}")
        self._emit("flopDealt", {"cards": [c.to_dict() for c in self.community_cards]})

    def _deal_turn(self) -> None:
        """Deal the turn (4th community card)."""
        self.deck.burn()
        self.community_cards.extend(self.deck.deal(TURN_CARDS))
        self.phase = GamePhase.TURN
        logger.debug(f"Turn: {self.community_cards[-1]}")
        self._emit("turnDealt", {"card": self.community_cards[-1].to_dict()})

    def _deal_river(self) -> None:
        """Deal the river (5th community card)."""
        self.deck.burn()
        self.community_cards.extend(self.deck.deal(RIVER_CARDS))
        self.phase = GamePhase.RIVER
        logger.debug(f"River: {self.community_cards[-1]}")
        self._emit("riverDealt", {"card": self.community_cards[-1].to_dict()})

    def _deal_remaining_cards(self) -> None:
        """Deal remaining community cards (when going directly to showdown)."""
        while len(self.community_cards) < TOTAL_COMMUNITY_CARDS:
            self._deal_next_street()

    # ------------------------------------------------------------------
    # Settlement
    # ------------------------------------------------------------------

    def _players_from_button(self) -> List[Player]:
        """Players clockwise starting left of the dealer."""
        n = self.num_players
        return [self.players[(self.dealer_index + 1 + i) % n] for i in range(n)]

    def _showdown(self) -> None:
        """Evaluate every live hand and pay out each pot."""
        self.phase = GamePhase.SHOWDOWN
        self._settle_contributions()

        contenders = [p for p in self.players if p.is_in_hand]
        evaluations: Dict[int, HandResult] = {
            p.player_id: evaluate_hand(p.hole_cards + self.community_cards)
            for p in contenders
        }
        evaluations_payload = {pid: hand.to_dict() for pid, hand in evaluations.items()}

        self._emit("showdown", {
            "players": [p.to_dict(hide_cards=False) for p in contenders],
            "hand_evaluations": evaluations_payload,
        })

        payouts = self.pot_manager.distribute_pots(self._players_from_button(), evaluations)
        for payout in payouts:
            player = self.get_player(payout.player_id)
            player.win(payout.amount)
            verb = "wins" if payout.kind == PayoutKind.WIN else "takes back"
            self._add_action(player, verb, payout.amount)

        # Chips now live in stacks
        self.pot_manager.reset()

        self._emit("potsDistributed", {
            "results": [payout.to_dict() for payout in payouts],
            "hand_evaluations": evaluations_payload,
        })

        self.validate_game_state()
        self.scheduler.schedule(self.config.showdown_delay, self._complete_hand)

    def _handle_single_player_win(self) -> None:
        """Award everything to the last player who has not folded."""
        winner = next(p for p in self.players if p.is_in_hand)

        self._settle_contributions()
        pot = self.pot_manager.total
        winner.win(pot)
        self.pot_manager.reset()
        self.waiting_for_human_action = False

        self._add_action(winner, "wins uncontested", pot)
        logger.info(f"{winner.name} wins {pot} uncontested")
        self._emit("singlePlayerWin", {"winner": winner.to_dict(), "pot": pot})

        self.validate_game_state()
        self.scheduler.schedule(self.config.single_win_delay, self._complete_hand)

    def validate_game_state(self) -> bool:
        """
        Check chip conservation and all-in flags.

        A chip mismatch is reported through the ``integrityError`` event;
        a zero-stack player not flagged all-in is corrected in place.

        Returns:
            True if the chip total matched
        """
        total = self.total_chips()
        consistent = total == self.starting_total

        if not consistent:
            message = f"Expected {self.starting_total}, found {total}"
            logger.error(f"Integrity error: chip count mismatch. {message}")
            self._emit("integrityError", {"type": "CHIP_MISMATCH", "message": message})

        for player in self.players:
            if player.stack == 0 and not player.all_in and not player.folded:
                logger.warning(
                    f"{player.name} has 0 stack but is not marked all-in. Correcting."
                )
                player.all_in = True

        return consistent

    # ------------------------------------------------------------------
    # Human actions
    # ------------------------------------------------------------------

    def _pending_human(self) -> Optional[Player]:
        if not self.waiting_for_human_action:
            return None
        player = self.current_player
        if player is None or not player.is_human:
            return None
        return player

    def _submit_human(self, human: Player, action: ActionType, amount: int, message: str) -> ActionResult:
        self.waiting_for_human_action = False
        try:
            self.process_player_action(human, action, amount)
        except ValueError as e:
            self.waiting_for_human_action = True
            logger.warning(f"Rejected human action {action.value}: {e}")
            return ActionResult(False, str(e))
        return ActionResult(True, message, action, amount)

    def human_fold(self) -> ActionResult:
        human = self._pending_human()
        if human is None:
            return ActionResult(False, "Not waiting for your action")
        return self._submit_human(human, ActionType.FOLD, 0, "Folded")

    def human_check(self) -> ActionResult:
        human = self._pending_human()
        if human is None:
            return ActionResult(False, "Not waiting for your action")
        call_amount = self.call_amount_for(human)
        if call_amount > 0:
            return ActionResult(False, f"Cannot check, must call {call_amount}")
        return self._submit_human(human, ActionType.CHECK, 0, "Checked")

    def human_call(self) -> ActionResult:
        human = self._pending_human()
        if human is None:
            return ActionResult(False, "Not waiting for your action")
        call_amount = self.call_amount_for(human)
        if call_amount >= human.stack:
            return self.human_all_in()
        return self._submit_human(human, ActionType.CALL, call_amount, f"Called {call_amount}")

    def human_bet(self, amount: int) -> ActionResult:
        human = self._pending_human()
        if human is None:
            return ActionResult(False, "Not waiting for your action")
        call_amount = self.call_amount_for(human)
        if call_amount > 0:
            return ActionResult(False, f"Cannot bet facing {call_amount} to call, raise instead")
        if amount <= 0:
            return ActionResult(False, "Bet amount must be positive")
        if amount >= human.stack:
            return self.human_all_in()
        return self._submit_human(human, ActionType.BET, amount, f"Bet {amount}")

    def human_raise(self, amount: int) -> ActionResult:
        human = self._pending_human()
        if human is None:
            return ActionResult(False, "Not waiting for your action")
        if amount >= human.stack:
            return self.human_all_in()
        call_amount = self.call_amount_for(human)
        if amount <= call_amount:
            return ActionResult(False, f"Raise must put in more than the {call_amount} to call")
        return self._submit_human(human, ActionType.RAISE, amount, f"Raised {amount}")

    def human_all_in(self) -> ActionResult:
        human = self._pending_human()
        if human is None:
            return ActionResult(False, "Not waiting for your action")
        stack = human.stack
        return self._submit_human(human, ActionType.ALL_IN, stack, f"All-in for {stack}")

    def take_human_action(self, action: ActionType, amount: int = 0) -> ActionResult:
        """Dispatch a human action by type."""
        action = ActionType(action)
        if action == ActionType.FOLD:
            return self.human_fold()
        elif action == ActionType.CHECK:
            return self.human_check()
        elif action == ActionType.CALL:
            return self.human_call()
        elif action == ActionType.BET:
            return self.human_bet(amount)
        elif action == ActionType.RAISE:
            return self.human_raise(amount)
        elif action == ActionType.ALL_IN:
            return self.human_all_in()
        raise ValueError(f"Unknown action: {action}")

    # ------------------------------------------------------------------
    # Collaborator views
    # ------------------------------------------------------------------

    def legal_actions(self, player: Optional[Player] = None) -> List[Dict[str, Any]]:
        """
        Legal actions for the given player (or the player to act).

        BET and RAISE ranges are in chips put in, not raise-to totals.
        """
        if player is None:
            player = self.current_player

        if player is None or not player.can_act or player is not self.current_player:
            return []

        call_amount = self.call_amount_for(player)
        actions: List[Dict[str, Any]] = [{"type": ActionType.FOLD.value}]

        if call_amount == 0:
            actions.append({"type": ActionType.CHECK.value})
            actions.append({
                "type": ActionType.BET.value,
                "min": min(self.big_blind, player.stack),
                "max": player.stack,
            })
        else:
            actions.append({"type": ActionType.CALL.value, "amount": min(call_amount, player.stack)})
            if player.stack > call_amount:
                actions.append({
                    "type": ActionType.RAISE.value,
                    "min": min(call_amount + self.min_raise, player.stack),
                    "max": player.stack,
                })

        actions.append({"type": ActionType.ALL_IN.value, "amount": player.stack})
        return actions

    def get_state(self) -> Dict[str, Any]:
        """Table state as the human seat may see it."""
        current = self.current_player
        human = self.human_player
        return {
            "phase": self.phase.name,
            "hand_number": self.hand_number,
            "pot": self.get_current_pot_size(),
            "pots": self.pot_manager.to_list(),
            "current_bet": self.current_bet,
            "min_raise": self.min_raise,
            "board": [c.to_dict() for c in self.community_cards],
            "dealer_index": self.dealer_index,
            "current_player": current.player_id if current else None,
            "waiting_for_human_action": self.waiting_for_human_action,
            "players": [p.to_dict(hide_cards=not p.is_human) for p in self.players],
            "legal_actions": self.legal_actions(human) if human and self.waiting_for_human_action else [],
        }

    def _add_action(self, player: Player, action: str, amount: Optional[int] = None) -> None:
        """Append to the action log."""
        entry = {
            "player": player.name,
            "action": action,
            "amount": amount,
            "timestamp": time.time(),
        }
        self.action_history.append(entry)
        self._emit("actionLogged", entry)

    def _emit(self, event: str, payload: Dict[str, Any]) -> None:
        logger.debug(f"Event {event}")
        self.event_sink(event, payload)
