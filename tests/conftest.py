"""
Pytest configuration and shared fixtures for pokertable tests.
"""

import random
from collections import deque

import pytest
from pokertable.agents.base import BaseAgent
from pokertable.core.card import Card, Deck, Rank, Suit
from pokertable.core.game import TexasHoldemGame
from pokertable.core.player import Player
from pokertable.core.rules import ActionType, Decision, SeatConfig, TableConfig


class EventRecorder:
    """Event sink that keeps every event and fails on integrity errors."""

    def __init__(self):
        self.events = []

    def __call__(self, event, payload):
        self.events.append((event, payload))
        if event == "integrityError":
            raise AssertionError(f"Integrity error: {payload}")

    @property
    def names(self):
        return [name for name, _ in self.events]

    def of(self, name):
        return [payload for event, payload in self.events if event == name]


class ScriptedAgent(BaseAgent):
    """Plays queued decisions, then checks or calls."""

    def __init__(self, decisions=()):
        self.decisions = deque(Decision(ActionType(a), amount) for a, amount in decisions)

    def decide(self, view, player):
        if self.decisions:
            return self.decisions.popleft()
        if view.current_bet > player.current_bet:
            return Decision(ActionType.CALL)
        return Decision(ActionType.CHECK)


def table_config(bots=2, human=True, **kwargs):
    """Config with an optional human in seat 0 followed by bots."""
    personalities = ["tight_aggressive", "loose_aggressive", "tight_passive",
                     "loose_passive", "adaptive"]
    seats = [SeatConfig("You")] if human else []
    for i in range(bots):
        seats.append(SeatConfig(f"Bot{i + 1}", personalities[i % len(personalities)]))
    return TableConfig(seats=seats, **kwargs)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def make_game(recorder, rng):
    """
    Factory for seated tables on the inline scheduler.

    ``script`` maps seat index to a list of (action, amount) pairs; bots
    without a script check or call. Pass ``script=None`` to keep the
    real decision engines.
    """
    def _make(config=None, script=None, stacks=None):
        game = TexasHoldemGame(config=config or table_config(), event_sink=recorder, rng=rng)
        game.initialize_players()

        if stacks:
            for seat, stack in stacks.items():
                game.players[seat].stack = stack
            game.starting_total = sum(p.stack for p in game.players)

        if script is not None:
            for player in game.players:
                if player.is_bot:
                    player.decision_engine = ScriptedAgent(script.get(player.player_id, ()))
        return game

    return _make


@pytest.fixture
def deck():
    """Create a fresh shuffled deck."""
    return Deck(shuffle=True, rng=random.Random(7))


@pytest.fixture
def unshuffled_deck():
    """Create a fresh unshuffled deck."""
    return Deck(shuffle=False)


@pytest.fixture
def sample_player():
    """Create a sample player with 1000 chips."""
    return Player(player_id=0, name="Test", stack=1000)


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
    ]
