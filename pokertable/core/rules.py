"""
Texas Hold'em Rules, Constants and Table Configuration.

Seat arithmetic used by the table:

1. Blinds: the small blind sits one seat after the dealer, the big blind
   two seats after (modulo the number of seated players).

2. First to act: three seats after the dealer pre-flop, one seat after
   the dealer on every later street. Seats that cannot act are skipped
   when the turn reaches them.

3. Position: seats at most two places after the dealer are early, at
   most four are middle, the rest are late. Bots loosen up in late
   position.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class GamePhase(Enum):
    """Phases of a Texas Hold'em hand."""
    WAITING = auto()        # Table created, no hand dealt yet
    PRE_FLOP = auto()       # After hole cards dealt, before flop
    FLOP = auto()           # After 3 community cards
    TURN = auto()           # After 4th community card
    RIVER = auto()          # After 5th community card
    SHOWDOWN = auto()       # Determine winner
    HAND_COMPLETE = auto()  # Hand is complete
    GAME_OVER = auto()      # Fewer than 2 players with chips


class ActionType(str, Enum):
    """Possible player actions."""
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    BET = "bet"
    RAISE = "raise"
    ALL_IN = "all-in"


@dataclass(frozen=True)
class Decision:
    """An action chosen by a player or bot."""
    action: ActionType
    amount: int = 0


class Position(Enum):
    """Coarse table position relative to the dealer button."""
    EARLY = "early"
    MIDDLE = "middle"
    LATE = "late"


# Default game settings
DEFAULT_SMALL_BLIND = 5
DEFAULT_BIG_BLIND = 10
DEFAULT_STARTING_STACK = 1000
MIN_PLAYERS = 2
MAX_PLAYERS = 10

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5


@dataclass
class SeatConfig:
    """A seat at the table; ``personality`` is None for the human seat."""
    name: str
    personality: Optional[str] = None

    @property
    def is_human(self) -> bool:
        return self.personality is None


DEFAULT_SEATS = [
    ("You", None),
    ("Sarah", "tight_aggressive"),
    ("Mike", "loose_aggressive"),
    ("Emma", "tight_passive"),
    ("Jake", "loose_passive"),
    ("Alex", "adaptive"),
]


def _default_seats() -> List[SeatConfig]:
    return [SeatConfig(name, personality) for name, personality in DEFAULT_SEATS]


@dataclass
class TableConfig:
    """
    Table settings.

    Attributes:
        small_blind: Small blind amount
        big_blind: Big blind amount
        starting_stack: Chips each seat starts with
        seats: Seat roster in clockwise order
        bot_think_delay: Pause before a bot acts (seconds)
        action_delay: Pause between consecutive actions
        street_delay: Pause after dealing a street
        showdown_delay: Pause after pots are paid at showdown
        single_win_delay: Pause after an uncontested pot is awarded
        next_hand_delay: Pause before the next hand is dealt
        auto_next_hand: Deal the next hand automatically when one completes
    """
    small_blind: int = DEFAULT_SMALL_BLIND
    big_blind: int = DEFAULT_BIG_BLIND
    starting_stack: int = DEFAULT_STARTING_STACK
    seats: List[SeatConfig] = field(default_factory=_default_seats)
    bot_think_delay: float = 0.8
    action_delay: float = 0.1
    street_delay: float = 1.0
    showdown_delay: float = 3.0
    single_win_delay: float = 2.0
    next_hand_delay: float = 2.0
    auto_next_hand: bool = False

    def __post_init__(self):
        if not MIN_PLAYERS <= len(self.seats) <= MAX_PLAYERS:
            raise ValueError(f"Number of seats must be {MIN_PLAYERS}-{MAX_PLAYERS}")
        if self.small_blind <= 0 or self.big_blind <= 0:
            raise ValueError("Blinds must be positive")
        if self.small_blind > self.big_blind:
            raise ValueError("Small blind cannot exceed big blind")
        if self.starting_stack <= 0:
            raise ValueError("Starting stack must be positive")
        if sum(1 for seat in self.seats if seat.is_human) > 1:
            raise ValueError("At most one human seat is supported")

    @classmethod
    def default(cls) -> "TableConfig":
        """The standard table: one human against five bots."""
        return cls()

    @property
    def total_chips(self) -> int:
        return self.starting_stack * len(self.seats)


def get_blind_positions(num_players: int, dealer_position: int) -> Tuple[int, int]:
    """
    Calculate small blind and big blind positions.

    Returns:
        Tuple of (small_blind_position, big_blind_position)
    """
    if num_players < MIN_PLAYERS:
        raise ValueError("Need at least 2 players")
    return (dealer_position + 1) % num_players, (dealer_position + 2) % num_players


def get_first_to_act_preflop(num_players: int, dealer_position: int) -> int:
    """First seat to act pre-flop: three after the dealer."""
    return (dealer_position + 3) % num_players


def get_first_to_act_postflop(num_players: int, dealer_position: int) -> int:
    """First seat to act on the flop, turn and river: left of the dealer."""
    return (dealer_position + 1) % num_players


def get_position(seat_index: int, dealer_index: int, num_players: int) -> Position:
    """Classify a seat as early, middle or late by distance from the dealer."""
    from_dealer = (seat_index - dealer_index + num_players) % num_players
    if from_dealer <= 2:
        return Position.EARLY
    if from_dealer <= 4:
        return Position.MIDDLE
    return Position.LATE
