"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field

from pokertable.core.rules import (
    DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND, DEFAULT_STARTING_STACK,
    MIN_PLAYERS, MAX_PLAYERS,
)


# ============= Request Schemas =============

class SeatSchema(BaseModel):
    """A seat in the roster; no personality means the human seat."""
    name: str = Field(min_length=1)
    personality: Optional[str] = Field(
        default=None,
        description="tight_aggressive, loose_aggressive, tight_passive, loose_passive or adaptive",
    )


class InitGameRequest(BaseModel):
    """Request to initialize the table."""
    small_blind: int = Field(gt=0, default=DEFAULT_SMALL_BLIND)
    big_blind: int = Field(gt=0, default=DEFAULT_BIG_BLIND)
    starting_stack: int = Field(gt=0, default=DEFAULT_STARTING_STACK)
    seats: Optional[List[SeatSchema]] = Field(
        default=None, description=f"{MIN_PLAYERS}-{MAX_PLAYERS} seats in clockwise order",
    )
    auto_next_hand: bool = False
    realtime: bool = Field(
        default=True,
        description="Pace bots with delays on the event loop; False resolves bot turns immediately",
    )
    seed: Optional[int] = None


class ActionRequest(BaseModel):
    """Request to take a game action."""
    action_type: str = Field(..., description="Action type: fold, check, call, bet, raise, all-in")
    amount: Optional[int] = Field(default=0, ge=0, description="Chips to put in for bet/raise")


# ============= Response Schemas =============

class ActionResultSchema(BaseModel):
    """Result of an action."""
    success: bool
    message: str
    action_type: Optional[str] = None
    amount: int = 0


class HistoryEntrySchema(BaseModel):
    """One line of the hand's action log."""
    player: str
    action: str
    amount: Optional[int] = None
    timestamp: float


# ============= WebSocket Message Schemas =============

class WSActionMessage(BaseModel):
    """WebSocket action message."""
    type: str = "action"
    action: str  # fold, check, call, bet, raise, all-in
    amount: Optional[int] = 0


class WSEventMessage(BaseModel):
    """Engine event pushed to every connected client."""
    type: str = "event"
    event: str
    data: Dict[str, Any]


class WSErrorMessage(BaseModel):
    """WebSocket error message."""
    type: str = "error"
    message: str
