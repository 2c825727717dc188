"""
HTTP API Routes for pokertable.

These routes handle table setup, state queries and human actions.
Live events are pushed over the WebSocket.
"""

from typing import Dict, Any, List
from fastapi import APIRouter, HTTPException

from pokertable.core.game import TexasHoldemGame
from pokertable.core.rules import ActionType, SeatConfig, TableConfig
from pokertable.server.schemas import (
    InitGameRequest, ActionRequest, ActionResultSchema, HistoryEntrySchema,
)
from pokertable.server.websocket import table_manager

router = APIRouter()


def get_game() -> TexasHoldemGame:
    """Get the current table."""
    if table_manager.game is None:
        raise HTTPException(status_code=400, detail="Game not initialized")
    return table_manager.game


@router.post("/init_game")
async def init_game(req: InitGameRequest) -> Dict[str, Any]:
    """
    Seat a new table with the requested settings.

    Omitted settings fall back to the standard six-seat table.
    """
    try:
        kwargs: Dict[str, Any] = {
            "small_blind": req.small_blind,
            "big_blind": req.big_blind,
            "starting_stack": req.starting_stack,
            "auto_next_hand": req.auto_next_hand,
        }
        if req.seats is not None:
            kwargs["seats"] = [SeatConfig(s.name, s.personality) for s in req.seats]
        game = table_manager.create_game(TableConfig(**kwargs), req.realtime, req.seed)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "success": True,
        "message": f"Game initialized with {game.num_players} players",
        "players": [p.to_dict() for p in game.players],
    }


@router.post("/start_hand")
async def start_hand() -> Dict[str, Any]:
    """
    Start a new hand.

    Posts blinds, deals hole cards and plays bot turns up to the human.
    """
    game = get_game()

    if not game.start_new_hand():
        raise HTTPException(status_code=400, detail="Cannot start hand")

    return {
        "success": True,
        "message": f"Hand #{game.hand_number} started",
        "hand_number": game.hand_number,
    }


@router.get("/state")
async def get_state() -> Dict[str, Any]:
    """Get the table state as the human seat sees it."""
    return get_game().get_state()


@router.get("/legal_actions")
async def get_legal_actions() -> Dict[str, Any]:
    """Get legal actions for the human seat."""
    game = get_game()

    if not game.waiting_for_human_action:
        return {"actions": [], "message": "Not waiting for your action"}

    return {"actions": game.legal_actions()}


@router.post("/action", response_model=ActionResultSchema)
async def take_action(req: ActionRequest) -> Dict[str, Any]:
    """
    Take an action for the human seat.

    Rejected actions come back with ``success: false``.
    """
    game = get_game()

    try:
        action_type = ActionType(req.action_type.lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid action type: {req.action_type}")

    return game.take_human_action(action_type, req.amount or 0).to_dict()


@router.get("/history", response_model=List[HistoryEntrySchema])
async def get_history() -> List[Dict[str, Any]]:
    """Action log of the current hand."""
    return get_game().action_history


@router.post("/reset_game")
async def reset_game() -> Dict[str, Any]:
    """
    Reset the table (for development/testing).
    """
    table_manager.reset()
    return {"success": True, "message": "Game reset"}
