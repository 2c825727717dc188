"""
WebSocket handling for real-time table communication.

This module provides:
- ConnectionHub: Pushes every engine event to the connected clients
- TableManager: Owns the single table, its scheduler and its hub
- WebSocket endpoint: Handles client connections and human actions
"""

from __future__ import annotations
from typing import Dict, List, Optional, Any
import asyncio
import logging
import random

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from pokertable.core.events import AsyncioScheduler, InlineScheduler
from pokertable.core.game import TexasHoldemGame
from pokertable.core.rules import ActionType, TableConfig
from pokertable.server.schemas import WSActionMessage, WSErrorMessage, WSEventMessage


logger = logging.getLogger(__name__)


class ConnectionHub:
    """
    Fan-out of engine events to WebSocket clients.

    The hub is the table's event sink: the engine calls it synchronously
    and the messages are queued for a single sender task on the running
    event loop, so clients receive events in the order they were emitted.
    """

    def __init__(self):
        self.connections: List[WebSocket] = []
        self._queue: Optional[asyncio.Queue] = None
        self._sender: Optional[asyncio.Task] = None

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.connections.append(websocket)
        logger.info(f"Client connected ({len(self.connections)} total)")

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.connections:
            self.connections.remove(websocket)
            logger.info(f"Client disconnected ({len(self.connections)} total)")

    def __call__(self, event: str, payload: Dict[str, Any]) -> None:
        if not self.connections:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(f"No running loop, dropping event {event}")
            return
        message = WSEventMessage(event=event, data=payload).model_dump()
        self._sender_queue(loop).put_nowait(message)

    def _sender_queue(self, loop: asyncio.AbstractEventLoop) -> asyncio.Queue:
        """The queue drained by this loop's sender task, started on demand."""
        if self._sender is None or self._sender.done() or self._sender.get_loop() is not loop:
            self._queue = asyncio.Queue()
            self._sender = loop.create_task(self._drain(self._queue))
        return self._queue

    async def _drain(self, queue: asyncio.Queue) -> None:
        while True:
            message = await queue.get()
            await self.broadcast(message)

    def stop(self) -> None:
        """Cancel the sender task; events still queued are dropped."""
        sender = self._sender
        if sender is not None and not sender.done() and not sender.get_loop().is_closed():
            sender.cancel()
        self._sender = None
        self._queue = None

    async def broadcast(self, message: Dict[str, Any]) -> None:
        """Send a message to every connected client."""
        for websocket in list(self.connections):
            try:
                await websocket.send_json(message)
            except Exception as e:
                logger.error(f"Error sending to client: {e}")
                self.disconnect(websocket)


class TableManager:
    """
    Owns the single table served by this process.

    Usage:
        manager = TableManager()
        game = manager.create_game(TableConfig.default())
        game.start_new_hand()
        result = manager.take_action("call")
    """

    def __init__(self):
        self.hub = ConnectionHub()
        self.game: Optional[TexasHoldemGame] = None

    def create_game(
        self,
        config: Optional[TableConfig] = None,
        realtime: bool = True,
        seed: Optional[int] = None,
    ) -> TexasHoldemGame:
        """
        Seat a new table, replacing any existing one.

        Args:
            config: Table settings (defaults to the six-seat table)
            realtime: Run continuations on the event loop with the
                configured delays; otherwise resolve them immediately
            seed: Seed for the deck and the bots
        """
        self._stop_current()
        scheduler = AsyncioScheduler() if realtime else InlineScheduler()
        game = TexasHoldemGame(
            config=config,
            event_sink=self.hub,
            scheduler=scheduler,
            rng=random.Random(seed),
        )
        game.initialize_players()
        self.game = game
        logger.info(f"Table created with {game.num_players} seats (realtime={realtime})")
        return game

    def reset(self) -> None:
        self._stop_current()
        self.game = None

    def _stop_current(self) -> None:
        """Cancel the current table's pending continuations."""
        if self.game is not None:
            self.game.scheduler.cancel_all()
            logger.info(f"Stopped table at hand #{self.game.hand_number}")

    def take_action(self, action: str, amount: int = 0) -> Dict[str, Any]:
        """Apply a human action by name; returns an ActionResult dict."""
        if self.game is None:
            return {"success": False, "message": "Game not initialized"}
        try:
            action_type = ActionType(action.lower())
        except ValueError:
            return {"success": False, "message": f"Invalid action: {action}"}
        return self.game.take_human_action(action_type, amount or 0).to_dict()


# Global table manager instance
table_manager = TableManager()


async def handle_message(manager: TableManager, message: Dict[str, Any]) -> Dict[str, Any]:
    """
    Handle a message from a client.

    Args:
        manager: The table manager
        message: The message dict with 'type' and optional data

    Returns:
        Response dict
    """
    msg_type = message.get("type", "")
    game = manager.game

    if game is None:
        return WSErrorMessage(message="Game not initialized").model_dump()

    if msg_type == "action":
        try:
            action = WSActionMessage.model_validate(message)
        except ValidationError as e:
            return WSErrorMessage(message=f"Invalid action message: {e}").model_dump()
        result = manager.take_action(action.action, action.amount or 0)
        return {"type": "action_result", **result}
    elif msg_type == "start_hand":
        if not game.start_new_hand():
            return WSErrorMessage(message="Cannot start hand").model_dump()
        return {"type": "hand_started", "hand_number": game.hand_number}
    elif msg_type == "get_state":
        return {"type": "state", **game.get_state()}
    else:
        return WSErrorMessage(message=f"Unknown message type: {msg_type}").model_dump()


async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for table communication.

    Protocol:
    1. Client connects; the server sends the current state if a table exists
    2. Every engine event is pushed as {"type": "event", "event": ..., "data": ...}
    3. Client sends {"type": "action", "action": "call", "amount": 0},
       {"type": "start_hand"} or {"type": "get_state"}
    """
    hub = table_manager.hub
    await hub.connect(websocket)

    try:
        if table_manager.game is not None:
            await websocket.send_json({"type": "state", **table_manager.game.get_state()})

        # Message loop
        while True:
            message = await websocket.receive_json()
            response = await handle_message(table_manager, message)
            await websocket.send_json(response)

    except WebSocketDisconnect:
        logger.info("WebSocket disconnected")
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
    finally:
        hub.disconnect(websocket)
        if not hub.connections:
            hub.stop()
