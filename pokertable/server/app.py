"""
FastAPI Application Entry Point for pokertable.

This module creates and configures the FastAPI application with:
- HTTP routes for table management and human actions
- WebSocket endpoint for live table events
- CORS middleware for development
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokertable.server.routes import router
from pokertable.server.websocket import websocket_endpoint

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="pokertable",
        description="No-Limit Texas Hold'em table against bot opponents",
        version="0.1.0",
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.websocket("/ws")(websocket_endpoint)

    logger.info("pokertable app created")
    return app


# Create the application instance
app = create_app()
