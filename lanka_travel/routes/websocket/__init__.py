# lanka_travel/routes/websocket/__init__.py
"""WebSocket route handlers initialization."""

import logging

from .connection import ConnectionHandler
from .trip import TripHandler
from .chat import ChatHandler
from .base import NAMESPACE

logger = logging.getLogger(__name__)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers with SocketIO.

    Args:
        socketio: Flask-SocketIO instance
    """
    logger.info("Registering WebSocket handlers...")

    handlers = (
        ConnectionHandler(socketio, NAMESPACE),
        TripHandler(socketio, NAMESPACE),
        ChatHandler(socketio, NAMESPACE),
    )

    try:
        for handler in handlers:
            logger.info(f"Registering {type(handler).__name__} for namespace: {NAMESPACE}")
            handler.register_handlers()

        logger.info("WebSocket handlers registered successfully")

    except Exception as e:
        logger.error(f"Failed to register WebSocket handlers: {e}")
        logger.exception("WebSocket registration error:")
        raise


__all__ = ['register_websocket_handlers', 'NAMESPACE']
