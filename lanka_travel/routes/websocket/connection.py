# lanka_travel/routes/websocket/connection.py
"""WebSocket connection and disconnection handlers."""

import time
import logging
from flask import request, session

from lanka_travel.api.config import get_planner_config
from .base import BaseWebSocketHandler, NAMESPACE

logger = logging.getLogger(__name__)


class ConnectionHandler(BaseWebSocketHandler):
    """Handles WebSocket connection lifecycle events."""

    def register_handlers(self):
        """Register connection-related event handlers."""

        @self.socketio.on('connect', namespace=NAMESPACE)
        def handle_connect(auth=None):
            """Handle WebSocket connection from browser."""
            self.log_event('connect')

            # Ensure Flask session has an ID
            if '_id' not in session:
                session['_id'] = f'anon_{request.sid}'
                session.modified = True

            self.emit_to_client('connected', {
                'session_id': request.sid,
                'status': 'connected',
                'flask_session_id': session['_id'],
                'planner': get_planner_config(),
            })

        @self.socketio.on('disconnect', namespace=NAMESPACE)
        def handle_disconnect(reason=None):
            """Handle WebSocket disconnection."""
            self.log_event('disconnect', {'reason': reason} if reason else None)

        @self.socketio.on('ping', namespace=NAMESPACE)
        def handle_ping():
            """Handle ping for connection testing."""
            self.emit_to_client('pong', {'timestamp': time.time()})
