# lanka_travel/routes/websocket/base.py
"""Shared plumbing for the trip planner's Socket.IO handlers."""

import logging
from flask import request
from flask_socketio import emit

logger = logging.getLogger(__name__)

NAMESPACE = "/travel/ws"


class BaseWebSocketHandler:
    """Emits replies and reports errors to the client that sent an event."""

    def __init__(self, socketio, namespace=NAMESPACE):
        self.socketio = socketio
        self.namespace = namespace

    def emit_to_client(self, event, data):
        emit(event, data, namespace=self.namespace)

    @staticmethod
    def event_payload(data):
        """Return the event's payload as a dict; a missing payload is empty.

        Raises:
            ValueError: If the client sent something other than an object
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Event payload must be an object")
        return data

    def log_event(self, event_name, data=None):
        if data:
            logger.info(f"[WS] {event_name} - Client: {request.sid}, Data: {data}")
        else:
            logger.info(f"[WS] {event_name} - Client: {request.sid}")

    def handle_error(self, error, event_name=""):
        """Log a failed event and tell the client which event failed."""
        logger.error(f"[WS] Error in {event_name} - Client: {request.sid}, Error: {error}")
        self.emit_to_client('error', {'message': str(error), 'event': event_name})
