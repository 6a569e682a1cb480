# lanka_travel/routes/websocket/chat.py
"""WebSocket handler for the travel assistant chat."""

import logging
import time

from lanka_travel.api.services.chat_service import ChatService
from .base import BaseWebSocketHandler, NAMESPACE

logger = logging.getLogger(__name__)


class ChatHandler(BaseWebSocketHandler):
    """Relays chat messages to the assistant."""

    def register_handlers(self):
        """Register chat event handlers."""

        @self.socketio.on('chat_message', namespace=NAMESPACE)
        def handle_chat_message(data):
            try:
                result = ChatService.reply(self.event_payload(data).get('message'))
            except ValueError as exc:
                self.handle_error(exc, 'chat_message')
                return

            result['timestamp'] = time.time()
            self.emit_to_client('chat_response', result)
