# lanka_travel/routes/websocket/trip.py
"""WebSocket handlers that re-plan the trip whenever its stops change."""

import logging

from lanka_travel.api.services.trip_service import TripService
from .base import BaseWebSocketHandler, NAMESPACE

logger = logging.getLogger(__name__)


class TripHandler(BaseWebSocketHandler):
    """Handles itinerary edits and pushes the recomputed plan."""

    def emit_plan(self):
        self.emit_to_client('trip_plan', TripService.compute_plan())

    def register_handlers(self):
        """Register trip-related event handlers."""

        @self.socketio.on('update_stops', namespace=NAMESPACE)
        def handle_update_stops(data):
            """Replace the itinerary with the stops sent by the client."""
            try:
                stops = TripService.set_stops(self.event_payload(data).get('stops', []))
                self.log_event('update_stops', {'count': len(stops)})
                self.emit_plan()
            except ValueError as exc:
                self.handle_error(exc, 'update_stops')

        @self.socketio.on('reorder_stops', namespace=NAMESPACE)
        def handle_reorder_stops(data):
            """Apply a drag-and-drop reorder."""
            try:
                TripService.reorder_stops(self.event_payload(data).get('order'))
                self.emit_plan()
            except ValueError as exc:
                self.handle_error(exc, 'reorder_stops')

        @self.socketio.on('current_location', namespace=NAMESPACE)
        def handle_current_location(data=None):
            """Take a geolocation report; errors just drop the current leg."""
            try:
                point = TripService.set_current_location(self.event_payload(data))
            except ValueError as exc:
                self.handle_error(exc, 'current_location')
                return
            if point is None:
                logger.info("Planning without current location")
            self.emit_plan()

        @self.socketio.on('get_plan', namespace=NAMESPACE)
        def handle_get_plan(data=None):
            self.emit_plan()
