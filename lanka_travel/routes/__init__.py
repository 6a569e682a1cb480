# lanka_travel/routes/__init__.py
from lanka_travel.routes.travel import create_travel_blueprint
from lanka_travel.routes.websocket import register_websocket_handlers, NAMESPACE

__all__ = ['create_travel_blueprint', 'register_websocket_handlers', 'NAMESPACE']
