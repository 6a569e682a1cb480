"""
Lanka Travel – main application entry point

* Flask app + Socket.IO serving the trip planner API under `/travel`.
* Socket.IO runs in threading mode; no eventlet/gevent required.
* The Socket.IO namespace is `/travel/ws`; trip edits sent there are answered
  with a freshly computed `trip_plan` event.
"""

import os
import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from dotenv import load_dotenv

from lanka_travel.api.config import get_port, get_websocket_config, validate_chat_config
from lanka_travel.routes import create_travel_blueprint, register_websocket_handlers

# --------------------------------------------------------------------------- #
# Environment & logging
# --------------------------------------------------------------------------- #
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(test_config=None):
    """Build the Flask app and its Socket.IO server.

    Args:
        test_config: Optional mapping applied on top of the default config

    Returns:
        Tuple of (app, socketio)
    """
    # ----------------------------------------------------------------------- #
    # Flask initialisation
    # ----------------------------------------------------------------------- #
    app = Flask(__name__)

    flask_secret_key = os.getenv("FLASK_SECRET_KEY") or os.urandom(32).hex()
    if "FLASK_SECRET_KEY" not in os.environ:
        logger.warning("No FLASK_SECRET_KEY found. Generated a temporary key.")
    app.secret_key = flask_secret_key

    app.config.update(
        SESSION_COOKIE_SECURE=False,
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
        PERMANENT_SESSION_LIFETIME=86400,
    )
    if test_config:
        app.config.update(test_config)

    # Leg maps are keyed in itinerary order
    app.json.sort_keys = False

    try:
        validate_chat_config()
    except ValueError as e:
        logger.warning(f"Travel assistant will answer from the offline knowledge base: {e}")

    # CORS for local dev / cross‑origin front‑end requests
    CORS(app, origins="*", supports_credentials=True)

    # ----------------------------------------------------------------------- #
    # Socket.IO
    # ----------------------------------------------------------------------- #
    ws_config = get_websocket_config()
    socketio = SocketIO(
        app,
        cors_allowed_origins=ws_config["cors_allowed_origins"],
        async_mode="threading",
        ping_interval=ws_config["ping_interval"],
        ping_timeout=ws_config["ping_timeout"],
        max_http_buffer_size=ws_config["max_message_size"],
        logger=False,
        engineio_logger=False,
    )
    logger.info("Socket.IO initialised (async_mode=threading)")

    # ----------------------------------------------------------------------- #
    # Blueprints & WebSocket handlers
    # ----------------------------------------------------------------------- #
    app.register_blueprint(create_travel_blueprint())
    register_websocket_handlers(socketio)

    @app.route("/debug")
    def debug():
        """Simple JSON health endpoint."""
        return {
            "status": "ok",
            "socketio_initialized": True,
            "endpoints": {
                "plan": "/travel/api/plan",
                "trip": "/travel/api/trip",
                "chat": "/travel/api/chat",
                "websocket_namespace": "/travel/ws",
            },
        }

    return app, socketio


app, socketio = create_app()

# --------------------------------------------------------------------------- #
# Local development runner ( `python main.py` )
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    port = get_port()
    logger.info("Starting travel app on http://localhost:%d", port)
    socketio.run(app, host="0.0.0.0", port=port, debug=False, allow_unsafe_werkzeug=True)

__all__ = ["app", "socketio", "create_app"]
