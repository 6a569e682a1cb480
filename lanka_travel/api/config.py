# api/config.py
"""Configuration management for the travel planner API."""
import os
from dotenv import load_dotenv

load_dotenv()


def get_openai_api_key():
    """Get OpenAI API key from environment."""
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OPENAI_API_KEY not set")
    return api_key


def get_google_maps_config():
    """Get Google Maps configuration."""
    return {
        "api_key": os.getenv("GOOGLE_MAPS_API_KEY", ""),
        "client_id": os.getenv("maps_client_id", ""),
    }


def get_port():
    """Get port configuration."""
    return int(os.getenv("PORT", 5000))


def get_chat_config():
    """Get travel assistant chat configuration."""
    return {
        "model": os.getenv("OPENAI_CHAT_MODEL", "gpt-4.1"),
        "temperature": float(os.getenv("CHAT_TEMPERATURE", "0.7")),
        "max_tokens": int(os.getenv("CHAT_MAX_TOKENS", "1000")),
        "retry_attempts": int(os.getenv("CHAT_RETRY_ATTEMPTS", "3")),

        # Instructions for the assistant
        "instructions": """You are "Lanka Guide", an expert Sri Lankan travel assistant with comprehensive knowledge of Sri Lanka's destinations, culture, cuisine, transportation, accommodations, activities, and local experiences. You are passionate, knowledgeable, and provide practical advice to help travelers make the most of their Sri Lankan adventure.

    FORMATTING RULES:
    - Never use asterisks (*) for emphasis or formatting
    - Use clear, natural language without markdown formatting
    - Write in a conversational, friendly tone
    - Use bullet points with dashes (-) only when listing multiple items

    KNOWLEDGE AREAS:
    - Historical and cultural sites (Sigiriya, Polonnaruwa, Kandy, Galle Fort)
    - Natural attractions (Yala National Park, Horton Plains, Adam's Peak, beaches)
    - Local cuisine and where to find the best food
    - Transportation options (trains, buses, tuk-tuks, private drivers)
    - Cultural etiquette, weather patterns and best travel times
    - Adventure activities, festivals and events

    Always give specific, actionable advice with location names and approximate costs when relevant. If you don't know something specific, say so and offer related helpful information."""
    }


def get_planner_config():
    """Get itinerary planner configuration shared with clients."""
    return {
        # Distance at which a location counts as visited (km)
        "unlock_radius_km": float(os.getenv("UNLOCK_RADIUS_KM", "0.5")),
        # Hint for the browser's geolocation request
        "geolocation_timeout_ms": int(os.getenv("GEOLOCATION_TIMEOUT_MS", "10000")),
        "geolocation_high_accuracy": os.getenv("GEOLOCATION_HIGH_ACCURACY", "true").lower() == "true",
    }


def get_websocket_config():
    """Get WebSocket configuration."""
    return {
        "max_message_size": int(os.getenv("WEBSOCKET_MAX_MESSAGE_SIZE", "1048576")),  # 1MB
        "ping_interval": int(os.getenv("WEBSOCKET_PING_INTERVAL", "25")),
        "ping_timeout": int(os.getenv("WEBSOCKET_PING_TIMEOUT", "60")),
        "cors_allowed_origins": _origins(os.getenv("WEBSOCKET_CORS_ORIGINS", "*")),
    }


def _origins(value):
    """A lone "*" allows every origin; anything else is a comma-separated list."""
    return "*" if value.strip() == "*" else [origin.strip() for origin in value.split(",")]


def validate_chat_config():
    """Validate chat configuration is properly set."""
    api_key = get_openai_api_key()
    chat_config = get_chat_config()

    # Check if API key looks valid
    if not api_key.startswith("sk-"):
        raise ValueError("OpenAI API key appears invalid (should start with 'sk-')")

    if not 0 <= chat_config["temperature"] <= 2:
        raise ValueError("CHAT_TEMPERATURE must be between 0 and 2")

    if chat_config["retry_attempts"] < 1:
        raise ValueError("CHAT_RETRY_ATTEMPTS must be at least 1")

    return True
