# lanka_travel/api/services/chat_service.py
"""Service layer for the travel assistant chat."""

import logging
from typing import Any, Dict

from openai import OpenAIError

from lanka_travel.api.knowledge import generate_response
from lanka_travel.api.llm import build_trip_plan_prompt, complete_chat

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4000

SOURCE_AI = "ai"
SOURCE_KNOWLEDGE_BASE = "knowledge_base"


class ChatService:
    """Answers travel questions, falling back to built-in knowledge."""

    @staticmethod
    def validate_message(message: Any) -> str:
        """Check a chat message and return it stripped.

        Raises:
            ValueError: If the message is empty, not text or too long
        """
        if not isinstance(message, str) or not message.strip():
            raise ValueError("Message must be a non-empty string")
        if len(message) > MAX_MESSAGE_LENGTH:
            raise ValueError(f"Message must be at most {MAX_MESSAGE_LENGTH} characters")
        return message.strip()

    @staticmethod
    def reply(message: Any) -> Dict[str, str]:
        """Answer a user message.

        Args:
            message: The user's question

        Returns:
            Dictionary with the response text and where it came from

        Raises:
            ValueError: If the message is invalid
        """
        text = ChatService.validate_message(message)
        return ChatService._answer(text, fallback_to=text)

    @staticmethod
    def plan_trip(preferences: Dict[str, Any]) -> Dict[str, str]:
        """Ask the assistant for a day-by-day itinerary.

        Raises:
            ValueError: If duration or interests are missing
        """
        if not isinstance(preferences, dict):
            raise ValueError("Preferences must be an object")
        prompt = build_trip_plan_prompt(preferences)
        return ChatService._answer(prompt, fallback_to=str(preferences.get("interests")))

    @staticmethod
    def _answer(prompt: str, fallback_to: str) -> Dict[str, str]:
        try:
            return {"response": complete_chat(prompt), "source": SOURCE_AI}
        except (OpenAIError, ValueError) as e:
            logger.warning(f"AI assistant unavailable, using knowledge base: {e}")
            return {"response": generate_response(fallback_to), "source": SOURCE_KNOWLEDGE_BASE}


__all__ = ['ChatService']
