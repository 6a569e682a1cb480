"""LLM helper functions for Lanka Travel.

Sends travel questions to OpenAI Chat Completions as the "Lanka Guide"
assistant. Transient API failures are retried with exponential backoff;
the final failure propagates so the caller can fall back to the offline
knowledge base.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from openai import (
    APIConnectionError,
    APITimeoutError,
    InternalServerError,
    OpenAI,
    RateLimitError,
)
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from lanka_travel.api.config import get_chat_config, get_openai_api_key

logger = logging.getLogger(__name__)

_client: OpenAI | None = None

# ---------------------------------------------------------------------------
# OpenAI client initialisation
# ---------------------------------------------------------------------------

def _get_client() -> OpenAI:
    """Return a cached OpenAI client, created on first use."""
    global _client
    if _client is None:
        _client = OpenAI(api_key=get_openai_api_key())
        logger.info("Initialised OpenAI client")
    return _client


# ---------------------------------------------------------------------------
# Prompt construction helpers
# ---------------------------------------------------------------------------

def build_trip_plan_prompt(preferences: Dict[str, Any]) -> str:
    """Build the itinerary request sent by the AI trip planner.

    Raises:
        ValueError: If duration or interests are missing
    """
    duration = preferences.get("duration")
    interests = preferences.get("interests")
    if not duration or not interests:
        raise ValueError("Please provide both duration and interests")

    return (
        f"Create a detailed {duration}-day Sri Lanka travel itinerary for someone "
        f"interested in {interests}.\n\n"
        "Additional details:\n"
        f"- Budget: {preferences.get('budget') or 'moderate'}\n"
        f"- Group size: {preferences.get('group_size') or '2 people'}\n"
        f"- Starting location: {preferences.get('start_location') or 'Colombo'}\n\n"
        "Please provide:\n"
        "1. A day-by-day breakdown with specific locations\n"
        "2. 3-4 activities per day that match their interests\n"
        "3. Practical tips for each day\n"
        "4. Transportation recommendations\n"
        "5. Budget considerations\n\n"
        "Format the response as a structured itinerary that's practical and "
        "actionable for travelers."
    )


def clean_reply(text: str) -> str:
    """Remove markdown emphasis the model sometimes adds despite instructions."""
    text = text.replace("*", "")
    return re.sub(r"\n{3,}", "\n\n", text).strip()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

MAX_CHAT_ATTEMPTS = get_chat_config()["retry_attempts"]

# Errors worth another attempt; a missing key or an empty reply is not
TRANSIENT_ERRORS = (APIConnectionError, APITimeoutError, RateLimitError, InternalServerError)


@retry(
    retry=retry_if_exception_type(TRANSIENT_ERRORS),
    stop=stop_after_attempt(MAX_CHAT_ATTEMPTS),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=8),
    reraise=True,
)
def complete_chat(message: str, config: Optional[Dict[str, Any]] = None) -> str:
    """Return the assistant's reply to a single user message."""
    cfg = config or get_chat_config()

    messages = [
        {"role": "system", "content": cfg["instructions"]},
        {"role": "user", "content": message},
    ]

    logger.debug(
        "Calling OpenAI ChatCompletion: model=%s chars=%d",
        cfg["model"],
        len(message),
    )

    response = _get_client().chat.completions.create(
        model=cfg["model"],
        messages=messages,
        temperature=cfg["temperature"],
        max_tokens=cfg["max_tokens"],
    )

    raw_content = response.choices[0].message.content or ""
    reply = clean_reply(raw_content)
    if not reply:
        raise ValueError("Empty response from chat model")
    return reply


__all__ = ["complete_chat", "build_trip_plan_prompt", "clean_reply"]
