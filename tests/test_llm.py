# tests/test_llm.py

from unittest.mock import MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError

from lanka_travel.api import llm


def _response(content):
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


def test_complete_chat_sends_guide_instructions():
    client = MagicMock()
    client.chat.completions.create.return_value = _response("Visit **Sigiriya** early.")

    with patch.object(llm, "_get_client", return_value=client):
        reply = llm.complete_chat("Where should I go?")

    assert reply == "Visit Sigiriya early."
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["messages"][0]["role"] == "system"
    assert "Lanka Guide" in kwargs["messages"][0]["content"]
    assert kwargs["messages"][1] == {"role": "user", "content": "Where should I go?"}


def test_complete_chat_retries_transient_failures():
    client = MagicMock()
    client.chat.completions.create.side_effect = [
        APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")),
        _response("Try Ella."),
    ]

    with patch.object(llm, "_get_client", return_value=client):
        assert llm.complete_chat("hiking?") == "Try Ella."
    assert client.chat.completions.create.call_count == 2


def test_complete_chat_does_not_retry_missing_key():
    get_client = MagicMock(side_effect=ValueError("OPENAI_API_KEY not set"))

    with patch.object(llm, "_get_client", get_client):
        with pytest.raises(ValueError):
            llm.complete_chat("hello")
    assert get_client.call_count == 1


def test_complete_chat_does_not_retry_empty_reply():
    client = MagicMock()
    client.chat.completions.create.return_value = _response("")

    with patch.object(llm, "_get_client", return_value=client):
        with pytest.raises(ValueError):
            llm.complete_chat("hello")
    assert client.chat.completions.create.call_count == 1


def test_clean_reply():
    assert llm.clean_reply("*Hi*\n\n\n\nthere  ") == "Hi\n\nthere"


def test_trip_plan_prompt_defaults():
    prompt = llm.build_trip_plan_prompt({"duration": 5, "interests": "wildlife"})
    assert "5-day Sri Lanka travel itinerary" in prompt
    assert "interested in wildlife" in prompt
    assert "- Budget: moderate" in prompt
    assert "- Group size: 2 people" in prompt
    assert "- Starting location: Colombo" in prompt


def test_trip_plan_prompt_requires_duration_and_interests():
    with pytest.raises(ValueError):
        llm.build_trip_plan_prompt({"duration": 3})
