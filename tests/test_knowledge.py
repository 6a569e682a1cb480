# tests/test_knowledge.py

import random

import pytest

from lanka_travel.api.knowledge import (
    DEFAULT_RESPONSE,
    GREETING_RESPONSE,
    THANKS_RESPONSE,
    TRAVEL_KNOWLEDGE,
    generate_response,
    match_topic,
)


@pytest.mark.parametrize("message,topic", [
    ("Which BEACH should I visit?", "destinations"),
    ("Where can I eat kottu?", "food"),
    ("Is the train to Ella nice?", "transport"),
    ("Tell me about the Perahera festival", "culture"),
    ("Is it monsoon season in May?", "weather"),
    ("Best safari spots", "activities"),
    ("xyz", None),
])
def test_match_topic(message, topic):
    assert match_topic(message) == topic


def test_topic_response_comes_from_topic():
    reply = generate_response("what food should I try", rng=random.Random(1))
    assert reply in TRAVEL_KNOWLEDGE["food"]["responses"]


def test_greeting_thanks_and_default():
    assert generate_response("Hello there") == GREETING_RESPONSE
    assert generate_response("thanks a lot") == THANKS_RESPONSE
    assert generate_response("xyz") == DEFAULT_RESPONSE
