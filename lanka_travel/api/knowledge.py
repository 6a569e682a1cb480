"""Offline travel knowledge used when the AI assistant is unavailable."""

from __future__ import annotations

import random
from typing import Optional

TRAVEL_KNOWLEDGE = {
    "destinations": {
        "keywords": ["destination", "place", "visit", "city", "town", "beach", "mountain", "temple", "national park"],
        "responses": [
            "Sri Lanka offers incredible destinations! Some must-visit places include:\n\n"
            "- Cultural Triangle: Sigiriya, Polonnaruwa, Anuradhapura\n"
            "- Beaches: Mirissa, Unawatuna, Arugam Bay\n"
            "- Hill Country: Kandy, Ella, Nuwara Eliya\n"
            "- Wildlife: Yala National Park, Udawalawe\n\n"
            "What type of experience interests you most?",
            "Popular Sri Lankan destinations by region:\n\n"
            "- South Coast: beautiful beaches, whale watching, colonial forts\n"
            "- Central Highlands: tea plantations, scenic train rides, cool weather\n"
            "- Ancient Cities: historical ruins, ancient temples, cultural heritage\n"
            "- East Coast: surfing, pristine beaches, less crowded\n\n"
            "Which region sounds most appealing?",
        ],
    },
    "food": {
        "keywords": ["food", "eat", "restaurant", "cuisine", "rice", "curry", "spicy", "local food"],
        "responses": [
            "Sri Lankan cuisine is amazing! Must-try dishes include:\n\n"
            "- Rice & Curry: the national dish with various curries\n"
            "- Kottu Roti: chopped flatbread stir-fry\n"
            "- Hoppers: bowl-shaped pancakes, try them with egg\n"
            "- Lamprais: Dutch-influenced rice packet\n"
            "- Curd & Treacle: traditional dessert\n\n"
            "Are you looking for specific restaurants or cooking experiences?",
            "Sri Lankan food tips:\n\n"
            "- Spice level: ask for 'less spicy' if you're not used to heat\n"
            "- Coconut: used in most dishes, fresh coconut water is everywhere\n"
            "- Tea: try different Ceylon tea estates\n"
            "- Seafood: coastal areas have amazing fresh fish curries\n\n"
            "What type of flavors do you enjoy?",
        ],
    },
    "transport": {
        "keywords": ["transport", "travel", "train", "bus", "tuk tuk", "taxi", "getting around"],
        "responses": [
            "Getting around Sri Lanka:\n\n"
            "- Trains: scenic routes, especially Kandy to Ella\n"
            "- Buses: cheap but can be crowded\n"
            "- Tuk-tuks: great for short distances, negotiate prices\n"
            "- Private driver: comfortable for longer trips\n"
            "- Ride apps: PickMe works in major cities\n\n"
            "What's your preferred way to travel?",
            "Transport tips for Sri Lanka:\n\n"
            "- Book early: train tickets for popular routes sell out\n"
            "- Negotiate: always agree tuk-tuk prices beforehand\n"
            "- Plan routes: some areas are better connected than others\n"
            "- Pack light: easier for train and bus travel\n\n"
            "Which routes are you planning to take?",
        ],
    },
    "culture": {
        "keywords": ["culture", "tradition", "festival", "temple", "buddhist", "religion", "customs"],
        "responses": [
            "Sri Lankan culture is rich and diverse:\n\n"
            "- Buddhism: majority religion, beautiful temples everywhere\n"
            "- Festivals: Vesak, Kandy Perahera, Sinhala New Year\n"
            "- Dress code: cover shoulders and knees at temples\n"
            "- Arts: traditional dance, drumming, handicrafts\n"
            "- Etiquette: remove shoes before entering homes and temples\n\n"
            "Are you interested in any specific cultural experiences?",
            "Cultural experiences to try:\n\n"
            "- Temple of the Tooth: sacred Buddhist site in Kandy\n"
            "- Cultural shows: traditional dance performances\n"
            "- Handicraft villages: watch artisans at work\n"
            "- Meditation retreats: many temples offer programs\n"
            "- Cooking classes: learn to make authentic curries\n\n"
            "What cultural aspects interest you most?",
        ],
    },
    "weather": {
        "keywords": ["weather", "climate", "season", "rain", "monsoon", "temperature", "when to visit"],
        "responses": [
            "Sri Lanka's weather by season:\n\n"
            "- Dec-Mar: best time, dry and sunny on the west and south\n"
            "- Apr-Jun: southwest monsoon affects west and south coasts\n"
            "- Jun-Sep: good time for the east coast\n"
            "- Oct-Nov: inter-monsoon, short showers\n\n"
            "It is tropical year-round and cooler in the hills. When are you planning to visit?",
            "Weather planning tips:\n\n"
            "- Beach season: west and south coasts Dec-Mar, east coast Jun-Sep\n"
            "- Hill country: can be cool and rainy, bring layers\n"
            "- Monsoon: rain is often brief, don't let it stop you\n"
            "- UV protection: strong sun year-round, use sunscreen\n\n"
            "Which regions are you considering?",
        ],
    },
    "activities": {
        "keywords": ["activity", "adventure", "wildlife", "safari", "surfing", "hiking", "diving", "things to do"],
        "responses": [
            "Amazing activities in Sri Lanka:\n\n"
            "- Wildlife safaris: Yala, Udawalawe, Minneriya\n"
            "- Surfing: Arugam Bay, Mirissa, Hikkaduwa\n"
            "- Hiking: Adam's Peak, Sigiriya Rock, Little Adam's Peak\n"
            "- Whale watching: Mirissa (Nov-Apr)\n"
            "- Diving and snorkeling: Trincomalee, Hikkaduwa\n"
            "- Train journey: the Kandy to Ella scenic route\n\n"
            "What type of adventure interests you?",
            "Adventure planning:\n\n"
            "- Adam's Peak: climb at night for sunrise (Dec-May)\n"
            "- Wildlife: early morning safaris have the best sightings\n"
            "- Water sports: check seasonal conditions for each coast\n"
            "- National parks: book accommodation in advance\n\n"
            "Are there specific activities you'd like to plan?",
        ],
    },
}

GREETING_KEYWORDS = ("hello", "hi", "hey")
THANKS_KEYWORDS = ("thank", "thanks")

GREETING_RESPONSE = (
    "Hello! Welcome to Sri Lanka travel assistance! I can help you with destinations, "
    "food, transport, culture, weather, and activities. What would you like to know?"
)
THANKS_RESPONSE = (
    "You're welcome! I'm here to help make your Sri Lankan adventure amazing. "
    "Feel free to ask me anything else about traveling in Sri Lanka!"
)
DEFAULT_RESPONSE = (
    "I'd love to help you explore Sri Lanka! You can ask me about:\n\n"
    "- Destinations: best places to visit\n"
    "- Food: local cuisine and restaurants\n"
    "- Transport: getting around the island\n"
    "- Culture: traditions and customs\n"
    "- Weather: best times to visit\n"
    "- Activities: adventures and experiences\n\n"
    "What interests you most?"
)


def match_topic(message: str) -> Optional[str]:
    """Return the first knowledge topic whose keywords appear in the message."""
    text = message.lower()
    for topic, data in TRAVEL_KNOWLEDGE.items():
        if any(keyword in text for keyword in data["keywords"]):
            return topic
    return None


def generate_response(message: str, rng: Optional[random.Random] = None) -> str:
    """Answer a travel question from the built-in knowledge base."""
    rng = rng or random
    topic = match_topic(message)
    if topic:
        return rng.choice(TRAVEL_KNOWLEDGE[topic]["responses"])

    text = message.lower()
    if any(word in text for word in GREETING_KEYWORDS):
        return GREETING_RESPONSE
    if any(word in text for word in THANKS_KEYWORDS):
        return THANKS_RESPONSE
    return DEFAULT_RESPONSE


__all__ = ["TRAVEL_KNOWLEDGE", "match_topic", "generate_response"]
