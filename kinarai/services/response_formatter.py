# kinarai/services/response_formatter.py

"""
response_formatter.py
Turns a recommendation response into the assistant's chat reply.
Restaurants take precedence over foods, then errors, then the
"nothing found" fallback.
"""

from typing import Optional

from kinarai.models.response_models import RecommendResponse

NO_RESULTS_MESSAGE = "Sorry, I couldn't find any results. Please try a different query."


def _restaurant_reply(count: int, location: Optional[str]) -> str:
    where = f"in {location} " if location else ""
    return f"I found {count} restaurants {where}for you. Check out the cards below!"


def _food_reply(count: int, food_type: Optional[str]) -> str:
    kind = f"{food_type} " if food_type else ""
    return f"I found {count} {kind}food options for you. Check out the cards below!"


def format_assistant_reply(
    response: RecommendResponse,
    location: Optional[str] = None,
    food_type: Optional[str] = None,
) -> str:
    if response.restaurants:
        return _restaurant_reply(len(response.restaurants), location)

    if response.foods:
        return _food_reply(len(response.foods), food_type)

    if response.error:
        return f"Sorry, I encountered an error: {response.error}"

    return NO_RESULTS_MESSAGE
