import json

import pytest

from main import create_app
from kinarai.services.recommendation_service import RecommendationService


class FakeClient:
    """Stands in for GeminiClient; answers prompts from a queue or a callable."""

    def __init__(self, replies=None, handler=None):
        self.replies = list(replies or [])
        self.handler = handler
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.handler is not None:
            return self.handler(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def make_restaurants(n, start=1):
    return [
        {
            "id": f"rest-{i}",
            "name": f"Restaurant {i}",
            "cuisine": "Thai",
            "address": f"{i} Sukhumvit Rd, Bangkok",
            "rating": 4.5,
            "priceRange": "$$",
            "description": "Good food.",
            "imageUrl": None,
        }
        for i in range(start, start + n)
    ]


def make_foods(n):
    return [
        {
            "id": f"food-{i}",
            "name": f"Dish {i}",
            "cuisine": "Italian",
            "description": "Tasty.",
            "ingredients": ["flour", "egg", "salt", "oil", "water"],
        }
        for i in range(1, n + 1)
    ]


def as_json(items):
    return json.dumps(items, ensure_ascii=False)


def is_verification(prompt):
    return "verify which of these restaurants" in prompt


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def make_app():
    def _make(client, verify=True):
        app = create_app(service=RecommendationService(client, verify=verify))
        app.config["TESTING"] = True
        return app
    return _make
