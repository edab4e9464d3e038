# kinarai/services/recommendation_service.py

import logging
import re
from typing import List, Union

from kinarai.core.errors import ExtractionFailure, UpstreamTimeout
from kinarai.llm.prompts import build_food_prompt, build_restaurant_prompt
from kinarai.models.response_models import Food, Restaurant
from kinarai.services.location_verifier import verify_restaurant_locations
from kinarai.services.response_extractor import extract_records

logger = logging.getLogger(__name__)

# Not the same list as the intent classifier's location keywords.
RESTAURANT_KEYWORDS = re.compile(r"ร้าน|restaurant|place|eatery|dining|cafe|bistro", re.IGNORECASE)


def redirects_to_restaurants(food_type: str) -> bool:
    return bool(RESTAURANT_KEYWORDS.search(food_type or ""))


def strip_restaurant_keywords(text: str) -> str:
    return RESTAURANT_KEYWORDS.sub("", text).strip()


class RecommendationService:
    """
    Prompt -> Gemini -> extract (-> verify) for restaurants and foods.

    `client` is anything with `generate(prompt) -> str`. The service keeps
    no per-request state, so one instance serves every request. Failures
    become an empty list; only UpstreamTimeout is re-raised so the caller
    can report which branch ran out of time.
    """

    def __init__(self, client, verify: bool = True):
        self.client = client
        self.verify = verify

    def get_restaurant_recommendations(self, location: str) -> List[Restaurant]:
        logger.info("Searching for restaurants in %s", location)
        try:
            text = self.client.generate(build_restaurant_prompt(location))
            restaurants = extract_records(text, Restaurant)
            logger.info("Found %d restaurants", len(restaurants))

            if self.verify:
                restaurants = verify_restaurant_locations(self.client, restaurants, location)
                logger.info("After verification: %d restaurants", len(restaurants))

            return restaurants

        except UpstreamTimeout:
            raise
        except ExtractionFailure as e:
            logger.warning("Failed to extract restaurants (%s). Raw output:\n%s", e, e.raw_text)
            return []
        except Exception:
            logger.exception("Restaurant recommendation failed for %s", location)
            return []

    def get_food_recommendations(self, food_type: str) -> Union[List[Food], List[Restaurant]]:
        logger.info("Searching for %s foods", food_type)

        if redirects_to_restaurants(food_type):
            location = strip_restaurant_keywords(food_type)
            logger.info("Detected restaurant query, redirecting to restaurants in %s", location)
            return self.get_restaurant_recommendations(location)

        try:
            text = self.client.generate(build_food_prompt(food_type))
            foods = extract_records(text, Food)
            logger.info("Found %d foods", len(foods))
            return foods

        except UpstreamTimeout:
            raise
        except ExtractionFailure as e:
            logger.warning("Failed to extract foods (%s). Raw output:\n%s", e, e.raw_text)
            return []
        except Exception:
            logger.exception("Food recommendation failed for %s", food_type)
            return []
