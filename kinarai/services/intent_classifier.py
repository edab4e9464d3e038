# kinarai/services/intent_classifier.py

"""
Decides whether a chat message asks for restaurants in a place or for
dishes of a food type.

The checks run in a fixed order and the short-query threshold is part of
the contract:

1. location keywords  -> LocationQuery (captured place, or the whole text)
2. food-type keywords -> FoodTypeQuery (whole text)
3. neither            -> <= 3 words is a food type, longer is a location

Both keyword patterns can match the same text; the location check wins.
Keywords are matched as plain substrings, case-insensitively.
"""

import logging
import re
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

LOCATION_PATTERN = re.compile(r"restaurants?|places?|eat|dining|food near|in\s+[a-z\s]+", re.IGNORECASE)
FOOD_TYPE_PATTERN = re.compile(r"food$|foods?|cuisine|dish|meal|recipe|menu|eat", re.IGNORECASE)
LOCATION_CAPTURE = re.compile(r"(?:in|near|at)\s+([a-z\s,]+)(?:\s|$)", re.IGNORECASE)

SHORT_QUERY_MAX_WORDS = 3


@dataclass(frozen=True)
class LocationQuery:
    location: str


@dataclass(frozen=True)
class FoodTypeQuery:
    food_type: str


ClassifiedIntent = Union[LocationQuery, FoodTypeQuery]


def extract_location(text: str) -> str:
    match = LOCATION_CAPTURE.search(text)
    if match and match.group(1):
        return match.group(1).strip()
    return text


def classify(text: str) -> ClassifiedIntent:
    text = text or ""

    if LOCATION_PATTERN.search(text):
        intent = LocationQuery(extract_location(text))
        logger.info("Detected location query: %s", intent.location)
        return intent

    if FOOD_TYPE_PATTERN.search(text):
        logger.info("Detected food type query: %s", text)
        return FoodTypeQuery(text)

    words = re.split(r"\s+", text)
    if len(words) <= SHORT_QUERY_MAX_WORDS:
        logger.info("Assuming short query is a food type: %s", text)
        return FoodTypeQuery(text)

    logger.info("Assuming longer query is a location: %s", text)
    return LocationQuery(text)
