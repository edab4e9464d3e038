# kinarai/services/dispatcher.py

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from typing import List, Optional

from kinarai.core.errors import UpstreamTimeout
from kinarai.models.response_models import RecommendResponse, Restaurant
from kinarai.services.recommendation_service import redirects_to_restaurants

logger = logging.getLogger(__name__)

RESTAURANT_ID_PREFIX = "rest-"

BRANCH_LABELS = {
    "restaurants": "Restaurant",
    "foods": "Food",
}


def merge_restaurants(existing: List[Restaurant], extra: List[Restaurant]) -> List[Restaurant]:
    """
    Append `extra` to `existing`, renumbering any restaurant whose id is
    already taken. Both lists come from separate model calls and are each
    numbered from rest-1, but ids must stay unique within one response.
    """
    merged = list(existing)
    taken = {r.id for r in merged}
    incoming = {r.id for r in extra}
    next_number = len(merged) + 1

    for restaurant in extra:
        if restaurant.id in taken:
            while f"{RESTAURANT_ID_PREFIX}{next_number}" in taken | incoming:
                next_number += 1
            restaurant = restaurant.model_copy(update={"id": f"{RESTAURANT_ID_PREFIX}{next_number}"})
        taken.add(restaurant.id)
        merged.append(restaurant)

    return merged


def run_recommendation_branches(
    service,
    location: Optional[str] = None,
    food_type: Optional[str] = None,
    timeout: float = 120,
) -> RecommendResponse:
    """
    Run the restaurant and/or food branch of one request.

    Branches run side by side under one shared deadline and don't wait on
    each other. A branch that fails or runs out of time leaves an error
    string behind; the other branch's results are still returned.
    """
    response = RecommendResponse()
    errors = []

    branches = {}
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="recommend")
    try:
        if location:
            branches["restaurants"] = executor.submit(service.get_restaurant_recommendations, location)
        if food_type:
            branches["foods"] = executor.submit(service.get_food_recommendations, food_type)

        deadline = time.monotonic() + timeout
        for key, future in branches.items():
            label = BRANCH_LABELS[key]
            try:
                items = future.result(timeout=max(deadline - time.monotonic(), 0))
            except (FutureTimeout, UpstreamTimeout):
                logger.warning("%s branch timed out", label)
                errors.append(f"{label} recommendations timed out")
                continue
            except Exception:
                logger.exception("%s branch failed", label)
                errors.append(f"Failed to get {label.lower()} recommendations")
                continue

            if key == "foods" and redirects_to_restaurants(food_type):
                response.restaurants = merge_restaurants(response.restaurants or [], items)
            else:
                setattr(response, key, list(items))
    finally:
        # abandoned branches finish on their own; don't block the response
        executor.shutdown(wait=False, cancel_futures=True)

    if errors:
        response.error = "; ".join(errors)

    return response
