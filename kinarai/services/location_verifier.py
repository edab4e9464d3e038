# kinarai/services/location_verifier.py

import logging
from typing import List

from kinarai.core.errors import VerificationFailure
from kinarai.llm.prompts import build_verification_prompt
from kinarai.models.response_models import Restaurant
from kinarai.services.response_extractor import extract_json_array

logger = logging.getLogger(__name__)

# fewer verified than this and we keep the unfiltered list
MIN_VERIFIED_RESULTS = 5


def _verified_ids(client, candidates: List[Restaurant], location: str) -> set:
    text = client.generate(build_verification_prompt(candidates, location))
    ids = extract_json_array(text)
    if not all(isinstance(i, (str, int)) for i in ids):
        raise VerificationFailure(f"Verification reply is not a list of ids: {ids!r}")
    return {str(i) for i in ids}


def verify_restaurant_locations(client, candidates: List[Restaurant], location: str) -> List[Restaurant]:
    """
    Second pass against hallucinated restaurants.

    The model is shown id/name/address of every candidate and asked which
    ones really are in `location`. The result is the candidates whose ids
    came back, in their original order. Too few survivors, or any error on
    the way, returns the candidates unchanged: a verification we can't
    trust never blanks the result.
    """
    if not candidates:
        return candidates

    logger.info("Verifying %d restaurants in %s", len(candidates), location)

    try:
        ids = _verified_ids(client, candidates, location)
    except Exception as e:
        logger.warning("Location verification failed, keeping unfiltered list: %s", e)
        return candidates

    verified = [r for r in candidates if r.id in ids]
    logger.info("Verified %d out of %d restaurants", len(verified), len(candidates))

    if len(verified) < MIN_VERIFIED_RESULTS:
        logger.info("Too few verified restaurants, returning original list")
        return candidates

    return verified
