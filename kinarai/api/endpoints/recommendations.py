# kinarai/api/endpoints/recommendations.py

import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from kinarai.core.errors import InvalidRequestError
from kinarai.models.request_models import RecommendRequest
from kinarai.services.dispatcher import run_recommendation_branches

logger = logging.getLogger(__name__)

bp = Blueprint("recommendations", __name__)

MISSING_QUERY = "Missing required parameters: location or foodType"


def get_service():
    return current_app.extensions["recommendation_service"]


def _parse_request() -> RecommendRequest:
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise TypeError("Expected a JSON object")
    req = RecommendRequest(**payload)
    if not req.has_query():
        raise InvalidRequestError(MISSING_QUERY)
    return req


@bp.route("/recommend", methods=["POST"])
def recommend():
    logger.info("Received request to /api/recommend")

    try:
        req = _parse_request()
    except InvalidRequestError as e:
        logger.warning("Rejected request: %s", e)
        return jsonify({"error": str(e)}), 400
    except (ValidationError, TypeError) as e:
        return jsonify({"error": "Invalid request", "details": str(e)}), 400

    try:
        response = run_recommendation_branches(
            get_service(),
            location=req.location,
            food_type=req.food_type,
            timeout=current_app.config["REQUEST_TIMEOUT_SECONDS"],
        )
    except Exception:
        logger.exception("Error processing request")
        return jsonify({"error": "Failed to process request"}), 500

    logger.info("Successfully processed request")
    return jsonify(response.to_json()), 200
