# kinarai/api/endpoints/chat.py

import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from kinarai.models.response_models import ChatResponse
from kinarai.models.request_models import ChatRequest
from kinarai.services.chat_service import ChatTranscript, handle_chat_message

logger = logging.getLogger(__name__)

chat_bp = Blueprint("chat", __name__)


@chat_bp.route("/chat", methods=["POST"])
def chat():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Invalid request", "details": "Expected a JSON object"}), 400

    try:
        req = ChatRequest(**payload)
    except ValidationError as e:
        return jsonify({"error": "Invalid request", "details": str(e)}), 400

    text = req.message.strip()
    if not text:
        return jsonify({"error": "Missing required parameter: message"}), 400

    try:
        result = handle_chat_message(
            current_app.extensions["recommendation_service"],
            text,
            ChatTranscript(req.history),
            timeout=current_app.config["REQUEST_TIMEOUT_SECONDS"],
        )
    except Exception:
        logger.exception("Error processing chat message")
        return jsonify({"error": "Failed to process request"}), 500

    body = ChatResponse(
        messages=result.transcript.messages,
        recent=result.transcript.recent(),
        restaurants=result.response.restaurants,
        foods=result.response.foods,
        error=result.response.error,
    )
    return jsonify(body.to_json()), 200
