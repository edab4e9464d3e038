from flask import Blueprint, current_app, jsonify

from kinarai.services.response_extractor import extract_json_array

test_llm_bp = Blueprint("test_llm", __name__)

PROBE_PROMPT = 'Reply with exactly this JSON array and nothing else: ["ok"]'


@test_llm_bp.route("/test-llm", methods=["GET"])
def test_llm():
    try:
        client = current_app.extensions["recommendation_service"].client
        output = extract_json_array(client.generate(PROBE_PROMPT))

        return jsonify({
            "status": "success",
            "model_output": output
        })

    except Exception as e:
        return jsonify({
            "status": "error",
            "message": str(e)
        }), 500
