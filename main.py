import logging

from flask import Flask, jsonify
from flask_cors import CORS

from kinarai.api.routes import register_api
from kinarai.core.config import settings as default_settings
from kinarai.llm.gemini_client import GeminiClient
from kinarai.services.recommendation_service import RecommendationService


def create_app(service=None, settings=None):
    settings = settings or default_settings

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.config['SECRET_KEY'] = settings.SECRET_KEY
    app.config['REQUEST_TIMEOUT_SECONDS'] = settings.REQUEST_TIMEOUT_SECONDS

    # missing GEMINI_API_KEY fails here, at startup
    if service is None:
        service = RecommendationService(
            GeminiClient.from_settings(settings),
            verify=settings.VERIFY_LOCATIONS,
        )
    app.extensions["recommendation_service"] = service

    CORS(
        app,
        resources={r"/api/*": {"origins": "*"}},
        supports_credentials=False,
    )

    register_api(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=8000, debug=True)
