# kinarai/api/routes.py

from kinarai.api.endpoints.chat import chat_bp
from kinarai.api.endpoints.recommendations import bp as rec_bp
from kinarai.api.test_llm import test_llm_bp


def register_api(app):
    # Register all API blueprints under /api
    app.register_blueprint(rec_bp, url_prefix="/api")
    app.register_blueprint(chat_bp, url_prefix="/api")
    app.register_blueprint(test_llm_bp, url_prefix="/api")
