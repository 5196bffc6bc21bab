"""
DuckQuest — Flask app factory.
JSON API over one QuestEngine, for hosts that prefer HTTP to MCP.
"""
import logging
import threading

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def create_app(engine=None):
    from duckquest.core.engine import QuestEngine

    app = Flask(__name__)
    app.config["DUCKQUEST_ENGINE"] = engine or QuestEngine()
    # Flask may serve requests on several threads; the engine is not thread-safe
    app.config["DUCKQUEST_ENGINE_LOCK"] = threading.Lock()

    # Register blueprints
    from duckquest.web.routes.api import bp as api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.name, "message": e.description}), e.code
        logger.error(f"Unhandled error in web request: {e}", exc_info=True)
        return jsonify({"error": "internal_error",
                        "message": "The duck got confused. Please try again."}), 500

    return app
