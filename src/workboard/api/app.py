# src/workboard/api/app.py

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from ..core.state import AppState
from ..errors import RequestDecodeError
from .routes import create_api_blueprint

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE"
CORS_ALLOW_HEADERS = "content-type"


def create_app(state: AppState) -> Flask:
    """
    Flask application factory.

    Wires state.store into the route handlers and installs:
    - JSON error bodies for undecodable requests (400) and routing misses (404)
    - CORS headers on every response
    - one INFO log line per request
    """
    settings = state.settings

    app = Flask(__name__)
    app.json.sort_keys = False

    app.register_blueprint(
        create_api_blueprint(
            state.store,
            task_create_enabled=bool(getattr(settings, "task_create_enabled", False)),
        )
    )

    cors_origin = str(getattr(settings, "cors_origin", "*") or "*")

    @app.errorhandler(RequestDecodeError)
    def _decode_error(exc: RequestDecodeError):
        logger.info("Rejected body %s %s: %s", request.method, request.path, exc.message)
        body = {"error": exc.message, "details": [d.to_dict() for d in exc.details]}
        return jsonify(body), 400

    # A known path with an unserved method is a routing miss too.
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def _not_found(_exc):
        return jsonify({"error": "Not Found"}), 404

    @app.after_request
    def _finish(response):
        response.headers["Access-Control-Allow-Origin"] = cors_origin
        response.headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    return app
