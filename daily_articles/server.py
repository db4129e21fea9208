"""HTTP endpoint serving the daily article selection."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify

from .runner import RunConfig, build_payload

logger = logging.getLogger(__name__)

SUCCESS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Cache-Control": "public, max-age=3600",
}


def create_app(config: Optional[RunConfig] = None) -> Flask:
    """Build the Flask application around a pipeline configuration."""
    run_config = config or RunConfig()

    app = Flask(__name__)
    # Category order in the payload follows the configuration.
    app.json.sort_keys = False

    @app.get("/")
    @app.get("/daily-articles")
    def daily_articles():
        try:
            payload = build_payload(run_config)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Failed to build daily articles.")
            return jsonify({"error": str(exc)}), 500

        response = jsonify(payload)
        response.headers.update(SUCCESS_HEADERS)
        return response

    return app
