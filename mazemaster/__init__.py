"""
project: MazeMaster Engine
module: __init__.py
License: MIT

Flask application and configuration wiring.

The engine packages (maze, navigation, services, hooks) are plain Python and
usable on their own; this module exposes them over a small JSON API for hosts
that prefer HTTP. Configuration is sourced from environment variables (a local
``.env`` is honoured) with defaults suited to development.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from mazemaster.config import EngineConfig

# Load .env if present so MAZEMASTER_* settings can be supplied without
# exporting shell variables during development.
load_dotenv()

__version__ = "0.4.0"

app = Flask(__name__, instance_relative_config=True)

# Instance directory holds the rotating server log.
try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    pass

engine_config = EngineConfig.from_env()

app.config.update(
    MAZE_MAX_SIZE=int(os.getenv("MAZEMASTER_MAX_SIZE", "64")),
    **engine_config.to_flask_config(),
)

from mazemaster.routes.engine_api import bp_engine  # noqa: E402

app.register_blueprint(bp_engine)


def create_app(overrides=None):
    """Return the Flask app instance, applying optional config overrides."""
    if overrides:
        app.config.update(overrides)
    return app


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal error", "error_id": error_id}), 500
