#!/usr/bin/env python3
"""
Silicon Wars Game Server

Serves the hardware catalog and test-lab JSON API to the browser UI.
"""

import logging
from flask import Flask

from config import PORT, LOG_LEVEL, DEBUG_MODE

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app() -> Flask:
    """Build the Flask app with all API routes registered."""
    app = Flask(__name__)

    from routes import api
    app.register_blueprint(api)

    return app


app = create_app()


if __name__ == '__main__':
    logger.info(f"Starting Silicon Wars server on port {PORT}")
    app.run(host='0.0.0.0', port=PORT, debug=DEBUG_MODE)
