"""
Run the Todo Service with uvicorn.

Usage:
    python -m src.api.server

Host, port, database path and log level come from the environment
(see src.api.settings).
"""
from __future__ import annotations

import logging

import uvicorn

from .main import create_app
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """Start the HTTP server on the configured host and port."""
    settings = get_settings()
    app = create_app(settings)
    logger.info("Server is running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
