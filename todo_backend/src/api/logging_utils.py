from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s level=%(levelname)s logger=%(name)s message=\"%(message)s\""


# PUBLIC_INTERFACE
def configure_logging(level: str = "INFO") -> None:
    """
    Install a root handler with the service log format unless one exists,
    then apply the requested level to the application loggers.
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logging.getLogger("src.api").setLevel(level.upper())
