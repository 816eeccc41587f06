"""backend.RequestUnicorn.log

Logger setup for the RequestUnicorn Lambda. Lambda forwards stderr to
CloudWatch, so a single stream handler is enough.
"""

import logging

from backend.RequestUnicorn.config import log_level

LOGGER_NAME = "wildrydes"


def setup_logging() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.DEBUG)  # filtered by the handler's level

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))

    level = log_level()
    if level == "0":
        handler.setLevel(logging.CRITICAL + 1)
    elif level == "1":
        handler.setLevel(logging.INFO)
    else:
        handler.setLevel(logging.DEBUG)

    logger.addHandler(handler)
    return logger
