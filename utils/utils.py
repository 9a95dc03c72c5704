import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"
        logger.setLevel(level)
        logger.propagate = False
    return logger


def ensure_directory(path):
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)
    return path
