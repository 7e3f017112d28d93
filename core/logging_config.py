# core/logging_config.py
import logging

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "linea"

# Gate decisions are logged at DEBUG; only surface them outside production
LEVEL_BY_ENV = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
    "production": logging.INFO,
}


def setup_logger(env: str = settings.ENV) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)

    # Avoid duplicate handlers in dev reload
    if logger.handlers:
        return logger

    logger.setLevel(LEVEL_BY_ENV.get(env, logging.INFO))

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)

    return logger


logger = setup_logger()
