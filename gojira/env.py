"""Environment and .env loading."""

import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILENAME = ".env"


def load_env(path: str = ENV_FILENAME) -> bool:
    """Load a dotenv file from the working directory.

    Variables already set in the process environment win. Returns whether the
    file was found.
    """
    if not os.path.isfile(path):
        logger.debug("No %s file found, using system environment only", path)
        return False
    load_dotenv(path, override=False)
    logger.debug("Loaded environment from %s", path)
    return True


def get_env(key: str, default: str = "", warn: bool = True) -> str:
    value = os.environ.get(key, "")
    if value:
        return value
    if warn:
        logger.warning("Environment variable %s is not set", key)
    return default
