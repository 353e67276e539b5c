# dependencies.py

from functools import lru_cache
import logging

from config import Settings, load_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_settings() -> Settings:
    logger.debug("Loading settings for this process.")
    return load_settings()
