from __future__ import annotations

import logging

from dotenv import load_dotenv

from .config import get_settings_module, load_settings

logger = logging.getLogger(__name__)


def configure(env_file: str | None = None):
    """Load .env, pick the settings module and set up logging.

    Returns the imported settings module.
    """
    load_dotenv(env_file, override=False)

    settings_name = get_settings_module()
    settings = load_settings(settings_name)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format=getattr(settings, "LOG_FORMAT", logging.BASIC_FORMAT),
    )
    logger.debug("attendance-trends settings=%s", settings_name)
    return settings
