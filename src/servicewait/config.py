import os
import logging
from typing import Optional

from dotenv import dotenv_values, find_dotenv

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Config:
    """Application configuration"""

    # Waiting contract; not read from the environment
    PROBE_TIMEOUT = 2.0
    RETRY_DELAY = 2.0
    MAX_RETRIES = 30

    def __init__(self):
        # .env values are read, never exported into os.environ
        dotenv = dotenv_values(find_dotenv(usecwd=True))
        self.log_level = self._get("SERVICEWAIT_LOG_LEVEL", dotenv, "WARNING").upper()
        self.log_file: Optional[str] = self._get("SERVICEWAIT_LOG_FILE", dotenv) or None

    @staticmethod
    def _get(key, dotenv, default=None):
        return os.getenv(key) or dotenv.get(key) or default


def configure_logging(cfg: Optional[Config] = None):
    """
    Route diagnostics to stderr (and optionally a file) so stdout only
    carries the wait report.
    """
    cfg = cfg or Config()
    handlers = [logging.StreamHandler()]
    if cfg.log_file:
        handlers.append(logging.FileHandler(cfg.log_file))

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
    )
