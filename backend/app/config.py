import os
import logging
import sys

from core.environment import get_env_bool, get_env_list

DEBUG = get_env_bool("DEBUG", False)

# Frontend origins allowed to call the API
ALLOWED_ORIGINS = get_env_list("ALLOWED_ORIGINS", default=[
    "http://localhost:3000",
    "http://localhost:3001",
])

# Optional JSON file of extra model number -> AFUE entries
AFUE_TABLE_PATH = os.getenv("AFUE_TABLE_PATH", "")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Client libraries that log every request at INFO
QUIET_LOGGERS = ('urllib3', 'httpx', 'httpcore', 'openai')


def setup_logging():
    """Configure root logging once and return the service logger"""
    log_level = logging.DEBUG if DEBUG else logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stdout)])

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    service_logger = logging.getLogger('hvac_intake')
    service_logger.setLevel(log_level)
    return service_logger


setup_logging()
