import logging
from os import getenv

from dotenv import load_dotenv

LOG_FORMAT = "[%(asctime)s.%(msecs)d] [%(levelname)s] [%(name)s:%(lineno)d]: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup() -> None:
    load_dotenv()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger("pullgate")
    logger.setLevel(getenv("PULLGATE_LOG_LEVEL", "INFO").upper())
    logger.addHandler(handler)
