import logging

from .constants import DEBUG_MODE

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(debug=DEBUG_MODE):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # requests/urllib3 são verbosos em DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
