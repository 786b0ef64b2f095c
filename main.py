import logging
import sys

from gchat_adapter.constants import APP_HOST, APP_PORT, DEBUG_MODE
from gchat_adapter.controller import create_app
from gchat_adapter.errors import MissingConfigError
from gchat_adapter.logging_setup import configure_logging

configure_logging()
logger = logging.getLogger("gchat_adapter")

try:
    app = create_app()
except MissingConfigError as exc:
    # sem URL de destino não há para onde encaminhar
    logger.critical(f"Error: {exc}")
    sys.exit(1)

if __name__ == '__main__':
    logger.info(f"Google Chat Adapter listening on :{APP_PORT}")
    app.run(host=APP_HOST, port=APP_PORT, debug=DEBUG_MODE, use_reloader=False)
