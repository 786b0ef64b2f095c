import logging

import requests

from .constants import GOOGLE_CHAT_TIMEOUT_SECONDS
from .errors import ForwardError

logger = logging.getLogger(__name__)


def send_google_chat_payload(message, webhook_url, timeout=GOOGLE_CHAT_TIMEOUT_SECONDS):
    try:
        resp = requests.post(webhook_url, json=message, timeout=timeout)
    except requests.RequestException as exc:
        raise ForwardError(str(exc)) from exc

    logger.debug(f"Google Chat response: {resp.status_code}")
    if resp.status_code != 200:
        logger.debug(f"Response content: {resp.text}")
    return resp
