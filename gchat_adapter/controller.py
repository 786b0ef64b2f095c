import logging

from flask import Flask, request

from .constants import GOOGLE_CHAT_TIMEOUT_SECONDS, GOOGLE_CHAT_WEBHOOK_URL, require_webhook_url
from .errors import ForwardError, InvalidPayloadError
from .formatters import build_alert_text, build_chat_message
from .payload import parse_alertmanager_payload
from .services import send_google_chat_payload

logger = logging.getLogger(__name__)

PLAIN_TEXT = {'Content-Type': 'text/plain; charset=utf-8'}


def _plain_error(message, status_code):
    # mesmo formato de http.Error: texto puro terminado em newline
    return f"{message}\n", status_code, PLAIN_TEXT


def create_app(webhook_url=None, timeout=None):
    webhook_url = require_webhook_url(webhook_url or GOOGLE_CHAT_WEBHOOK_URL)
    timeout = GOOGLE_CHAT_TIMEOUT_SECONDS if timeout is None else timeout

    app = Flask(__name__)
    app.config['GOOGLE_CHAT_WEBHOOK_URL'] = webhook_url
    app.config['GOOGLE_CHAT_TIMEOUT_SECONDS'] = timeout

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return _plain_error("Method not allowed", 405)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'gchat-adapter'}, 200

    # Qualquer caminho é tratado como a raiz
    @app.route('/', methods=['POST'], provide_automatic_options=False)
    @app.route('/<path:path>', methods=['POST'], provide_automatic_options=False)
    def alert(path=None):
        try:
            payload = parse_alertmanager_payload(request.get_data())
        except InvalidPayloadError as exc:
            logger.error(f"Error decoding payload: {exc}")
            return _plain_error("Invalid payload", 400)

        text = build_alert_text(payload)
        message = build_chat_message(text)

        try:
            resp = send_google_chat_payload(message, webhook_url, timeout=timeout)
        except ForwardError as exc:
            logger.error(f"Error forwarding to Google Chat: {exc}")
            return _plain_error("Error forwarding alert", 500)

        if resp.status_code != 200:
            logger.error(f"Google Chat webhook failed with status: {resp.status_code} {resp.reason}")
            return _plain_error("Webhook failed", 500)

        logger.info(f"Forwarded {len(payload['alerts'])} alert(s) with status {payload['status']!r}")
        return "Alert forwarded successfully", 200, PLAIN_TEXT

    return app
