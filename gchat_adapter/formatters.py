import logging

from .constants import FIRING_ICON, RESOLVED_ICON, RESOLVED_STATUS

logger = logging.getLogger(__name__)


def status_icon(status):
    return RESOLVED_ICON if status == RESOLVED_STATUS else FIRING_ICON


def format_alert_block(alert):
    labels = alert.get('labels') or {}
    annotations = alert.get('annotations') or {}

    alertname = labels.get('alertname', '')
    # instance costuma faltar quando o alerta vem de regra agregada
    instance = labels.get('instance', '')
    severity = labels.get('severity', '')
    summary = annotations.get('summary', '')

    logger.debug("--- Alert Labels Check ---")
    logger.debug(f"Alert Name: {alertname}")
    logger.debug(f"All Labels Received: {labels}")
    logger.debug("--------------------------")

    parts = [
        f"\n**Alert: {alertname}**\n",
        f"  ->Instance: `{instance}`\n",
        f"  ->Severity: {severity}\n",
        f"  ->Summary: {summary}\n",
    ]
    return "".join(parts)


def build_alert_text(payload):
    status = payload.get('status', '')
    parts = [f"{status_icon(status)} **Alert Status:** {status}\n"]
    for alert in payload.get('alerts', []):
        parts.append(format_alert_block(alert))
    return "".join(parts)


def build_chat_message(text, cards_v2=None):
    message = {"text": text}
    if cards_v2:
        message["cardsV2"] = list(cards_v2)
    return message
