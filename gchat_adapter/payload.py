import json
import logging
from typing import Any, Dict, List

from .errors import InvalidPayloadError

logger = logging.getLogger(__name__)


def _string_field(container: Dict, key: str, where: str) -> str:
    value = container.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidPayloadError(f"{where}.{key}: esperado string, recebido {type(value).__name__}")
    return value


def _string_map(container: Dict, key: str, where: str) -> Dict[str, str]:
    value = container.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidPayloadError(f"{where}.{key}: esperado objeto, recebido {type(value).__name__}")

    result: Dict[str, str] = {}
    for name, item in value.items():
        if item is None:
            result[name] = ""
        elif isinstance(item, str):
            result[name] = item
        else:
            raise InvalidPayloadError(
                f"{where}.{key}[{name!r}]: esperado string, recebido {type(item).__name__}"
            )
    return result


def _reject_constant(name):
    # NaN/Infinity não são JSON válido
    raise InvalidPayloadError(f"JSON inválido: constante {name} não permitida")


def parse_alert(alert: Any, index: int) -> Dict[str, Any]:
    where = f"alerts[{index}]"
    if not isinstance(alert, dict):
        raise InvalidPayloadError(f"{where}: esperado objeto, recebido {type(alert).__name__}")
    return {
        'labels': _string_map(alert, 'labels', where),
        'annotations': _string_map(alert, 'annotations', where),
        'startsAt': _string_field(alert, 'startsAt', where),
        'endsAt': _string_field(alert, 'endsAt', where),
    }


def parse_alertmanager_payload(raw_body) -> Dict[str, Any]:
    """
    Decodifica o corpo do webhook do Alertmanager.

    Mantém apenas 'status' e 'alerts' (labels, annotations, startsAt, endsAt);
    demais chaves (receiver, groupLabels, commonLabels, externalURL...) são ignoradas.
    Campos ausentes ou null viram valores vazios. Tipos incorretos, JSON
    malformado e corpo vazio levantam InvalidPayloadError.
    """
    if isinstance(raw_body, bytes):
        try:
            raw_body = raw_body.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise InvalidPayloadError(f"corpo não é UTF-8 válido: {exc}") from exc

    if not raw_body or not raw_body.strip():
        raise InvalidPayloadError("corpo vazio")

    try:
        data = json.loads(raw_body, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise InvalidPayloadError(f"JSON inválido: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidPayloadError(f"esperado objeto JSON, recebido {type(data).__name__}")

    raw_alerts = data.get('alerts')
    if raw_alerts is None:
        raw_alerts = []
    if not isinstance(raw_alerts, list):
        raise InvalidPayloadError(f"alerts: esperado lista, recebido {type(raw_alerts).__name__}")

    alerts: List[Dict[str, Any]] = [parse_alert(alert, i) for i, alert in enumerate(raw_alerts)]
    payload = {
        'status': _string_field(data, 'status', 'payload'),
        'alerts': alerts,
    }
    logger.debug(f"Payload decodificado: status={payload['status']!r} alerts={len(alerts)}")
    return payload
