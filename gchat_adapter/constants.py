import os

from .errors import MissingConfigError

# Configurações globais de ambiente
GOOGLE_CHAT_WEBHOOK_URL = os.getenv("GOOGLE_CHAT_WEBHOOK_URL")
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8080"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"
GOOGLE_CHAT_TIMEOUT_SECONDS = float(os.getenv("GOOGLE_CHAT_TIMEOUT_SECONDS", "10"))

# Ícones por status do grupo de alertas
FIRING_ICON = "🚨"
RESOLVED_ICON = "✅"
RESOLVED_STATUS = "resolved"


def require_webhook_url(url=GOOGLE_CHAT_WEBHOOK_URL):
    if not url:
        raise MissingConfigError("GOOGLE_CHAT_WEBHOOK_URL environment variable is not set.")
    return url
