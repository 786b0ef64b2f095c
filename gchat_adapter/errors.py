class AdapterError(Exception):
    """Erro base do adaptador."""


class MissingConfigError(AdapterError):
    pass


class InvalidPayloadError(AdapterError):
    pass


class ForwardError(AdapterError):
    """Falha de transporte ao enviar para o Google Chat."""
