"""Adapter Alertmanager -> Google Chat.

Este pacote contém:
- constants: variáveis de ambiente e ícones de status
- errors: exceções do adaptador
- logging_setup: configuração de logging
- payload: decodificação do webhook do Alertmanager
- formatters: montagem do texto e da mensagem do Google Chat
- services: envio para o webhook do Google Chat
- controller: criação do Flask app e endpoints
"""
