"""Pacote do webhook hub: Vercel / Hugging Face -> Discord.

Este pacote contém:
- constants: variáveis de ambiente e mapas de cores/emojis
- models: dataclasses do evento recebido e da mensagem de notificação
- signature: verificação HMAC das assinaturas dos provedores
- utils: utilitários de formatação e helpers
- detection: detecção de provedor e da chave do evento
- formatters: montagem das mensagens por provedor/evento
- services: integração com serviços externos (Discord)
- router: fluxo de validação -> assinatura -> formatação -> envio
- controller: criação do Flask app e endpoints
"""

__version__ = "1.0.0"
