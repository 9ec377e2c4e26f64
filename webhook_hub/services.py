import logging

import requests

from .constants import DEBUG_MODE, DISCORD_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def build_discord_payload(message):
    return {"embeds": [message.to_embed()]}


def send_discord_embed(webhook_url, message, timeout=DISCORD_TIMEOUT_SECONDS):
    """Envia a mensagem uma única vez; False sinaliza falha (sem retry)."""
    payload = build_discord_payload(message)
    kwargs = {}
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        resp = requests.post(webhook_url, json=payload, **kwargs)
    except requests.RequestException as exc:
        logger.error(f"Erro ao enviar mensagem para o Discord: {exc}")
        return False

    if DEBUG_MODE:
        print(f"[DEBUG] Discord response: {resp.status_code}")
        if resp.status_code != 204:
            print(f"[DEBUG] Response content: {resp.text}")

    if not 200 <= resp.status_code < 300:
        logger.error(f"Discord webhook falhou: {resp.status_code} {resp.reason}")
        return False

    logger.info("Mensagem enviada ao Discord com sucesso")
    return True
