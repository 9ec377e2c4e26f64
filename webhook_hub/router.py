"""Fluxo de um webhook recebido, do payload cru até a resposta HTTP.

validação -> configuração -> assinatura -> classificação -> formatação/envio.
Falhas de envio ao Discord não mudam a resposta: o provedor sempre recebe
200 para não disparar retries/alertas do lado dele.
"""
import logging

from .constants import DEBUG_MODE, HF_SECRET_HEADER, HF_SIGNATURE_HEADER, VERCEL_SIGNATURE_HEADER
from .detection import classify_event, split_hf_event
from .formatters import format_notification
from .models import HandlerOutcome, InboundEvent, Provider, SignatureContext
from .services import send_discord_embed
from .signature import verify_shared_secret

logger = logging.getLogger(__name__)

# Provedores com convenção de assinatura; os demais não são verificados
SIGNED_PROVIDERS = {Provider.VERCEL, Provider.HUGGING_FACE}


def build_event(provider, raw_body, headers, payload):
    event_type = classify_event(provider, payload) if isinstance(payload, (dict, list)) else ""
    return InboundEvent(provider, event_type, raw_body or b"", dict(headers or {}), payload)


def error_outcome(status_code, category, message):
    return HandlerOutcome(status_code, {"error": category, "message": message})


def check_signature(event, secret):
    if event.provider is Provider.VERCEL:
        return SignatureContext(secret, event.header(VERCEL_SIGNATURE_HEADER), "sha1", event.raw_body).verify()

    if event.provider is Provider.HUGGING_FACE:
        # HF envia o segredo em claro em X-Webhook-Secret; aceita também HMAC sha256
        shared = event.header(HF_SECRET_HEADER)
        if shared:
            return verify_shared_secret(shared, secret)
        return SignatureContext(secret, event.header(HF_SIGNATURE_HEADER), "sha256", event.raw_body).verify()

    raise ValueError(f"Provedor sem convenção de assinatura: {event.provider.value}")


def route_event(event, webhook_url, secret=None, sender=send_discord_embed):
    provider_name = event.provider.display_name
    payload = event.payload

    # objetos e arrays JSON seguem adiante; null e escalares são rejeitados
    if payload is None or not isinstance(payload, (dict, list)):
        logger.error(f"Payload inválido recebido de {provider_name}")
        return error_outcome(400, "invalid_payload", "Request body must be a JSON object or array")

    if not webhook_url:
        logger.error("DISCORD_WEBHOOK_URL não configurado")
        return error_outcome(500, "configuration_error", "Discord webhook not configured")

    if event.provider in SIGNED_PROVIDERS:
        if not secret:
            logger.warning(f"Segredo de {provider_name} não configurado, verificação de assinatura ignorada")
        elif not check_signature(event, secret):
            logger.warning(f"Assinatura inválida em webhook de {provider_name}")
            return error_outcome(401, "invalid_signature", "Invalid signature")

    event_key = event.event_type or classify_event(event.provider, payload)
    logger.info(f"Processando evento {provider_name}: {event_key}")

    try:
        message = format_notification(event.provider, payload, event_key)
        sent = sender(webhook_url, message)
    except Exception as exc:
        logger.exception(f"Erro ao processar webhook de {provider_name}")
        detail = str(exc) if DEBUG_MODE else "Something went wrong"
        return error_outcome(500, "internal_error", detail)

    if sent:
        logger.info(f"Evento {provider_name} {event_key} enviado ao Discord")
    else:
        logger.error(f"Falha ao enviar evento {provider_name} {event_key} ao Discord")

    body = {
        "success": True,
        "message": "Webhook processed successfully",
        "eventType": event_key,
    }
    if event.provider is Provider.HUGGING_FACE:
        body["eventScope"], body["eventAction"] = split_hf_event(payload)
    return HandlerOutcome(200, body)
