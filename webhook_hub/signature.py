"""Verificação das assinaturas HMAC enviadas pelos provedores.

Vercel envia ``x-vercel-signature: sha1=<hex>``; o Hugging Face pode enviar
``x-hub-signature-256: sha256=<hex>`` ou o próprio segredo em
``x-webhook-secret``. Qualquer entrada malformada resulta em False.
"""
import hashlib
import hmac
import logging
import string
from typing import Optional, Union

logger = logging.getLogger(__name__)

SUPPORTED_ALGORITHMS = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
}

_HEX_DIGITS = set(string.hexdigits)


def _to_bytes(value: Union[bytes, str]) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def compute_signature(raw_body: Union[bytes, str], secret: str, algorithm: str = "sha256") -> str:
    """Retorna o header esperado (``<algoritmo>=<hex>``) para o corpo dado.

    Usado na verificação e também para assinar requisições de teste
    (ex.: reenviar um payload com curl).
    """
    digestmod = SUPPORTED_ALGORITHMS[algorithm]
    digest = hmac.new(_to_bytes(secret), _to_bytes(raw_body), digestmod).hexdigest()
    return f"{algorithm}={digest}"


def verify_signature(raw_body: Union[bytes, str, None], signature_header: Optional[str],
                     secret: Optional[str], algorithm: str = "sha256") -> bool:
    if not raw_body or not signature_header or not secret:
        return False

    digestmod = SUPPORTED_ALGORITHMS.get(algorithm)
    if digestmod is None:
        logger.warning(f"Algoritmo de assinatura não suportado: {algorithm}")
        return False

    prefix = f"{algorithm}="
    if not signature_header.startswith(prefix):
        return False

    provided = signature_header[len(prefix):].strip().lower()
    # Tamanho e alfabeto conferidos antes da comparação em tempo constante
    if len(provided) != digestmod().digest_size * 2:
        return False
    if not all(c in _HEX_DIGITS for c in provided):
        return False

    expected = compute_signature(raw_body, secret, algorithm)[len(prefix):]
    return hmac.compare_digest(expected, provided)


def verify_shared_secret(provided: Optional[str], secret: Optional[str]) -> bool:
    """Compara um token compartilhado em tempo constante."""
    if not provided or not secret:
        return False
    return hmac.compare_digest(_to_bytes(provided), _to_bytes(secret))
