from typing import Tuple

from .models import Provider
from .utils import dig, pick_first_nonempty


def split_hf_event(payload) -> Tuple[str, str]:
    scope = pick_first_nonempty(dig(payload, "event", "scope")) or "unknown"
    action = pick_first_nonempty(dig(payload, "event", "action")) or "unknown"
    return scope, action


def classify_event(provider: Provider, payload) -> str:
    """Chave do evento usada no lookup de formatadores.

    Vercel: o ``type`` do payload (``deployment.ready`` ...).
    Hugging Face: ``<scope>.<action>`` (``repo.content.update`` ...).
    Genérico: ``type``/``event_type``/``event`` do payload.
    """
    if provider is Provider.VERCEL:
        return pick_first_nonempty(dig(payload, "type")) or "deployment.unknown"

    if provider is Provider.HUGGING_FACE:
        scope, action = split_hf_event(payload)
        return f"{scope}.{action}"

    return pick_first_nonempty(
        dig(payload, "type"),
        dig(payload, "event_type"),
        dig(payload, "event"),
    ) or "unknown"
