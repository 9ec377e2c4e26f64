from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .signature import verify_signature


class Provider(Enum):
    VERCEL = "vercel"
    HUGGING_FACE = "huggingface"
    GENERIC = "generic"

    @property
    def display_name(self) -> str:
        return _PROVIDER_DISPLAY_NAMES[self]


_PROVIDER_DISPLAY_NAMES = {
    Provider.VERCEL: "Vercel",
    Provider.HUGGING_FACE: "Hugging Face",
    Provider.GENERIC: "Generic",
}


@dataclass(frozen=True)
class InboundEvent:
    """Requisição recebida de um provedor; vive apenas durante o request."""
    provider: Provider
    event_type: str
    raw_body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)
    payload: Any = None

    def header(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


@dataclass(frozen=True)
class NotificationMessage:
    """Mensagem genérica de notificação, serializada como embed do Discord."""
    title: str
    color: int
    timestamp: str
    description: Optional[str] = None
    fields: Tuple[EmbedField, ...] = ()
    url: Optional[str] = None
    footer_text: Optional[str] = None
    footer_icon_url: Optional[str] = None

    def to_embed(self) -> Dict[str, Any]:
        embed: Dict[str, Any] = {
            "title": self.title,
            "color": self.color,
            "timestamp": self.timestamp,
            "fields": [f.to_dict() for f in self.fields],
        }
        if self.description is not None:
            embed["description"] = self.description
        if self.url:
            embed["url"] = self.url
        if self.footer_text:
            footer = {"text": self.footer_text}
            if self.footer_icon_url:
                footer["icon_url"] = self.footer_icon_url
            embed["footer"] = footer
        return embed


@dataclass(frozen=True)
class SignatureContext:
    secret: Optional[str]
    header_value: Optional[str]
    algorithm: str
    raw_body: Union[bytes, str, None]

    def verify(self) -> bool:
        return verify_signature(self.raw_body, self.header_value, self.secret, self.algorithm)


@dataclass(frozen=True)
class HandlerOutcome:
    status_code: int
    body: Dict[str, Any]
